import logging

from infix_calculator.parser import to_postfix
from infix_calculator.runtime import evaluate
from infix_calculator.tokenizer import tokenize

logger = logging.getLogger(__name__)


def calculate(code: str, skip_whitespace: bool = False) -> float:
    """Evaluates an infix arithmetic expression.

    Raises a ``CalculatorError`` subclass from the first stage that fails; its
    ``kind`` tells which of the ``ErrorKind`` cases occurred.
    """
    logger.debug("Calculating %r", code)
    tokens = tokenize(code, skip_whitespace=skip_whitespace)
    postfix = to_postfix(tokens)
    return evaluate(postfix)
