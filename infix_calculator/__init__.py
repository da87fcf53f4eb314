from infix_calculator.errors import CalcRuntimeError, CalculatorError, ErrorKind
from infix_calculator.parser import BinaryOperator, ParserError, format_postfix, to_postfix
from infix_calculator.pipeline import calculate
from infix_calculator.runtime import evaluate
from infix_calculator.tokenizer import Token, TokenizerError, TokenType, tokenize

__all__ = [
    "BinaryOperator",
    "CalcRuntimeError",
    "CalculatorError",
    "ErrorKind",
    "ParserError",
    "Token",
    "TokenType",
    "TokenizerError",
    "calculate",
    "evaluate",
    "format_postfix",
    "to_postfix",
    "tokenize",
]
