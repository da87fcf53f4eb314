import enum
import logging
from dataclasses import dataclass

from infix_calculator.errors import CalculatorError, ErrorKind
from infix_calculator.tokenizer import Token, TokenType, untokenize
from infix_calculator.utils import PrintableEnum, format_number

logger = logging.getLogger(__name__)


@dataclass
class ParserError(CalculatorError):
    tokens: list[Token]
    error_token_idx: int

    def __str__(self) -> str:
        # rendering up to and including the offending token ends right on it
        caret_column = len(untokenize(self.tokens[: self.error_token_idx + 1])) - 1
        return "\n".join([f"Parser error: {self.errmsg}", untokenize(self.tokens), " " * caret_column + "^"])


class BinaryOperator(PrintableEnum):
    ADD = enum.auto()
    SUB = enum.auto()
    MUL = enum.auto()
    DIV = enum.auto()
    MOD = enum.auto()
    POW = enum.auto()


OPERATOR_SYMBOLS = {
    BinaryOperator.ADD: "+",
    BinaryOperator.SUB: "-",
    BinaryOperator.MUL: "*",
    BinaryOperator.DIV: "/",
    BinaryOperator.MOD: "%",
    BinaryOperator.POW: "^",
}

OPERATOR_TOKENS = {
    TokenType.PLUS: BinaryOperator.ADD,
    TokenType.MINUS: BinaryOperator.SUB,
    TokenType.STAR: BinaryOperator.MUL,
    TokenType.SLASH: BinaryOperator.DIV,
    TokenType.PERCENT: BinaryOperator.MOD,
    TokenType.CARET: BinaryOperator.POW,
}

PostfixItem = float | BinaryOperator


def get_op_precedence(op: BinaryOperator) -> int:
    """Lower binds tighter"""
    return {
        BinaryOperator.POW: 2,
        BinaryOperator.MUL: 3,
        BinaryOperator.DIV: 3,
        BinaryOperator.MOD: 3,
        BinaryOperator.ADD: 4,
        BinaryOperator.SUB: 4,
    }[op]


def to_postfix(tokens: list[Token]) -> list[PostfixItem]:
    """Shunting-yard: reorders infix tokens into Reverse Polish order.

    All operators are left-associative, so an operator on the stack is popped
    when it binds at least as tightly as the incoming one. Brackets never go
    to the output; the operator stack holds operators and the token index of
    each still-open bracket.
    """
    output: list[PostfixItem] = []
    # (operator or None for an open bracket, index of the token that pushed it)
    stack: list[tuple[BinaryOperator | None, int]] = []

    for i, token in enumerate(tokens):
        if token.type is TokenType.NUMBER:
            if token.value is None:
                raise ParserError(
                    ErrorKind.INVALID_NUMBER, "Number token without a value", tokens=tokens, error_token_idx=i
                )
            output.append(token.value)
        elif token.type in OPERATOR_TOKENS:
            operator = OPERATOR_TOKENS[token.type]
            while stack:
                top, _ = stack[-1]
                if top is None or get_op_precedence(top) > get_op_precedence(operator):
                    break
                output.append(top)
                stack.pop()
            stack.append((operator, i))
        elif token.type is TokenType.BRACKET_OPEN:
            stack.append((None, i))
        elif token.type is TokenType.BRACKET_CLOSE:
            while True:
                if not stack:
                    logger.debug("Unmatched closing bracket at token %d", i)
                    raise ParserError(
                        ErrorKind.UNMATCHED_PARENTHESIS,
                        "Closing bracket without a matching opening one",
                        tokens=tokens,
                        error_token_idx=i,
                    )
                top, _ = stack.pop()
                if top is None:
                    break
                output.append(top)
        else:
            raise RuntimeError(f"Unexpected token type: {token.type}")

    while stack:
        top, pushed_at = stack.pop()
        if top is None:
            logger.debug("Unclosed bracket at token %d", pushed_at)
            raise ParserError(
                ErrorKind.UNMATCHED_PARENTHESIS, "Unclosed bracket", tokens=tokens, error_token_idx=pushed_at
            )
        output.append(top)

    logger.debug("Postfix: %s", format_postfix(output))
    return output


def format_postfix(items: list[PostfixItem]) -> str:
    """[2.0, 3.0, BinaryOperator.ADD] => '2 3 +'"""
    return " ".join(
        OPERATOR_SYMBOLS[item] if isinstance(item, BinaryOperator) else format_number(item) for item in items
    )
