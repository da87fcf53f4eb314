import pytest

from infix_calculator.errors import ErrorKind
from infix_calculator.parser import BinaryOperator, ParserError, PostfixItem, format_postfix, to_postfix
from infix_calculator.tokenizer import Token, TokenType, tokenize

ADD = BinaryOperator.ADD
SUB = BinaryOperator.SUB
MUL = BinaryOperator.MUL
MOD = BinaryOperator.MOD
POW = BinaryOperator.POW


@pytest.mark.parametrize(
    "code, expected_postfix",
    [
        pytest.param("", []),
        pytest.param("1", [1.0]),
        pytest.param("2+3*4", [2.0, 3.0, 4.0, MUL, ADD]),
        pytest.param("2*3+4", [2.0, 3.0, MUL, 4.0, ADD]),
        pytest.param("8-3-2", [8.0, 3.0, SUB, 2.0, SUB]),
        pytest.param("(1+2)*3", [1.0, 2.0, ADD, 3.0, MUL]),
        pytest.param("2^3^2", [2.0, 3.0, POW, 2.0, POW]),
        pytest.param("2*3^2", [2.0, 3.0, 2.0, POW, MUL]),
        pytest.param("1-2%3", [1.0, 2.0, 3.0, MOD, SUB]),
        pytest.param("((1))", [1.0]),
        pytest.param("15*8/", [15.0, 8.0, MUL, BinaryOperator.DIV]),
    ],
)
def test_to_postfix(code: str, expected_postfix: list[PostfixItem]) -> None:
    assert to_postfix(tokenize(code)) == expected_postfix


def test_format_postfix() -> None:
    assert format_postfix(to_postfix(tokenize("1+(2.5*4)^2"))) == "1 2.5 4 * 2 ^ +"


def test_unclosed_bracket() -> None:
    with pytest.raises(ParserError) as exc_info:
        to_postfix(tokenize("1+(5*9"))
    error = exc_info.value
    assert error.kind is ErrorKind.UNMATCHED_PARENTHESIS
    assert error.error_token_idx == 2
    assert str(error) == "\n".join(["Parser error: Unclosed bracket", "1 + (5 * 9", "    ^"])


def test_unmatched_closing_bracket() -> None:
    with pytest.raises(ParserError) as exc_info:
        to_postfix(tokenize("1+5)"))
    error = exc_info.value
    assert error.kind is ErrorKind.UNMATCHED_PARENTHESIS
    assert error.error_token_idx == 3
    assert str(error).splitlines()[1:] == ["1 + 5)", "     ^"]


def test_number_token_without_value() -> None:
    with pytest.raises(ParserError) as exc_info:
        to_postfix([Token(type=TokenType.NUMBER, lexeme="1")])
    assert exc_info.value.kind is ErrorKind.INVALID_NUMBER
