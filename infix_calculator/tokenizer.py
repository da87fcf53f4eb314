import enum
import logging
import re
from dataclasses import dataclass
from typing import Optional

from infix_calculator.errors import CalculatorError, ErrorKind
from infix_calculator.utils import PrintableEnum

logger = logging.getLogger(__name__)


@dataclass
class TokenizerError(CalculatorError):
    code: str
    error_char_idx: int

    def __str__(self) -> str:
        print_start_idx = max(0, self.error_char_idx - 10)
        print_ellipsis_pre = print_start_idx > 0
        print_end_idx = min(len(self.code), self.error_char_idx + 10)
        print_ellipsis_post = print_end_idx < len(self.code)
        return "\n".join(
            [
                f"[Tokenizer error] {self.errmsg}",
                (
                    ("..." if print_ellipsis_pre else "")
                    + f"{self.code[print_start_idx:print_end_idx]}"
                    + ("..." if print_ellipsis_post else "")
                ),
                " " * (self.error_char_idx - print_start_idx + (3 if print_ellipsis_pre else 0)) + "^",
            ]
        )


class TokenType(PrintableEnum):
    NUMBER = enum.auto()
    PLUS = enum.auto()
    MINUS = enum.auto()
    STAR = enum.auto()
    SLASH = enum.auto()
    PERCENT = enum.auto()
    CARET = enum.auto()
    BRACKET_OPEN = enum.auto()
    BRACKET_CLOSE = enum.auto()


@dataclass(frozen=True)
class Token:
    type: TokenType
    lexeme: str
    position: int = 0
    value: Optional[float] = None

    def __str__(self) -> str:
        return f"<{self.type}>{self.lexeme}"


def _is_valid_in_number(s: str) -> bool:
    return (s.isascii() and s.isdigit()) or s == "."


SINGLE_CHAR_TOKENS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "%": TokenType.PERCENT,
    "^": TokenType.CARET,
    "(": TokenType.BRACKET_OPEN,
    ")": TokenType.BRACKET_CLOSE,
}


def _parse_number(code: str, start_idx: int, end_idx: int) -> float:
    lexeme = code[start_idx:end_idx]
    try:
        return float(lexeme)
    except ValueError:
        # float() tolerates neither "." alone nor more than one dot
        bad_char_idx = start_idx
        if lexeme.count(".") > 1:
            bad_char_idx = code.index(".", code.index(".", start_idx) + 1)
        logger.debug("Malformed number literal %r at %d", lexeme, start_idx)
        raise TokenizerError(
            ErrorKind.INVALID_NUMBER,
            f"Malformed number literal: {lexeme!r}",
            code=code,
            error_char_idx=bad_char_idx,
        ) from None


def tokenize(code: str, skip_whitespace: bool = False) -> list[Token]:
    """Scans ``code`` left to right into infix-ordered tokens.

    Scanning stops silently at the first character that is neither an operator,
    a bracket nor part of a number, returning what was collected so far.
    Whitespace is such a character unless ``skip_whitespace`` is set, so by
    default "5 * 9" yields a single number token.
    """
    i = 0
    tokens: list[Token] = []
    while i < len(code):
        if _is_valid_in_number(code[i]):
            number_end_idx = i + 1
            while number_end_idx < len(code) and _is_valid_in_number(code[number_end_idx]):
                number_end_idx += 1
            tokens.append(
                Token(
                    type=TokenType.NUMBER,
                    lexeme=code[i:number_end_idx],
                    position=i,
                    value=_parse_number(code, i, number_end_idx),
                )
            )
            i = number_end_idx - 1  # to account for += 1 later
        elif code[i] in SINGLE_CHAR_TOKENS:
            tokens.append(Token(type=SINGLE_CHAR_TOKENS[code[i]], lexeme=code[i], position=i))
        elif skip_whitespace and code[i].isspace():
            pass
        else:
            logger.debug("Stopped scanning at %r (index %d)", code[i], i)
            break
        i += 1

    logger.debug("Tokens: %s", " ".join(str(t) for t in tokens))
    return tokens


def untokenize(tokens: list[Token]) -> str:
    result = " ".join(t.lexeme for t in tokens)

    # ( 1 + 2 ) => (1 + 2)
    result = re.sub(r"\(\s+", "(", result)
    result = re.sub(r"\s+\)", ")", result)
    return result
