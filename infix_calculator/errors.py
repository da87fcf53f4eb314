import enum
from dataclasses import dataclass

from infix_calculator.utils import PrintableEnum


class ErrorKind(PrintableEnum):
    INVALID_RESULT = enum.auto()
    INVALID_OPERATION = enum.auto()
    DIVIDE_BY_ZERO = enum.auto()
    TOO_MANY_OPERATIONS = enum.auto()
    UNMATCHED_PARENTHESIS = enum.auto()
    INVALID_NUMBER = enum.auto()


@dataclass
class CalculatorError(Exception):
    """Base for every error the pipeline raises; ``kind`` identifies it"""

    kind: ErrorKind
    errmsg: str

    def __str__(self) -> str:
        return f"[{self.kind.human_name()}] {self.errmsg}"


@dataclass
class CalcRuntimeError(CalculatorError):
    pass
