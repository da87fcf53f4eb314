import logging
import math
from typing import Callable

from infix_calculator.errors import CalcRuntimeError, ErrorKind
from infix_calculator.parser import BinaryOperator, PostfixItem, format_postfix

logger = logging.getLogger(__name__)

BinaryOperationImpl = Callable[[float, float], float]


def evaluate(postfix: list[PostfixItem]) -> float:
    """Runs a postfix sequence on a value stack; exactly one value must be left over"""
    stack: list[float] = []
    for item in postfix:
        if isinstance(item, BinaryOperator):
            right = _pop_operand(stack, item)
            left = _pop_operand(stack, item)
            stack.append(eval_binary_operation(item, left, right))
        elif isinstance(item, (float, int)) and not isinstance(item, bool):
            stack.append(float(item))
        else:
            raise CalcRuntimeError(ErrorKind.INVALID_OPERATION, f"Neither a number nor an operator: {item!r}")

    if len(stack) != 1:
        logger.debug("Value stack after evaluating %r: %s", format_postfix(postfix), stack)
        raise CalcRuntimeError(
            ErrorKind.INVALID_RESULT,
            "Expected exactly one result, got " + (f"{len(stack)} values" if stack else "nothing"),
        )
    logger.debug("Result: %s", stack[0])
    return stack[0]


def _pop_operand(stack: list[float], op: BinaryOperator) -> float:
    if not stack:
        raise CalcRuntimeError(ErrorKind.TOO_MANY_OPERATIONS, f"Not enough operands for {op}")
    return stack.pop()


def eval_binary_operation(op: BinaryOperator, a: float, b: float) -> float:
    impl = binary_operation_impls.get(op)
    if impl is None:
        raise CalcRuntimeError(ErrorKind.INVALID_OPERATION, f"Unexpected binary operator: {op}")
    return impl(a, b)


def _div(a: float, b: float) -> float:
    if b == 0:
        raise CalcRuntimeError(ErrorKind.DIVIDE_BY_ZERO, f"Division of {a} by zero")
    return a / b


def _mod(a: float, b: float) -> float:
    if b == 0:
        raise CalcRuntimeError(ErrorKind.DIVIDE_BY_ZERO, f"Remainder of {a} by zero")
    try:
        return math.fmod(a, b)
    except ValueError:
        # infinite dividend
        return math.nan


def _pow(a: float, b: float) -> float:
    """IEEE-754 pow: never raises and never goes complex"""
    try:
        return math.pow(a, b)
    except OverflowError:
        negative = a < 0 and b.is_integer() and b % 2 == 1
        return -math.inf if negative else math.inf
    except ValueError:
        if a == 0:
            # zero to a negative power
            negative = math.copysign(1.0, a) < 0 and b.is_integer() and b % 2 == 1
            return -math.inf if negative else math.inf
        return math.nan


binary_operation_impls: dict[BinaryOperator, BinaryOperationImpl] = {
    BinaryOperator.ADD: lambda a, b: a + b,
    BinaryOperator.SUB: lambda a, b: a - b,
    BinaryOperator.MUL: lambda a, b: a * b,
    BinaryOperator.DIV: _div,
    BinaryOperator.MOD: _mod,
    BinaryOperator.POW: _pow,
}
