import math

import pytest

from infix_calculator.errors import CalcRuntimeError, ErrorKind
from infix_calculator.parser import BinaryOperator, PostfixItem
from infix_calculator.runtime import evaluate

ADD = BinaryOperator.ADD
SUB = BinaryOperator.SUB
DIV = BinaryOperator.DIV
MOD = BinaryOperator.MOD
POW = BinaryOperator.POW


@pytest.mark.parametrize(
    "postfix, expected_ret_val",
    [
        pytest.param([1.0], 1.0),
        pytest.param([1.0, 2.0, ADD], 3.0),
        pytest.param([5.0, 2.0, SUB], 3.0),
        pytest.param([1, 2, ADD], 3.0),
        pytest.param([65.0, 4.0, DIV], 16.25),
        pytest.param([-7.0, 3.0, MOD], -1.0),
        pytest.param([7.0, -3.0, MOD], 1.0),
        pytest.param([2.0, 10.0, POW], 1024.0),
        pytest.param([0.0, -1.0, POW], math.inf),
        pytest.param([-0.0, -1.0, POW], -math.inf),
        pytest.param([10.0, 400.0, POW], math.inf),
        pytest.param([-10.0, 401.0, POW], -math.inf),
        pytest.param([-10.0, 400.0, POW], math.inf),
    ],
)
def test_evaluate(postfix: list[PostfixItem], expected_ret_val: float) -> None:
    result = evaluate(postfix)
    assert isinstance(result, float)
    assert result == expected_ret_val


@pytest.mark.parametrize(
    "postfix",
    [
        pytest.param([-8.0, 0.5, POW]),
        pytest.param([math.inf, 3.0, MOD]),
    ],
)
def test_evaluate_nan(postfix: list[PostfixItem]) -> None:
    assert math.isnan(evaluate(postfix))


@pytest.mark.parametrize(
    "postfix, expected_kind",
    [
        pytest.param([], ErrorKind.INVALID_RESULT),
        pytest.param([1.0, 2.0], ErrorKind.INVALID_RESULT),
        pytest.param([1.0, 2.0, 3.0, ADD], ErrorKind.INVALID_RESULT),
        pytest.param([ADD], ErrorKind.TOO_MANY_OPERATIONS),
        pytest.param([1.0, ADD], ErrorKind.TOO_MANY_OPERATIONS),
        pytest.param([1.0, 0.0, DIV], ErrorKind.DIVIDE_BY_ZERO),
        pytest.param([0.0, 0.0, DIV], ErrorKind.DIVIDE_BY_ZERO),
        pytest.param([1.0, -0.0, MOD], ErrorKind.DIVIDE_BY_ZERO),
        pytest.param(["1"], ErrorKind.INVALID_OPERATION),
        pytest.param([1.0, None, ADD], ErrorKind.INVALID_OPERATION),
        pytest.param([True], ErrorKind.INVALID_OPERATION),
    ],
)
def test_evaluate_errors(postfix: list, expected_kind: ErrorKind) -> None:
    with pytest.raises(CalcRuntimeError) as exc_info:
        evaluate(postfix)
    assert exc_info.value.kind is expected_kind


def test_runtime_error_str() -> None:
    with pytest.raises(CalcRuntimeError) as exc_info:
        evaluate([1.0, 0.0, DIV])
    assert str(exc_info.value) == "[divide by zero] Division of 1.0 by zero"
