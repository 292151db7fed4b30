"""
Tests for the binary evaluator.
"""
import math

import pytest

from pocket_calculator.errors import CalculatorError, DivideByZero
from pocket_calculator.evaluator import apply
from pocket_calculator.events import OperatorKind


@pytest.mark.parametrize('op, expected', [
    (OperatorKind.ADD, 15.5),
    (OperatorKind.SUB, 9.5),
    (OperatorKind.MUL, 37.5),
    (OperatorKind.DIV, 4.166666666666667),
])
def test_operations(op, expected):
    assert apply(12.5, 3, op) == pytest.approx(expected)


def test_no_rounding():
    assert apply(0.1, 0.2, OperatorKind.ADD) == 0.1 + 0.2


@pytest.mark.parametrize('rhs', [0, 0.0, -0.0])
def test_divide_by_zero(rhs):
    with pytest.raises(DivideByZero) as exc_info:
        apply(1, rhs, OperatorKind.DIV)
    assert isinstance(exc_info.value, CalculatorError)
    assert exc_info.value.lhs == 1


def test_zero_numerator_is_fine():
    assert apply(0, 5, OperatorKind.DIV) == 0


def test_overflow_is_not_an_evaluator_error():
    assert math.isinf(apply(1e308, 10, OperatorKind.MUL))
