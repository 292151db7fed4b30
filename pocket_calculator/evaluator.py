# evaluator.py
# Python 3.x

from .errors import DivideByZero
from .events import OperatorKind


def add(a: float, b: float) -> float:
    return a + b


def subtract(a: float, b: float) -> float:
    return a - b


def multiply(a: float, b: float) -> float:
    return a * b


def divide(a: float, b: float) -> float:
    if b == 0:
        raise DivideByZero(a)
    return a / b


_OPERATIONS = {
    OperatorKind.ADD: add,
    OperatorKind.SUB: subtract,
    OperatorKind.MUL: multiply,
    OperatorKind.DIV: divide,
}


def apply(lhs: float, rhs: float, op: OperatorKind) -> float:
    """이항 연산 한 번. 반올림은 하지 않는다(formatter 담당)"""
    return _OPERATIONS[op](lhs, rhs)
