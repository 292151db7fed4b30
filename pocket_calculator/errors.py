# errors.py
# Python 3.x
# 엔진 내부에서만 발생하고 handle() 밖으로는 나가지 않는 예외들


class CalculatorError(Exception):
    """계산 오류의 공통 부모"""


class DivideByZero(CalculatorError):
    """0으로 나누기"""

    def __init__(self, lhs: float) -> None:
        super().__init__(f'division by zero: {lhs!r} / 0')
        self.lhs = lhs


class NonFiniteResult(CalculatorError):
    """NaN 또는 무한대 결과"""

    def __init__(self, value: float) -> None:
        super().__init__(f'non-finite result: {value!r}')
        self.value = value
