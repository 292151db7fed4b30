# events.py
# Python 3.x
# PEP 8 준수, 문자열은 기본적으로 ' ' 사용

from dataclasses import dataclass
from enum import Enum
from typing import Union


class OperatorKind(Enum):
    """사칙연산 종류. value는 키보드 기호, glyph는 UI 표시 기호"""

    ADD = '+'
    SUB = '-'
    MUL = '*'
    DIV = '/'

    @property
    def glyph(self) -> str:
        return _GLYPHS[self]


_GLYPHS = {
    OperatorKind.ADD: '+',
    OperatorKind.SUB: '−',
    OperatorKind.MUL: '×',
    OperatorKind.DIV: '÷',
}


class Mode(Enum):
    ENTERING = 'entering'
    JUST_EVALUATED = 'just_evaluated'
    ERROR = 'error'


@dataclass(frozen=True)
class Digit:
    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int) \
                or not 0 <= self.value <= 9:
            raise ValueError(f'digit must be 0-9, got {self.value!r}')

    @property
    def char(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class DecimalPoint:
    pass


@dataclass(frozen=True)
class Operator:
    kind: OperatorKind

    def __post_init__(self) -> None:
        # '+', '-', '*', '/' 문자도 허용
        if not isinstance(self.kind, OperatorKind):
            object.__setattr__(self, 'kind', OperatorKind(self.kind))


@dataclass(frozen=True)
class Percent:
    pass


@dataclass(frozen=True)
class SignToggle:
    pass


@dataclass(frozen=True)
class Equals:
    pass


@dataclass(frozen=True)
class Clear:
    pass


@dataclass(frozen=True)
class Backspace:
    pass


CalcEvent = Union[Digit, DecimalPoint, Operator, Percent, SignToggle,
                  Equals, Clear, Backspace]

EVENT_TYPES = (Digit, DecimalPoint, Operator, Percent, SignToggle,
               Equals, Clear, Backspace)
