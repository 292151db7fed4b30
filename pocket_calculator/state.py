# state.py
# Python 3.x

from dataclasses import dataclass
from typing import Optional

from .events import Mode, OperatorKind
from .formatter import ERROR_TEXT


@dataclass(frozen=True)
class CalculatorState:
    """엔진 상태 스냅샷 (불변)"""

    display: str = '0'
    pending_operand: Optional[float] = None
    pending_operator: Optional[OperatorKind] = None
    mode: Mode = Mode.ENTERING
    operand: str = ''  # 입력 중인 피연산자 문자열

    def __post_init__(self) -> None:
        if not self.display:
            raise ValueError('display must not be empty')
        if self.pending_operator is not None and self.pending_operand is None:
            raise ValueError('pending operator without pending operand')
        if self.mode is Mode.ERROR:
            idle = (self.pending_operand is None and self.pending_operator is None
                    and not self.operand)
            if self.display != ERROR_TEXT or not idle:
                raise ValueError('error state must be idle and show "Error"')

    @property
    def has_pending(self) -> bool:
        return self.pending_operator is not None


INITIAL_STATE = CalculatorState()
ERROR_STATE = CalculatorState(display=ERROR_TEXT, mode=Mode.ERROR)
