# resolver.py
# Python 3.x
# 연산자/퍼센트/= 입력 시 엔진이 무엇을 할지 결정

from enum import Enum

from .events import Mode
from .state import CalculatorState


class Action(Enum):
    EVALUATE = 'evaluate'  # 대기 중인 연산을 먼저 계산
    REPLACE_OPERATOR = 'replace_operator'
    START_PENDING = 'start_pending'  # 입력 중인 피연산자로 새 연산 시작
    CONTINUE_FROM_RESULT = 'continue_from_result'  # 직전 결과로 새 연산 시작
    PERCENT_OF_PENDING = 'percent_of_pending'  # pending * operand / 100
    PERCENT = 'percent'  # 현재 값 / 100
    NOOP = 'noop'


def resolve_operator(state: CalculatorState) -> Action:
    if state.mode is Mode.JUST_EVALUATED:
        return Action.CONTINUE_FROM_RESULT
    if state.has_pending:
        if state.operand:
            return Action.EVALUATE
        return Action.REPLACE_OPERATOR
    return Action.START_PENDING


def resolve_percent(state: CalculatorState) -> Action:
    if state.pending_operand is not None:
        if state.operand:
            return Action.PERCENT_OF_PENDING
        # 두 번째 피연산자를 아직 입력하지 않음
        return Action.NOOP
    return Action.PERCENT


def resolve_equals(state: CalculatorState) -> Action:
    if state.mode is not Mode.ENTERING:
        return Action.NOOP
    if not state.has_pending or not state.operand:
        return Action.NOOP
    return Action.EVALUATE
