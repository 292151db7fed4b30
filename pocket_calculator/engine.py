# engine.py
# Python 3.x
# PEP 8 준수, 문자열은 기본적으로 ' ' 사용

import logging
import math
from dataclasses import replace
from typing import Callable, Iterable, List, Tuple

from . import accumulator, evaluator
from .errors import CalculatorError, NonFiniteResult
from .events import (
    EVENT_TYPES,
    Backspace,
    CalcEvent,
    Clear,
    DecimalPoint,
    Digit,
    Equals,
    Mode,
    Operator,
    OperatorKind,
    Percent,
    SignToggle,
)
from .formatter import format_number, parse_number
from .history import HistoryEntry, HistoryLog
from .resolver import Action, resolve_equals, resolve_operator, resolve_percent
from .state import ERROR_STATE, INITIAL_STATE, CalculatorState

logger = logging.getLogger(__name__)

Listener = Callable[[CalculatorState], None]


class CalculatorEngine:
    """계산기 상태 머신: 이벤트 하나를 받아 상태/표시/기록을 갱신한다.

    상태(CalculatorState)와 기록(HistoryLog)은 엔진만 소유하며,
    밖으로는 불변 스냅샷만 내보낸다. 계산 오류는 handle() 안에서
    Error 상태로 바뀌고 예외로 새어 나가지 않는다.
    """

    def __init__(self) -> None:
        self._state = INITIAL_STATE
        self._history = HistoryLog()
        self._listeners: List[Listener] = []
        self._handlers = {
            Digit: self._on_input,
            DecimalPoint: self._on_input,
            Operator: self._on_operator,
            Percent: self._on_percent,
            SignToggle: self._on_sign_toggle,
            Equals: self._on_equals,
            Backspace: self._on_backspace,
        }

    # 필수 API
    def handle(self, event: CalcEvent) -> None:
        if not isinstance(event, EVENT_TYPES):
            raise TypeError(f'not a calculator event: {event!r}')
        logger.debug('event %r (mode=%s)', event, self._state.mode.value)

        if isinstance(event, Clear):
            self.reset()
            return

        if self._state.mode is Mode.ERROR:
            # 오류 뒤 첫 입력은 초기화 후 새 입력으로 처리
            self._state = INITIAL_STATE
            if isinstance(event, Backspace):
                self._notify()
                return

        try:
            self._handlers[type(event)](event)
        except CalculatorError as exc:
            logger.info('calculation failed: %s', exc)
            self._state = ERROR_STATE
        self._notify()

    def feed(self, events: Iterable[CalcEvent]) -> None:
        for event in events:
            self.handle(event)

    def reset(self) -> None:
        self._state = INITIAL_STATE
        self._notify()

    @property
    def state(self) -> CalculatorState:
        return self._state

    def current_display(self) -> str:
        return self._state.display

    def current_history(self) -> Tuple[HistoryEntry, ...]:
        return self._history.entries()

    def is_error(self) -> bool:
        return self._state.mode is Mode.ERROR

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    # 이벤트별 처리
    def _on_input(self, event) -> None:
        s = self._state
        current = s.operand if s.mode is Mode.ENTERING else ''
        token = event.char if isinstance(event, Digit) else accumulator.DECIMAL_POINT
        operand = accumulator.append(current, token)
        self._state = replace(s, operand=operand, display=operand or '0',
                              mode=Mode.ENTERING)

    def _on_operator(self, event: Operator) -> None:
        s = self._state
        action = resolve_operator(s)

        if action is Action.EVALUATE:
            result, text = self._evaluate(s.pending_operand,
                                          parse_number(s.operand),
                                          s.pending_operator)
            self._state = replace(s, pending_operand=result,
                                  pending_operator=event.kind,
                                  operand='', display=text)
        elif action is Action.REPLACE_OPERATOR:
            self._state = replace(s, pending_operator=event.kind)
        elif action is Action.START_PENDING:
            value = parse_number(s.operand)
            self._state = replace(s, pending_operand=value,
                                  pending_operator=event.kind,
                                  operand='', display=format_number(value))
        else:
            # 직전 결과를 그대로 이어서 계산
            self._state = replace(s, pending_operand=parse_number(s.display),
                                  pending_operator=event.kind,
                                  operand='', mode=Mode.ENTERING)

    def _on_percent(self, event: Percent) -> None:
        s = self._state
        action = resolve_percent(s)

        if action is Action.PERCENT_OF_PENDING:
            result = s.pending_operand * parse_number(s.operand) / 100
        elif action is Action.PERCENT:
            current = s.operand if s.mode is Mode.ENTERING and s.operand else s.display
            result = parse_number(current) / 100
        else:
            return

        self._state = CalculatorState(display=self._checked_text(result),
                                      mode=Mode.JUST_EVALUATED)

    def _on_sign_toggle(self, event: SignToggle) -> None:
        s = self._state
        if s.mode is Mode.JUST_EVALUATED:
            display = accumulator.toggle_sign(s.display, max_length=None)
            self._state = replace(s, display=display)
        elif s.operand:
            operand = accumulator.toggle_sign(s.operand)
            self._state = replace(s, operand=operand, display=operand)

    def _on_equals(self, event: Equals) -> None:
        s = self._state
        if resolve_equals(s) is Action.NOOP:
            return

        rhs = parse_number(s.operand)
        result, text = self._evaluate(s.pending_operand, rhs, s.pending_operator)
        expression = '{} {} {}'.format(format_number(s.pending_operand),
                                       s.pending_operator.glyph,
                                       format_number(rhs))
        self._history.append(HistoryEntry(expression, text))
        logger.debug('evaluated %s = %s', expression, text)
        self._state = CalculatorState(display=text, mode=Mode.JUST_EVALUATED)

    def _on_backspace(self, event: Backspace) -> None:
        s = self._state
        if s.mode is not Mode.ENTERING:
            self._state = INITIAL_STATE
            return
        if not s.operand:
            return
        operand = accumulator.backspace(s.operand)
        self._state = replace(s, operand=operand, display=operand or '0')

    # 내부 유틸
    def _evaluate(self, lhs: float, rhs: float, op: OperatorKind):
        result = evaluator.apply(lhs, rhs, op)
        return result, self._checked_text(result)

    def _checked_text(self, value: float) -> str:
        if not math.isfinite(value):
            raise NonFiniteResult(value)
        return format_number(value)

    def _notify(self) -> None:
        snapshot = self._state
        for listener in list(self._listeners):
            listener(snapshot)
