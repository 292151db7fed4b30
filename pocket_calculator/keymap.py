# keymap.py
# Python 3.x
# 키보드 키 / 버튼 라벨 -> 계산기 이벤트

from typing import Iterator, Optional

from .events import (
    Backspace,
    CalcEvent,
    Clear,
    DecimalPoint,
    Digit,
    Equals,
    Operator,
    OperatorKind,
    Percent,
    SignToggle,
)

KEY_EVENTS = {
    '.': DecimalPoint(),
    ',': DecimalPoint(),
    '+': Operator(OperatorKind.ADD),
    '-': Operator(OperatorKind.SUB),
    '*': Operator(OperatorKind.MUL),
    '/': Operator(OperatorKind.DIV),
    '−': Operator(OperatorKind.SUB),
    '×': Operator(OperatorKind.MUL),
    '÷': Operator(OperatorKind.DIV),
    '%': Percent(),
    '=': Equals(),
    'Enter': Equals(),
    'Return': Equals(),
    'Backspace': Backspace(),
    'Escape': Clear(),
    'Esc': Clear(),
}
KEY_EVENTS.update({str(d): Digit(d) for d in range(10)})

# 키패드 전용 라벨
BUTTON_EVENTS = {
    'AC': Clear(),
    'C': Clear(),
    '+/-': SignToggle(),
    '±': SignToggle(),
    '⌫': Backspace(),
}


def event_for_key(key: str) -> Optional[CalcEvent]:
    """알 수 없는 키는 None"""
    return KEY_EVENTS.get(key)


def event_for_button(label: str) -> Optional[CalcEvent]:
    if label in BUTTON_EVENTS:
        return BUTTON_EVENTS[label]
    return KEY_EVENTS.get(label)


def events_for_keys(text: str) -> Iterator[CalcEvent]:
    """'12+3=' 같은 키 문자열을 이벤트로 풀어낸다. 공백은 건너뛴다"""
    for ch in text:
        if ch.isspace():
            continue
        event = event_for_button(ch)
        if event is None:
            raise ValueError(f'unknown key: {ch!r}')
        yield event
