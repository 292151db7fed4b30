"""pocket_calculator: 즉시 계산 방식 사칙연산 계산기 엔진.

    from pocket_calculator import CalculatorEngine, Digit, Operator, Equals

    engine = CalculatorEngine()
    engine.feed([Digit(5), Operator('+'), Digit(3), Equals()])
    engine.current_display()  # '8'
"""

from .engine import CalculatorEngine
from .errors import CalculatorError, DivideByZero, NonFiniteResult
from .events import (
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
from .formatter import ERROR_TEXT, format_number, parse_number
from .history import HistoryEntry, HistoryLog
from .state import CalculatorState, INITIAL_STATE

__version__ = '0.1.0'

__all__ = [
    'Backspace',
    'CalcEvent',
    'CalculatorEngine',
    'CalculatorError',
    'CalculatorState',
    'Clear',
    'DecimalPoint',
    'Digit',
    'DivideByZero',
    'ERROR_TEXT',
    'Equals',
    'HistoryEntry',
    'HistoryLog',
    'INITIAL_STATE',
    'Mode',
    'NonFiniteResult',
    'Operator',
    'OperatorKind',
    'Percent',
    'SignToggle',
    'format_number',
    'parse_number',
]
