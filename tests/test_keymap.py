"""
Tests for key and button mapping.
"""
import pytest

from pocket_calculator.events import (
    Backspace,
    Clear,
    DecimalPoint,
    Digit,
    Equals,
    Operator,
    OperatorKind,
    Percent,
    SignToggle,
)
from pocket_calculator.keymap import event_for_button, event_for_key, events_for_keys


class TestEventForKey:

    @pytest.mark.parametrize('key, expected', [
        ('7', Digit(7)),
        ('.', DecimalPoint()),
        ('+', Operator(OperatorKind.ADD)),
        ('-', Operator(OperatorKind.SUB)),
        ('*', Operator(OperatorKind.MUL)),
        ('/', Operator(OperatorKind.DIV)),
        ('%', Percent()),
        ('Enter', Equals()),
        ('=', Equals()),
        ('Backspace', Backspace()),
        ('Escape', Clear()),
    ])
    def test_known_keys(self, key, expected):
        assert event_for_key(key) == expected

    def test_unknown_key(self):
        assert event_for_key('x') is None
        assert event_for_key('') is None

    def test_button_only_labels_are_not_keys(self):
        assert event_for_key('AC') is None


class TestEventForButton:

    @pytest.mark.parametrize('label, expected', [
        ('AC', Clear()),
        ('+/-', SignToggle()),
        ('÷', Operator(OperatorKind.DIV)),
        ('×', Operator(OperatorKind.MUL)),
        ('−', Operator(OperatorKind.SUB)),
        ('⌫', Backspace()),
        ('0', Digit(0)),
    ])
    def test_labels(self, label, expected):
        assert event_for_button(label) == expected


class TestEventsForKeys:

    def test_sequence(self):
        assert list(events_for_keys('1 + 2=')) == [
            Digit(1), Operator(OperatorKind.ADD), Digit(2), Equals(),
        ]

    def test_unknown_character(self):
        with pytest.raises(ValueError):
            list(events_for_keys('1+x'))
