"""
Tests for operand text building.
"""
from functools import reduce

import pytest

from pocket_calculator.accumulator import (
    MAX_OPERAND_LENGTH,
    append,
    backspace,
    toggle_sign,
)


def feed(tokens, start=''):
    return reduce(append, tokens, start)


class TestAppend:

    def test_leading_zeros_are_stripped(self):
        assert feed('005') == '5'

    def test_single_zero(self):
        assert feed('0') == '0'
        assert feed('00') == '0'

    def test_decimal_point_deduplicated(self):
        assert feed('1.2.') == '1.2'

    def test_decimal_point_on_empty(self):
        assert append('', '.') == '0.'
        assert feed('.5') == '0.5'

    def test_zero_before_point_is_kept(self):
        assert feed('0.05') == '0.05'

    def test_max_length(self):
        full = '1' * MAX_OPERAND_LENGTH
        assert append(full, '2') == full
        assert append(full, '.') == full

    def test_sign_counts_toward_length(self):
        negative = '-' + '1' * (MAX_OPERAND_LENGTH - 1)
        assert append(negative, '2') == negative
        assert append(negative, '.') == negative

    def test_sign_preserved(self):
        assert append('-5', '3') == '-53'
        assert append('-0.', '7') == '-0.7'

    @pytest.mark.parametrize('token', ['a', '12', '', '²'])
    def test_invalid_token(self, token):
        with pytest.raises(ValueError):
            append('1', token)


class TestBackspace:

    @pytest.mark.parametrize('current, expected', [
        ('12', '1'),
        ('1', ''),
        ('-5', ''),
        ('', ''),
        ('0.', '0'),
    ])
    def test_backspace(self, current, expected):
        assert backspace(current) == expected


class TestToggleSign:

    @pytest.mark.parametrize('current, expected', [
        ('5', '-5'),
        ('-5', '5'),
        ('0.5', '-0.5'),
        ('', ''),
        ('0', '0'),
        ('0.', '0.'),
    ])
    def test_toggle(self, current, expected):
        assert toggle_sign(current) == expected

    def test_no_room_for_sign(self):
        full = '1' * MAX_OPERAND_LENGTH
        assert toggle_sign(full) == full
        assert toggle_sign('-' + full[1:]) == full[1:]

    def test_unlimited_length(self):
        assert toggle_sign('1.000000e+12', max_length=None) == '-1.000000e+12'
