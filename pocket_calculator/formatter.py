# formatter.py
# Python 3.x
# 숫자 -> 디스플레이 문자열 변환 (순수 함수)

import math
from decimal import Decimal

ERROR_TEXT = 'Error'
MAX_DIGITS = 12  # 디스플레이 자릿수 제한 (부호/소수점 제외)
MAX_FRACTION_DIGITS = 8
EXP_THRESHOLD = 1e10
EXP_FRACTION_DIGITS = 6

_ROUNDING = 1e10  # 소수 10자리에서 반올림


def format_number(value: float) -> str:
    """값을 화면에 표시할 문자열로 바꾼다.

    - NaN/무한대는 'Error'
    - 소수 10자리 반올림으로 부동소수점 잡음 제거
    - 절댓값이 1e10 초과이거나 반올림 값의 자릿수가 12를 넘으면 지수 표기(소수 6자리)
    - 그 외에는 소수부가 8자리를 넘을 때만 8자리 고정 소수로 자른다
    """
    if not math.isfinite(value):
        return ERROR_TEXT
    if abs(value) > EXP_THRESHOLD:
        return _exponential(value)

    # 0.5는 양의 방향으로 올림
    rounded = math.floor(value * _ROUNDING + 0.5) / _ROUNDING
    if rounded == 0:
        rounded = 0.0  # -0.0 제거
    if abs(rounded) > EXP_THRESHOLD:
        return _exponential(rounded)

    text = _positional(rounded)
    if count_digits(text) > MAX_DIGITS:
        return _exponential(rounded)
    fraction = text.partition('.')[2]
    if len(fraction) > MAX_FRACTION_DIGITS:
        text = _trim('{:.{}f}'.format(rounded, MAX_FRACTION_DIGITS))
    return text


def parse_number(text: str) -> float:
    """디스플레이/입력 문자열 -> float. 빈 입력은 0"""
    if text in ('', '-'):
        return 0.0
    return float(text)


def count_digits(text: str) -> int:
    return sum(1 for ch in text if ch.isdigit())


def _positional(x: float) -> str:
    # repr은 왕복 가능한 최단 표현, Decimal로 지수 표기를 풀어준다
    return _trim(format(Decimal(repr(x)), 'f'))


def _exponential(x: float) -> str:
    return '{:.{}e}'.format(x, EXP_FRACTION_DIGITS)


def _trim(s: str) -> str:
    if '.' in s:
        s = s.rstrip('0').rstrip('.')
    if s in ('', '-', '-0'):
        s = '0'
    return s
