# accumulator.py
# Python 3.x
# 현재 입력 중인 피연산자 문자열 조립

from .formatter import parse_number

MAX_OPERAND_LENGTH = 12  # 부호 포함 글자 수
DIGITS = '0123456789'
DECIMAL_POINT = '.'


def append(current: str, token: str) -> str:
    """숫자 또는 소수점 한 글자를 붙인 새 피연산자 문자열을 돌려준다.

    길이 제한을 넘는 입력은 조용히 버린다(current 그대로 반환).
    """
    sign, body = _split_sign(current)

    if token == DECIMAL_POINT:
        if not body:
            new = '0.'
        elif DECIMAL_POINT in body:
            return current
        else:
            new = body + DECIMAL_POINT
    elif len(token) == 1 and token in DIGITS:
        new = body + token
        # 앞자리 0 제거 ('0.'은 유지)
        if len(new) > 1 and new[0] == '0' and new[1] != DECIMAL_POINT:
            new = new[1:]
    else:
        raise ValueError(f'not a digit or decimal point: {token!r}')

    if len(sign + new) > MAX_OPERAND_LENGTH:
        return current
    return sign + new


def backspace(current: str) -> str:
    s = current[:-1]
    if s == '-':
        return ''
    return s


def toggle_sign(current: str, max_length=MAX_OPERAND_LENGTH) -> str:
    """부호 반전. 비어 있거나 값이 0이면 그대로, '-'를 붙일 자리가 없어도 그대로"""
    if not current or parse_number(current) == 0:
        return current
    if max_length and not current.startswith('-') and len(current) >= max_length:
        return current
    if current.startswith('-'):
        return current[1:]
    return '-' + current


def _split_sign(current: str):
    if current.startswith('-'):
        return '-', current[1:]
    return '', current
