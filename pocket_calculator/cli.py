# cli.py
# Python 3.x
# 진입점: 기본은 PyQt5 창, --keys 를 주면 창 없이 키 문자열을 재생

import argparse
import logging

from .engine import CalculatorEngine
from .keymap import events_for_keys
from .log import setup_logger

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR_STATE = 1
EXIT_BAD_KEYS = 2


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog='pocket-calculator',
        description='사칙연산 계산기. --keys 없이 실행하면 창을 띄웁니다.'
    )
    parser.add_argument('--keys', default=None,
                        help="창 없이 재생할 키 문자열 (예: '12+3=')")
    parser.add_argument('--history', action='store_true',
                        help='--keys 재생 후 계산 기록도 출력')
    parser.add_argument('--log', default=None,
                        help='로그 파일 경로(기본값: 파일 로그 없음)')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='이벤트 단위 DEBUG 로그 출력')
    return parser.parse_args(argv)


def replay(keys: str, show_history: bool = False) -> int:
    """키 문자열을 새 엔진에 순서대로 넣고 마지막 표시값을 출력한다."""
    try:
        events = list(events_for_keys(keys))
    except ValueError as exc:
        logger.error('invalid key string: %s', exc)
        return EXIT_BAD_KEYS

    engine = CalculatorEngine()
    engine.feed(events)

    if show_history:
        for entry in engine.current_history():
            print(entry)
    print(engine.current_display())
    return EXIT_ERROR_STATE if engine.is_error() else EXIT_OK


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logger(args.log, args.verbose)

    if args.keys is not None:
        return replay(args.keys, args.history)

    from .gui import run_gui
    return run_gui()
