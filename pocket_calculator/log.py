# log.py
# Python 3.x

import logging
import sys

LOGGER_NAME = 'pocket_calculator'
LOG_FORMAT = '%(asctime)s %(levelname)s %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logger(log_path=None, verbose=False):
    """콘솔(stderr)과 파일(UTF-8, 선택)로 동시에 로그를 남기는 로거를 설정한다.

    이미 핸들러가 붙어 있으면 그대로 돌려준다.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if logger.handlers:
        return logger

    level = logging.DEBUG if verbose else logging.INFO
    logger.setLevel(level)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    # 콘솔 (stdout은 계산 결과 출력용)
    sh = logging.StreamHandler(sys.stderr)
    sh.setLevel(level)
    sh.setFormatter(formatter)
    logger.addHandler(sh)

    # 파일(UTF-8)
    if log_path:
        fh = logging.FileHandler(log_path, mode='a', encoding='utf-8')
        fh.setLevel(level)
        fh.setFormatter(formatter)
        logger.addHandler(fh)

    return logger
