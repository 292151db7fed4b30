"""
Pytest configuration and fixtures.
"""
import logging
import os
import sys

import pytest

# Add the parent directory to path so we can import the package
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pocket_calculator import CalculatorEngine  # noqa: E402
from pocket_calculator.keymap import events_for_keys  # noqa: E402
from pocket_calculator.log import LOGGER_NAME  # noqa: E402


@pytest.fixture
def engine():
    return CalculatorEngine()


@pytest.fixture
def press(engine):
    """키 문자열을 engine에 넣는다: press('12+3=')"""
    def _press(keys):
        engine.feed(events_for_keys(keys))
        return engine.current_display()
    return _press


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
