"""
Shared pytest fixtures.

Every test starts from default settings and leaves the root logger the way
it found it.
"""

import logging

import pytest

from calc.core.config import get_settings
from calc.core.logging import StructuredFormatter, TextFormatter
from calc.parser import EvalError


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Drop CALC_* overrides and undo setup_logging() after each test."""
    for name in ("CALC_PROMPT", "CALC_LOG_LEVEL", "CALC_LOG_FORMAT", "CALC_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()

    root = logging.getLogger()
    level = root.level

    yield

    for handler in root.handlers[:]:
        if isinstance(handler.formatter, (TextFormatter, StructuredFormatter)):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
    get_settings.cache_clear()


@pytest.fixture
def raises_eval_error():
    """Run a callable and return the EvalError it raised."""
    def _raises(func, *args) -> EvalError:
        with pytest.raises(EvalError) as exc_info:
            func(*args)
        return exc_info.value
    return _raises
