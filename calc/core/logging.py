"""
Logging configuration.

Console logs go to stderr; stdout is reserved for results. Structured fields
are passed as ``extra_data`` and end up in ``record.extra_data``.
"""

import sys
import logging
from typing import Any, Dict, Optional
import json
import math
from pathlib import Path

from .config import Settings, get_settings


def _fields(record: logging.LogRecord) -> Dict[str, Any]:
    return getattr(record, "extra_data", {})


class StructuredFormatter(logging.Formatter):
    """One JSON object per line, with the structured fields at the top level"""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "time": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_fields(record),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps({key: _plain(value) for key, value in log_data.items()}, default=str)


def _plain(value: Any) -> Any:
    # inf and nan are not valid JSON numbers
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)
    return value


class TextFormatter(logging.Formatter):
    """Human-readable lines: ``LEVEL logger: message key=value ...``"""

    def __init__(self):
        super().__init__(fmt="%(asctime)s %(levelname)s %(name)s: %(message)s", datefmt="%H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = " ".join(f"{key}={value!r}" for key, value in _fields(record).items())
        return f"{line} {fields}" if fields else line


def setup_logging(settings: Optional[Settings] = None, level: Optional[str] = None) -> None:
    """
    Configure application logging.

    Args:
        settings: Settings to read LOG_* values from (defaults to the cached settings)
        level: Level name overriding settings.LOG_LEVEL
    """
    settings = settings or get_settings()

    log_level = getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.WARNING)
    formatter = StructuredFormatter() if settings.LOG_FORMAT == "json" else TextFormatter()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if settings.LOG_FILE:
        log_path = Path(settings.LOG_FILE)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path))

    for handler in handlers:
        handler.setFormatter(formatter)

    logging.basicConfig(level=log_level, handlers=handlers, force=True)


def get_logger(name: str) -> logging.Logger:
    """Get logger instance"""
    return logging.getLogger(name)


class LoggerAdapter(logging.LoggerAdapter):
    """Adapter merging its fixed context with per-call ``extra_data``"""

    def process(self, msg: str, kwargs: Dict[str, Any]) -> tuple:
        fields = {**self.extra, **kwargs.pop("extra_data", {})}
        kwargs.setdefault("extra", {})["extra_data"] = fields
        return msg, kwargs


def get_context_logger(name: str, **context) -> LoggerAdapter:
    """Get logger with permanent context, e.g. ``component="evaluator"``"""
    return LoggerAdapter(get_logger(name), context)
