"""Configuration and logging"""

from .config import Settings, get_settings
from .logging import setup_logging, get_logger, get_context_logger

__all__ = [
    "Settings",
    "get_settings",
    "setup_logging",
    "get_logger",
    "get_context_logger",
]
