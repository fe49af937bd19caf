"""
Logging utilities.
"""
import logging
import sys
from typing import Optional

from config import settings

ROOT_LOGGER_NAME = "case_chain"

_configured = False


def _configure_root() -> logging.Logger:
    global _configured
    root = logging.getLogger(ROOT_LOGGER_NAME)
    # Other handlers may already be attached (e.g. a test runner's capture)
    if not _configured:
        _configured = True
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(settings.log_format))
        root.addHandler(handler)
        root.propagate = False
        set_log_level(settings.effective_log_level)
    return root


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger under the project's root logger.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger instance
    """
    root = _configure_root()
    if not name:
        return root
    return root.getChild(name)


def set_log_level(level: str) -> None:
    """
    Set the project logging level.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    numeric_level = getattr(logging, level.upper(), None)
    if isinstance(numeric_level, int):
        logging.getLogger(ROOT_LOGGER_NAME).setLevel(numeric_level)
