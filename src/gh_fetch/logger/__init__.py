"""Logging utilities for gh-fetch.

This package provides structured logging with:
- Colored console output with ANSI color codes
- File rotation using standard RotatingFileHandler
- Non-blocking logging via QueueHandler/QueueListener
- Hierarchical logger naming (e.g., gh_fetch.core.auth)

Usage:
    >>> from gh_fetch.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Fetching %s", file_path)  # Use %-style formatting

RULES FOR CONTRIBUTORS:
    1. Always use: logger = get_logger(__name__)
    2. Never call logging.basicConfig()
    3. Never use f-strings in log calls
    4. Never log token values
"""

from gh_fetch.logger.config import (
    update_logger_from_config as _update_config,
)
from gh_fetch.logger.formatters import (
    ColoredConsoleFormatter,
    HybridConsoleFormatter,
    SimpleConsoleFormatter,
)
from gh_fetch.logger.handlers import ConfigurationError
from gh_fetch.logger.logger import (
    clear_logger_state,
    flush_all_handlers,
    get_logger,
    setup_logging,
)
from gh_fetch.logger.state import get_state

__all__ = [
    "ColoredConsoleFormatter",
    "ConfigurationError",
    "HybridConsoleFormatter",
    "SimpleConsoleFormatter",
    "clear_logger_state",
    "flush_all_handlers",
    "get_logger",
    "setup_logging",
    "update_logger_from_config",
]


def update_logger_from_config(settings) -> None:
    """Update logger handler levels from loaded settings.

    Example:
        >>> settings = SettingsManager().load()
        >>> update_logger_from_config(settings)

    """
    _update_config(get_state(), settings)
