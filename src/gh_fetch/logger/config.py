"""Configuration loading and updating for logging system.

Bootstrap defaults are computed here without touching the settings module
so that the logger can be imported first; the settings file is applied
later through update_logger_from_config().
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from gh_fetch.constants import (
    CONFIG_DIR_NAME,
    DEFAULT_CONFIG_SUBDIR,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    LOG_DIR_ENV,
    LOG_FILE_NAME,
)

if TYPE_CHECKING:
    from gh_fetch.config.settings import Settings
    from gh_fetch.logger.state import _LoggerState


def load_log_settings() -> tuple[str, str, Path]:
    """Load default console level, file level, and file path.

    Environment Variable Override:
        GH_FETCH_LOG_DIR: Overrides the log directory. Used by the test
        suite so test runs never write to the user's log file.
        LOG_LEVEL: Overrides the console level.

    Returns:
        Tuple of (console_level, file_level, log_path)

    """
    console_level = os.getenv("LOG_LEVEL", DEFAULT_CONSOLE_LOG_LEVEL).upper()

    env_log_dir = os.getenv(LOG_DIR_ENV)
    if env_log_dir:
        log_path = Path(env_log_dir).expanduser() / LOG_FILE_NAME
    else:
        log_path = (
            Path.home()
            / CONFIG_DIR_NAME
            / DEFAULT_CONFIG_SUBDIR
            / "logs"
            / LOG_FILE_NAME
        )

    return console_level, DEFAULT_LOG_LEVEL, log_path


def update_logger_from_config(
    state: "_LoggerState", settings: "Settings"
) -> None:
    """Update handler levels from loaded settings.

    Only handler levels change; handlers are never added or removed. The
    LOG_LEVEL environment variable keeps precedence for the console.

    Args:
        state: Logger state object (from logger.state module)
        settings: Loaded application settings

    """
    console_level_str = os.getenv("LOG_LEVEL", settings.console_log_level)
    console_level = getattr(
        logging, console_level_str.upper(), logging.INFO
    )
    file_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    if state.queue_listener is not None:
        for handler in state.queue_listener.handlers:
            if isinstance(handler, RotatingFileHandler):
                handler.setLevel(file_level)
            elif isinstance(handler, logging.StreamHandler):
                handler.setLevel(console_level)

    state.config_applied = True
