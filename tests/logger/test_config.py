"""Tests for logger bootstrap settings and config-driven updates."""

import logging
from logging.handlers import QueueListener, RotatingFileHandler
from pathlib import Path
from unittest.mock import MagicMock

from gh_fetch.config.settings import Settings
from gh_fetch.logger.config import (
    load_log_settings,
    update_logger_from_config,
)
from gh_fetch.logger.state import _LoggerState


def test_log_dir_override(monkeypatch, tmp_path):
    """Test GH_FETCH_LOG_DIR relocates the log file."""
    monkeypatch.setenv("GH_FETCH_LOG_DIR", str(tmp_path))
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    console, file_level, path = load_log_settings()

    assert console == "INFO"
    assert file_level == "INFO"
    assert path == tmp_path / "gh-fetch.log"


def test_default_log_path(monkeypatch, tmp_path):
    """Test the default log path is under ~/.config/gh-fetch/logs."""
    monkeypatch.delenv("GH_FETCH_LOG_DIR", raising=False)
    monkeypatch.setattr(Path, "home", lambda: tmp_path)

    _, _, path = load_log_settings()

    assert path == tmp_path / ".config" / "gh-fetch" / "logs" / "gh-fetch.log"


def test_log_level_env(monkeypatch):
    """Test LOG_LEVEL sets the bootstrap console level."""
    monkeypatch.setenv("LOG_LEVEL", "debug")

    console, _, _ = load_log_settings()

    assert console == "DEBUG"


def make_state(
    tmp_path,
) -> tuple[_LoggerState, logging.Handler, logging.Handler]:
    """Logger state with one console and one file handler."""
    console = logging.StreamHandler()
    file_handler = RotatingFileHandler(tmp_path / "x.log", delay=True)
    state = _LoggerState()
    state.queue_listener = QueueListener(MagicMock(), console, file_handler)
    return state, console, file_handler


def test_update_sets_handler_levels(monkeypatch, tmp_path):
    """Test settings levels are applied to the matching handlers."""
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    state, console, file_handler = make_state(tmp_path)

    update_logger_from_config(
        state, Settings(log_level="DEBUG", console_log_level="WARNING")
    )

    assert console.level == logging.WARNING
    assert file_handler.level == logging.DEBUG
    assert state.config_applied is True


def test_log_level_env_wins_over_settings(monkeypatch, tmp_path):
    """Test LOG_LEVEL keeps precedence for the console handler."""
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    state, console, _ = make_state(tmp_path)

    update_logger_from_config(state, Settings(console_log_level="DEBUG"))

    assert console.level == logging.ERROR


def test_update_without_listener(tmp_path):
    """Test updating before setup only marks config as applied."""
    state = _LoggerState()

    update_logger_from_config(state, Settings())

    assert state.config_applied is True
