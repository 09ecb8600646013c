"""Tests for console formatters."""

import logging

from gh_fetch.logger.formatters import (
    ColoredConsoleFormatter,
    HybridConsoleFormatter,
    SimpleConsoleFormatter,
)


FORMAT = "%(name)s - %(levelname)s - %(message)s"


def make_record(level: int, msg: str = "Fetching %s") -> logging.LogRecord:
    return logging.LogRecord(
        "gh_fetch.core.contents", level, __file__, 1, msg, ("a.txt",), None
    )


def test_simple_formatter_shows_message_only():
    """Test the simple formatter drops all metadata."""
    record = make_record(logging.WARNING)

    assert SimpleConsoleFormatter().format(record) == "Fetching a.txt"


def test_colored_formatter_restores_levelname():
    """Test colors are applied to output but not left on the record."""
    record = make_record(logging.ERROR)
    formatter = ColoredConsoleFormatter("%(levelname)s %(message)s")

    output = formatter.format(record)

    assert "\033[" in output
    assert output.endswith("Fetching a.txt")
    assert record.levelname == "ERROR"


def test_hybrid_formatter_info_is_bare():
    """Test INFO lines are printed without metadata."""
    formatter = HybridConsoleFormatter(FORMAT)

    assert formatter.format(make_record(logging.INFO)) == "Fetching a.txt"


def test_hybrid_formatter_warning_is_structured():
    """Test WARNING lines carry logger name and level."""
    formatter = HybridConsoleFormatter(FORMAT)

    output = formatter.format(make_record(logging.WARNING))

    assert output.startswith("gh_fetch.core.contents - ")
    assert "WARNING" in output
