"""Command-line interface for gh-fetch."""

from gh_fetch.cli.runner import CLIRunner

__all__ = ["CLIRunner"]
