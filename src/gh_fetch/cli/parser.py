"""CLI argument parser for gh-fetch.

Handles parsing of command-line arguments and provides a clean
interface for defining CLI commands and their options.
"""

import argparse
from argparse import Namespace
from collections.abc import Sequence
from pathlib import Path

from gh_fetch.config.settings import Settings
from gh_fetch.constants import DEFAULT_BRANCH


def _positive_int(value: str) -> int:
    """Argparse type for strictly positive integers."""
    try:
        number = int(value)
    except ValueError:
        msg = f"invalid integer: {value!r}"
        raise argparse.ArgumentTypeError(msg) from None
    if number <= 0:
        msg = f"must be positive: {value}"
        raise argparse.ArgumentTypeError(msg)
    return number


class CLIParser:
    """Command-line argument parser for gh-fetch."""

    def __init__(self, settings: Settings) -> None:
        """Initialize the CLI parser.

        Args:
            settings: Loaded settings, used for option defaults.

        """
        self.settings = settings

    def parse_args(self, argv: Sequence[str] | None = None) -> Namespace:
        """Parse command-line arguments.

        Args:
            argv: Arguments to parse (defaults to sys.argv[1:])

        Returns:
            Namespace: Parsed arguments namespace.

        """
        parser = self.create_parser()
        return parser.parse_args(argv)

    def create_parser(self) -> argparse.ArgumentParser:
        """Create the main parser with global options and subcommands."""
        parser = argparse.ArgumentParser(
            prog="gh-fetch",
            description="Fetch files and release assets from GitHub",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  # Download a single file (written to ./settings.toml)
  %(prog)s file my-org my-repo config/settings.toml

  # From another branch, to an explicit path
  %(prog)s file my-org my-repo docs/guide.md -b develop -o /tmp/guide.md

  # Download and install the wheel of the latest release
  %(prog)s release my-org my-repo

  # Download a different asset type without installing it
  %(prog)s release my-org my-repo --suffix .tar.gz --no-install

  # Cached token management
  %(prog)s token --status my-org my-repo
  %(prog)s token --remove my-org my-repo

Set GITHUB_TOKEN to skip the keyring and the browser login.
            """,
        )
        self._add_global_options(parser)

        subparsers = parser.add_subparsers(
            dest="command", help="Available commands"
        )
        self._add_file_command(subparsers)
        self._add_release_command(subparsers)
        self._add_token_command(subparsers)
        return parser

    def _add_global_options(self, parser: argparse.ArgumentParser) -> None:
        """Add options shared by all commands."""
        parser.add_argument(
            "--version",
            action="store_true",
            help="Show gh-fetch version and exit",
        )
        parser.add_argument(
            "--client-id",
            help="OAuth app client id used for the device login",
        )
        parser.add_argument(
            "--scope",
            help=f"OAuth scope to request (default: {self.settings.scope})",
        )
        parser.add_argument(
            "--max-poll-attempts",
            type=_positive_int,
            help=(
                "Give up the device login after this many polls "
                f"(default: {self.settings.max_poll_attempts})"
            ),
        )

    @staticmethod
    def _add_repo_arguments(parser: argparse.ArgumentParser) -> None:
        parser.add_argument("org", help="Repository owner (user or org)")
        parser.add_argument("repo", help="Repository name")

    def _add_file_command(self, subparsers) -> None:
        """Add the file subcommand."""
        file_parser = subparsers.add_parser(
            "file", help="Download a single file from a repository"
        )
        self._add_repo_arguments(file_parser)
        file_parser.add_argument(
            "file_path", help="Path of the file inside the repository"
        )
        file_parser.add_argument(
            "-o",
            "--output",
            type=Path,
            help="Output path (default: file name in current directory)",
        )
        file_parser.add_argument(
            "-b",
            "--branch",
            default=DEFAULT_BRANCH,
            help=f"Branch, tag or commit (default: {DEFAULT_BRANCH})",
        )

    def _add_release_command(self, subparsers) -> None:
        """Add the release subcommand."""
        release_parser = subparsers.add_parser(
            "release",
            help="Download (and install) an asset of the latest release",
        )
        self._add_repo_arguments(release_parser)
        release_parser.add_argument(
            "--suffix",
            default=self.settings.asset_suffix,
            help=(
                "Select the first asset whose name ends with this suffix "
                f"(default: {self.settings.asset_suffix})"
            ),
        )
        release_parser.add_argument(
            "--no-install",
            action="store_true",
            help="Only download the asset, do not install it",
        )
        release_parser.add_argument(
            "--keep",
            action="store_true",
            help="Keep the downloaded file after installing",
        )

    def _add_token_command(self, subparsers) -> None:
        """Add the token subcommand."""
        token_parser = subparsers.add_parser(
            "token", help="Manage the cached token of a repository"
        )
        self._add_repo_arguments(token_parser)
        group = token_parser.add_mutually_exclusive_group(required=True)
        group.add_argument(
            "--status",
            action="store_true",
            help="Show whether a token is cached",
        )
        group.add_argument(
            "--remove",
            action="store_true",
            help="Remove the cached token from the keyring",
        )
