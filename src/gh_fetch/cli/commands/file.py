"""File command handler for gh-fetch CLI."""

from argparse import Namespace

from gh_fetch.config.paths import Paths
from gh_fetch.core.contents import FileFetcher
from gh_fetch.ui.display import print_success_message

from .base import BaseCommandHandler


class FileHandler(BaseCommandHandler):
    """Handler for the file command."""

    def execute(self, args: Namespace) -> None:
        """Fetch one file and report where it was written."""
        token = self.obtain_token(args)
        output = Paths.expand_path(str(args.output)) if args.output else None

        target = FileFetcher(self.client).fetch(
            token,
            args.org,
            args.repo,
            args.file_path,
            branch=args.branch,
            output_path=output,
        )
        print_success_message(f"Saved {target.path} ({target.size} bytes)")
