"""Release command handler for gh-fetch CLI."""

from argparse import Namespace

from gh_fetch.core.install import PackageInstaller
from gh_fetch.core.release import ReleaseAssetFetcher, suffix_predicate
from gh_fetch.logger import get_logger
from gh_fetch.ui.display import print_success_message

from .base import BaseCommandHandler

logger = get_logger(__name__)


class ReleaseHandler(BaseCommandHandler):
    """Handler for the release command."""

    installer_factory = PackageInstaller

    def execute(self, args: Namespace) -> None:
        """Download the latest release asset and optionally install it.

        The temporary download is removed after installing unless --keep
        is given; a failed removal only logs a warning.
        """
        token = self.obtain_token(args)
        fetcher = ReleaseAssetFetcher(self.client)
        target = fetcher.fetch_latest_asset(
            token, args.org, args.repo, suffix_predicate(args.suffix)
        )

        if args.no_install:
            print_success_message(f"Downloaded {target.path}")
            return

        installer = self.installer_factory()
        try:
            installer.install(target.path)
        finally:
            if not args.keep:
                installer.cleanup(target.path)

        print_success_message(f"Installed {target.path.name}")
