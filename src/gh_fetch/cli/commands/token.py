"""Token command handler for gh-fetch CLI.

Reports on and removes the token cached in the keyring for a repository.
"""

from argparse import Namespace

import keyring.errors

from gh_fetch.logger import get_logger
from gh_fetch.ui.display import (
    print_info_message,
    print_success_message,
    print_warning_message,
)

from .base import BaseCommandHandler

logger = get_logger(__name__)


class TokenHandler(BaseCommandHandler):
    """Handler for token command operations."""

    def execute(self, args: Namespace) -> None:
        """Execute the token command."""
        config = self.build_auth_config(args)
        if args.remove:
            self._remove_token(config.service, config.account)
        else:
            self._show_status(config.service, config.account)
        if config.override_token:
            print_info_message(
                f"{self.settings.token_env} is set and takes precedence "
                "over the keyring."
            )

    def _show_status(self, service: str, account: str) -> None:
        if self.store.get(service, account):
            print_success_message(f"A token is cached for {service}.")
        else:
            print_info_message(f"No token cached for {service}.")

    def _remove_token(self, service: str, account: str) -> None:
        """Remove the cached token, handling a missing one gracefully."""
        try:
            self.store.delete(service, account)
        except keyring.errors.PasswordDeleteError:
            print_warning_message(f"No token cached for {service}.")
            return
        print_success_message(f"Token for {service} removed from keyring.")
