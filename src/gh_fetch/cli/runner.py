"""CLI runner for gh-fetch.

Orchestrates the execution of CLI commands by routing parsed arguments
to the appropriate command handlers and turning failures into exit codes.
"""

import os
from argparse import Namespace
from collections.abc import Mapping, Sequence

import keyring.errors

from gh_fetch import __version__
from gh_fetch.cli.commands import (
    BaseCommandHandler,
    FileHandler,
    ReleaseHandler,
    TokenHandler,
)
from gh_fetch.cli.parser import CLIParser
from gh_fetch.config.settings import Settings, SettingsManager
from gh_fetch.core.http import GitHubClient
from gh_fetch.core.token import KeyringError, KeyringSecretStore, SecretStore
from gh_fetch.exceptions import GhFetchError
from gh_fetch.logger import get_logger, update_logger_from_config
from gh_fetch.ui.display import print_error_message

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130

COMMAND_HANDLERS: dict[str, type[BaseCommandHandler]] = {
    "file": FileHandler,
    "release": ReleaseHandler,
    "token": TokenHandler,
}


class CLIRunner:
    """CLI command runner and orchestrator."""

    def __init__(
        self,
        settings: Settings | None = None,
        store: SecretStore | None = None,
        environ: Mapping[str, str] | None = None,
        client_factory=GitHubClient,
    ) -> None:
        """Initialize CLI runner with shared dependencies.

        Args:
            settings: Loaded settings (read from settings.conf if omitted)
            store: Secret store (system keyring if omitted)
            environ: Environment mapping (os.environ if omitted)
            client_factory: Callable returning a GitHubClient context
                manager, given timeout=

        """
        self.settings = settings or SettingsManager().load()
        self.store = store if store is not None else KeyringSecretStore()
        self.environ = environ if environ is not None else os.environ
        self.client_factory = client_factory
        update_logger_from_config(self.settings)

    def run(self, argv: Sequence[str] | None = None) -> int:
        """Run the CLI application.

        Args:
            argv: Command-line arguments (defaults to sys.argv[1:])

        Returns:
            Process exit code

        """
        parser = CLIParser(self.settings)
        args = parser.parse_args(argv)

        if args.version:
            print(__version__)  # noqa: T201
            return EXIT_OK

        if not args.command:
            parser.create_parser().print_help()
            return EXIT_FAILURE

        try:
            self._dispatch(args)
        except KeyboardInterrupt:
            logger.info("Cancelled by user")
            return EXIT_INTERRUPTED
        except GhFetchError as e:
            logger.debug("Command %s failed", args.command, exc_info=True)
            print_error_message(str(e))
            return EXIT_FAILURE
        except (KeyringError, keyring.errors.KeyringError) as e:
            logger.debug("Keyring failure", exc_info=True)
            print_error_message(f"Keyring error: {e}")
            return EXIT_FAILURE
        except OSError as e:
            logger.debug("Filesystem failure", exc_info=True)
            print_error_message(f"File error: {e}")
            return EXIT_FAILURE

        return EXIT_OK

    def _dispatch(self, args: Namespace) -> None:
        """Create the handler for args.command and run it."""
        handler_cls = COMMAND_HANDLERS[args.command]
        logger.debug("Running command %s", args.command)
        with self.client_factory(
            timeout=self.settings.timeout_seconds
        ) as client:
            handler = handler_cls(
                self.settings, client, self.store, self.environ
            )
            handler.execute(args)
