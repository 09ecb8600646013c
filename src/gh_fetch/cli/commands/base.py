"""Base command handler for gh-fetch CLI commands.

This module provides the abstract base class that all command handlers
inherit from, ensuring a consistent interface and shared token handling.
"""

from abc import ABC, abstractmethod
from argparse import Namespace
from collections.abc import Callable, Mapping

from gh_fetch.config.settings import Settings, build_auth_config
from gh_fetch.core.auth import TokenAcquirer
from gh_fetch.core.device_flow import DeviceFlowClient
from gh_fetch.core.http import GitHubClient
from gh_fetch.core.token import SecretStore
from gh_fetch.domain.types import AuthConfig, DeviceAuthorizationSession, Token
from gh_fetch.logger import get_logger
from gh_fetch.ui.display import print_device_instructions

logger = get_logger(__name__)


class BaseCommandHandler(ABC):
    """Abstract base class for all command handlers.

    Dependencies are injected by CLIRunner, which acts as the composition
    root; tests construct handlers with mocks directly.
    """

    def __init__(
        self,
        settings: Settings,
        client: GitHubClient,
        store: SecretStore,
        environ: Mapping[str, str],
        *,
        sleep: Callable[[float], None] | None = None,
        on_device_code: Callable[[DeviceAuthorizationSession], None]
        | None = None,
    ) -> None:
        """Initialize the command handler with shared dependencies.

        Args:
            settings: Loaded settings
            client: GitHub API client
            store: Secret store for cached tokens
            environ: Process environment, read once for auth config
            sleep: Sleep used between device flow polls
            on_device_code: Display callback for the device login code

        """
        self.settings = settings
        self.client = client
        self.store = store
        self.environ = environ
        self._sleep = sleep
        self._on_device_code = on_device_code or print_device_instructions

    @abstractmethod
    def execute(self, args: Namespace) -> None:
        """Execute the command with the given arguments.

        This method must be implemented by all concrete command handlers.
        """

    def build_auth_config(self, args: Namespace) -> AuthConfig:
        """Build the auth config for the repository named in args."""
        return build_auth_config(
            self.settings,
            args.repo,
            self.environ,
            client_id=getattr(args, "client_id", None),
            scope=getattr(args, "scope", None),
            max_poll_attempts=getattr(args, "max_poll_attempts", None),
        )

    def create_acquirer(self, config: AuthConfig) -> TokenAcquirer:
        """Wire a TokenAcquirer for config."""
        device_flow = DeviceFlowClient(
            self.client, config.client_id or "", config.scope
        )
        kwargs = {"on_device_code": self._on_device_code}
        if self._sleep is not None:
            kwargs["sleep"] = self._sleep
        return TokenAcquirer(config, self.store, device_flow, **kwargs)

    def obtain_token(self, args: Namespace) -> Token:
        """Acquire a token, then cache it if it was freshly issued.

        Raises:
            AuthenticationError: If no token could be obtained.

        """
        acquirer = self.create_acquirer(self.build_auth_config(args))
        token = acquirer.acquire()
        logger.debug("Token source: %s", token.source.value)
        acquirer.cache_if_fresh(token)
        return token
