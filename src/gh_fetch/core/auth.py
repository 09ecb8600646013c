"""Access token acquisition.

TokenAcquirer produces a token from three tiers tried in strict order:

1. the override token from the environment,
2. the token cached in the secret store for (repository, account),
3. the interactive OAuth device authorization grant.

Persisting a freshly issued token is a separate step, cache_if_fresh(),
so a failing keyring can never affect the token handed to the caller.

Interactive tier states::

    Requesting -> Polling -> Succeeded
                     |  ^
                     +--+ pending
                     |
                     +-> Aborted (fatal response or attempts exhausted)
"""

import time
from collections.abc import Callable

from gh_fetch.constants import SLOW_DOWN_INCREMENT
from gh_fetch.core.device_flow import DeviceFlowClient
from gh_fetch.core.token import SecretStore
from gh_fetch.domain.types import (
    AuthConfig,
    DeviceAuthorizationSession,
    ExchangeStatus,
    Token,
    TokenSource,
)
from gh_fetch.exceptions import AuthenticationError
from gh_fetch.logger import get_logger

logger = get_logger(__name__)


class TokenAcquirer:
    """Obtain a GitHub access token for one repository."""

    def __init__(
        self,
        config: AuthConfig,
        store: SecretStore,
        device_flow: DeviceFlowClient,
        *,
        sleep: Callable[[float], None] = time.sleep,
        on_device_code: Callable[[DeviceAuthorizationSession], None]
        | None = None,
    ) -> None:
        """Initialize the acquirer.

        Args:
            config: Auth configuration built once at startup
            store: Secret store holding cached tokens
            device_flow: Client for the device authorization endpoints
            sleep: Blocking sleep used between polls
            on_device_code: Called with the session before polling starts,
                to show the user code and verification URL

        """
        self.config = config
        self.store = store
        self.device_flow = device_flow
        self._sleep = sleep
        self._on_device_code = on_device_code

    def acquire(self) -> Token:
        """Return a token from the first tier that yields one.

        Raises:
            AuthenticationError: If the device flow fails, is denied, or
                does not complete within max_poll_attempts polls.

        """
        if self.config.override_token:
            logger.debug("Using token from environment")
            return Token(self.config.override_token, TokenSource.ENVIRONMENT)

        cached = self.store.get(self.config.service, self.config.account)
        if cached:
            logger.debug("Using cached token for %s", self.config.service)
            return Token(cached, TokenSource.CACHED)

        logger.info(
            "No token found for %s, starting device login",
            self.config.service,
        )
        return self._run_device_flow()

    def cache_if_fresh(self, token: Token) -> bool:
        """Persist a freshly issued token to the secret store.

        Exactly one write is attempted, and only for freshly issued tokens.
        Failures are logged as warnings and never raised.

        Returns:
            True if the token was written, False otherwise.

        """
        if not token.is_fresh:
            return False

        try:
            self.store.set(
                self.config.service, self.config.account, token.value
            )
        except Exception as e:  # noqa: BLE001
            # Keyring backends raise a wide range of errors; none of them
            # may invalidate a token the user just authorized.
            logger.warning(
                "Could not cache token for %s (%s); you will be asked to "
                "log in again next time",
                self.config.service,
                type(e).__name__,
            )
            return False

        logger.info("Token for %s saved to keyring", self.config.service)
        return True

    def _run_device_flow(self) -> Token:
        """Requesting -> Polling -> Succeeded | Aborted."""
        if not self.config.client_id:
            msg = (
                "no OAuth client id configured; set client_id in "
                "settings.conf or pass --client-id"
            )
            raise AuthenticationError(msg, self.config.service)

        session = self.device_flow.request_code()
        if self._on_device_code is not None:
            self._on_device_code(session)

        interval = self._initial_interval(session)
        for attempt in range(1, self.config.max_poll_attempts + 1):
            self._sleep(interval)
            result = self.device_flow.exchange(session)

            if result.status is ExchangeStatus.TOKEN_ISSUED:
                logger.debug("Device flow succeeded after %d polls", attempt)
                return Token(result.access_token, TokenSource.FRESHLY_ISSUED)

            if result.status is ExchangeStatus.FATAL:
                msg = f"device authorization aborted: {result.reason}"
                raise AuthenticationError(msg, self.config.service)

            if result.slow_down:
                interval += SLOW_DOWN_INCREMENT
                logger.debug(
                    "Server asked to slow down, interval now %ss", interval
                )

        msg = (
            "timed out waiting for device authorization after "
            f"{self.config.max_poll_attempts} attempts"
        )
        raise AuthenticationError(msg, self.config.service)

    def _initial_interval(self, session: DeviceAuthorizationSession) -> int:
        """Pick the poll interval for a session."""
        if self.config.honor_server_interval and session.interval:
            return session.interval
        return self.config.poll_interval
