"""Access token storage using the system keyring.

Secrets are keyed by a service identifier (the repository name) and an
account identifier, and live in the platform keyring (SecretService on
Linux, Keychain on macOS, Credential Manager on Windows).
"""

from typing import Protocol

import keyring
import keyring.errors
from keyring.backends import fail

from gh_fetch.logger import get_logger

logger = get_logger(__name__)


class KeyringError(Exception):
    """Base exception for keyring-related errors."""


class KeyringUnavailableError(KeyringError):
    """Raised when keyring is unavailable (e.g., headless environment)."""


class KeyringAccessError(KeyringError):
    """Raised when keyring access fails (e.g., permission denied)."""


class SecretStore(Protocol):
    """Key-value secret storage keyed by service and account."""

    def get(self, service: str, account: str) -> str | None:
        """Return the stored secret or None."""
        ...

    def set(self, service: str, account: str, secret: str) -> None:
        """Store a secret, raising on failure."""
        ...

    def delete(self, service: str, account: str) -> None:
        """Remove a stored secret, raising on failure."""
        ...


def setup_keyring() -> None:
    """Verify that a usable keyring backend is configured.

    Raises:
        KeyringUnavailableError: If only the fail backend is available
            (headless environment, no DBUS).
        KeyringAccessError: If the backend cannot be loaded.

    """
    try:
        backend = keyring.get_keyring()
    except Exception as e:
        if "DBUS" in str(e) or "DBus" in str(e):
            logger.debug("Keyring unavailable in headless environment: %s", e)
            msg = "Keyring unavailable in headless environment"
            raise KeyringUnavailableError(msg) from e
        logger.warning("Keyring setup failed: %s", e)
        msg = "Keyring setup failed"
        raise KeyringAccessError(msg) from e

    if isinstance(backend, fail.Keyring):
        msg = "No keyring backend available"
        raise KeyringUnavailableError(msg)
    logger.debug("Using keyring backend %s", type(backend).__name__)


class KeyringSecretStore:
    """Secret storage backed by the system keyring.

    Reads never raise: an unavailable or failing keyring is reported as a
    missing secret. Writes and deletes raise so callers can decide whether
    the failure matters.
    """

    def __init__(self) -> None:
        """Initialize the keyring secret store lazily."""
        self._initialized = False
        self._unavailable = False

    def _ensure_initialized(self) -> None:
        """Initialize keyring on first use."""
        if self._initialized or self._unavailable:
            return

        try:
            setup_keyring()
            self._initialized = True
        except KeyringUnavailableError:
            self._unavailable = True
            logger.debug(
                "Keyring unavailable (headless environment or no DBUS)"
            )
        except KeyringAccessError:
            self._unavailable = True
            logger.warning("Keyring access denied or setup failed")

    def is_available(self) -> bool:
        """Check if keyring is available for use."""
        self._ensure_initialized()
        return not self._unavailable

    def get(self, service: str, account: str) -> str | None:
        """Retrieve a stored secret.

        Args:
            service: Service identifier (repository name)
            account: Account identifier

        Returns:
            The secret, or None if not stored or keyring is unavailable.

        """
        self._ensure_initialized()
        if self._unavailable:
            return None

        try:
            secret = keyring.get_password(service, account)
        except Exception:  # noqa: BLE001
            # Don't log exception details, they may echo the secret
            logger.debug("Keyring access failed for service %s", service)
            return None

        if secret:
            logger.debug("Token for %s retrieved from keyring", service)
            return secret
        logger.debug("No token stored in keyring for %s", service)
        return None

    def set(self, service: str, account: str, secret: str) -> None:
        """Store a secret in the keyring.

        Raises:
            KeyringUnavailableError: If no keyring backend is usable.
            keyring.errors.PasswordSetError: If the backend refuses.

        """
        self._ensure_initialized()
        if self._unavailable:
            msg = "Keyring not available in this environment"
            raise KeyringUnavailableError(msg)

        keyring.set_password(service, account, secret)
        logger.debug("Token for %s saved to keyring", service)

    def delete(self, service: str, account: str) -> None:
        """Remove a stored secret.

        Raises:
            KeyringUnavailableError: If no keyring backend is usable.
            keyring.errors.PasswordDeleteError: If no secret is stored.

        """
        self._ensure_initialized()
        if self._unavailable:
            msg = "Keyring not available in this environment"
            raise KeyringUnavailableError(msg)

        try:
            keyring.delete_password(service, account)
        except keyring.errors.PasswordDeleteError:
            logger.debug("No token found in keyring to delete for %s", service)
            raise
        logger.debug("Token for %s removed from keyring", service)
