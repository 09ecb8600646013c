"""Domain types for gh-fetch.

Pure data types shared by the token, contents and release logic, without
any IO or infrastructure dependencies.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from gh_fetch.constants import (
    DEFAULT_KEYRING_ACCOUNT,
    DEFAULT_MAX_POLL_ATTEMPTS,
    DEFAULT_OAUTH_SCOPE,
    DEFAULT_POLL_INTERVAL,
)


class TokenSource(Enum):
    """Where an access token came from."""

    ENVIRONMENT = "environment"
    CACHED = "cached"
    FRESHLY_ISSUED = "freshly-issued"


@dataclass(frozen=True)
class Token:
    """Opaque bearer token and its provenance.

    The value is kept out of repr() so tokens never end up in logs or
    tracebacks by accident.
    """

    value: str = field(repr=False)
    source: TokenSource

    @property
    def is_fresh(self) -> bool:
        """Return whether the token was issued during this invocation."""
        return self.source is TokenSource.FRESHLY_ISSUED


@dataclass(frozen=True)
class AuthConfig:
    """Explicit configuration for token acquisition.

    Built once at startup; the acquirer never reads the process
    environment itself.
    """

    service: str
    override_token: str | None = field(default=None, repr=False)
    account: str = DEFAULT_KEYRING_ACCOUNT
    client_id: str | None = None
    scope: str = DEFAULT_OAUTH_SCOPE
    poll_interval: int = DEFAULT_POLL_INTERVAL
    max_poll_attempts: int = DEFAULT_MAX_POLL_ATTEMPTS
    honor_server_interval: bool = True


@dataclass(frozen=True)
class DeviceAuthorizationSession:
    """In-progress device authorization grant."""

    device_code: str = field(repr=False)
    user_code: str
    verification_uri: str
    # Server-suggested poll interval in seconds, when the server sent one
    interval: int | None = None
    expires_in: int | None = None


class ExchangeStatus(Enum):
    """Outcome of a single token-exchange call."""

    PENDING = "pending"
    TOKEN_ISSUED = "token_issued"
    FATAL = "fatal"


@dataclass(frozen=True)
class ExchangeResult:
    """Result of polling the token endpoint once."""

    status: ExchangeStatus
    access_token: str | None = field(default=None, repr=False)
    reason: str | None = None
    slow_down: bool = False

    @classmethod
    def pending(cls, *, slow_down: bool = False) -> "ExchangeResult":
        """Build a pending result."""
        return cls(ExchangeStatus.PENDING, slow_down=slow_down)

    @classmethod
    def issued(cls, access_token: str) -> "ExchangeResult":
        """Build a success result carrying the access token."""
        return cls(ExchangeStatus.TOKEN_ISSUED, access_token=access_token)

    @classmethod
    def fatal(cls, reason: str) -> "ExchangeResult":
        """Build a terminal failure result."""
        return cls(ExchangeStatus.FATAL, reason=reason)


@dataclass(frozen=True)
class ReleaseAsset:
    """Release asset information."""

    name: str
    url: str
    size: int = 0
    content_type: str = ""

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "ReleaseAsset":
        """Build an asset from a GitHub release asset object."""
        return cls(
            name=data.get("name", ""),
            url=data.get("url", ""),
            size=int(data.get("size") or 0),
            content_type=data.get("content_type") or "",
        )


@dataclass(frozen=True)
class DownloadTarget:
    """A file written to disk by a fetch operation."""

    path: Path
    size: int
