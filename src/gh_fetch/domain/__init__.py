"""Domain types for gh-fetch."""

from gh_fetch.domain.types import (
    AuthConfig,
    DeviceAuthorizationSession,
    DownloadTarget,
    ExchangeResult,
    ExchangeStatus,
    ReleaseAsset,
    Token,
    TokenSource,
)

__all__ = [
    "AuthConfig",
    "DeviceAuthorizationSession",
    "DownloadTarget",
    "ExchangeResult",
    "ExchangeStatus",
    "ReleaseAsset",
    "Token",
    "TokenSource",
]
