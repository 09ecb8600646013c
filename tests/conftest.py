"""Pytest configuration and fixtures for gh-fetch tests."""

import logging
import os
import tempfile
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Must be set before gh_fetch is imported so test logs never reach
# ~/.config/gh-fetch/logs
os.environ.setdefault(
    "GH_FETCH_LOG_DIR",
    str(Path(tempfile.gettempdir()) / "gh-fetch-test-logs"),
)

from gh_fetch.core.http import GitHubClient  # noqa: E402
from gh_fetch.domain.types import AuthConfig, Token, TokenSource  # noqa: E402


class FakeSecretStore:
    """In-memory secret store recording every call."""

    def __init__(self, secrets: dict[tuple[str, str], str] | None = None):
        self.secrets = dict(secrets or {})
        self.get_calls: list[tuple[str, str]] = []
        self.set_calls: list[tuple[str, str, str]] = []
        self.fail_on_set: Exception | None = None

    def get(self, service: str, account: str) -> str | None:
        self.get_calls.append((service, account))
        return self.secrets.get((service, account))

    def set(self, service: str, account: str, secret: str) -> None:
        self.set_calls.append((service, account, secret))
        if self.fail_on_set is not None:
            raise self.fail_on_set
        self.secrets[(service, account)] = secret

    def delete(self, service: str, account: str) -> None:
        self.secrets.pop((service, account))


@pytest.fixture(autouse=True)
def enable_log_propagation():
    """Enable log propagation so caplog sees gh_fetch records.

    The root gh_fetch logger is created with propagate=False in
    production code.
    """
    logger = logging.getLogger("gh_fetch")
    original = logger.propagate
    logger.propagate = True
    yield
    logger.propagate = original


@pytest.fixture
def secret_store() -> FakeSecretStore:
    """Empty in-memory secret store."""
    return FakeSecretStore()


@pytest.fixture
def token() -> Token:
    """A token as if read from the environment."""
    return Token("ghp_" + "a" * 36, TokenSource.ENVIRONMENT)


@pytest.fixture
def auth_config() -> AuthConfig:
    """Auth config with no override and a configured client id."""
    return AuthConfig(
        service="my-repo",
        client_id="Iv1.testclient",
        scope="repo",
        poll_interval=5,
        max_poll_attempts=10,
    )


@pytest.fixture
def mock_client() -> MagicMock:
    """GitHubClient mock."""
    return MagicMock(spec=GitHubClient)
