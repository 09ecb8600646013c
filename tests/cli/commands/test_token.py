"""Tests for TokenHandler."""

from argparse import Namespace
from unittest.mock import MagicMock

import keyring.errors
import pytest

from gh_fetch.cli.commands.token import TokenHandler
from gh_fetch.config.settings import Settings


def make_args(*, status: bool = False, remove: bool = False) -> Namespace:
    return Namespace(
        command="token",
        org="o",
        repo="my-repo",
        status=status,
        remove=remove,
        client_id=None,
        scope=None,
        max_poll_attempts=None,
    )


@pytest.fixture
def handler_for(mock_client):
    """Build a TokenHandler over a store and environment."""

    def _build(store, environ=None) -> TokenHandler:
        return TokenHandler(Settings(), mock_client, store, environ or {})

    return _build


def test_status_cached(handler_for, secret_store, capsys):
    """Test status reports a cached token without revealing it."""
    secret_store.secrets[("my-repo", "oauth-token")] = "secret-value"

    handler_for(secret_store).execute(make_args(status=True))

    out = capsys.readouterr().out
    assert "A token is cached for my-repo" in out
    assert "secret-value" not in out


def test_status_missing(handler_for, secret_store, capsys):
    """Test status reports a missing token."""
    handler_for(secret_store).execute(make_args(status=True))

    assert "No token cached for my-repo" in capsys.readouterr().out


def test_status_mentions_override(handler_for, secret_store, capsys):
    """Test status notes that GITHUB_TOKEN takes precedence."""
    handler_for(secret_store, {"GITHUB_TOKEN": "x"}).execute(
        make_args(status=True)
    )

    assert "GITHUB_TOKEN is set" in capsys.readouterr().out


def test_remove(handler_for, secret_store, capsys):
    """Test remove deletes the cached token."""
    secret_store.secrets[("my-repo", "oauth-token")] = "secret"

    handler_for(secret_store).execute(make_args(remove=True))

    assert secret_store.secrets == {}
    assert "removed from keyring" in capsys.readouterr().out


def test_remove_missing(handler_for, capsys):
    """Test removing a missing token only warns."""
    store = MagicMock()
    store.delete.side_effect = keyring.errors.PasswordDeleteError("none")

    handler_for(store).execute(make_args(remove=True))

    store.delete.assert_called_once_with("my-repo", "oauth-token")
    assert "No token cached for my-repo" in capsys.readouterr().out


def test_token_command_never_starts_device_flow(
    handler_for, secret_store, mock_client
):
    """Test token management makes no network requests."""
    handler_for(secret_store).execute(make_args(status=True))

    mock_client.post_json.assert_not_called()
    mock_client.get_json.assert_not_called()
