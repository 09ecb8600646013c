"""Tests for DeviceFlowClient request and response classification."""

import pytest

from gh_fetch.constants import DEVICE_CODE_GRANT_TYPE
from gh_fetch.core.device_flow import DeviceFlowClient
from gh_fetch.domain.types import DeviceAuthorizationSession, ExchangeStatus
from gh_fetch.exceptions import AuthenticationError, TransportError

SESSION = DeviceAuthorizationSession(
    device_code="dev-123",
    user_code="ABCD-1234",
    verification_uri="https://github.com/login/device",
    interval=5,
)


@pytest.fixture
def flow(mock_client) -> DeviceFlowClient:
    """DeviceFlowClient over a mocked GitHubClient."""
    return DeviceFlowClient(mock_client, "Iv1.testclient", "repo")


class TestRequestCode:
    """Tests for DeviceFlowClient.request_code."""

    def test_returns_session(self, flow, mock_client):
        """Test a successful response produces a session."""
        mock_client.post_json.return_value = (
            200,
            {
                "device_code": "dev-123",
                "user_code": "ABCD-1234",
                "verification_uri": "https://github.com/login/device",
                "interval": 5,
                "expires_in": 899,
            },
        )

        session = flow.request_code()

        assert session.device_code == "dev-123"
        assert session.user_code == "ABCD-1234"
        assert session.interval == 5
        assert session.expires_in == 899
        url, payload = mock_client.post_json.call_args.args
        assert url == "https://github.com/login/device/code"
        assert payload == {"client_id": "Iv1.testclient", "scope": "repo"}

    @pytest.mark.parametrize("interval", [None, "abc", 0, -3])
    def test_invalid_interval_becomes_none(self, flow, mock_client, interval):
        """Test missing or non-positive intervals are dropped."""
        mock_client.post_json.return_value = (
            200,
            {
                "device_code": "d",
                "user_code": "u",
                "verification_uri": "https://github.com/login/device",
                "interval": interval,
            },
        )

        assert flow.request_code().interval is None

    def test_missing_field_raises(self, flow, mock_client):
        """Test a response without user_code is rejected."""
        mock_client.post_json.return_value = (
            200,
            {"device_code": "d", "verification_uri": "u"},
        )

        with pytest.raises(AuthenticationError, match="user_code"):
            flow.request_code()

    def test_error_body_raises(self, flow, mock_client):
        """Test an OAuth error body is surfaced with its description."""
        mock_client.post_json.return_value = (
            400,
            {
                "error": "incorrect_client_credentials",
                "error_description": "The client_id is not valid.",
            },
        )

        with pytest.raises(AuthenticationError, match="client_id is not"):
            flow.request_code()

    def test_transport_error_raises(self, flow, mock_client):
        """Test network failures become AuthenticationError."""
        mock_client.post_json.side_effect = TransportError("timed out")

        with pytest.raises(AuthenticationError, match="timed out"):
            flow.request_code()


class TestExchange:
    """Tests for DeviceFlowClient.exchange."""

    def test_posts_device_code_grant(self, flow, mock_client):
        """Test the exchange payload carries the device code grant."""
        mock_client.post_json.return_value = (200, {"access_token": "t"})

        flow.exchange(SESSION)

        url, payload = mock_client.post_json.call_args.args
        assert url == "https://github.com/login/oauth/access_token"
        assert payload == {
            "client_id": "Iv1.testclient",
            "device_code": "dev-123",
            "grant_type": DEVICE_CODE_GRANT_TYPE,
        }

    def test_access_token_is_issued(self, flow, mock_client):
        """Test a body with access_token yields TOKEN_ISSUED."""
        mock_client.post_json.return_value = (
            200,
            {"access_token": "gho_x", "token_type": "bearer"},
        )

        result = flow.exchange(SESSION)

        assert result.status is ExchangeStatus.TOKEN_ISSUED
        assert result.access_token == "gho_x"

    @pytest.mark.parametrize("status", [200, 400])
    def test_authorization_pending(self, flow, mock_client, status):
        """Test authorization_pending is PENDING for 200 and 400."""
        mock_client.post_json.return_value = (
            status,
            {"error": "authorization_pending"},
        )

        result = flow.exchange(SESSION)

        assert result.status is ExchangeStatus.PENDING
        assert result.slow_down is False

    def test_slow_down(self, flow, mock_client):
        """Test slow_down is PENDING with the slow_down flag set."""
        mock_client.post_json.return_value = (200, {"error": "slow_down"})

        result = flow.exchange(SESSION)

        assert result.status is ExchangeStatus.PENDING
        assert result.slow_down is True

    @pytest.mark.parametrize(
        "error", ["expired_token", "access_denied", "unsupported_grant_type"]
    )
    def test_terminal_errors_are_fatal(self, flow, mock_client, error):
        """Test non-pending OAuth errors are FATAL."""
        mock_client.post_json.return_value = (400, {"error": error})

        result = flow.exchange(SESSION)

        assert result.status is ExchangeStatus.FATAL
        assert result.reason == error

    def test_fatal_prefers_description(self, flow, mock_client):
        """Test error_description is used as the fatal reason."""
        mock_client.post_json.return_value = (
            400,
            {"error": "access_denied", "error_description": "User said no"},
        )

        assert flow.exchange(SESSION).reason == "User said no"

    def test_empty_body_is_fatal(self, flow, mock_client):
        """Test a body with neither token nor error is FATAL."""
        mock_client.post_json.return_value = (500, {})

        result = flow.exchange(SESSION)

        assert result.status is ExchangeStatus.FATAL
        assert "HTTP 500" in result.reason

    def test_transport_error_is_fatal(self, flow, mock_client):
        """Test network failures end polling instead of raising."""
        mock_client.post_json.side_effect = TransportError("reset")

        result = flow.exchange(SESSION)

        assert result.status is ExchangeStatus.FATAL
        assert result.reason == "reset"
