"""OAuth device authorization grant against GitHub.

The client performs single requests only. Classifying each token-exchange
response into pending / issued / fatal happens here, so the polling loop in
gh_fetch.core.auth switches on an explicit ExchangeResult instead of
catching exceptions.
"""

from typing import Any

from gh_fetch.constants import (
    ACCESS_TOKEN_PATH,
    DEVICE_CODE_GRANT_TYPE,
    DEVICE_CODE_PATH,
    GITHUB_URL,
    PENDING_ERRORS,
)
from gh_fetch.core.http import GitHubClient
from gh_fetch.domain.types import DeviceAuthorizationSession, ExchangeResult
from gh_fetch.exceptions import AuthenticationError, TransportError
from gh_fetch.logger import get_logger

logger = get_logger(__name__)

HTTP_OK = 200


def _positive_int(value: Any) -> int | None:
    """Return value as a positive int, or None."""
    try:
        number = int(value)
    except (TypeError, ValueError):
        return None
    return number if number > 0 else None


class DeviceFlowClient:
    """Issues device-code and token-exchange requests."""

    def __init__(
        self,
        client: GitHubClient,
        client_id: str,
        scope: str,
        login_url: str = GITHUB_URL,
    ) -> None:
        self.client = client
        self.client_id = client_id
        self.scope = scope
        self.login_url = login_url.rstrip("/")

    def request_code(self) -> DeviceAuthorizationSession:
        """Start a device authorization session.

        Returns:
            Session holding the device code and the user-facing code

        Raises:
            AuthenticationError: If the request fails or the response lacks
                the required fields.

        """
        url = f"{self.login_url}{DEVICE_CODE_PATH}"
        try:
            status, body = self.client.post_json(
                url, {"client_id": self.client_id, "scope": self.scope}
            )
        except TransportError as e:
            msg = f"device code request failed: {e.message}"
            raise AuthenticationError(msg) from e

        if status != HTTP_OK or "error" in body:
            reason = body.get("error_description") or body.get(
                "error", f"HTTP {status}"
            )
            msg = f"device code request rejected: {reason}"
            raise AuthenticationError(msg)

        try:
            session = DeviceAuthorizationSession(
                device_code=body["device_code"],
                user_code=body["user_code"],
                verification_uri=body["verification_uri"],
                interval=_positive_int(body.get("interval")),
                expires_in=_positive_int(body.get("expires_in")),
            )
        except KeyError as e:
            msg = f"device code response missing field {e.args[0]!r}"
            raise AuthenticationError(msg) from e

        logger.debug(
            "Device code issued (interval=%ss, expires_in=%s)",
            session.interval,
            session.expires_in,
        )
        return session

    def exchange(self, session: DeviceAuthorizationSession) -> ExchangeResult:
        """Poll the token endpoint once.

        GitHub answers pending states with an ``error`` field, with either
        HTTP 200 or 400 depending on the client; both are treated alike.

        Returns:
            ExchangeResult: pending, issued (with token) or fatal (with
            reason). Network failures are fatal.

        """
        url = f"{self.login_url}{ACCESS_TOKEN_PATH}"
        payload = {
            "client_id": self.client_id,
            "device_code": session.device_code,
            "grant_type": DEVICE_CODE_GRANT_TYPE,
        }
        try:
            status, body = self.client.post_json(url, payload)
        except TransportError as e:
            return ExchangeResult.fatal(e.message)

        access_token = body.get("access_token")
        if access_token:
            return ExchangeResult.issued(access_token)

        error = body.get("error")
        if error in PENDING_ERRORS:
            return ExchangeResult.pending(slow_down=error == "slow_down")

        if error:
            reason = body.get("error_description") or error
            return ExchangeResult.fatal(reason)

        msg = f"unexpected token response (HTTP {status})"
        return ExchangeResult.fatal(msg)
