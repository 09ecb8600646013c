"""GitHub REST API transport.

Thin synchronous wrapper over a requests.Session. All network and HTTP
failures leave this module as TransportError (NotFoundError for 404) so
callers never handle requests exceptions directly.
"""

from pathlib import Path
from typing import Any

import orjson
import requests

from gh_fetch.constants import (
    ACCEPT_GITHUB_JSON,
    ACCEPT_JSON,
    DEFAULT_TIMEOUT_SECONDS,
    DOWNLOAD_CHUNK_SIZE,
    GITHUB_API_URL,
    PARTIAL_SUFFIX,
)
from gh_fetch.domain.types import Token
from gh_fetch.exceptions import NotFoundError, TransportError
from gh_fetch.logger import get_logger

logger = get_logger(__name__)

HTTP_NOT_FOUND = 404
HTTP_FORBIDDEN = 403
HTTP_BAD_REQUEST = 400


def auth_headers(token: Token) -> dict[str, str]:
    """Return the Authorization header for a token."""
    return {"Authorization": f"token {token.value}"}


def _decode_json(response: requests.Response, url: str) -> Any:
    """Parse a JSON response body.

    Raises:
        TransportError: If the body is not valid JSON.

    """
    try:
        return orjson.loads(response.content)
    except orjson.JSONDecodeError as e:
        msg = "Response body is not valid JSON"
        raise TransportError(msg, url, response.status_code) from e


class GitHubClient:
    """Synchronous GitHub API client.

    Usage:
        >>> with GitHubClient(timeout=10) as client:
        ...     release = client.get_json("/repos/o/r/releases/latest", token)
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        timeout: int = DEFAULT_TIMEOUT_SECONDS,
        api_url: str = GITHUB_API_URL,
    ) -> None:
        """Initialize the client.

        Args:
            session: Optional session (injected in tests)
            timeout: Per-request timeout in seconds
            api_url: Base URL of the REST API

        """
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout
        self.api_url = api_url.rstrip("/")

    def __enter__(self) -> "GitHubClient":
        """Return the client for use as a context manager."""
        return self

    def __exit__(self, *exc_info: object) -> None:
        """Close the underlying session."""
        self.close()

    def close(self) -> None:
        """Close the underlying session."""
        self.session.close()

    def build_url(self, path_or_url: str) -> str:
        """Resolve an API path against the base URL.

        Absolute URLs (asset download URLs) are returned unchanged.
        """
        if path_or_url.startswith(("http://", "https://")):
            return path_or_url
        return f"{self.api_url}/{path_or_url.lstrip('/')}"

    def _request(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str] | None = None,
        **kwargs: Any,
    ) -> requests.Response:
        """Execute a request, mapping transport failures.

        Raises:
            TransportError: On connection errors and timeouts.

        """
        logger.debug("%s %s", method, url)
        try:
            return self.session.request(
                method,
                url,
                headers=headers,
                timeout=self.timeout,
                **kwargs,
            )
        except requests.RequestException as e:
            msg = f"{type(e).__name__}: {e}"
            raise TransportError(msg, url) from e

    @staticmethod
    def _raise_for_status(response: requests.Response, url: str) -> None:
        """Map HTTP error statuses onto the error taxonomy.

        Raises:
            NotFoundError: On 404.
            TransportError: On any other 4xx/5xx status.

        """
        status = response.status_code
        if status < HTTP_BAD_REQUEST:
            return

        response.close()
        if status == HTTP_NOT_FOUND:
            msg = "resource does not exist or the token lacks access"
            raise NotFoundError(msg, url, status)

        if (
            status == HTTP_FORBIDDEN
            and response.headers.get("X-RateLimit-Remaining") == "0"
        ):
            msg = "GitHub API rate limit exceeded"
            raise TransportError(msg, url, status)

        msg = f"HTTP {status} {response.reason or ''}".rstrip()
        raise TransportError(msg, url, status)

    def get_json(
        self,
        path_or_url: str,
        token: Token,
        params: dict[str, str] | None = None,
    ) -> Any:
        """GET an API resource and return the decoded JSON body."""
        url = self.build_url(path_or_url)
        headers = {"Accept": ACCEPT_GITHUB_JSON, **auth_headers(token)}
        response = self._request("GET", url, headers=headers, params=params)
        self._raise_for_status(response, url)
        return _decode_json(response, url)

    def get_bytes(
        self,
        path_or_url: str,
        token: Token,
        accept: str,
        params: dict[str, str] | None = None,
    ) -> bytes:
        """GET a resource and return the raw body."""
        url = self.build_url(path_or_url)
        headers = {"Accept": accept, **auth_headers(token)}
        response = self._request("GET", url, headers=headers, params=params)
        self._raise_for_status(response, url)
        return response.content

    def post_json(
        self, url: str, payload: dict[str, str]
    ) -> tuple[int, dict[str, Any]]:
        """POST a JSON body and return the status with the decoded body.

        Error statuses are not raised here: the OAuth endpoints report
        "authorization pending" as an error body, which callers classify.

        Raises:
            TransportError: On network failure or a non-JSON body.

        """
        headers = {"Accept": ACCEPT_JSON}
        response = self._request("POST", url, headers=headers, json=payload)
        body = _decode_json(response, url)
        if not isinstance(body, dict):
            msg = "Unexpected response shape"
            raise TransportError(msg, url, response.status_code)
        return response.status_code, body

    def download(
        self,
        url: str,
        token: Token,
        destination: Path,
        accept: str,
    ) -> int:
        """Stream a resource to disk.

        Bytes go to a sibling ".part" file that is renamed on success and
        removed on failure, so the destination never holds a partial file.

        Returns:
            Number of bytes written

        Raises:
            TransportError: On network or HTTP failure.

        """
        headers = {"Accept": accept, **auth_headers(token)}
        response = self._request("GET", url, headers=headers, stream=True)
        self._raise_for_status(response, url)

        partial = destination.with_name(destination.name + PARTIAL_SUFFIX)
        written = 0
        try:
            with response, partial.open("wb") as handle:
                for chunk in response.iter_content(
                    chunk_size=DOWNLOAD_CHUNK_SIZE
                ):
                    if chunk:
                        handle.write(chunk)
                        written += len(chunk)
            partial.replace(destination)
        except requests.RequestException as e:
            partial.unlink(missing_ok=True)
            msg = f"Download interrupted: {e}"
            raise TransportError(msg, url) from e
        except OSError:
            partial.unlink(missing_ok=True)
            raise

        logger.debug("Downloaded %d bytes to %s", written, destination)
        return written
