"""Exception classes for gh-fetch operations."""


class GhFetchError(Exception):
    """Base exception for gh-fetch operations."""

    error_prefix: str = "Operation failed"

    def __init__(self, message: str, target: str | None = None) -> None:
        """Initialize error with message and optional target.

        Args:
            message: Error message describing the failure.
            target: Optional name of the target that failed
                (repository, file path or asset name).

        """
        super().__init__(message)
        self.message = message
        self.target = target

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.target:
            return f"{self.error_prefix} for '{self.target}': {self.message}"
        return f"{self.error_prefix}: {self.message}"


class AuthenticationError(GhFetchError):
    """Raised when no access token could be obtained."""

    error_prefix = "Authentication failed"


class TransportError(GhFetchError):
    """Raised on network or HTTP failures not otherwise classified."""

    error_prefix = "Request failed"

    def __init__(
        self,
        message: str,
        target: str | None = None,
        status: int | None = None,
    ) -> None:
        """Initialize transport error.

        Args:
            message: Error message describing the failure.
            target: Optional URL or resource that failed.
            status: HTTP status code when the server answered.

        """
        super().__init__(message, target)
        self.status = status


class NotFoundError(TransportError):
    """Raised when the API answers 404 for a file or release."""

    error_prefix = "Not found"


class NotAFileError(GhFetchError):
    """Raised when a repository path is a directory or other non-file."""

    error_prefix = "Not a file"


class NoAssetsError(GhFetchError):
    """Raised when the latest release has no assets at all."""

    error_prefix = "No release assets"


class NoMatchingAssetError(GhFetchError):
    """Raised when no release asset satisfies the selection predicate."""

    error_prefix = "No matching asset"


class InstallationError(GhFetchError):
    """Raised when installing a downloaded package fails."""

    error_prefix = "Installation failed"
