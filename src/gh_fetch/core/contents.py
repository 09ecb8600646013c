"""Single-file download through the GitHub contents API."""

import base64
import binascii
from pathlib import Path, PurePosixPath
from urllib.parse import quote

from gh_fetch.constants import (
    ACCEPT_GITHUB_RAW,
    DEFAULT_BRANCH,
    PARTIAL_SUFFIX,
)
from gh_fetch.core.http import GitHubClient
from gh_fetch.domain.types import DownloadTarget, Token
from gh_fetch.exceptions import NotAFileError, TransportError
from gh_fetch.logger import get_logger

logger = get_logger(__name__)


def contents_path(org: str, repo: str, file_path: str) -> str:
    """Build the contents API path with the file path percent-encoded.

    Slashes separate directories and stay unescaped.
    """
    encoded = quote(file_path.strip("/"), safe="/")
    return f"/repos/{org}/{repo}/contents/{encoded}"


def resolve_output_path(file_path: str, output_path: Path | None) -> Path:
    """Return the explicit output path or cwd / basename(file_path)."""
    if output_path is not None:
        return output_path
    return Path.cwd() / PurePosixPath(file_path.strip("/")).name


def write_bytes_atomic(path: Path, data: bytes) -> None:
    """Write data to path through a sibling partial file.

    Parent directories are created on demand.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    partial = path.with_name(path.name + PARTIAL_SUFFIX)
    try:
        partial.write_bytes(data)
        partial.replace(path)
    except OSError:
        partial.unlink(missing_ok=True)
        raise


class FileFetcher:
    """Fetch one repository file and write it to disk."""

    def __init__(self, client: GitHubClient) -> None:
        self.client = client

    def fetch(
        self,
        token: Token,
        org: str,
        repo: str,
        file_path: str,
        branch: str = DEFAULT_BRANCH,
        output_path: Path | None = None,
    ) -> DownloadTarget:
        """Download file_path from org/repo at branch.

        Args:
            token: Access token
            org: Repository owner
            repo: Repository name
            file_path: Path of the file inside the repository
            branch: Branch or ref; the ref query is only sent when it
                differs from the default branch
            output_path: Explicit destination

        Returns:
            The written file and its size

        Raises:
            NotFoundError: If the file does not exist (HTTP 404).
            NotAFileError: If the path is a directory, symlink or submodule.
            TransportError: On any other request failure.

        """
        api_path = contents_path(org, repo, file_path)
        params = None
        if branch and branch != DEFAULT_BRANCH:
            params = {"ref": branch}
        target = f"{org}/{repo}/{file_path}"

        logger.info("Fetching %s", target)
        metadata = self.client.get_json(api_path, token, params=params)

        # Directories come back as a JSON list
        entry_type = (
            metadata.get("type") if isinstance(metadata, dict) else "dir"
        )
        if entry_type != "file":
            msg = f"path is a {entry_type}"
            raise NotAFileError(msg, target)

        data = self._decode_content(metadata, target)
        if data is None:
            # Files over 1 MB are returned without inline content
            logger.debug("No inline content for %s, fetching raw", target)
            data = self.client.get_bytes(
                api_path, token, ACCEPT_GITHUB_RAW, params=params
            )

        destination = resolve_output_path(file_path, output_path)
        write_bytes_atomic(destination, data)
        logger.debug("Saved %s (%d bytes)", destination, len(data))
        return DownloadTarget(path=destination, size=len(data))

    @staticmethod
    def _decode_content(metadata: dict, target: str) -> bytes | None:
        """Decode the inline base64 content, or None if not inlined."""
        encoding = metadata.get("encoding")
        content = metadata.get("content") or ""
        if encoding != "base64" or (not content and metadata.get("size")):
            return None

        try:
            return base64.b64decode(content)
        except (binascii.Error, ValueError) as e:
            msg = "file content is not valid base64"
            raise TransportError(msg, target) from e
