"""Latest release lookup and asset download."""

import tempfile
from collections.abc import Callable, Iterable
from pathlib import Path

from gh_fetch.constants import ACCEPT_OCTET_STREAM
from gh_fetch.core.http import GitHubClient
from gh_fetch.domain.types import DownloadTarget, ReleaseAsset, Token
from gh_fetch.exceptions import NoAssetsError, NoMatchingAssetError
from gh_fetch.logger import get_logger

logger = get_logger(__name__)

AssetPredicate = Callable[[str], bool]


def suffix_predicate(suffix: str) -> AssetPredicate:
    """Return a predicate matching asset names ending with suffix.

    Matching is case-insensitive so ".whl" also selects ".WHL".
    """
    wanted = suffix.lower()

    def _matches(name: str) -> bool:
        return name.lower().endswith(wanted)

    return _matches


def select_asset(
    assets: Iterable[ReleaseAsset], predicate: AssetPredicate
) -> ReleaseAsset | None:
    """Return the first asset, in release order, whose name matches."""
    for asset in assets:
        if predicate(asset.name):
            return asset
    return None


class ReleaseAssetFetcher:
    """Download an asset of a repository's latest release."""

    def __init__(
        self, client: GitHubClient, download_dir: Path | None = None
    ) -> None:
        """Initialize the fetcher.

        Args:
            client: GitHub API client
            download_dir: Where assets are written
                (defaults to the system temp directory)

        """
        self.client = client
        self.download_dir = download_dir

    def get_latest_assets(
        self, token: Token, org: str, repo: str
    ) -> tuple[str, list[ReleaseAsset]]:
        """Return the latest release tag and its assets in release order.

        Raises:
            NotFoundError: If the repository has no published release.

        """
        release = self.client.get_json(
            f"/repos/{org}/{repo}/releases/latest", token
        )
        tag = release.get("tag_name") or ""
        raw_assets = release.get("assets") or []
        assets = [ReleaseAsset.from_api(a) for a in raw_assets]
        logger.debug(
            "Latest release of %s/%s is %s with %d assets",
            org,
            repo,
            tag,
            len(assets),
        )
        return tag, assets

    def fetch_latest_asset(
        self,
        token: Token,
        org: str,
        repo: str,
        predicate: AssetPredicate,
    ) -> DownloadTarget:
        """Download the first matching asset of the latest release.

        Returns:
            Path of the downloaded asset inside the download directory

        Raises:
            NotFoundError: If the repository has no release.
            NoAssetsError: If the release has no assets.
            NoMatchingAssetError: If no asset satisfies predicate.
            TransportError: If the download fails.

        """
        target = f"{org}/{repo}"
        tag, assets = self.get_latest_assets(token, org, repo)
        if not assets:
            msg = f"release {tag or '(untagged)'} has no assets"
            raise NoAssetsError(msg, target)

        asset = select_asset(assets, predicate)
        if asset is None:
            names = ", ".join(a.name for a in assets)
            msg = f"no asset of release {tag} matches (available: {names})"
            raise NoMatchingAssetError(msg, target)

        download_dir = self.download_dir or Path(tempfile.gettempdir())
        download_dir.mkdir(parents=True, exist_ok=True)
        # Asset names come from the server; keep only the final component
        destination = download_dir / Path(asset.name).name

        logger.info("Downloading %s from %s %s", asset.name, target, tag)
        size = self.client.download(
            asset.url, token, destination, ACCEPT_OCTET_STREAM
        )
        return DownloadTarget(path=destination, size=size)
