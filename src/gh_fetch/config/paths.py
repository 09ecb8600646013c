"""Path constants for gh-fetch configuration."""

from pathlib import Path

from gh_fetch.constants import CONFIG_DIR_NAME, DEFAULT_CONFIG_SUBDIR


class Paths:
    """Application paths and directory structure.

    The log directory is resolved by gh_fetch.logger.config, which must
    not import this package.
    """

    HOME_DIR = Path.home()
    CONFIG_BASE_DIR = HOME_DIR / CONFIG_DIR_NAME
    CONFIG_DIR = CONFIG_BASE_DIR / DEFAULT_CONFIG_SUBDIR

    @classmethod
    def expand_path(cls, path_str: str) -> Path:
        """Expand ~ and resolve a user supplied path.

        Args:
            path_str: Path string, possibly relative or starting with ~

        Returns:
            Absolute path

        """
        return Path(path_str).expanduser().resolve()
