"""Install a downloaded package and clean up after it."""

import subprocess
import sys
from pathlib import Path

from gh_fetch.exceptions import InstallationError
from gh_fetch.logger import get_logger

logger = get_logger(__name__)


class PackageInstaller:
    """Install wheels with pip into the running interpreter."""

    def __init__(self, python: str | None = None) -> None:
        self.python = python or sys.executable

    def install(self, path: Path) -> None:
        """Install the package at path.

        Raises:
            InstallationError: If pip exits non-zero or cannot be started.

        """
        command = [self.python, "-m", "pip", "install", "--upgrade", str(path)]
        logger.info("Installing %s", path.name)
        logger.debug("Running %s", " ".join(command))
        try:
            result = subprocess.run(  # noqa: S603
                command, check=False, capture_output=True, text=True
            )
        except OSError as e:
            msg = f"could not run pip: {e}"
            raise InstallationError(msg, path.name) from e

        if result.returncode != 0:
            logger.debug("pip output:\n%s", result.stdout)
            detail = result.stderr.strip().splitlines()
            msg = detail[-1] if detail else f"pip exited {result.returncode}"
            raise InstallationError(msg, path.name)

        logger.info("Installed %s", path.name)

    @staticmethod
    def cleanup(path: Path) -> bool:
        """Delete a downloaded file.

        Returns:
            True if the file is gone, False if deletion failed (logged).

        """
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning("Could not remove temporary file %s: %s", path, e)
            return False
        logger.debug("Removed temporary file %s", path)
        return True
