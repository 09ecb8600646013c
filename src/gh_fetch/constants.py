"""Centralized constants module for gh-fetch.

This module serves as the single source of truth for shared constants
across the gh-fetch codebase. Constants are grouped by concern and use
typing.Final annotations to ensure immutability.

Usage:
    from gh_fetch.constants import GITHUB_API_URL
"""

from typing import Final

# =============================================================================
# Configuration Constants
# =============================================================================

CONFIG_FILE_NAME: Final[str] = "settings.conf"
CONFIG_DIR_NAME: Final[str] = ".config"
DEFAULT_CONFIG_SUBDIR: Final[str] = "gh-fetch"

DEFAULT_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_CONSOLE_LOG_LEVEL: Final[str] = "INFO"

SECTION_DEFAULT: Final[str] = "DEFAULT"
SECTION_AUTH: Final[str] = "auth"
SECTION_NETWORK: Final[str] = "network"
SECTION_RELEASE: Final[str] = "release"

KEY_LOG_LEVEL: Final[str] = "log_level"
KEY_CONSOLE_LOG_LEVEL: Final[str] = "console_log_level"

# =============================================================================
# Authentication Constants
# =============================================================================

DEFAULT_TOKEN_ENV: Final[str] = "GITHUB_TOKEN"
CLIENT_ID_ENV: Final[str] = "GH_FETCH_CLIENT_ID"
DEFAULT_KEYRING_ACCOUNT: Final[str] = "oauth-token"
DEFAULT_OAUTH_SCOPE: Final[str] = "repo"

DEFAULT_POLL_INTERVAL: Final[int] = 5
# GitHub device codes expire after 900 seconds
DEFAULT_MAX_POLL_ATTEMPTS: Final[int] = 180
# RFC 8628 section 3.5: slow_down adds 5 seconds to the interval
SLOW_DOWN_INCREMENT: Final[int] = 5

DEVICE_CODE_GRANT_TYPE: Final[str] = (
    "urn:ietf:params:oauth:grant-type:device_code"
)
PENDING_ERRORS: Final[frozenset[str]] = frozenset(
    {"authorization_pending", "slow_down"}
)

# =============================================================================
# GitHub API Constants
# =============================================================================

GITHUB_URL: Final[str] = "https://github.com"
GITHUB_API_URL: Final[str] = "https://api.github.com"
DEVICE_CODE_PATH: Final[str] = "/login/device/code"
ACCESS_TOKEN_PATH: Final[str] = "/login/oauth/access_token"

DEFAULT_BRANCH: Final[str] = "main"
DEFAULT_ASSET_SUFFIX: Final[str] = ".whl"
DEFAULT_TIMEOUT_SECONDS: Final[int] = 10

ACCEPT_JSON: Final[str] = "application/json"
ACCEPT_GITHUB_JSON: Final[str] = "application/vnd.github+json"
ACCEPT_GITHUB_RAW: Final[str] = "application/vnd.github.raw"
ACCEPT_OCTET_STREAM: Final[str] = "application/octet-stream"

DOWNLOAD_CHUNK_SIZE: Final[int] = 64 * 1024
PARTIAL_SUFFIX: Final[str] = ".part"

# =============================================================================
# Logging Constants
# =============================================================================

LOG_FILE_NAME: Final[str] = "gh-fetch.log"
LOG_DIR_ENV: Final[str] = "GH_FETCH_LOG_DIR"
LOG_ROTATION_THRESHOLD_BYTES: Final[int] = 1024 * 1024  # 1 MB
LOG_BACKUP_COUNT: Final[int] = 3

LOG_CONSOLE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
LOG_CONSOLE_DATE_FORMAT: Final[str] = "%H:%M:%S"
LOG_FILE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "%(funcName)s:%(lineno)d - %(message)s"
)
LOG_FILE_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

LOG_COLORS: Final[dict[str, str]] = {
    "DEBUG": "\033[36m",  # Cyan
    "INFO": "\033[32m",  # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[35m",  # Magenta
    "RESET": "\033[0m",
}
