"""Settings manager for the INI configuration file."""

import configparser
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from gh_fetch.config.paths import Paths
from gh_fetch.constants import (
    CLIENT_ID_ENV,
    CONFIG_FILE_NAME,
    DEFAULT_ASSET_SUFFIX,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_KEYRING_ACCOUNT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MAX_POLL_ATTEMPTS,
    DEFAULT_OAUTH_SCOPE,
    DEFAULT_POLL_INTERVAL,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_TOKEN_ENV,
    KEY_CONSOLE_LOG_LEVEL,
    KEY_LOG_LEVEL,
    SECTION_AUTH,
    SECTION_DEFAULT,
    SECTION_NETWORK,
    SECTION_RELEASE,
)
from gh_fetch.domain.types import AuthConfig
from gh_fetch.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Settings:
    """Typed view of settings.conf."""

    log_level: str = DEFAULT_LOG_LEVEL
    console_log_level: str = DEFAULT_CONSOLE_LOG_LEVEL
    client_id: str = ""
    scope: str = DEFAULT_OAUTH_SCOPE
    account: str = DEFAULT_KEYRING_ACCOUNT
    token_env: str = DEFAULT_TOKEN_ENV
    poll_interval: int = DEFAULT_POLL_INTERVAL
    max_poll_attempts: int = DEFAULT_MAX_POLL_ATTEMPTS
    honor_server_interval: bool = True
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS
    asset_suffix: str = DEFAULT_ASSET_SUFFIX


class SettingsManager:
    """Loads settings.conf merged over built-in defaults."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize settings manager.

        Args:
            config_dir: Configuration directory path
                (defaults to Paths.CONFIG_DIR)

        """
        self.config_dir = config_dir or Paths.CONFIG_DIR
        self.settings_file = self.config_dir / CONFIG_FILE_NAME

    @staticmethod
    def get_default_config() -> dict[str, str | dict[str, str]]:
        """Get default configuration values as raw INI strings."""
        return {
            KEY_LOG_LEVEL: DEFAULT_LOG_LEVEL,
            KEY_CONSOLE_LOG_LEVEL: DEFAULT_CONSOLE_LOG_LEVEL,
            SECTION_AUTH: {
                "client_id": "",
                "scope": DEFAULT_OAUTH_SCOPE,
                "account": DEFAULT_KEYRING_ACCOUNT,
                "token_env": DEFAULT_TOKEN_ENV,
                "poll_interval": str(DEFAULT_POLL_INTERVAL),
                "max_poll_attempts": str(DEFAULT_MAX_POLL_ATTEMPTS),
                "honor_server_interval": "true",
            },
            SECTION_NETWORK: {
                "timeout_seconds": str(DEFAULT_TIMEOUT_SECONDS),
            },
            SECTION_RELEASE: {
                "asset_suffix": DEFAULT_ASSET_SUFFIX,
            },
        }

    def _create_parser(self) -> configparser.ConfigParser:
        """Create a ConfigParser populated with defaults."""
        config = configparser.ConfigParser(
            inline_comment_prefixes=("#", ";"),
            interpolation=None,
        )
        defaults = self.get_default_config()

        flat_defaults = {
            key: value
            for key, value in defaults.items()
            if not isinstance(value, dict)
        }
        config.read_dict({SECTION_DEFAULT: flat_defaults})

        for key, value in defaults.items():
            if isinstance(value, dict):
                config.add_section(key)
                for subkey, subvalue in value.items():
                    config.set(key, subkey, subvalue)

        return config

    def load(self) -> Settings:
        """Load settings from the INI file.

        A missing file yields the defaults. Unreadable files and malformed
        values are logged and replaced by defaults.

        Returns:
            Loaded settings

        """
        config = self._create_parser()

        if self.settings_file.exists():
            try:
                config.read(self.settings_file, encoding="utf-8")
            except configparser.Error as e:
                logger.warning(
                    "Ignoring malformed settings file %s: %s",
                    self.settings_file,
                    e,
                )
                config = self._create_parser()

        auth = config[SECTION_AUTH]
        return Settings(
            log_level=config.get(SECTION_DEFAULT, KEY_LOG_LEVEL).upper(),
            console_log_level=config.get(
                SECTION_DEFAULT, KEY_CONSOLE_LOG_LEVEL
            ).upper(),
            client_id=auth.get("client_id", "").strip(),
            scope=auth.get("scope", DEFAULT_OAUTH_SCOPE).strip(),
            account=auth.get("account", DEFAULT_KEYRING_ACCOUNT).strip()
            or DEFAULT_KEYRING_ACCOUNT,
            token_env=auth.get("token_env", DEFAULT_TOKEN_ENV).strip()
            or DEFAULT_TOKEN_ENV,
            poll_interval=self._get_positive_int(
                config, SECTION_AUTH, "poll_interval", DEFAULT_POLL_INTERVAL
            ),
            max_poll_attempts=self._get_positive_int(
                config,
                SECTION_AUTH,
                "max_poll_attempts",
                DEFAULT_MAX_POLL_ATTEMPTS,
            ),
            honor_server_interval=self._get_bool(
                config, SECTION_AUTH, "honor_server_interval", default=True
            ),
            timeout_seconds=self._get_positive_int(
                config,
                SECTION_NETWORK,
                "timeout_seconds",
                DEFAULT_TIMEOUT_SECONDS,
            ),
            asset_suffix=config.get(
                SECTION_RELEASE, "asset_suffix", fallback=DEFAULT_ASSET_SUFFIX
            ).strip()
            or DEFAULT_ASSET_SUFFIX,
        )

    @staticmethod
    def _get_positive_int(
        config: configparser.ConfigParser,
        section: str,
        key: str,
        default: int,
    ) -> int:
        """Read a positive integer, falling back to default when invalid."""
        try:
            value = config.getint(section, key)
        except ValueError:
            logger.warning(
                "Invalid value for [%s] %s, using default %s",
                section,
                key,
                default,
            )
            return default
        if value <= 0:
            logger.warning(
                "[%s] %s must be positive, using default %s",
                section,
                key,
                default,
            )
            return default
        return value

    @staticmethod
    def _get_bool(
        config: configparser.ConfigParser,
        section: str,
        key: str,
        *,
        default: bool,
    ) -> bool:
        """Read a boolean, falling back to default when invalid."""
        try:
            return config.getboolean(section, key)
        except ValueError:
            logger.warning(
                "Invalid boolean for [%s] %s, using default %s",
                section,
                key,
                default,
            )
            return default


def build_auth_config(
    settings: Settings,
    service: str,
    environ: Mapping[str, str],
    *,
    client_id: str | None = None,
    scope: str | None = None,
    max_poll_attempts: int | None = None,
) -> AuthConfig:
    """Construct the token acquisition config once at startup.

    Precedence for the client id: explicit argument, then the
    GH_FETCH_CLIENT_ID environment variable, then settings.conf.

    Args:
        settings: Loaded settings
        service: Keyring service identifier (the repository name)
        environ: Environment mapping, usually os.environ
        client_id: Client id given on the command line
        scope: OAuth scope given on the command line
        max_poll_attempts: Poll bound given on the command line

    Returns:
        Immutable auth configuration

    """
    override = environ.get(settings.token_env) or None
    resolved_client_id = (
        client_id
        or environ.get(CLIENT_ID_ENV, "").strip()
        or settings.client_id
    )

    return AuthConfig(
        service=service,
        override_token=override,
        account=settings.account,
        client_id=resolved_client_id or None,
        scope=scope or settings.scope,
        poll_interval=settings.poll_interval,
        max_poll_attempts=max_poll_attempts or settings.max_poll_attempts,
        honor_server_interval=settings.honor_server_interval,
    )
