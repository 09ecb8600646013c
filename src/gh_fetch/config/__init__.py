"""Configuration management for gh-fetch."""

from gh_fetch.config.paths import Paths
from gh_fetch.config.settings import (
    Settings,
    SettingsManager,
    build_auth_config,
)

__all__ = ["Paths", "Settings", "SettingsManager", "build_auth_config"]
