"""Tests for SettingsManager and build_auth_config."""

import pytest

from gh_fetch.config.settings import (
    Settings,
    SettingsManager,
    build_auth_config,
)


@pytest.fixture
def manager(tmp_path) -> SettingsManager:
    """SettingsManager rooted in a temporary config directory."""
    return SettingsManager(config_dir=tmp_path)


def write_settings(manager: SettingsManager, text: str) -> None:
    manager.settings_file.write_text(text, encoding="utf-8")


class TestSettingsManager:
    """Tests for loading settings.conf."""

    def test_missing_file_gives_defaults(self, manager):
        """Test defaults are used when no settings file exists."""
        assert manager.load() == Settings()

    def test_values_are_read(self, manager):
        """Test every section is read into the typed settings."""
        write_settings(
            manager,
            "[DEFAULT]\n"
            "log_level = debug\n"
            "console_log_level = WARNING\n"
            "\n"
            "[auth]\n"
            "client_id = Iv1.abc  # app id\n"
            "scope = read:org\n"
            "account = me\n"
            "token_env = MY_TOKEN\n"
            "poll_interval = 3\n"
            "max_poll_attempts = 20\n"
            "honor_server_interval = no\n"
            "\n"
            "[network]\n"
            "timeout_seconds = 30\n"
            "\n"
            "[release]\n"
            "asset_suffix = .tar.gz\n",
        )

        settings = manager.load()

        assert settings == Settings(
            log_level="DEBUG",
            console_log_level="WARNING",
            client_id="Iv1.abc",
            scope="read:org",
            account="me",
            token_env="MY_TOKEN",
            poll_interval=3,
            max_poll_attempts=20,
            honor_server_interval=False,
            timeout_seconds=30,
            asset_suffix=".tar.gz",
        )

    def test_partial_file_keeps_other_defaults(self, manager):
        """Test unspecified keys fall back to defaults."""
        write_settings(manager, "[auth]\nclient_id = Iv1.abc\n")

        settings = manager.load()

        assert settings.client_id == "Iv1.abc"
        assert settings.max_poll_attempts == 180
        assert settings.asset_suffix == ".whl"

    @pytest.mark.parametrize("value", ["abc", "0", "-1"])
    def test_invalid_int_falls_back(self, manager, caplog, value):
        """Test invalid integers are replaced by defaults with a warning."""
        write_settings(manager, f"[auth]\npoll_interval = {value}\n")

        assert manager.load().poll_interval == 5
        assert "poll_interval" in caplog.text

    def test_invalid_bool_falls_back(self, manager, caplog):
        """Test invalid booleans are replaced by defaults with a warning."""
        write_settings(manager, "[auth]\nhonor_server_interval = maybe\n")

        assert manager.load().honor_server_interval is True
        assert "honor_server_interval" in caplog.text

    def test_malformed_file_gives_defaults(self, manager, caplog):
        """Test a file without section headers is ignored."""
        write_settings(manager, "client_id = oops\n")

        assert manager.load() == Settings()
        assert "malformed" in caplog.text


class TestBuildAuthConfig:
    """Tests for build_auth_config."""

    def test_override_token_from_environment(self):
        """Test the override token is read from the configured variable."""
        config = build_auth_config(
            Settings(), "repo", {"GITHUB_TOKEN": "ghp_x"}
        )

        assert config.override_token == "ghp_x"
        assert config.service == "repo"
        assert config.account == "oauth-token"

    def test_custom_token_env(self):
        """Test token_env selects which variable is read."""
        settings = Settings(token_env="MY_TOKEN")

        config = build_auth_config(
            settings, "repo", {"GITHUB_TOKEN": "a", "MY_TOKEN": "b"}
        )

        assert config.override_token == "b"

    @pytest.mark.parametrize("environ", [{}, {"GITHUB_TOKEN": ""}])
    def test_absent_or_empty_override(self, environ):
        """Test a missing or empty variable gives no override."""
        config = build_auth_config(Settings(), "repo", environ)

        assert config.override_token is None

    @pytest.mark.parametrize("value", [" tok ", "   ", "tok\n"])
    def test_override_value_kept_verbatim(self, value):
        """Test any non-empty variable value is used unchanged."""
        config = build_auth_config(Settings(), "r", {"GITHUB_TOKEN": value})

        assert config.override_token == value

    def test_client_id_precedence(self):
        """Test argument beats environment, which beats settings."""
        settings = Settings(client_id="from-file")
        env = {"GH_FETCH_CLIENT_ID": "from-env"}

        assert build_auth_config(settings, "r", {}).client_id == "from-file"
        assert build_auth_config(settings, "r", env).client_id == "from-env"
        assert (
            build_auth_config(settings, "r", env, client_id="arg").client_id
            == "arg"
        )

    def test_no_client_id_is_none(self):
        """Test an unconfigured client id is None."""
        assert build_auth_config(Settings(), "r", {}).client_id is None

    def test_command_line_overrides(self):
        """Test scope and poll bound arguments replace settings."""
        config = build_auth_config(
            Settings(poll_interval=2, honor_server_interval=False),
            "r",
            {},
            scope="read:packages",
            max_poll_attempts=4,
        )

        assert config.scope == "read:packages"
        assert config.max_poll_attempts == 4
        assert config.poll_interval == 2
        assert config.honor_server_interval is False

    def test_override_hidden_from_repr(self):
        """Test the override token does not appear in repr."""
        config = build_auth_config(Settings(), "r", {"GITHUB_TOKEN": "s3"})

        assert "s3" not in repr(config)
