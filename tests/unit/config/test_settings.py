"""Unit tests for Settings class and get_settings function."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from nexus.config import get_settings, reload_settings
from nexus.config.settings import Settings


class TestSettings:
    """Tests for Settings model."""

    def test_default_values(self) -> None:
        """Settings has sensible defaults."""
        settings = Settings()
        assert settings.app_name == "nexus"
        assert settings.environment == "production"
        assert settings.debug is False

    def test_conversation_defaults(self) -> None:
        """Session and context defaults match the documented values."""
        conversation = Settings().conversation
        assert conversation.session_timeout_seconds == 1800
        assert conversation.sweep_interval_seconds == 60
        assert conversation.context_default_ttl_seconds == 300
        assert conversation.history_max_length == 20
        assert conversation.back_command == "back"
        assert conversation.reset_commands == ["reset", "/reset", "/start"]

    def test_platform_defaults(self) -> None:
        """Every supported platform is allowed by default."""
        assert Settings().platforms.allowed == ["facebook", "zalo", "telegram", "tiktok", "weibo"]

    def test_env_var_overrides_nested(self, env_override) -> None:
        """NEXUS_* variables override nested sections."""
        with env_override({"NEXUS_API__PORT": "8080", "NEXUS_DEBUG": "true"}):
            settings = Settings()
        assert settings.api.port == 8080
        assert settings.debug is True

    def test_unknown_platform_rejected(self) -> None:
        """Allow-list entries must be known platforms."""
        with pytest.raises(ValidationError, match="myspace"):
            Settings(platforms={"allowed": ["facebook", "myspace"]})

    def test_allow_list_normalized(self) -> None:
        """Allow-list entries are trimmed and lower-cased."""
        settings = Settings(platforms={"allowed": [" Facebook ", "ZALO"]})
        assert settings.platforms.allowed == ["facebook", "zalo"]

    def test_commands_normalized(self) -> None:
        """Commands are matched case-insensitively, so they are stored lower-case."""
        settings = Settings(conversation={"back_command": " BACK ", "reset_commands": ["/Start", " "]})
        assert settings.conversation.back_command == "back"
        assert settings.conversation.reset_commands == ["/start"]

    def test_non_positive_timeout_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(conversation={"session_timeout_seconds": 0})


class TestGetSettings:
    """Tests for get_settings function."""

    def test_loads_toml_config(
        self,
        test_config_dir: Path,
        mock_toml_files,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """get_settings applies default.toml and the environment file."""
        mock_toml_files({
            "default.toml": "[conversation]\nsession_timeout_seconds = 600",
            "test.toml": "environment = 'test'\n[plugins]\nclassifier_enabled = false",
        })
        monkeypatch.setenv("NEXUS_CONFIG_DIR", str(test_config_dir))
        monkeypatch.setenv("NEXUS_ENV", "test")

        settings = get_settings()
        assert settings.environment == "test"
        assert settings.conversation.session_timeout_seconds == 600
        assert settings.plugins.classifier_enabled is False

    def test_env_beats_toml(
        self,
        test_config_dir: Path,
        mock_toml_files,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Environment variables take precedence over TOML values."""
        mock_toml_files({"default.toml": "[api]\nport = 9000"})
        monkeypatch.setenv("NEXUS_CONFIG_DIR", str(test_config_dir))
        monkeypatch.setenv("NEXUS_API__PORT", "9100")

        assert get_settings().api.port == 9100

    def test_missing_default_toml_uses_defaults(
        self, test_config_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """A config directory without default.toml falls back to model defaults."""
        monkeypatch.setenv("NEXUS_CONFIG_DIR", str(test_config_dir))

        assert get_settings().conversation.session_timeout_seconds == 1800

    def test_cached(self, test_config_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """get_settings returns the same instance until reloaded."""
        monkeypatch.setenv("NEXUS_CONFIG_DIR", str(test_config_dir))

        first = get_settings()
        assert get_settings() is first
        assert reload_settings() is not first
