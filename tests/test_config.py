"""Unit tests for configuration loading."""
import pytest
from pydantic import ValidationError

from appchat.config import ChatConfig, load_config
from appchat.transport import DEFAULT_ENDPOINT

ENV_VARS = ("APPCHAT_ENDPOINT", "APPCHAT_PROVIDER", "APPCHAT_TIMEOUT", "APPCHAT_LOG_LEVEL")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove appchat variables so tests see only what they set."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults(self):
        config = load_config()

        assert config.endpoint == DEFAULT_ENDPOINT
        assert config.provider == "claude"
        assert config.timeout is None
        assert config.log_level == "WARNING"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("APPCHAT_ENDPOINT", "https://toolkit.example.org/api/ai")
        monkeypatch.setenv("APPCHAT_PROVIDER", "gemini")
        monkeypatch.setenv("APPCHAT_TIMEOUT", "30")
        monkeypatch.setenv("APPCHAT_LOG_LEVEL", "debug")

        config = load_config()

        assert config.endpoint == "https://toolkit.example.org/api/ai"
        assert config.provider == "gemini"
        assert config.timeout == 30.0
        assert config.log_level == "DEBUG"

    def test_bad_timeout(self, monkeypatch):
        monkeypatch.setenv("APPCHAT_TIMEOUT", "soon")

        with pytest.raises(ValueError, match="APPCHAT_TIMEOUT"):
            load_config()

    def test_negative_timeout(self, monkeypatch):
        monkeypatch.setenv("APPCHAT_TIMEOUT", "-1")

        with pytest.raises(ValidationError):
            load_config()


class TestChatConfig:
    """Tests for the ChatConfig model."""

    def test_unknown_log_level(self):
        with pytest.raises(ValidationError):
            ChatConfig(log_level="chatty")

    def test_provider_not_validated(self):
        assert ChatConfig(provider="anything").provider == "anything"
