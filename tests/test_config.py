from unittest.mock import patch

import pytest

from shell_translator.config import OPENROUTER_URL, TranslatorConfig
from shell_translator.errors import ConfigurationError


ENV_VARS = (
    "OPENROUTER_API_KEY",
    "SHELL_TRANSLATOR_API_URL",
    "SHELL_TRANSLATOR_MODEL",
    "SHELL_TRANSLATOR_TIMEOUT",
    "SHELL_TRANSLATOR_LOG_LEVEL",
)


@pytest.fixture
def clean_env(monkeypatch):
    # set then delete so monkeypatch restores anything load_dotenv writes
    for name in ENV_VARS:
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)
    return monkeypatch


class TestFromEnv:
    def test_defaults(self, clean_env):
        with patch("shell_translator.config.load_dotenv"):
            config = TranslatorConfig.from_env()
        assert config.api_key is None
        assert config.api_url == OPENROUTER_URL
        assert config.request_timeout == 3.0
        assert config.transport_timeout == 5.0
        assert config.cache_ttl == 300.0
        assert config.cache_size == 100
        assert config.log_level == "WARNING"

    def test_overrides(self, clean_env):
        clean_env.setenv("OPENROUTER_API_KEY", "sk-test")
        clean_env.setenv("SHELL_TRANSLATOR_MODEL", "some/model")
        clean_env.setenv("SHELL_TRANSLATOR_TIMEOUT", "1.5")
        clean_env.setenv("SHELL_TRANSLATOR_LOG_LEVEL", "debug")
        with patch("shell_translator.config.load_dotenv"):
            config = TranslatorConfig.from_env()
        assert config.api_key == "sk-test"
        assert config.model == "some/model"
        assert config.request_timeout == 1.5
        assert config.log_level == "DEBUG"

    def test_env_file(self, clean_env, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("OPENROUTER_API_KEY=from-file\n")
        config = TranslatorConfig.from_env(str(env_file))
        assert config.api_key == "from-file"

    def test_bad_timeout(self, clean_env):
        clean_env.setenv("SHELL_TRANSLATOR_TIMEOUT", "soon")
        with patch("shell_translator.config.load_dotenv"):
            with pytest.raises(ConfigurationError):
                TranslatorConfig.from_env()

    def test_bad_log_level(self, clean_env):
        clean_env.setenv("SHELL_TRANSLATOR_LOG_LEVEL", "chatty")
        with patch("shell_translator.config.load_dotenv"):
            with pytest.raises(ConfigurationError):
                TranslatorConfig.from_env()


class TestApiKey:
    def test_missing_key(self):
        with pytest.raises(ConfigurationError) as excinfo:
            TranslatorConfig().require_api_key()
        assert "OPENROUTER_API_KEY" in str(excinfo.value)

    def test_present_key(self):
        assert TranslatorConfig(api_key="sk-test").require_api_key() == "sk-test"


def test_validate_rejects_zero_cache():
    with pytest.raises(ConfigurationError):
        TranslatorConfig(cache_size=0).validate()
