"""Tests for startup configuration (core/config.py)."""

import pytest

from core import config
from core.config import ConfigurationError, load_settings, mask_secret


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv(config.API_KEY_ENV_VAR, raising=False)
    monkeypatch.delenv(config.LOG_LEVEL_ENV_VAR, raising=False)


def test_missing_api_key_is_fatal():
    with pytest.raises(ConfigurationError, match="BLAZE_API_KEY"):
        load_settings(use_dotenv=False)


def test_blank_api_key_is_fatal(monkeypatch):
    monkeypatch.setenv(config.API_KEY_ENV_VAR, "   ")

    with pytest.raises(ConfigurationError):
        load_settings(use_dotenv=False)


def test_loads_key_and_default_log_level(monkeypatch):
    monkeypatch.setenv(config.API_KEY_ENV_VAR, "sk-blaze-0123456789")

    settings = load_settings(use_dotenv=False)

    assert settings.api_key == "sk-blaze-0123456789"
    assert settings.log_level == "INFO"


def test_log_level_override(monkeypatch):
    monkeypatch.setenv(config.API_KEY_ENV_VAR, "sk-blaze-0123456789")
    monkeypatch.setenv(config.LOG_LEVEL_ENV_VAR, "debug")

    assert load_settings(use_dotenv=False).log_level == "DEBUG"


def test_dotenv_is_consulted_before_the_environment(monkeypatch):
    calls = []

    def fake_load_dotenv(override=False):
        calls.append(override)
        monkeypatch.setenv(config.API_KEY_ENV_VAR, "from-dotenv-file-key")
        return True

    monkeypatch.setattr(config, "load_dotenv", fake_load_dotenv)

    assert load_settings().api_key == "from-dotenv-file-key"
    assert calls == [False]


def test_dotenv_can_be_skipped(monkeypatch):
    monkeypatch.setattr(config, "load_dotenv", lambda **kw: pytest.fail("dotenv loaded"))
    monkeypatch.setenv(config.API_KEY_ENV_VAR, "sk-blaze-0123456789")

    load_settings(use_dotenv=False)


def test_mask_secret_hides_the_middle():
    assert mask_secret("sk-blaze-0123456789") == "sk-b…6789"
    assert mask_secret("short") == "*****"


def test_settings_masked_key(monkeypatch):
    monkeypatch.setenv(config.API_KEY_ENV_VAR, "sk-blaze-0123456789")

    assert "0123456789" not in load_settings(use_dotenv=False).masked_api_key
