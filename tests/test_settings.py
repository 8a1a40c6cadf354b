"""Tests for settings loading."""

import pytest
from pydantic import ValidationError

from papertrend.config.settings import Settings, get_settings
from papertrend.core.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults(settings):
    assert settings.site_origin == "https://huggingface.co"
    assert settings.site_domain == "huggingface.co"
    assert settings.listing_base == "https://huggingface.co/papers"
    assert settings.max_papers == 10
    assert settings.user_agent.startswith("papertrend/")


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PAPERTREND_SITE_ORIGIN", "https://hf.example.org/")
    monkeypatch.setenv("PAPERTREND_REQUEST_TIMEOUT", "5")
    monkeypatch.setenv("PAPERTREND_MAX_PAPERS", "3")

    settings = Settings(_env_file=None)

    assert settings.site_origin == "https://hf.example.org"
    assert settings.site_domain == "hf.example.org"
    assert settings.request_timeout == 5.0
    assert settings.max_papers == 3


def test_rejects_relative_origin():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, site_origin="huggingface.co")


def test_rejects_more_than_ten_papers():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, max_papers=11)


def test_get_settings_wraps_validation_errors(monkeypatch):
    monkeypatch.setenv("PAPERTREND_PORT", "not-a-port")

    with pytest.raises(ConfigurationError):
        get_settings()


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
