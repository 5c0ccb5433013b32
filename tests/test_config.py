"""Tests for configuration loading."""

from __future__ import annotations

import pytest

from index_history.config.loader import get_settings, reload_settings
from index_history.config.settings import AppSettings, YahooChartSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch):
    for var in ("YAHOO_BASE_URL", "YAHOO_USER_AGENT", "YAHOO_TIMEOUT", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    reload_settings()
    yield
    get_settings.cache_clear()


def test_default_settings():
    """AppSettings can be created with defaults."""
    settings = AppSettings()
    assert settings.log_level == "INFO"
    assert settings.yahoo.base_url == "https://query1.finance.yahoo.com"
    assert settings.yahoo.user_agent
    assert settings.yahoo.timeout == 30.0


def test_yahoo_env_override(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("YAHOO_USER_AGENT", "my-desk/2.0")
    monkeypatch.setenv("YAHOO_TIMEOUT", "7.5")

    s = YahooChartSettings()
    assert s.user_agent == "my-desk/2.0"
    assert s.timeout == 7.5


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_reload_settings_picks_up_env(monkeypatch: pytest.MonkeyPatch):
    before = get_settings()
    monkeypatch.setenv("YAHOO_BASE_URL", "http://localhost:9000")
    assert get_settings() is before

    after = reload_settings()

    assert after is not before
    assert after.yahoo.base_url == "http://localhost:9000"
    assert get_settings() is after
