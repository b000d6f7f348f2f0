import pytest
from pydantic import ValidationError

from revenue_dashboard.config import Settings


def test_settings_env_var_precedence(monkeypatch):
    """Environment variables take precedence over the .env file."""
    monkeypatch.setenv("APP_TITLE", "FromEnvVar")
    s = Settings()
    assert s.app_title == "FromEnvVar"


def test_settings_aliases_env(monkeypatch):
    monkeypatch.setenv("PORT", "8123")
    monkeypatch.setenv("DEBUG", "1")
    monkeypatch.setenv("DATA_SOURCE", "sql")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOCALE", "en-GB")
    s = Settings()
    assert s.port == 8123
    assert s.debug is True
    assert s.data_source == "SQL"
    assert s.log_level == "DEBUG"
    assert s.locale == "en-GB"


def test_direct_instantiation_by_field_name():
    s = Settings(items_per_page=10, max_rows=25)
    assert s.items_per_page == 10
    assert s.max_rows == 25
    assert s.cache_type in ("SimpleCache", "RedisCache")


def test_unknown_locale_rejected_at_startup(monkeypatch):
    monkeypatch.setenv("LOCALE", "fr-FR")
    with pytest.raises(ValidationError):
        Settings()
    assert Settings(locale="en_GB").locale == "en_GB"
