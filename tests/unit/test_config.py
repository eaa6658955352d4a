"""
Unit tests -- settings and the API root URL.
"""
from d2client.core.config import Settings, get_settings


def test_api_url_without_version():
    settings = Settings(dhis2_base_url="https://play.dhis2.org/dev/", dhis2_api_version=None)
    assert settings.api_url == "https://play.dhis2.org/dev/api"


def test_api_url_with_version():
    settings = Settings(dhis2_base_url="https://play.dhis2.org/dev", dhis2_api_version=40)
    assert settings.api_url == "https://play.dhis2.org/dev/api/40"


def test_env_override(monkeypatch):
    monkeypatch.setenv("DHIS2_USERNAME", "tester")
    assert Settings().dhis2_username == "tester"


def test_get_settings_cached():
    assert get_settings() is get_settings()
