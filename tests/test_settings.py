import pytest

from rucpy.core.settings import Settings, get_settings


def test_defaults():
    settings = Settings()

    assert settings.app_name == "RUC Validation API"
    assert settings.log_level == "INFO"
    assert settings.cors_allowed_origins == ["*"]


def test_env_aliases_override_defaults(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("APP_NAME", "ruc-check")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("CORS_ALLOWED_ORIGINS", '["https://example.com.py"]')
    get_settings.cache_clear()

    try:
        settings = get_settings()
        assert settings.app_name == "ruc-check"
        assert settings.log_level == "debug"
        assert settings.cors_allowed_origins == ["https://example.com.py"]
    finally:
        get_settings.cache_clear()


def test_get_settings_is_cached():
    get_settings.cache_clear()
    assert get_settings() is get_settings()
    get_settings.cache_clear()
