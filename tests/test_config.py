import importlib
import pytest

from core import config

def test_settings_load_from_env(monkeypatch):
    monkeypatch.setenv("MAX_DIFF_LENGTH", "1000")
    monkeypatch.setenv("ALLOW_ORPHAN_LINES", "true")
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    importlib.reload(config)
    settings = config.Settings()

    assert settings.MAX_DIFF_LENGTH == 1000
    assert settings.ALLOW_ORPHAN_LINES is True
    assert settings.PORT == 9000
    assert settings.LOG_LEVEL == "DEBUG"

def test_settings_default_values(monkeypatch):
    monkeypatch.delenv("MAX_DIFF_LENGTH", raising=False)
    monkeypatch.delenv("ALLOW_ORPHAN_LINES", raising=False)
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("HOST", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    importlib.reload(config)
    settings = config.Settings()

    assert settings.MAX_DIFF_LENGTH == 5000000
    assert settings.ALLOW_ORPHAN_LINES is False
    assert settings.PORT == 8080
    assert settings.HOST == "0.0.0.0"
    assert settings.LOG_LEVEL == "INFO"

def test_settings_invalid_max_diff_length(monkeypatch):
    monkeypatch.setenv("MAX_DIFF_LENGTH", "0")

    importlib.reload(config)
    with pytest.raises(ValueError):
        settings = config.Settings()
        settings.validate_settings()
