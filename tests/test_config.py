import pytest

from patchnotes.config import LAUNCHER_BASE_URL, META_BASE_URL, load_settings


def test_defaults(monkeypatch):
    for name in ("PATCHNOTES_META_BASE_URL", "PATCHNOTES_LAUNCHER_BASE_URL", "PATCHNOTES_HTTP_TIMEOUT",
                 "PATCHNOTES_FALLBACK_HOST", "PATCHNOTES_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = load_settings()

    assert settings.meta_base_url == META_BASE_URL
    assert settings.launcher_base_url == LAUNCHER_BASE_URL
    assert settings.http_timeout == 30.0
    assert settings.fallback_host == "localhost"
    assert settings.log_level == "INFO"


def test_overrides(monkeypatch):
    monkeypatch.setenv("PATCHNOTES_LAUNCHER_BASE_URL", "https://mirror.test/")
    monkeypatch.setenv("PATCHNOTES_HTTP_TIMEOUT", "2.5")
    monkeypatch.setenv("PATCHNOTES_LOG_LEVEL", "debug")

    settings = load_settings()

    assert settings.launcher_base_url == "https://mirror.test"
    assert settings.http_timeout == 2.5
    assert settings.log_level == "DEBUG"


def test_invalid_timeout(monkeypatch):
    monkeypatch.setenv("PATCHNOTES_HTTP_TIMEOUT", "soon")

    with pytest.raises(ValueError, match="PATCHNOTES_HTTP_TIMEOUT"):
        load_settings()
