from __future__ import annotations

import pytest

from appwhere.settings import get_settings


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("APPWHERE_PLATFORM", raising=False)
    monkeypatch.delenv("APPWHERE_LOGGING__ENABLED", raising=False)

    settings = get_settings()

    assert settings.platform is None
    assert settings.logging.enabled is False
    assert settings.app.project_name == "appwhere"


def test_settings_read_prefixed_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APPWHERE_PLATFORM", "windows")
    monkeypatch.setenv("APPWHERE_LOGGING__ENABLED", "true")
    monkeypatch.setenv("APPWHERE_LOGGING__LOG_LEVEL", "DEBUG")

    settings = get_settings()

    assert settings.platform == "windows"
    assert settings.logging.enabled is True
    assert settings.logging.log_level == "DEBUG"
