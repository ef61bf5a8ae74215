"""Tests for settings loading."""

from __future__ import annotations

from promptcount.config import Settings, get_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("DEFAULT_MODEL", raising=False)
    monkeypatch.delenv("COUNT_TOOL_DEFINITIONS", raising=False)
    settings = Settings(_env_file=None)
    assert settings.default_model == "gpt-3.5-turbo"
    assert settings.count_tool_definitions is False


def test_env_override(monkeypatch):
    monkeypatch.setenv("DEFAULT_MODEL", "gpt-4")
    monkeypatch.setenv("COUNT_TOOL_DEFINITIONS", "1")
    settings = Settings(_env_file=None)
    assert settings.default_model == "gpt-4"
    assert settings.count_tool_definitions is True


def test_get_settings_is_cached():
    get_settings.cache_clear()
    try:
        assert get_settings() is get_settings()
    finally:
        get_settings.cache_clear()
