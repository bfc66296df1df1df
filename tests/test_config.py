"""Tests for environment-driven settings."""

import logging

from graphprep.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("GRAPHPREP_LOG_LEVEL", raising=False)
    monkeypatch.delenv("GRAPHPREP_API_PORT", raising=False)
    settings = Settings(_env_file=None)

    assert settings.log_level_value == logging.WARNING
    assert settings.api_port == 8765


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("GRAPHPREP_LOG_LEVEL", "debug")
    monkeypatch.setenv("GRAPHPREP_API_PORT", "9000")
    settings = Settings(_env_file=None)

    assert settings.log_level_value == logging.DEBUG
    assert settings.api_port == 9000


def test_unknown_log_level_falls_back(monkeypatch):
    monkeypatch.setenv("GRAPHPREP_LOG_LEVEL", "chatty")
    assert Settings(_env_file=None).log_level_value == logging.WARNING


def test_json_indent_from_env(monkeypatch):
    monkeypatch.setenv("GRAPHPREP_JSON_INDENT", "0")
    assert Settings(_env_file=None).json_indent == 0
