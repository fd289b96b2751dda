"""Tests for settings and logging setup."""

from __future__ import annotations

import logging

from vectorcompose import logging_config
from vectorcompose.config import Settings
from vectorcompose.geometry.vectors import Vector


def test_defaults():
    s = Settings()
    assert s.vectorcompose_tolerance == 1e-9
    assert s.vectorcompose_env == "development"


def test_env_override(monkeypatch):
    monkeypatch.setenv("VECTORCOMPOSE_TOLERANCE", "0.5")
    monkeypatch.setenv("VECTORCOMPOSE_LOG_LEVEL", "warning")
    s = Settings()
    assert s.vectorcompose_tolerance == 0.5
    assert s.vectorcompose_log_level == "warning"


def test_isclose_uses_configured_tolerance(monkeypatch):
    monkeypatch.setattr("vectorcompose.geometry.vectors.settings", Settings(vectorcompose_tolerance=0.5))
    assert Vector(1, 1).isclose(Vector(1.2, 0.9))


def test_configure_logging(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
    logging_config.configure_logging("debug")
    assert calls[0]["level"] == logging.DEBUG
    assert calls[0]["format"] == logging_config.LOG_FORMAT


def test_configure_logging_falls_back_on_unknown_level(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
    logging_config.configure_logging("chatty")
    assert calls[0]["level"] == logging.INFO
