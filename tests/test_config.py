"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from core.config import APP_KIND, GateSettings


def test_defaults(settings):
    assert settings.parallel_checks is False
    assert settings.max_workers == 6
    assert settings.log_level == "WARNING"
    assert settings.app_kind == APP_KIND


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("APPCR_GATE_PARALLEL_CHECKS", "true")
    monkeypatch.setenv("APPCR_GATE_MAX_WORKERS", "2")
    monkeypatch.setenv("APPCR_GATE_LOG_LEVEL", "debug")
    settings = GateSettings(_env_file=None)
    assert settings.parallel_checks is True
    assert settings.max_workers == 2
    assert settings.log_level == "DEBUG"


def test_rejects_bad_values():
    with pytest.raises(ValidationError):
        GateSettings(_env_file=None, max_workers=0)
    with pytest.raises(ValidationError):
        GateSettings(_env_file=None, log_level="chatty")
