"""
TASKFLOW - Startup Security Check Tests
"""

import warnings

import pytest

from taskflow.config import settings
from taskflow.security import validate_security_config


def test_development_defaults_are_quiet(monkeypatch):
    monkeypatch.setattr(settings, "ENVIRONMENT", "development")
    monkeypatch.setattr(settings, "COOKIE_SECURE", False)
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        validate_security_config()


def test_production_without_secure_cookie_warns(monkeypatch):
    monkeypatch.setattr(settings, "ENVIRONMENT", "production")
    monkeypatch.setattr(settings, "COOKIE_SECURE", False)
    monkeypatch.setattr(settings, "PASSWORD_MEMORY_COST", 65536)
    with pytest.warns(UserWarning, match="Secure"):
        validate_security_config()


def test_production_with_low_memory_cost_warns(monkeypatch):
    monkeypatch.setattr(settings, "ENVIRONMENT", "production")
    monkeypatch.setattr(settings, "COOKIE_SECURE", True)
    monkeypatch.setattr(settings, "PASSWORD_MEMORY_COST", 1024)
    with pytest.warns(UserWarning, match="PASSWORD_MEMORY_COST"):
        validate_security_config()


def test_samesite_none_requires_secure(monkeypatch):
    monkeypatch.setattr(settings, "COOKIE_SAMESITE", "none")
    monkeypatch.setattr(settings, "COOKIE_SECURE", False)
    with pytest.warns(UserWarning, match="COOKIE_SAMESITE"):
        validate_security_config()
