"""Pytest configuration and fixtures.

Provides environment isolation, logging configuration and marker
registration. All fixtures here are autouse unless noted.
"""

from __future__ import annotations

import logging
import os

import pytest

# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    monkeypatch.setattr("tryresult.config.load_dotenv", lambda *_a, **_kw: False)


@pytest.fixture(autouse=True)
def isolate_tryresult_env(request, monkeypatch):
    """Clear TRYRESULT_* env vars so each test sees built-in defaults.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return
    for key in list(os.environ.keys()):
        if key.startswith("TRYRESULT_"):
            monkeypatch.delenv(key, raising=False)


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture
def debug_logs(caplog):
    """Capture tryresult DEBUG records. Not autouse."""
    caplog.set_level(logging.DEBUG, logger="tryresult")
    return caplog


# =============================================================================
# Pytest Hooks
# =============================================================================


def pytest_configure(config):
    """Configure custom markers for test organization."""
    markers = [
        "unit: Fast, isolated unit tests",
        "integration: Tests exercising the public API end to end",
        "allow_dotenv: Let python-dotenv read .env files",
        "allow_env_pollution: Keep TRYRESULT_* environment variables",
    ]
    for marker in markers:
        config.addinivalue_line("markers", marker)
