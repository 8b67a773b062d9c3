"""Pytest configuration and fixtures.

Provides environment isolation and config reset. All fixtures here are
autouse unless noted.
"""

from __future__ import annotations

from contextlib import suppress
import logging
import os

import pytest

from resultant.config import reset_config

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
    with suppress(Exception):
        monkeypatch.setattr(
            "dotenv.load_dotenv", lambda *_args, **_kwargs: False, raising=False
        )


@pytest.fixture(autouse=True)
def isolate_resultant_env(request, monkeypatch):
    """Ensure a clean RESULTANT_* environment for each test.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return

    for key in list(os.environ.keys()):
        if key.startswith("RESULTANT_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def fresh_config():
    """Drop the cached process-wide config before and after each test."""
    reset_config()
    yield
    reset_config()


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture
def panic_log(caplog):
    """Capture records from the panic logger at DEBUG and above."""
    caplog.set_level(logging.DEBUG, logger="resultant.panic")
    return caplog
