"""Pytest configuration for all tests."""

import os
from typing import Generator

import pytest
import structlog

from passguard.core.config import get_settings
from passguard.domain.services import AllowedCharacterRule


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Run every test against default settings.

    Removes PASSGUARD_* variables from the environment and clears the
    cached settings before and after the test.
    """
    for key in list(os.environ):
        if key.startswith("PASSGUARD_"):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()


@pytest.fixture
def abc_rule() -> AllowedCharacterRule:
    """Rule allowing only 'a', 'b' and 'c' with default options."""
    return AllowedCharacterRule("abc")
