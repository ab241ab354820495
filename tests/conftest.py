"""Shared test fixtures: saved contents pages and isolated settings."""

import os
from pathlib import Path

import pytest

from apk_file.settings import get_settings

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    """Ignore APK_FILE_* variables from the developer's environment."""
    for name in list(os.environ):
        if name.startswith("APK_FILE_"):
            monkeypatch.delenv(name)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def libssl_page():
    return (FIXTURES / "libssl.html").read_bytes()


@pytest.fixture
def empty_page():
    return (FIXTURES / "empty.html").read_bytes()
