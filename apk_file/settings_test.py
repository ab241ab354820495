"""Unit tests for settings module."""

import pytest

from .settings import CONTENTS_SEARCH_URL, Settings, get_settings


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def describe_settings():

    def it_has_defaults(monkeypatch):
        for name in ("BRANCH", "REPO", "ARCH", "TIMEOUT", "CONTENTS_URL"):
            monkeypatch.delenv(f"APK_FILE_{name}", raising=False)
        s = Settings(_env_file=None)
        assert s.contents_url == CONTENTS_SEARCH_URL
        assert (s.branch, s.repo, s.arch) == ("v3.8", "main", "x86_64")
        assert s.timeout == 30.0

    def it_reads_prefixed_environment(monkeypatch):
        monkeypatch.setenv("APK_FILE_BRANCH", "edge")
        monkeypatch.setenv("APK_FILE_TIMEOUT", "2.5")
        s = get_settings()
        assert s.branch == "edge"
        assert s.timeout == 2.5

    def it_caches_instance():
        assert get_settings() is get_settings()

    def it_disables_timeout_with_none(monkeypatch):
        monkeypatch.setenv("APK_FILE_TIMEOUT", "none")
        assert Settings(_env_file=None).timeout is None
