"""Unit tests for ponyurl.settings module."""

import pytest

from ponyurl import settings
from ponyurl.errors import InvalidSetting
from ponyurl.settings import (
    DEFAULT_SETTINGS,
    get_settings,
    settings_from_env,
    settings_from_file,
    update_settings,
)

ENV_NAMES = ("PONYURL_ENCODING", "PONYURL_ERRORS", "PONYURL_SORT_COLLATION")


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)


class TestFromEnv:
    """Tests for settings_from_env()."""

    def test_defaults(self, clean_env):
        """Test the defaults apply without environment variables."""
        assert settings_from_env() == DEFAULT_SETTINGS

    def test_override(self, clean_env, monkeypatch):
        """Test prefixed variables override the defaults."""
        monkeypatch.setenv("PONYURL_SORT_COLLATION", "locale")
        monkeypatch.setenv("PONYURL_ENCODING", "latin-1")
        loaded = settings_from_env()
        assert loaded["sort_collation"] == "locale"
        assert loaded["encoding"] == "latin-1"
        assert loaded["errors"] == "replace"

    def test_invalid_value(self, clean_env, monkeypatch):
        """Test invalid values raise InvalidSetting."""
        monkeypatch.setenv("PONYURL_SORT_COLLATION", "random")
        with pytest.raises(InvalidSetting):
            settings_from_env()

    def test_get_settings_reads_env_once(self, clean_env, monkeypatch):
        """Test get_settings() loads the environment lazily."""
        monkeypatch.setattr(settings, "_loaded", False)
        monkeypatch.setenv("PONYURL_ERRORS", "strict")
        assert get_settings()["errors"] == "strict"

        monkeypatch.setenv("PONYURL_ERRORS", "ignore")
        assert get_settings()["errors"] == "strict"


class TestFromFile:
    """Tests for settings_from_file()."""

    def test_module(self, tmp_path, monkeypatch):
        """Test module-level names are read."""
        (tmp_path / "ponyurl_test_settings.py").write_text("encoding = 'latin-1'\n")
        monkeypatch.syspath_prepend(str(tmp_path))

        loaded = settings_from_file("ponyurl_test_settings")
        assert loaded["encoding"] == "latin-1"
        assert loaded["sort_collation"] == "codepoint"


class TestUpdate:
    """Tests for update_settings()."""

    def test_update(self):
        """Test updates are visible through get_settings()."""
        update_settings(sort_collation="locale")
        assert get_settings()["sort_collation"] == "locale"
        assert get_settings()["encoding"] == "utf-8"

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"unknown": "x"},
            {"encoding": "not-a-codec"},
            {"errors": "not-a-handler"},
            {"sort_collation": "reverse"},
        ],
    )
    def test_invalid(self, kwargs):
        """Test invalid settings are rejected and nothing changes."""
        with pytest.raises(InvalidSetting):
            update_settings(**kwargs)
        assert get_settings() == DEFAULT_SETTINGS
