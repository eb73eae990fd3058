import pytest

from ponyurl import settings
from ponyurl.settings import DEFAULT_SETTINGS, Settings


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    """Run every test with the default settings, ignoring the environment."""
    monkeypatch.setattr(settings, "_current", Settings(**DEFAULT_SETTINGS))
    monkeypatch.setattr(settings, "_loaded", True)
