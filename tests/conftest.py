import pytest

from connect_errors.config import Settings, settings


@pytest.fixture
def lib_settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    """Module-level settings, with any attribute changes undone after the test."""
    for field in Settings.model_fields:
        monkeypatch.setattr(settings, field, getattr(settings, field))
    return settings
