"""Pytest configuration and fixtures."""

from datetime import datetime, timezone

import pytest

from config.settings_pydantic import settings


@pytest.fixture(autouse=True)
def no_offset_override(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ignore any UTC offset override set in the environment."""
    monkeypatch.setattr(settings, "utc_offset_minutes", None)


@pytest.fixture
def friday() -> datetime:
    """Friday 26 June 2020, midday UTC."""
    return datetime(2020, 6, 26, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def tuesday() -> datetime:
    """Tuesday 30 June 2020, midday UTC."""
    return datetime(2020, 6, 30, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def naive_morning() -> datetime:
    """Naive local datetime with seconds and milliseconds set."""
    return datetime(2020, 6, 26, 8, 15, 42, 123000)
