"""Pytest fixtures and configuration for voicetask tests."""

import pytest
from datetime import datetime, timezone


@pytest.fixture
def wednesday_now():
    """Reference instant on a Wednesday (2026-01-28 10:30:15, naive local time)."""
    return datetime(2026, 1, 28, 10, 30, 15)


@pytest.fixture
def month_end_now():
    """Reference instant on the last day of a 31-day month."""
    return datetime(2026, 1, 31, 8, 0, 0)


@pytest.fixture
def utc_now():
    """Timezone-aware reference instant (also a Wednesday)."""
    return datetime(2026, 1, 28, 10, 30, 15, tzinfo=timezone.utc)


@pytest.fixture
def fixed_clock(monkeypatch, wednesday_now):
    """Make the parser's default clock return the Wednesday reference instant."""
    monkeypatch.setattr("voicetask.parsing.voice_parser.current_time", lambda: wednesday_now)
    return wednesday_now
