"""Shared fixtures for the session tagger tests."""

from datetime import datetime, timezone

import pytest

from helicone_session.services.session_tracker import SessionTracker

FIXED_NOW = datetime(2026, 10, 16, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture
def tracker(fixed_clock):
    """A fresh tracker that has not observed any session."""
    return SessionTracker(fallback_prefix="Session", clock=fixed_clock)
