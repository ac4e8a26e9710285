"""Pytest configuration and shared fixtures."""

import pytest
from django.core.management import call_command
from rest_framework.test import APIClient

from factories import RecordingNavigator, make_event


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def navigator() -> RecordingNavigator:
    return RecordingNavigator()


@pytest.fixture
def scenario_events():
    """June: 2 spots left. May: full. July: zero spots of five."""
    return [
        make_event("june", date="2024-06-01", price="40", max_participants=12, current_participants=10),
        make_event("may", date="2024-05-01", price="80", max_participants=12, current_participants=12),
        make_event("july", date="2024-07-01", price="60", max_participants=5, current_participants=5),
    ]


@pytest.fixture
def seeded_catalog(db) -> None:
    call_command("loaddata", "culinary_events", verbosity=0)


@pytest.fixture
def fast_booking(settings):
    settings.CULINARY = {**settings.CULINARY, "CONFIRMATION_DELAY": 0}
    return settings
