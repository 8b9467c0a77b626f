# backend/tests/conftest.py

import datetime
import pytest

from prayertimer import create_app
from prayertimer.services.prayer_timer import CalendarContext, PrayerDay

UTC = datetime.timezone.utc

# Monday 2025-08-11 and Friday 2025-08-15 share the same timings.
DAY_TIMINGS = {
    'Fajr': '04:30',
    'Sunrise': '06:00',
    'Dhuhr': '12:30',
    'Asr': '15:45',
    'Maghrib': '18:30',
    'Isha': '20:00'
}

@pytest.fixture(scope='session')
def app():
    """Session-wide application for testing."""
    app = create_app('testing')
    return app

@pytest.fixture(scope='function')
def test_client(app):
    """A test client for the app."""
    return app.test_client()

@pytest.fixture
def calendar():
    return CalendarContext(UTC)

@pytest.fixture
def monday(calendar):
    """A full PrayerDay for Monday 2025-08-11, with yesterday's Isha and tomorrow's early adhans."""
    return PrayerDay.from_timings(
        datetime.date(2025, 8, 11), DAY_TIMINGS, calendar,
        yesterday=DAY_TIMINGS, tomorrow=DAY_TIMINGS
    )

@pytest.fixture
def friday(calendar):
    """A full PrayerDay for Friday 2025-08-15."""
    return PrayerDay.from_timings(
        datetime.date(2025, 8, 15), DAY_TIMINGS, calendar,
        yesterday=DAY_TIMINGS, tomorrow=DAY_TIMINGS
    )
