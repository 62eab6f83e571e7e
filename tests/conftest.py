from __future__ import annotations

from datetime import date, timedelta

import pytest

from metrics import HealthReading


def _reading(day: date, **overrides) -> HealthReading:
    values = {
        "steps": 8000,
        "heart_rate": 70,
        "oxygen_level": 98,
        "hydration": 2500,
        "sleep_hours": 8.0,
    }
    values.update(overrides)
    return HealthReading(date=day, **values)


@pytest.fixture
def make_reading():
    """Factory for a single reading; keyword arguments override the defaults."""

    def factory(day: date = date(2025, 3, 30), **overrides) -> HealthReading:
        return _reading(day, **overrides)

    return factory


@pytest.fixture
def make_series():
    """Factory for a most-recent-first series from a list of per-day overrides."""

    def factory(rows, start: date = date(2025, 3, 30)):
        return [_reading(start - timedelta(days=i), **row) for i, row in enumerate(rows)]

    return factory
