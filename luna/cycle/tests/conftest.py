"""Shared fixtures and history builders for cycle engine tests."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date, datetime, time, timedelta, timezone

import pytest

from luna.cycle.samples import Sample

# Canonical reference instant: mid-morning UTC on TEST_DATE
TEST_DATE = date(2026, 3, 1)
TEST_NOW = datetime(2026, 3, 1, 9, 30, tzinfo=timezone.utc)
READING_TIME = time(7, 0)

BASELINE_C = 36.30
ELEVATED_C = 36.75  # +0.45°C → medium confidence


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------


def reading_at(day: date, tz=timezone.utc) -> datetime:
    return datetime.combine(day, READING_TIME, tzinfo=tz)


def make_sample(day: date, temp_c: float) -> Sample:
    return Sample(temperature=temp_c, timestamp=reading_at(day))


def build_history(temps: Sequence[float], last_day: date = TEST_DATE) -> list[Sample]:
    """One 07:00 UTC reading per day, oldest first, ending on ``last_day``."""
    first_day = last_day - timedelta(days=len(temps) - 1)
    return [make_sample(first_day + timedelta(days=i), t) for i, t in enumerate(temps)]


def build_shift_history(
    rise_day: date,
    rise_days: int,
    baseline_days: int = 6,
    baseline_c: float = BASELINE_C,
    elevated_c: float = ELEVATED_C,
) -> list[Sample]:
    """Flat baseline followed by a sustained elevation starting on ``rise_day``."""
    temps = [baseline_c] * baseline_days + [elevated_c] * rise_days
    last_day = rise_day + timedelta(days=rise_days - 1)
    return build_history(temps, last_day=last_day)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def now() -> datetime:
    return TEST_NOW


@pytest.fixture
def scenario_a() -> list[Sample]:
    """6 days at 36.30–36.40°C followed by 3 days at 36.70–36.80°C."""
    return build_history(
        [36.30, 36.35, 36.40, 36.30, 36.35, 36.40, 36.75, 36.78, 36.80]
    )


@pytest.fixture
def flat_history() -> list[Sample]:
    """8 flat readings at 36.40°C."""
    return build_history([36.40] * 8)
