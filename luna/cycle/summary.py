"""Today's dashboard summary: today's reading plus the current phase assessment."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from luna.cycle.calendar_view import latest_reading_per_day
from luna.cycle.dates import local_date
from luna.cycle.phase import detect_current_phase
from luna.cycle.samples import Sample
from luna.models.cycle import TodaySummary


def build_today_summary(samples: Sequence[Sample], now: datetime) -> TodaySummary:
    """Summarise the current day for the home screen.

    Args:
        samples: Full BBT history (any order).
        now:     Reference instant (wall clock or simulated date).

    Returns:
        TodaySummary.  ``temperature`` is the newest reading taken on the local
        date of ``now``, or None when today has no reading yet.
    """
    today = local_date(now)
    todays_reading = latest_reading_per_day(samples, now.tzinfo).get(today)
    assessment = detect_current_phase(samples, now)

    return TodaySummary(
        date=today,
        temperature=todays_reading.temperature if todays_reading else None,
        has_reading=todays_reading is not None,
        phase=assessment.phase,
        phase_name=assessment.phase_name,
        description=assessment.description,
        tip=assessment.tip,
        trend=assessment.trend,
        avg_bbt=round(assessment.avg_bbt, 2) if assessment.avg_bbt is not None else None,
        ovulation=assessment.ovulation,
        period_prediction=assessment.period_prediction,
        days_since_ovulation=assessment.days_since_ovulation,
        readings_count=len(samples),
    )
