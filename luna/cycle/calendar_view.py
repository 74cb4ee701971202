"""Month calendar with a phase marker for every day that has a reading.

Historical days are bucketed with the same rules the phase classifier uses,
applied retrospectively: relative to the detected ovulation day when there is
one, otherwise relative to the mean of the whole history.
"""

from __future__ import annotations

import calendar
import logging
from collections.abc import Sequence
from datetime import date, datetime, tzinfo

from luna.cycle.dates import local_date
from luna.cycle.ovulation import detect_ovulation
from luna.cycle.phase import ABOVE_AVG_C, BELOW_AVG_C, LUTEAL_MAX_DAYS, detect_current_phase
from luna.cycle.samples import Sample, mean_temperature, newest_first
from luna.models.cycle import CalendarDay, MonthCalendar, OvulationEvent, Phase

logger = logging.getLogger("luna.cycle.calendar_view")

FOLLICULAR_COLOR = "#93a7d1"
LUTEAL_COLOR = "#9d7089"
MENSTRUAL_COLOR = "#c14a4a"

PHASE_COLORS: dict[Phase, str] = {
    Phase.pre_ovulation: FOLLICULAR_COLOR,
    Phase.ovulation: FOLLICULAR_COLOR,
    Phase.luteal: LUTEAL_COLOR,
    Phase.pre_menstrual: MENSTRUAL_COLOR,
}


def latest_reading_per_day(
    samples: Sequence[Sample],
    tz: tzinfo | None = None,
) -> dict[date, Sample]:
    """Index samples by local date, keeping the newest reading of each day."""
    by_day: dict[date, Sample] = {}
    for sample in newest_first(samples):
        by_day.setdefault(local_date(sample.timestamp, tz), sample)
    return by_day


def classify_day(
    day: date,
    temperature: float,
    ovulation_day: date | None,
    history_avg: float | None,
) -> Phase | None:
    """Phase of a single historical day with a reading.

    Args:
        day:           The calendar day.
        temperature:   That day's reading in °C.
        ovulation_day: Local date of the detected ovulation, if any.
        history_avg:   Mean of all readings, used when nothing was detected.

    Returns:
        The phase, or None when the reading sits in the indeterminate band.
    """
    if ovulation_day is not None:
        days_since = (day - ovulation_day).days
        if days_since == 0:
            return Phase.ovulation
        if days_since < 0:
            return Phase.pre_ovulation
        if days_since <= LUTEAL_MAX_DAYS:
            return Phase.luteal
        return Phase.pre_menstrual

    if history_avg is None:
        return None
    if temperature < history_avg - BELOW_AVG_C:
        return Phase.pre_ovulation
    if temperature > history_avg + ABOVE_AVG_C:
        return Phase.luteal
    return None


def build_month_calendar(
    samples: Sequence[Sample],
    year: int,
    month: int,
    now: datetime,
) -> MonthCalendar:
    """Build the phase-coloured calendar for one month.

    Args:
        samples: Full BBT history (any order).
        year:    Calendar year.
        month:   Calendar month, 1–12.
        now:     Reference instant; its timezone defines the local day.

    Returns:
        MonthCalendar with one entry per day of the month.

    Raises:
        ValueError: If ``month`` is outside 1–12.
    """
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")

    tz = now.tzinfo
    ovulation: OvulationEvent | None = detect_ovulation(samples)
    current = detect_current_phase(samples, now)

    ovulation_day = local_date(ovulation.date, tz) if ovulation and ovulation.detected else None
    history_avg = mean_temperature(samples) if samples else None
    readings = latest_reading_per_day(samples, tz)

    days_in_month = calendar.monthrange(year, month)[1]
    days: list[CalendarDay] = []
    for day_num in range(1, days_in_month + 1):
        day = date(year, month, day_num)
        reading = readings.get(day)

        phase = None
        if reading is not None:
            phase = classify_day(day, reading.temperature, ovulation_day, history_avg)

        days.append(
            CalendarDay(
                day=day_num,
                date=day,
                phase=phase,
                phase_color=PHASE_COLORS.get(phase) if phase else None,
                has_reading=reading is not None,
                temperature=reading.temperature if reading else None,
                is_ovulation_day=reading is not None and day == ovulation_day,
            )
        )

    logger.debug(
        "Calendar %04d-%02d: %d/%d days with readings",
        year, month, sum(d.has_reading for d in days), days_in_month,
    )

    return MonthCalendar(
        year=year,
        month=month,
        days_in_month=days_in_month,
        calendar_data=days,
        ovulation=ovulation,
        current_phase=current.phase,
    )
