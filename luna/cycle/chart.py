"""BBT chart series over the last N calendar days.

The series is a true time series: one point per local calendar date ending
today, not one per stored record.  Days without a reading keep their slot
with ``temp=None`` so gaps stay visible.
"""

from __future__ import annotations

import logging
import statistics
from collections.abc import Sequence
from datetime import datetime, timedelta

from luna.cycle.calendar_view import latest_reading_per_day
from luna.cycle.dates import local_date
from luna.cycle.ovulation import detect_ovulation
from luna.cycle.samples import Sample
from luna.models.cycle import ChartPoint, ChartSeries, ChartWindow, OvulationMarker

logger = logging.getLogger("luna.cycle.chart")

DEFAULT_WINDOW_DAYS = 28


def build_chart_series(
    samples: Sequence[Sample],
    now: datetime,
    window_days: int = DEFAULT_WINDOW_DAYS,
) -> ChartSeries:
    """Build the chart payload for the last ``window_days`` local dates.

    Args:
        samples:     Full BBT history (any order).
        now:         Reference instant; the window ends on its local date.
        window_days: Number of calendar days in the window.

    Returns:
        ChartSeries, oldest date first.

    Raises:
        ValueError: If ``window_days`` is not positive.
    """
    if window_days < 1:
        raise ValueError(f"window_days must be positive, got {window_days}")

    tz = now.tzinfo
    today = local_date(now)
    window_dates = [today - timedelta(days=offset) for offset in range(window_days - 1, -1, -1)]

    ovulation = detect_ovulation(samples)
    ovulation_day = local_date(ovulation.date, tz) if ovulation and ovulation.detected else None
    readings = latest_reading_per_day(samples, tz)

    points: list[ChartPoint] = []
    for idx, day in enumerate(window_dates, start=1):
        reading = readings.get(day)
        points.append(
            ChartPoint(
                index=idx,
                date=day,
                temp=reading.temperature if reading else None,
                has_reading=reading is not None,
                timestamp=reading.timestamp if reading else None,
                is_ovulation_day=ovulation_day is not None and day == ovulation_day,
            )
        )

    temps = [p.temp for p in points if p.temp is not None]
    avg_temp = round(statistics.mean(temps), 2) if temps else None

    markers: list[OvulationMarker] = []
    if ovulation is not None and ovulation_day is not None:
        for point in points:
            if point.is_ovulation_day:
                markers.append(
                    OvulationMarker(
                        date=point.date,
                        index=point.index,
                        temperature=ovulation.post_ovulation_temp,
                        confidence=ovulation.confidence,
                    )
                )
                break

    logger.debug(
        "Chart window %s → %s: %d readings, %d markers",
        window_dates[0], window_dates[-1], len(temps), len(markers),
    )

    return ChartSeries(
        temperature_data=points,
        avg_temp=avg_temp,
        ovulation_markers=markers,
        ovulation=ovulation,
        total_readings=len(samples),
        window=ChartWindow(days=window_days, start=window_dates[0], end=window_dates[-1]),
    )
