"""Next-period prediction from a detected ovulation.

The luteal phase is treated as a fixed 12–14 days, independent of cycle
history.  The window is anchored on the ovulation timestamp and compared to
local midnight of ``now``.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta

from luna.cycle.dates import days_until, start_of_day, to_zone
from luna.models.cycle import OvulationEvent, PeriodPrediction

logger = logging.getLogger("luna.cycle.period")

EARLIEST_LUTEAL_DAYS = 12
MOST_LIKELY_LUTEAL_DAYS = 13
LATEST_LUTEAL_DAYS = 14


def predict_period_start(
    event: OvulationEvent | None,
    now: datetime,
) -> PeriodPrediction | None:
    """Predict the window in which the next period should start.

    Args:
        event: Detected ovulation, or None.
        now:   Reference instant.  Only its local day matters.

    Returns:
        PeriodPrediction, or None when no ovulation was detected.
    """
    if event is None or not event.detected:
        return None

    today = start_of_day(now)
    ovulation = to_zone(event.date, today.tzinfo)

    window_start = ovulation + timedelta(days=EARLIEST_LUTEAL_DAYS)
    most_likely = ovulation + timedelta(days=MOST_LIKELY_LUTEAL_DAYS)
    window_end = ovulation + timedelta(days=LATEST_LUTEAL_DAYS)

    logger.debug(
        "Period window %s → %s (today %s)",
        window_start.date(), window_end.date(), today.date(),
    )

    return PeriodPrediction(
        window_start=window_start.date(),
        window_end=window_end.date(),
        most_likely=most_likely.date(),
        days_until_earliest=days_until(window_start, today),
        days_until_latest=days_until(window_end, today),
        days_until_most_likely=days_until(most_likely, today),
        confidence=event.confidence,
        is_in_window=window_start <= today <= window_end,
    )
