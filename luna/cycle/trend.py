"""Short-term BBT trend: compares the last three readings to the three before."""

from __future__ import annotations

from collections.abc import Sequence

from luna.cycle.samples import Sample, mean_temperature
from luna.models.cycle import Trend

TREND_WINDOW = 3
TREND_THRESHOLD_C = 0.2


def estimate_trend(samples_newest_first: Sequence[Sample]) -> Trend:
    """Classify the instantaneous direction of temperature movement.

    Args:
        samples_newest_first: BBT samples ordered newest to oldest.  The order
                              is taken as given.

    Returns:
        ``Trend.rising`` / ``Trend.falling`` when the recent window moved at
        least 0.2°C against the older one, else ``Trend.stable`` (also when
        fewer than 6 samples are available).
    """
    if len(samples_newest_first) < 2 * TREND_WINDOW:
        return Trend.stable

    avg_recent = mean_temperature(samples_newest_first[:TREND_WINDOW])
    avg_older = mean_temperature(samples_newest_first[TREND_WINDOW:2 * TREND_WINDOW])

    if avg_recent - avg_older >= TREND_THRESHOLD_C:
        return Trend.rising
    if avg_older - avg_recent >= TREND_THRESHOLD_C:
        return Trend.falling
    return Trend.stable
