"""Temperature-based ovulation detection for Luna.

Detects the biphasic BBT shift with the "3-over-6" rule:

1. Sort the history oldest-first and keep the most recent 30 samples.
2. Slide a candidate index forward.  The 6 samples before it form the
   baseline window, the 3 samples starting at it form the rise window.
3. A shift is confirmed when the rise window averages at least 0.3°C above
   the baseline average and every rise sample is at least 0.1°C above it.
4. The first candidate that qualifies wins; the scan does not look for the
   strongest rise.  The first day of the rise window is the ovulation date.

Confidence tiers follow the size of the average rise:
≥ 0.5°C high, ≥ 0.4°C medium, otherwise low.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from luna.cycle.samples import Sample, mean_temperature, oldest_first
from luna.models.cycle import Confidence, OvulationEvent

logger = logging.getLogger("luna.cycle.ovulation")

BASELINE_DAYS = 6
RISE_DAYS = 3
MIN_SAMPLES = BASELINE_DAYS + RISE_DAYS
SEARCH_WINDOW = 30  # older history is ignored

MIN_AVG_RISE_C = 0.3
MIN_DAY_ABOVE_BASELINE_C = 0.1
MEDIUM_RISE_C = 0.4
HIGH_RISE_C = 0.5


def confidence_for_rise(avg_rise: float) -> Confidence:
    """Map an average temperature rise (°C) to a confidence tier."""
    if avg_rise >= HIGH_RISE_C:
        return Confidence.high
    if avg_rise >= MEDIUM_RISE_C:
        return Confidence.medium
    return Confidence.low


def detect_ovulation(samples: Sequence[Sample]) -> OvulationEvent | None:
    """Find the first sustained temperature rise in a BBT history.

    Args:
        samples: BBT samples in any order.  The sequence is not modified.

    Returns:
        The detected OvulationEvent, or None when there are fewer than 9
        samples or no window satisfies the 3-over-6 rule.
    """
    if len(samples) < MIN_SAMPLES:
        return None

    recent = oldest_first(samples)[-SEARCH_WINDOW:]

    for i in range(BASELINE_DAYS, len(recent) - RISE_DAYS + 1):
        baseline = recent[i - BASELINE_DAYS:i]
        rise = recent[i:i + RISE_DAYS]

        baseline_avg = mean_temperature(baseline)
        rise_avg = mean_temperature(rise)
        avg_rise = rise_avg - baseline_avg

        all_above_baseline = all(
            s.temperature >= baseline_avg + MIN_DAY_ABOVE_BASELINE_C for s in rise
        )
        if avg_rise < MIN_AVG_RISE_C or not all_above_baseline:
            continue

        event = OvulationEvent(
            detected=True,
            date=rise[0].timestamp,
            confidence=confidence_for_rise(avg_rise),
            temperature_rise=round(avg_rise, 2),
            baseline_temp=round(baseline_avg, 2),
            post_ovulation_temp=round(rise_avg, 2),
        )
        logger.info(
            "Ovulation detected: %s (+%.2f°C over %.2f°C baseline, confidence=%s)",
            event.date.isoformat(),
            avg_rise,
            baseline_avg,
            event.confidence.value,
        )
        return event

    logger.debug("No 3-over-6 shift in the last %d samples", len(recent))
    return None
