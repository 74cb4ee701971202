"""Current cycle phase from BBT patterns (physiology first, no calendar).

The phase is derived from the full history on every call; there is no stored
state machine.  Appending a sample or rolling over to a new day are the only
things that can change the answer between calls.

Priority order:

1. A detected ovulation decides the phase by days since the ovulation day:
   before → pre-ovulation, same day → ovulation, 1–14 days → luteal,
   later → pre-menstrual.
2. Without one, fewer than 6 samples is insufficient data.  Otherwise the
   latest reading is compared to the 7-reading average: more than 0.1°C below
   → pre-ovulation, more than 0.2°C above → post-ovulation, else transition.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime
from typing import NamedTuple

from luna.cycle.dates import whole_days_between
from luna.cycle.ovulation import detect_ovulation
from luna.cycle.period import predict_period_start
from luna.cycle.samples import Sample, mean_temperature, newest_first, oldest_first
from luna.cycle.trend import estimate_trend
from luna.models.cycle import OvulationEvent, Phase, PhaseAssessment

logger = logging.getLogger("luna.cycle.phase")

AVG_BBT_WINDOW = 7
MIN_PATTERN_SAMPLES = 6
LUTEAL_MAX_DAYS = 14
BELOW_AVG_C = 0.1
ABOVE_AVG_C = 0.2


class PhaseCopy(NamedTuple):
    name: str
    description: str
    tip: str


# Static per-phase text.  ``{days}``, ``{day_suffix}`` and ``{rise}`` are
# filled in from the assessment.
PHASE_COPY: dict[Phase, PhaseCopy] = {
    Phase.unknown: PhaseCopy(
        "Unknown",
        "Start tracking your BBT daily to understand your body's patterns.",
        "Take your temperature first thing in the morning for the most accurate readings.",
    ),
    Phase.insufficient_data: PhaseCopy(
        "Building Baseline",
        "Keep tracking daily. We need more readings to detect your body's patterns.",
        "Consistency is key. Take your temperature at the same time each morning.",
    ),
    Phase.pre_ovulation: PhaseCopy(
        "Pre-Ovulation",
        "Your body is preparing for ovulation. BBT is typically lower during this phase.",
        "Your temperature is in the lower range. This is a good time for planning "
        "and starting new projects.",
    ),
    Phase.transition: PhaseCopy(
        "Transition Phase",
        "Your temperature pattern suggests you may be approaching ovulation.",
        "Watch for a sustained temperature rise to confirm ovulation.",
    ),
    Phase.post_ovulation: PhaseCopy(
        "Post-Ovulation",
        "Your BBT is elevated, suggesting you may have ovulated recently.",
        "Elevated temperatures typically indicate the luteal phase. Energy may fluctuate.",
    ),
    Phase.ovulation: PhaseCopy(
        "Ovulation Detected",
        "Temperature rise detected! Your BBT increased by {rise}°C, indicating ovulation.",
        "Your body has released an egg. Energy and mood may be at their peak.",
    ),
    Phase.luteal: PhaseCopy(
        "Luteal Phase",
        "You're {days} day{day_suffix} past ovulation. BBT remains elevated.",
        "Your body is in the luteal phase. Progesterone is high, which can affect "
        "energy and mood.",
    ),
    Phase.pre_menstrual: PhaseCopy(
        "Pre-Menstrual",
        "It's been {days} days since ovulation. Your period may start soon.",
        "Your period is likely approaching. Listen to your body and prioritize rest.",
    ),
}

# Without a detected shift, a low reading reads as follicular.
_PATTERN_LOW_COPY = PhaseCopy(
    "Pre-Ovulation",
    "Your BBT is in the lower range, suggesting you're in the pre-ovulation phase.",
    "Lower temperatures are typical before ovulation. This is often a time of rising energy.",
)


def phase_from_days_since_ovulation(days: int) -> Phase:
    if days < 0:
        return Phase.pre_ovulation
    if days == 0:
        return Phase.ovulation
    if days <= LUTEAL_MAX_DAYS:
        return Phase.luteal
    return Phase.pre_menstrual


def phase_from_temperature(latest_temp: float, avg_bbt: float) -> Phase:
    if latest_temp < avg_bbt - BELOW_AVG_C:
        return Phase.pre_ovulation
    if latest_temp > avg_bbt + ABOVE_AVG_C:
        return Phase.post_ovulation
    return Phase.transition


def _render_copy(
    copy: PhaseCopy,
    days_since_ovulation: int | None,
    ovulation: OvulationEvent | None,
) -> PhaseCopy:
    return copy._replace(
        description=copy.description.format(
            days=days_since_ovulation,
            day_suffix="" if days_since_ovulation == 1 else "s",
            rise=ovulation.temperature_rise if ovulation else None,
        )
    )


def detect_current_phase(
    samples: Sequence[Sample],
    now: datetime,
) -> PhaseAssessment:
    """Assess the current cycle phase from a BBT history.

    Args:
        samples: BBT samples, nominally newest first.  A sorted copy is used,
                 so any order gives the same answer; the input is not modified.
        now:     Reference instant (wall clock or a simulated date).

    Returns:
        PhaseAssessment.  An empty history yields the ``unknown`` phase with
        placeholder text and no numeric fields.
    """
    if not samples:
        copy = PHASE_COPY[Phase.unknown]
        return PhaseAssessment(
            phase=Phase.unknown,
            phase_name=copy.name,
            description=copy.description,
            tip=copy.tip,
        )

    recent_first = newest_first(samples)
    latest = recent_first[0]

    ovulation = detect_ovulation(oldest_first(samples))
    trend = estimate_trend(recent_first)
    avg_bbt = mean_temperature(recent_first[:AVG_BBT_WINDOW])

    days_since_ovulation: int | None = None
    if ovulation is not None and ovulation.detected:
        days_since_ovulation = whole_days_between(ovulation.date, now)
        phase = phase_from_days_since_ovulation(days_since_ovulation)
        copy = PHASE_COPY[phase]
    elif len(recent_first) < MIN_PATTERN_SAMPLES:
        phase = Phase.insufficient_data
        copy = PHASE_COPY[phase]
    else:
        phase = phase_from_temperature(latest.temperature, avg_bbt)
        copy = _PATTERN_LOW_COPY if phase is Phase.pre_ovulation else PHASE_COPY[phase]

    copy = _render_copy(copy, days_since_ovulation, ovulation)

    logger.debug(
        "Phase %s from %d samples (latest %.2f°C, avg %.2f°C, trend %s)",
        phase.value, len(recent_first), latest.temperature, avg_bbt, trend.value,
    )

    return PhaseAssessment(
        phase=phase,
        phase_name=copy.name,
        description=copy.description,
        tip=copy.tip,
        temperature=latest.temperature,
        trend=trend,
        ovulation=ovulation,
        period_prediction=predict_period_start(ovulation, now),
        days_since_ovulation=days_since_ovulation,
        avg_bbt=avg_bbt,
    )
