"""Luna cycle engine: demo entry point.

Builds a synthetic 28-day BBT history ending on the configured "today" and
prints the dashboard payloads as JSON.

Run locally:
    python -m luna.main
    SIMULATION_ENABLED=true SIMULATION_DATE=2026-03-01 python -m luna.main
"""

from __future__ import annotations

import json
import logging
import random
import sys
from datetime import datetime, time, timedelta

from luna.clock import current_time
from luna.config import get_settings
from luna.cycle.calendar_view import build_month_calendar
from luna.cycle.chart import build_chart_series
from luna.cycle.phase import detect_current_phase
from luna.cycle.samples import Sample
from luna.cycle.summary import build_today_summary
from luna.cycle.tips import build_tips

logger = logging.getLogger("luna")

BASELINE_TEMP_C = 36.35
POST_OVULATION_TEMP_C = 36.75
READING_TIME = time(7, 0)


# ---------- Demo data ----------

def _demo_temperature(cycle_day: int, rng: random.Random) -> float:
    if cycle_day <= 5:
        # menstruation
        temp = BASELINE_TEMP_C + rng.uniform(-0.05, 0.05)
    elif cycle_day <= 13:
        # follicular
        temp = BASELINE_TEMP_C + 0.05 + rng.uniform(-0.05, 0.05)
    elif cycle_day == 14:
        # pre-ovulatory dip
        temp = BASELINE_TEMP_C - 0.1 + rng.uniform(0.0, 0.05)
    elif cycle_day == 15:
        temp = POST_OVULATION_TEMP_C + 0.15 + rng.uniform(0.0, 0.1)
    elif cycle_day <= 25:
        # luteal plateau
        temp = POST_OVULATION_TEMP_C + rng.uniform(-0.05, 0.1)
    else:
        temp = POST_OVULATION_TEMP_C - 0.1 + rng.uniform(-0.05, 0.05)
    return round(temp, 2)


def build_demo_history(
    now: datetime,
    days: int = 28,
    seed: int | None = None,
) -> list[Sample]:
    """Generate one synthetic cycle of morning readings ending on ``now``'s day.

    Args:
        now:  Reference instant; the last reading falls on its local date.
        days: Number of daily readings (cycle day 1 is the oldest).
        seed: Seed for reproducible output.

    Returns:
        Samples ordered oldest first, taken at 07:00 local time.
    """
    rng = random.Random(seed)
    today = now.date()
    samples = []
    for offset in range(days - 1, -1, -1):
        day = today - timedelta(days=offset)
        samples.append(
            Sample(
                temperature=_demo_temperature(days - offset, rng),
                timestamp=datetime.combine(day, READING_TIME, tzinfo=now.tzinfo),
            )
        )
    return samples


# ---------- Dashboard ----------

def build_dashboard(history: list[Sample], now: datetime, chart_window_days: int = 28) -> dict:
    """Assemble every dashboard payload for ``now`` as JSON-ready dicts."""
    summary = build_today_summary(history, now)
    assessment = detect_current_phase(history, now)
    return {
        "today": summary.to_json_dict(),
        "chart": build_chart_series(history, now, window_days=chart_window_days).to_json_dict(),
        "calendar": build_month_calendar(history, now.year, now.month, now).to_json_dict(),
        "tips": build_tips(assessment).to_json_dict(),
    }


# ---------- Entry point ----------

def main() -> None:
    settings = get_settings()

    logging.basicConfig(
        level=logging.DEBUG if settings.debug else settings.log_level,
        format="%(asctime)s %(levelname)-8s %(name)s — %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    now = current_time(settings)
    logger.info(
        "Starting %s v%s [%s] as of %s",
        settings.app_name,
        settings.app_version,
        settings.environment,
        now.isoformat(),
    )

    history = build_demo_history(now, seed=0)
    dashboard = build_dashboard(history, now, chart_window_days=settings.chart_window_days)
    print(json.dumps(dashboard, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
