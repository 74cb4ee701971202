"""The app's notion of "now".

The cycle engine never reads the wall clock; callers resolve the reference
instant here and pass it down.  With demo simulation enabled the clock is
pinned to the simulated day at noon, so date keys never shift across
timezone boundaries.
"""

from __future__ import annotations

import logging
from datetime import datetime, time
from zoneinfo import ZoneInfo

from luna.config import Settings, get_settings

logger = logging.getLogger("luna.clock")

_SIMULATED_TIME_OF_DAY = time(12, 0)


def current_time(settings: Settings | None = None) -> datetime:
    """Return the current instant as an aware datetime in the configured zone.

    Args:
        settings: Override settings (defaults to the cached global settings).

    Returns:
        ``datetime.now`` in ``settings.timezone``, or the simulated date at
        12:00 local time when simulation is enabled.
    """
    settings = settings or get_settings()
    tz = ZoneInfo(settings.timezone)

    if settings.simulation_enabled and settings.simulation_date is not None:
        logger.debug("Using simulated date %s", settings.simulation_date)
        return datetime.combine(settings.simulation_date, _SIMULATED_TIME_OF_DAY, tzinfo=tz)

    return datetime.now(tz)
