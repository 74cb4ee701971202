"""Local-day arithmetic shared by the detectors.

Every day count in the engine is taken between local midnights in the
timezone of the caller's ``now``.  Aware timestamps are converted into that
zone first; naive ones are used as-is.
"""

from __future__ import annotations

import math
from datetime import date, datetime, timedelta, tzinfo

ONE_DAY = timedelta(days=1)


def to_zone(moment: datetime, tz: tzinfo | None) -> datetime:
    """Express an aware ``moment`` in ``tz``; naive moments are left alone."""
    if tz is not None and moment.tzinfo is not None:
        return moment.astimezone(tz)
    return moment


def start_of_day(moment: datetime, tz: tzinfo | None = None) -> datetime:
    """Return local midnight of the day containing ``moment``."""
    return to_zone(moment, tz).replace(hour=0, minute=0, second=0, microsecond=0)


def local_date(moment: datetime, tz: tzinfo | None = None) -> date:
    return to_zone(moment, tz).date()


def whole_days_between(earlier: datetime, later: datetime) -> int:
    """Floor of the day difference between the local midnights of two moments.

    Both are normalised in ``later``'s timezone.
    """
    tz = later.tzinfo
    return (start_of_day(later) - start_of_day(earlier, tz)).days


def days_until(target: datetime, today: datetime) -> int:
    """Ceiling of ``(target - today)`` in days; negative once ``target`` passed."""
    return math.ceil((target - today) / ONE_DAY)
