"""BBT cycle engine for Luna.

This subpackage infers ovulation, the current cycle phase, and the next
period window from basal body temperature alone.  Every function is pure:
the caller passes the sample history and the reference instant ``now``.

Modules:
    samples        Sample value type, payload parsing, ordering helpers
    dates          Local-midnight day arithmetic
    ovulation      3-over-6 temperature shift detection
    trend          Short-term rising/falling/stable trend
    period         Next-period window from a detected ovulation
    phase          Current phase classification (primary entry point)
    calendar_view  Retrospective per-day phase markers for a month
    chart          Calendar-day chart series with ovulation markers
    summary        Today's home-screen summary
    tips           Static phase-keyed tips
"""

from luna.cycle.ovulation import detect_ovulation
from luna.cycle.period import predict_period_start
from luna.cycle.phase import detect_current_phase
from luna.cycle.samples import InvalidSampleError, Sample
from luna.cycle.trend import estimate_trend

__all__ = [
    "Sample",
    "InvalidSampleError",
    "detect_ovulation",
    "estimate_trend",
    "predict_period_start",
    "detect_current_phase",
]
