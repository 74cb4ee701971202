"""BBT samples: the single input type of the cycle engine.

A sample is one thermometer reading.  Samples are immutable and validated on
construction so that the detectors can assume finite, positive temperatures
and real ``datetime`` timestamps.  Ingestion code that receives raw device or
dashboard payloads should go through ``Sample.from_payload``.
"""

from __future__ import annotations

import math
import statistics
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime, timezone
from numbers import Real


class InvalidSampleError(ValueError):
    """Raised when a reading cannot be turned into a valid sample."""


@dataclass(frozen=True)
class Sample:
    """A single BBT reading.

    Attributes:
        temperature: Basal body temperature in °C.
        timestamp:   When the reading was taken.  Naive and aware datetimes
                     are both accepted, but one history must not mix them.
    """

    temperature: float
    timestamp: datetime

    def __post_init__(self) -> None:
        if isinstance(self.temperature, bool) or not isinstance(self.temperature, Real):
            raise InvalidSampleError(
                f"temperature must be a number, got {self.temperature!r}"
            )
        if not math.isfinite(self.temperature) or self.temperature <= 0:
            raise InvalidSampleError(
                f"temperature must be finite and positive, got {self.temperature!r}"
            )
        if not isinstance(self.timestamp, datetime):
            raise InvalidSampleError(
                f"timestamp must be a datetime, got {type(self.timestamp).__name__}"
            )
        object.__setattr__(self, "temperature", float(self.temperature))

    @classmethod
    def from_payload(cls, temperature: object, timestamp: object) -> Sample:
        """Build a sample from a device or dashboard payload.

        Args:
            temperature: Number or numeric string, in °C.
            timestamp:   Unix seconds (int, float or digit string) or an
                         ISO-8601 string.  Naive ISO strings are read as UTC.

        Returns:
            A validated Sample.

        Raises:
            InvalidSampleError: If either value is missing or unparseable.
        """
        if temperature is None or temperature == "":
            raise InvalidSampleError("Missing temperature")
        if timestamp is None or timestamp == "":
            raise InvalidSampleError("Missing timestamp")

        try:
            temp_c = float(temperature)  # type: ignore[arg-type]
        except (TypeError, ValueError) as exc:
            raise InvalidSampleError(f"Unparseable temperature: {temperature!r}") from exc

        return cls(temperature=temp_c, timestamp=_parse_timestamp(timestamp))


def _parse_timestamp(value: object) -> datetime:
    if isinstance(value, datetime):
        return value

    if isinstance(value, bool):
        raise InvalidSampleError(f"Unparseable timestamp: {value!r}")

    if isinstance(value, (int, float)) or (isinstance(value, str) and value.strip().isdigit()):
        try:
            return datetime.fromtimestamp(float(value), tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as exc:
            raise InvalidSampleError(f"Timestamp out of range: {value!r}") from exc

    if isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError as exc:
            raise InvalidSampleError(f"Unparseable timestamp: {value!r}") from exc
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed

    raise InvalidSampleError(f"Unparseable timestamp: {value!r}")


# ---------------------------------------------------------------------------
# Sequence helpers (always return new lists, never sort in place)
# ---------------------------------------------------------------------------


def oldest_first(samples: Iterable[Sample]) -> list[Sample]:
    return sorted(samples, key=lambda s: s.timestamp)


def newest_first(samples: Iterable[Sample]) -> list[Sample]:
    return sorted(samples, key=lambda s: s.timestamp, reverse=True)


def mean_temperature(samples: Sequence[Sample]) -> float:
    """Arithmetic mean of the sample temperatures.

    Raises:
        statistics.StatisticsError: If ``samples`` is empty.
    """
    return statistics.mean(s.temperature for s in samples)
