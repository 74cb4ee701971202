"""Tests for sample validation, payload parsing and ordering helpers."""

from __future__ import annotations

import math
from datetime import date, datetime, timedelta, timezone

import pytest

from luna.cycle.samples import (
    InvalidSampleError,
    Sample,
    mean_temperature,
    newest_first,
    oldest_first,
)
from luna.cycle.tests.conftest import build_history


class TestSampleValidation:
    def test_valid_sample(self) -> None:
        ts = datetime(2026, 3, 1, 7, tzinfo=timezone.utc)
        sample = Sample(temperature=36.5, timestamp=ts)
        assert sample.temperature == 36.5
        assert sample.timestamp == ts

    def test_int_temperature_coerced_to_float(self) -> None:
        sample = Sample(temperature=37, timestamp=datetime(2026, 3, 1, 7))
        assert isinstance(sample.temperature, float)

    @pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf, -36.5, 0.0])
    def test_rejects_non_finite_or_non_positive(self, bad: float) -> None:
        with pytest.raises(InvalidSampleError):
            Sample(temperature=bad, timestamp=datetime(2026, 3, 1, 7))

    @pytest.mark.parametrize("bad", ["36.5", None, True])
    def test_rejects_non_numeric_temperature(self, bad: object) -> None:
        with pytest.raises(InvalidSampleError):
            Sample(temperature=bad, timestamp=datetime(2026, 3, 1, 7))  # type: ignore[arg-type]

    def test_rejects_date_without_time(self) -> None:
        with pytest.raises(InvalidSampleError):
            Sample(temperature=36.5, timestamp=date(2026, 3, 1))  # type: ignore[arg-type]

    def test_invalid_sample_is_value_error(self) -> None:
        assert issubclass(InvalidSampleError, ValueError)

    def test_samples_are_immutable(self) -> None:
        sample = Sample(temperature=36.5, timestamp=datetime(2026, 3, 1, 7))
        with pytest.raises(AttributeError):
            sample.temperature = 37.0  # type: ignore[misc]


class TestFromPayload:
    def test_unix_seconds(self) -> None:
        sample = Sample.from_payload(36.55, 1772348400)
        assert sample.timestamp == datetime.fromtimestamp(1772348400, tz=timezone.utc)
        assert sample.timestamp.tzinfo is not None

    def test_unix_seconds_as_string(self) -> None:
        sample = Sample.from_payload("36.55", "1772348400")
        assert sample.temperature == pytest.approx(36.55)
        assert sample.timestamp == datetime.fromtimestamp(1772348400, tz=timezone.utc)

    def test_iso_string_with_z_suffix(self) -> None:
        sample = Sample.from_payload(36.4, "2026-03-01T07:00:00.000Z")
        assert sample.timestamp == datetime(2026, 3, 1, 7, tzinfo=timezone.utc)

    def test_naive_iso_string_read_as_utc(self) -> None:
        sample = Sample.from_payload(36.4, "2026-03-01T07:00:00")
        assert sample.timestamp.utcoffset() == timedelta(0)

    def test_iso_string_keeps_offset(self) -> None:
        sample = Sample.from_payload(36.4, "2026-03-01T07:00:00+02:00")
        assert sample.timestamp.utcoffset() == timedelta(hours=2)

    @pytest.mark.parametrize(
        "temperature,timestamp",
        [
            (None, 1772348400),
            ("", 1772348400),
            (36.4, None),
            (36.4, ""),
        ],
    )
    def test_missing_values(self, temperature: object, timestamp: object) -> None:
        with pytest.raises(InvalidSampleError, match="Missing"):
            Sample.from_payload(temperature, timestamp)

    def test_unparseable_temperature(self) -> None:
        with pytest.raises(InvalidSampleError, match="temperature"):
            Sample.from_payload("warm", 1772348400)

    def test_unparseable_timestamp(self) -> None:
        with pytest.raises(InvalidSampleError, match="timestamp"):
            Sample.from_payload(36.4, "yesterday morning")

    def test_nan_string_rejected(self) -> None:
        with pytest.raises(InvalidSampleError):
            Sample.from_payload("nan", 1772348400)


class TestOrdering:
    def test_sort_helpers_return_new_lists(self) -> None:
        history = build_history([36.1, 36.2, 36.3])
        shuffled = [history[1], history[2], history[0]]
        snapshot = list(shuffled)

        assert oldest_first(shuffled) == history
        assert newest_first(shuffled) == list(reversed(history))
        assert shuffled == snapshot

    def test_mean_temperature(self) -> None:
        history = build_history([36.2, 36.4, 36.6])
        assert mean_temperature(history) == pytest.approx(36.4)
