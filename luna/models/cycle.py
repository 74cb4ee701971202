"""Pydantic models for derived cycle values: ovulation, period window, phase,
plus the dashboard payloads built on top of them (today, calendar, chart, tips)."""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum

from pydantic import Field

from luna.models.base import LunaBase


# ---------- Enums ----------

class Confidence(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"


class Trend(str, Enum):
    stable = "stable"
    rising = "rising"
    falling = "falling"


class Phase(str, Enum):
    unknown = "unknown"
    insufficient_data = "insufficient-data"
    pre_ovulation = "pre-ovulation"
    transition = "transition"
    post_ovulation = "post-ovulation"
    ovulation = "ovulation"
    luteal = "luteal"
    pre_menstrual = "pre-menstrual"


# ---------- Engine results ----------

class OvulationEvent(LunaBase):
    """A detected 3-over-6 temperature shift."""

    detected: bool = True
    date: datetime
    confidence: Confidence
    temperature_rise: float
    baseline_temp: float
    post_ovulation_temp: float


class PeriodPrediction(LunaBase):
    window_start: date
    window_end: date
    most_likely: date
    days_until_earliest: int
    days_until_latest: int
    days_until_most_likely: int
    confidence: Confidence
    is_in_window: bool


class PhaseAssessment(LunaBase):
    """Current cycle phase with the evidence it was derived from."""

    phase: Phase
    phase_name: str
    description: str
    tip: str
    temperature: float | None = None
    trend: Trend | None = None
    ovulation: OvulationEvent | None = None
    period_prediction: PeriodPrediction | None = None
    days_since_ovulation: int | None = None
    avg_bbt: float | None = Field(default=None, alias="avgBBT")


# ---------- Today ----------

class TodaySummary(LunaBase):
    date: date
    temperature: float | None = None
    has_reading: bool = False
    phase: Phase
    phase_name: str
    description: str
    tip: str
    trend: Trend | None = None
    avg_bbt: float | None = Field(default=None, alias="avgBBT")
    ovulation: OvulationEvent | None = None
    period_prediction: PeriodPrediction | None = None
    days_since_ovulation: int | None = None
    readings_count: int = Field(default=0, ge=0)


# ---------- Calendar ----------

class CalendarDay(LunaBase):
    day: int = Field(ge=1, le=31)
    date: date
    phase: Phase | None = None
    phase_color: str | None = None
    has_reading: bool = False
    temperature: float | None = None
    is_ovulation_day: bool = False


class MonthCalendar(LunaBase):
    year: int
    month: int = Field(ge=1, le=12)
    days_in_month: int
    calendar_data: list[CalendarDay]
    ovulation: OvulationEvent | None = None
    current_phase: Phase


# ---------- Chart ----------

class ChartPoint(LunaBase):
    index: int = Field(ge=1)
    date: date
    temp: float | None = None
    has_reading: bool = False
    timestamp: datetime | None = None
    is_ovulation_day: bool = False


class OvulationMarker(LunaBase):
    date: date
    index: int = Field(ge=1)
    temperature: float
    confidence: Confidence


class ChartWindow(LunaBase):
    days: int
    start: date
    end: date


class ChartSeries(LunaBase):
    temperature_data: list[ChartPoint]
    avg_temp: float | None = None
    ovulation_markers: list[OvulationMarker] = Field(default_factory=list)
    ovulation: OvulationEvent | None = None
    total_readings: int = 0
    window: ChartWindow


# ---------- Tips ----------

class Tip(LunaBase):
    title: str
    description: str
    icon: str | None = None


class PhaseTipGroup(LunaBase):
    phase_name: str = Field(alias="phase")
    icon: str
    color: str
    tips: list[Tip]


class TipsResponse(LunaBase):
    current_phase: Phase
    current_phase_name: str
    current_phase_tips: PhaseTipGroup
    all_phase_tips: list[PhaseTipGroup]
    general_tips: list[Tip]
