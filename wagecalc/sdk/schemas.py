"""Pydantic schemas for wage-calc configuration and results.

All schemas use extra='forbid' to reject unknown fields, ensuring
typos in schedules.yaml cause clear errors rather than silent ignoring.
"""

import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Longest projection horizon accepted from callers
MAX_PROJECTION_YEARS = 60


# =============================================================================
# Raise Schedules - Static configuration consumed by the projection engine
# =============================================================================


class RaiseEvent(BaseModel):
    """A single contractual raise landing in a given month."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    month: int = Field(..., ge=1, le=12, description="Calendar month the raise takes effect (1-12)")
    year: int = Field(..., description="Calendar year the raise takes effect")
    rate: float = Field(..., gt=0, description="Multiplier applied to the current rate (1.09 = +9%)")
    description: str = Field(default="", description="Human-readable label")


class Schedule(BaseModel):
    """Ordered raise events for one proposal."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., description="Proposal name (e.g., 'Alliance')")
    events: List[RaiseEvent] = Field(default_factory=list, description="Explicit raise events")

    @model_validator(mode="after")
    def check_unique_months(self) -> "Schedule":
        """Reject two events landing in the same (month, year)."""
        seen = set()
        for event in self.events:
            key = (event.month, event.year)
            if key in seen:
                raise ValueError(
                    f"Schedule '{self.name}' has more than one raise in {event.month}/{event.year}"
                )
            seen.add(key)
        return self

    @property
    def last_event_year(self) -> Optional[int]:
        """Year of the latest explicit event (None for an empty schedule)."""
        if not self.events:
            return None
        return max(event.year for event in self.events)

    def find_event(self, month: int, year: int) -> Optional[RaiseEvent]:
        """Return the first event in list order for (month, year), if any."""
        for event in self.events:
            if event.month == month and event.year == year:
                return event
        return None


class ProjectionConfig(BaseModel):
    """Anchor date, both schedules and the post-contract fallback rate."""

    model_config = ConfigDict(extra="forbid")

    anchor: datetime.date = Field(..., description="First simulated month; its month is the fallback month")
    alliance: Schedule = Field(..., description="Alliance proposal schedule")
    kp: Schedule = Field(..., description="KP proposal schedule")
    fallback_rate: float = Field(
        ..., gt=0,
        description="Annual multiplier applied every anchor month after a schedule's last explicit year",
    )

    @property
    def anchor_month(self) -> int:
        return self.anchor.month


# =============================================================================
# Projection Inputs and Results
# =============================================================================


class ProjectionInputs(BaseModel):
    """Caller-supplied inputs for one projection."""

    model_config = ConfigDict(extra="forbid")

    start_wage: float = Field(..., gt=0, description="Starting hourly wage in dollars")
    weekly_hours: float = Field(..., gt=0, description="Hours worked per week")
    projection_years: int = Field(
        ..., ge=0, le=MAX_PROJECTION_YEARS, description="Projection horizon in years"
    )


class WageDataPoint(BaseModel):
    """One quarterly sample of the projection, shaped for charting."""

    model_config = ConfigDict(extra="forbid")

    date: str = Field(..., description="Month label, 'M/YYYY'")
    display_year: int = Field(..., description="Calendar year of the sample")
    raw_date: datetime.date = Field(..., description="First day of the sampled month")
    alliance_rate: float = Field(..., description="Alliance hourly rate, rounded to cents")
    kp_rate: float = Field(..., description="KP hourly rate, rounded to cents")
    gap: float = Field(..., description="Alliance minus KP hourly rate, rounded to cents")
    cumulative_diff: float = Field(
        ..., description="Cumulative Alliance minus KP earnings (full precision)"
    )


class CalculationStats(BaseModel):
    """Cumulative earnings lost under KP at fixed horizons."""

    model_config = ConfigDict(extra="forbid")

    loss_4_year: float = Field(default=0.0, description="Loss at end of the 4-year contract")
    loss_10_year: float = Field(default=0.0, description="Loss after 10 years")
    loss_20_year: float = Field(default=0.0, description="Loss after 20 years")
    loss_30_year: float = Field(default=0.0, description="Loss after 30 years")


class CalculationResult(BaseModel):
    """Complete engine output passed to the presentation layer."""

    model_config = ConfigDict(extra="forbid")

    chart_data: List[WageDataPoint] = Field(default_factory=list, description="Quarterly samples")
    stats: CalculationStats = Field(..., description="Fixed-horizon loss figures")
