"""Wage projection engine.

SDK layer - pure logic, returns CalculationResult. No CLI or presentation.

Simulates both proposals month by month from the anchor date:
- A raise landing in a month applies to that whole month's earnings
- Raises compound on the already-raised rate
- After a schedule's last explicit year, the fallback rate applies
  every anchor month

Quarterly samples feed the chart; cumulative losses are read at the
month before each 4/10/20/30-year anniversary.
"""

import logging
import os
from datetime import date
from typing import Iterator, List, NamedTuple, Optional, Sequence, Tuple

from .formatting import round_display
from .schedules import DEFAULT_CONFIG
from .schemas import (
    CalculationResult,
    CalculationStats,
    ProjectionConfig,
    Schedule,
    WageDataPoint,
)

# Configure logging based on LOG_LEVEL environment variable
_log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, _log_level, logging.INFO),
    format="%(asctime)s.%(msecs)03d %(levelname)s: %(message)s",
    datefmt="%H:%M:%S"
)
logger = logging.getLogger(__name__)

WEEKS_PER_YEAR = 52
MONTHS_PER_YEAR = 12
CHART_SAMPLE_MONTHS = 3
LOSS_HORIZONS = (4, 10, 20, 30)


class MonthlySample(NamedTuple):
    """State of both proposals at the end of one simulated month."""

    year: int
    month: int
    alliance_rate: float
    kp_rate: float
    cumulative_alliance: float
    cumulative_kp: float


def hours_per_month(weekly_hours: float) -> float:
    """Average paid hours per calendar month."""
    return (weekly_hours * WEEKS_PER_YEAR) / MONTHS_PER_YEAR


def next_month(year: int, month: int) -> Tuple[int, int]:
    """Advance a (year, month) pair by one calendar month."""
    if month == 12:
        return year + 1, 1
    return year, month + 1


def apply_raise(
    rate: float,
    schedule: Schedule,
    year: int,
    month: int,
    anchor_month: int,
    fallback_rate: float,
) -> float:
    """Apply whatever raise a schedule grants in (year, month).

    An explicit event wins (first match in list order). Otherwise the
    fallback rate applies in the anchor month of any year strictly after
    the schedule's last explicit year; a schedule with no events gets the
    fallback every anchor month.
    """
    event = schedule.find_event(month, year)
    if event is not None:
        return rate * event.rate

    last_year = schedule.last_event_year
    if month == anchor_month and (last_year is None or year > last_year):
        return rate * fallback_rate

    return rate


def simulate_months(
    start_wage: float,
    weekly_hours: float,
    projection_years: int,
    config: Optional[ProjectionConfig] = None,
) -> Iterator[MonthlySample]:
    """Yield one MonthlySample per month, anchor month included.

    Runs projection_years * 12 + 1 months, so a zero-year projection still
    simulates the anchor month.
    """
    config = config or DEFAULT_CONFIG
    monthly_hours = hours_per_month(weekly_hours)

    alliance_rate = start_wage
    kp_rate = start_wage
    cumulative_alliance = 0.0
    cumulative_kp = 0.0

    year, month = config.anchor.year, config.anchor.month

    for _ in range(projection_years * MONTHS_PER_YEAR + 1):
        alliance_rate = apply_raise(
            alliance_rate, config.alliance, year, month,
            config.anchor_month, config.fallback_rate,
        )
        kp_rate = apply_raise(
            kp_rate, config.kp, year, month,
            config.anchor_month, config.fallback_rate,
        )

        # Raise-then-earn: this month accrues at the post-raise rate
        cumulative_alliance += alliance_rate * monthly_hours
        cumulative_kp += kp_rate * monthly_hours

        yield MonthlySample(
            year=year,
            month=month,
            alliance_rate=alliance_rate,
            kp_rate=kp_rate,
            cumulative_alliance=cumulative_alliance,
            cumulative_kp=cumulative_kp,
        )

        year, month = next_month(year, month)


def to_data_point(sample: MonthlySample) -> WageDataPoint:
    """Shape a monthly sample for the chart (rates rounded to cents)."""
    return WageDataPoint(
        date=f"{sample.month}/{sample.year}",
        display_year=sample.year,
        raw_date=date(sample.year, sample.month, 1),
        alliance_rate=round_display(sample.alliance_rate),
        kp_rate=round_display(sample.kp_rate),
        gap=round_display(sample.alliance_rate - sample.kp_rate),
        cumulative_diff=sample.cumulative_alliance - sample.cumulative_kp,
    )


def loss_at_year(samples: Sequence[MonthlySample], years: int) -> float:
    """Cumulative Alliance minus KP earnings just before the N-year mark.

    Reads index years*12 - 1. Returns 0.0 when the projection is too short
    to reach it.
    """
    target_index = years * MONTHS_PER_YEAR - 1
    if 0 <= target_index < len(samples):
        sample = samples[target_index]
        return sample.cumulative_alliance - sample.cumulative_kp
    return 0.0


def calculate_wage_impact(
    start_wage: float,
    weekly_hours: float,
    projection_years: int,
    config: Optional[ProjectionConfig] = None,
) -> CalculationResult:
    """Project hourly rates and cumulative earnings under both proposals.

    Args:
        start_wage: Current hourly wage in dollars
        weekly_hours: Hours worked per week
        projection_years: Horizon in years (0 still simulates the anchor month)
        config: Schedules, anchor and fallback rate (default: reference tables)

    Returns:
        CalculationResult with quarterly chart_data and fixed-horizon stats
    """
    config = config or DEFAULT_CONFIG

    samples: List[MonthlySample] = []
    chart_data: List[WageDataPoint] = []

    for index, sample in enumerate(
        simulate_months(start_wage, weekly_hours, projection_years, config)
    ):
        samples.append(sample)
        if index % CHART_SAMPLE_MONTHS == 0:
            chart_data.append(to_data_point(sample))

    loss_4, loss_10, loss_20, loss_30 = (
        loss_at_year(samples, years) for years in LOSS_HORIZONS
    )
    stats = CalculationStats(
        loss_4_year=loss_4,
        loss_10_year=loss_10,
        loss_20_year=loss_20,
        loss_30_year=loss_30,
    )

    logger.debug(
        f"Projected {len(samples)} months ({len(chart_data)} chart points) "
        f"from ${start_wage}/hr at {weekly_hours} hrs/week: "
        f"4-year loss {loss_4:.2f}, 30-year loss {loss_30:.2f}"
    )

    return CalculationResult(chart_data=chart_data, stats=stats)
