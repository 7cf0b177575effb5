"""Unit tests for the wage projection engine.

Covers the raise-then-earn monthly loop, quarterly chart sampling,
fixed-horizon loss lookups and the fallback-rate policy.
"""

from datetime import date

import pytest

from wagecalc.sdk.projection import (
    apply_raise,
    calculate_wage_impact,
    hours_per_month,
    loss_at_year,
    next_month,
    simulate_months,
)
from wagecalc.sdk.schedules import DEFAULT_CONFIG
from wagecalc.sdk.schemas import ProjectionConfig, RaiseEvent, Schedule


# === HELPERS ===


def make_config(alliance_events, kp_events, anchor=date(2025, 10, 1), fallback_rate=1.03):
    """Build a ProjectionConfig from (month, year, rate) tuples."""
    def schedule(name, events):
        return Schedule(
            name=name,
            events=[RaiseEvent(month=m, year=y, rate=r) for m, y, r in events],
        )

    return ProjectionConfig(
        anchor=anchor,
        alliance=schedule("Alliance", alliance_events),
        kp=schedule("KP", kp_events),
        fallback_rate=fallback_rate,
    )


# === TESTS ===


class TestReferenceScenario:
    """$50/hr, 40 hrs/week against the reference schedules."""

    def test_anchor_month_applies_first_raise(self):
        """First chart point reflects the anchor-month raise, not the raw wage."""
        result = calculate_wage_impact(50, 40, 4)
        first = result.chart_data[0]

        assert first.date == "10/2025"
        assert first.display_year == 2025
        assert first.raw_date == date(2025, 10, 1)
        assert first.alliance_rate == pytest.approx(54.50)
        assert first.kp_rate == pytest.approx(53.25)
        assert first.gap == pytest.approx(1.25)

    def test_loss_4_year_matches_hand_calculation(self):
        """4-year loss equals the month-weighted rate sums through Sep 2029."""
        hpm = 40 * 52 / 12

        a1 = 50 * 1.09
        a2 = a1 * 1.05
        a3 = a2 * 1.03
        a4 = a3 * 1.04
        a5 = a4 * 1.04
        alliance = (a1 * 12 + a2 * 6 + a3 * 6 + a4 * 12 + a5 * 12) * hpm

        k1 = 50 * 1.065
        k2 = k1 * 1.065
        k3 = k2 * 1.03
        k4 = k3 * 1.025
        k5 = k4 * 1.03
        kp = (k1 * 12 + k2 * 10 + k3 * 2 + k4 * 12 + k5 * 12) * hpm

        result = calculate_wage_impact(50, 40, 4)

        assert result.stats.loss_4_year == pytest.approx(alliance - kp, rel=1e-9)
        assert result.stats.loss_4_year > 0

    def test_short_horizon_leaves_later_losses_at_zero(self):
        """A 4-year projection cannot report 10/20/30-year losses."""
        stats = calculate_wage_impact(50, 40, 4).stats

        assert stats.loss_10_year == 0
        assert stats.loss_20_year == 0
        assert stats.loss_30_year == 0

    def test_losses_grow_over_career(self):
        """Front-loading compounds: each later horizon loses more."""
        stats = calculate_wage_impact(50, 40, 30).stats

        assert 0 < stats.loss_4_year < stats.loss_10_year < stats.loss_20_year < stats.loss_30_year

    def test_post_contract_rates_grow_in_lockstep(self):
        """After 2028 both get 3% each October, so the rate ratio is fixed."""
        samples = list(simulate_months(50, 40, 10))
        oct_2029 = samples[48]
        oct_2034 = samples[108]

        assert (oct_2029.year, oct_2029.month) == (2029, 10)
        assert (oct_2034.year, oct_2034.month) == (2034, 10)
        assert oct_2034.alliance_rate == pytest.approx(oct_2029.alliance_rate * 1.03 ** 5)
        assert oct_2034.kp_rate == pytest.approx(oct_2029.kp_rate * 1.03 ** 5)


class TestLossIndexing:
    """Losses are read at month index 12N - 1."""

    @pytest.mark.parametrize("years,field", [
        (4, "loss_4_year"),
        (10, "loss_10_year"),
        (20, "loss_20_year"),
        (30, "loss_30_year"),
    ])
    def test_loss_reads_month_before_anniversary(self, years, field):
        samples = list(simulate_months(55, 36, 30))
        expected = samples[years * 12 - 1]

        result = calculate_wage_impact(55, 36, 30)

        assert getattr(result.stats, field) == expected.cumulative_alliance - expected.cumulative_kp

    def test_loss_at_year_out_of_range_is_zero(self):
        samples = list(simulate_months(50, 40, 1))

        assert len(samples) == 13
        assert loss_at_year(samples, 2) == 0.0
        assert loss_at_year(samples, 0) == 0.0
        assert loss_at_year(samples, 1) == samples[11].cumulative_alliance - samples[11].cumulative_kp


class TestChartSampling:
    """Quarterly downsampling of the monthly simulation."""

    @pytest.mark.parametrize("years", [0, 1, 4, 10, 30])
    def test_chart_length(self, years):
        result = calculate_wage_impact(50, 40, years)

        assert len(result.chart_data) == (years * 12) // 3 + 1

    def test_points_are_every_third_month(self):
        labels = [p.date for p in calculate_wage_impact(50, 40, 1).chart_data]

        assert labels == ["10/2025", "1/2026", "4/2026", "7/2026", "10/2026"]

    def test_rates_rounded_but_cumulative_full_precision(self):
        """Displayed rates are cents; cumulative_diff is not rounded."""
        samples = list(simulate_months(50, 40, 5))
        point = calculate_wage_impact(50, 40, 5).chart_data[6]
        sample = samples[18]

        assert point.alliance_rate == round(point.alliance_rate, 2)
        assert point.alliance_rate == pytest.approx(sample.alliance_rate, abs=0.005)
        assert point.cumulative_diff == sample.cumulative_alliance - sample.cumulative_kp


class TestZeroHorizon:
    """projection_years = 0 still simulates the anchor month."""

    def test_single_point_and_zero_stats(self):
        result = calculate_wage_impact(50, 40, 0)

        assert len(result.chart_data) == 1
        assert result.chart_data[0].alliance_rate == pytest.approx(54.50)
        assert result.stats.loss_4_year == 0
        assert result.stats.loss_10_year == 0
        assert result.stats.loss_20_year == 0
        assert result.stats.loss_30_year == 0


class TestProperties:
    """Idempotence, hours scaling and ordering."""

    def test_repeated_calls_are_identical(self):
        assert calculate_wage_impact(52.5, 32, 30) == calculate_wage_impact(52.5, 32, 30)

    def test_doubling_hours_doubles_earnings_not_rates(self):
        single = calculate_wage_impact(50, 20, 30)
        double = calculate_wage_impact(50, 40, 30)

        for a, b in zip(single.chart_data, double.chart_data):
            assert b.alliance_rate == a.alliance_rate
            assert b.kp_rate == a.kp_rate
            assert b.cumulative_diff == pytest.approx(2 * a.cumulative_diff)
        assert double.stats.loss_30_year == pytest.approx(2 * single.stats.loss_30_year)

    def test_dominant_schedule_never_earns_less(self):
        """Higher-or-equal multipliers at every event keep cumulative ordering."""
        config = make_config(
            alliance_events=[(10, 2025, 1.05), (3, 2026, 1.02), (10, 2026, 1.04)],
            kp_events=[(10, 2025, 1.03), (3, 2026, 1.02), (10, 2026, 1.01)],
        )

        for sample in simulate_months(45, 24, 10, config):
            assert sample.alliance_rate >= sample.kp_rate
            assert sample.cumulative_alliance >= sample.cumulative_kp

    def test_identical_schedules_lose_nothing(self):
        config = make_config([(10, 2025, 1.05)], [(10, 2025, 1.05)])

        stats = calculate_wage_impact(60, 40, 30, config).stats

        assert stats.loss_4_year == 0
        assert stats.loss_30_year == 0


class TestRaisePolicy:
    """Explicit events, fallback month and first-match lookup."""

    def test_explicit_event_beats_fallback(self):
        schedule = Schedule(name="A", events=[RaiseEvent(month=10, year=2030, rate=1.10)])

        assert apply_raise(100, schedule, 2030, 10, 10, 1.03) == pytest.approx(110)
        assert apply_raise(100, schedule, 2031, 10, 10, 1.03) == pytest.approx(103)

    def test_fallback_only_in_anchor_month_after_last_year(self):
        """A schedule ending in April still only gets fallback raises in October."""
        schedule = Schedule(name="A", events=[RaiseEvent(month=4, year=2027, rate=1.10)])

        # Same year as last event: no fallback yet
        assert apply_raise(100, schedule, 2027, 10, 10, 1.03) == 100
        # Later years: only the anchor month
        assert apply_raise(100, schedule, 2028, 4, 10, 1.03) == 100
        assert apply_raise(100, schedule, 2028, 10, 10, 1.03) == pytest.approx(103)

    def test_first_matching_event_wins(self):
        """Colliding events (bypassing validation) apply only the first."""
        schedule = Schedule.model_construct(
            name="A",
            events=[
                RaiseEvent(month=10, year=2025, rate=1.10),
                RaiseEvent(month=10, year=2025, rate=1.50),
            ],
        )

        assert apply_raise(100, schedule, 2025, 10, 10, 1.03) == pytest.approx(110)

    def test_anchor_only_schedule_compounds_fallback_every_year(self):
        """One anchor-month event, then fallback every October thereafter."""
        config = make_config([(10, 2025, 1.05)], [(10, 2025, 1.05)], fallback_rate=1.02)
        samples = list(simulate_months(40, 40, 20, config))

        for years in range(21):
            sample = samples[years * 12]
            assert sample.month == 10
            assert sample.alliance_rate == pytest.approx(40 * 1.05 * 1.02 ** years)

    def test_empty_schedule_gets_fallback_from_anchor(self):
        """With no explicit events every anchor month is a fallback raise."""
        config = make_config([], [], fallback_rate=1.03)
        samples = list(simulate_months(50, 40, 3, config))

        assert samples[0].alliance_rate == pytest.approx(50 * 1.03)
        assert samples[11].alliance_rate == pytest.approx(50 * 1.03)
        assert samples[12].alliance_rate == pytest.approx(50 * 1.03 ** 2)
        assert samples[36].kp_rate == pytest.approx(50 * 1.03 ** 4)


class TestCalendar:
    """Month stepping and hours conversion."""

    def test_next_month_rolls_year(self):
        assert next_month(2025, 12) == (2026, 1)
        assert next_month(2026, 4) == (2026, 5)

    def test_hours_per_month(self):
        assert hours_per_month(40) == pytest.approx(2080 / 12)

    def test_simulation_starts_at_anchor(self):
        config = make_config([], [], anchor=date(2030, 3, 15))
        samples = list(simulate_months(50, 40, 1, config))

        assert (samples[0].year, samples[0].month) == (2030, 3)
        assert (samples[-1].year, samples[-1].month) == (2031, 3)

    def test_default_config_is_used(self):
        assert calculate_wage_impact(50, 40, 4) == calculate_wage_impact(50, 40, 4, DEFAULT_CONFIG)


class TestLargeWages:
    def test_very_large_wage_does_not_crash(self):
        """Rates past 28 significant digits still round for the chart."""
        result = calculate_wage_impact(1e27, 40, 0)

        assert len(result.chart_data) == 1
        assert result.chart_data[0].alliance_rate == pytest.approx(1e27 * 1.09)
        assert result.chart_data[0].kp_rate == pytest.approx(1e27 * 1.065)
