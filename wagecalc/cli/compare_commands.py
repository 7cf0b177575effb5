"""Projection CLI commands: compare, chart, stats."""

import functools
import json
from typing import Optional, Tuple

import click
from pydantic import ValidationError
from rich.console import Console

from wagecalc.sdk import (
    MAX_PROJECTION_YEARS,
    CalculationResult,
    ProjectionConfig,
    ProjectionInputs,
    ScheduleConfigError,
    calculate_wage_impact,
    format_currency,
    get_ai_insights,
    load_projection_config,
)
from .renderers.projection_renderer import (
    render_assumptions,
    render_chart_table,
    render_inputs,
    render_insights,
    render_key_findings,
    render_snowball_table,
)

# Control ranges (min, max, step)
WAGE_RANGE = (40.0, 70.0, 0.5)
HOURS_RANGE = (20.0, 40.0, 4.0)
DEFAULT_WAGE = 50.0
DEFAULT_HOURS = 40.0
DEFAULT_YEARS = 30
# Insights always compare the contract loss against a full career
CAREER_YEARS = 30


def _check_control(bounds: tuple, label: str):
    """Build a click callback enforcing a control's range and step grid."""
    minimum, maximum, step = bounds

    def callback(ctx, param, value):
        if value is None or ctx.params.get("no_limits"):
            return value
        if not minimum <= value <= maximum:
            raise click.BadParameter(
                f"{value:g} is not in the range {minimum:g}-{maximum:g} "
                f"(use --no-limits to override)"
            )
        steps = (value - minimum) / step
        if abs(steps - round(steps)) > 1e-9:
            raise click.BadParameter(
                f"{label} must be in steps of {step:g} from {minimum:g} (got {value:g})"
            )
        return value
    return callback


def projection_options(func):
    """Shared --wage/--hours/--years/--schedules options."""
    @click.option("--no-limits", is_flag=True, is_eager=True,
                  help="Allow values outside the standard wage/hours ranges")
    @click.option("--wage", type=float, default=DEFAULT_WAGE, show_default=True,
                  callback=_check_control(WAGE_RANGE, "Wage"),
                  help="Current hourly wage ($40-$70, step 0.5)")
    @click.option("--hours", type=float, default=DEFAULT_HOURS, show_default=True,
                  callback=_check_control(HOURS_RANGE, "Weekly hours"),
                  help="Weekly hours (20-40, step 4)")
    @click.option("--years", type=click.IntRange(0, MAX_PROJECTION_YEARS), default=DEFAULT_YEARS,
                  show_default=True, help="Projection horizon in years")
    @click.option("--schedules", "schedules_path", type=click.Path(exists=True, dir_okay=False),
                  help="Schedules YAML to use instead of the configured one")
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        kwargs.pop("no_limits")
        return func(*args, **kwargs)
    return wrapper


def _load_config(schedules_path: Optional[str]) -> ProjectionConfig:
    try:
        return load_projection_config(schedules_path)
    except ScheduleConfigError as e:
        raise click.ClickException(str(e))


def _project(wage: float, hours: float, years: int, schedules_path: Optional[str]
             ) -> Tuple[ProjectionInputs, ProjectionConfig, CalculationResult]:
    """Validate inputs, resolve schedules and run the engine."""
    try:
        inputs = ProjectionInputs(start_wage=wage, weekly_hours=hours, projection_years=years)
    except ValidationError as e:
        raise click.ClickException(f"Invalid inputs:\n{e}")

    config = _load_config(schedules_path)
    result = calculate_wage_impact(
        inputs.start_wage, inputs.weekly_hours, inputs.projection_years, config
    )
    return inputs, config, result


@click.command("compare")
@projection_options
@click.option("--format", "output_format", type=click.Choice(["table", "json"]), default="table",
              help="Output format (default: table)")
@click.option("--insights", is_flag=True, help="Add Gemini commentary on front-loaded raises")
def compare(wage: float, hours: float, years: int, schedules_path: Optional[str],
            output_format: str, insights: bool):
    """Compare cumulative earnings under both proposals.

    Shows the money lost under the second proposal at the end of the
    contract and over a career, plus the 4/10/20/30-year breakdown.

    \b
    Examples:
      wage-calc compare
      wage-calc compare --wage 55.5 --hours 36
      wage-calc compare --format json
      wage-calc compare --insights
    """
    inputs, config, result = _project(wage, hours, years, schedules_path)

    insight_text = None
    if insights:
        career = result
        if inputs.projection_years != CAREER_YEARS:
            career = calculate_wage_impact(
                inputs.start_wage, inputs.weekly_hours, CAREER_YEARS, config
            )
        insight_text = get_ai_insights(
            wage, career.stats.loss_4_year, career.stats.loss_30_year, hours
        )

    if output_format == "json":
        output = {
            "inputs": inputs.model_dump(),
            **result.model_dump(mode="json"),
        }
        if insight_text is not None:
            output["insights"] = insight_text
        click.echo(json.dumps(output, indent=2))
        return

    console = Console(width=120)
    render_inputs(console, wage, hours, years)
    render_key_findings(console, result, config)
    render_snowball_table(console, result)
    if insight_text is not None:
        render_insights(console, insight_text)
    render_assumptions(console, hours, config)


@click.command("chart")
@projection_options
@click.option("--format", "output_format", type=click.Choice(["table", "json"]), default="table",
              help="Output format (default: table)")
def chart(wage: float, hours: float, years: int, schedules_path: Optional[str],
          output_format: str):
    """Show the quarterly hourly-rate series for both proposals.

    The hourly gap is money lost every hour worked; the cumulative
    column is the running earnings difference.
    """
    _, config, result = _project(wage, hours, years, schedules_path)

    if output_format == "json":
        points = [p.model_dump(mode="json") for p in result.chart_data]
        click.echo(json.dumps(points, indent=2))
        return

    console = Console(width=120)
    render_chart_table(console, result, config)


@click.command("stats")
@projection_options
@click.option("--format", "output_format", type=click.Choice(["text", "json"]), default="text",
              help="Output format (default: text)")
def stats(wage: float, hours: float, years: int, schedules_path: Optional[str],
          output_format: str):
    """Print only the 4/10/20/30-year cumulative losses."""
    _, config, result = _project(wage, hours, years, schedules_path)

    if output_format == "json":
        click.echo(json.dumps(result.stats.model_dump(), indent=2))
        return

    for years_label, value in (
        ("4", result.stats.loss_4_year),
        ("10", result.stats.loss_10_year),
        ("20", result.stats.loss_20_year),
        ("30", result.stats.loss_30_year),
    ):
        click.echo(f"{years_label:>2} years: {format_currency(value)}")
