"""Rich renderer for wage projections.

Transforms SDK CalculationResult output into formatted Rich tables.
"""

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.columns import Columns
from rich.text import Text
from rich import box

from wagecalc.sdk.formatting import format_currency, format_rate
from wagecalc.sdk.projection import hours_per_month
from wagecalc.sdk.schemas import CalculationResult, ProjectionConfig


# (label, stats field, what the loss could buy)
SNOWBALL_ROWS = [
    ("End of Contract (4 Years)", "loss_4_year",
     "A nice family vacation or major appliance upgrades"),
    ("10 Years", "loss_10_year",
     "A reliable used car or significant down payment"),
    ("20 Years", "loss_20_year",
     "A year of college tuition or major home renovation"),
    ("30 Years (Career)", "loss_30_year",
     "Significant impact on retirement savings"),
]


def contract_end_label(config: ProjectionConfig) -> str:
    """Chart label ("M/YYYY") of the first anchor month after the contract."""
    last_years = [
        year for year in (config.alliance.last_event_year, config.kp.last_event_year)
        if year is not None
    ]
    end_year = max(last_years) + 1 if last_years else config.anchor.year
    return f"{config.anchor_month}/{end_year}"


def render_inputs(console: Console, start_wage: float, weekly_hours: float,
                  projection_years: int) -> None:
    """Render the control values the projection was run with."""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("key", style="dim")
    table.add_column("value", style="bold")
    table.add_row("Hourly Rate", format_rate(start_wage))
    table.add_row("Weekly Hours", f"{weekly_hours:g} hrs")
    table.add_row("Projection", f"{projection_years} years")
    console.print(Panel(table, title="Inputs", border_style="dim"))


def render_key_findings(console: Console, result: CalculationResult,
                        config: ProjectionConfig) -> None:
    """Render the 4-year and 30-year big-number callouts."""
    stats = result.stats
    end_month, end_year = contract_end_label(config).split("/")
    month_name = _month_abbr(int(end_month))

    contract = Panel(
        f"Money permanently lost under {config.kp.name} proposal:\n"
        f"[bold red]{format_currency(stats.loss_4_year)}[/bold red]\n"
        f"[dim]*Comparison of cumulative earnings by {month_name} {end_year}[/dim]",
        title="End of 4-Year Contract",
        border_style="blue",
    )
    career = Panel(
        f"Total lost earnings over career:\n"
        f"[bold red]{format_currency(stats.loss_30_year)}[/bold red]\n"
        f"[yellow]Even if raise percentages match later, money not earned "
        f"in the early years is never recovered.[/yellow]",
        title="Lifetime Impact (30 Years)",
        border_style="blue",
    )
    console.print(Columns([contract, career], equal=True, expand=True))


def render_snowball_table(console: Console, result: CalculationResult) -> None:
    """Render cumulative loss at each fixed horizon."""
    table = Table(
        title='The "Snowball Effect" of Lost Wages',
        caption="Small gaps early on turn into huge losses over time.",
        box=box.SIMPLE_HEAVY,
        expand=True,
    )
    table.add_column("Timeline", style="bold")
    table.add_column("Cumulative Loss", justify="right", style="red")
    table.add_column("What this could buy", style="dim")

    for index, (label, field, caption) in enumerate(SNOWBALL_ROWS):
        value = getattr(result.stats, field)
        is_last = index == len(SNOWBALL_ROWS) - 1
        table.add_row(
            label,
            format_currency(value),
            caption,
            style="bold" if is_last else None,
        )

    console.print(table)


def render_chart_table(console: Console, result: CalculationResult,
                       config: ProjectionConfig) -> None:
    """Render the quarterly rate series (the chart's data) as a table."""
    end_label = contract_end_label(config)

    table = Table(title="Wage Growth Projection", expand=True)
    table.add_column("Date", style="cyan", no_wrap=True)
    table.add_column(f"{config.alliance.name} Rate", justify="right", style="blue")
    table.add_column(f"{config.kp.name} Rate", justify="right")
    table.add_column("Hourly Gap", justify="right", style="red")
    table.add_column("Cumulative Diff", justify="right", style="yellow")

    for point in result.chart_data:
        is_contract_end = point.date == end_label
        if is_contract_end:
            table.add_section()
        table.add_row(
            point.date + (" (Contract Ends)" if is_contract_end else ""),
            format_rate(point.alliance_rate),
            format_rate(point.kp_rate),
            format_rate(point.gap),
            format_currency(point.cumulative_diff),
            style="bold" if is_contract_end else None,
        )

    console.print(table)


def render_assumptions(console: Console, weekly_hours: float,
                       config: ProjectionConfig) -> None:
    """Render the assumptions footer."""
    yearly_hours = hours_per_month(weekly_hours) * 12
    fallback_pct = (config.fallback_rate - 1) * 100
    console.print(
        f"[dim]Assumptions: Employment based on {weekly_hours:g} hours/week "
        f"({yearly_hours:g} hours/year). Projections assume a standard "
        f"{fallback_pct:g}% annual raise after the initial contract period "
        f"for both scenarios. Taxes not included.[/dim]"
    )


def render_insights(console: Console, text: str) -> None:
    """Render Gemini commentary."""
    console.print(Panel(Text(text), title="Strategic Insight", border_style="green"))


def render_schedules(console: Console, config: ProjectionConfig) -> None:
    """Render the anchor, fallback rate and both raise schedules."""
    console.print(
        f"Anchor: {config.anchor.isoformat()}  "
        f"Fallback: {config.fallback_rate:g}x every "
        f"{_month_abbr(config.anchor_month)} after each schedule ends"
    )
    for schedule in (config.alliance, config.kp):
        table = Table(title=f"{schedule.name} Schedule")
        table.add_column("Effective", style="cyan")
        table.add_column("Rate", justify="right")
        table.add_column("Description")
        for event in schedule.events:
            table.add_row(f"{event.month}/{event.year}", f"{event.rate:g}", event.description)
        if not schedule.events:
            table.add_row("-", "-", "[dim]fallback only[/dim]")
        console.print(table)


def _month_abbr(month: int) -> str:
    return ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
            "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"][month - 1]
