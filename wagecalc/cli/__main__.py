"""Wage Calc CLI - Command-line interface for wage projections."""

import click

from wagecalc import __version__

from .compare_commands import compare, chart, stats
from .schedules_commands import schedules as schedules_group
from .settings_commands import settings as settings_group


@click.group()
@click.version_option(version=__version__, prog_name="wage-calc")
def cli():
    """Wage Calc - Compare two contract raise schedules.

    Projects hourly rates month by month under both proposals and
    reports how much is lost, cumulatively, under the slower one.

    Schedules are loaded from (in order):

    \b
    1. --schedules option
    2. settings.json 'schedules' key (if set via CLI)
    3. schedules.yaml in WAGE_CALC_CONFIG_PATH or ~/.config/wage-calc/
    4. Built-in 2025 Alliance/KP reference tables
    """
    pass


cli.add_command(compare)
cli.add_command(chart)
cli.add_command(stats)
cli.add_command(schedules_group)
cli.add_command(settings_group)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
