"""Schedules CLI commands for Wage Calc.

Manages schedules.yaml - the raise tables for both proposals.
"""

import json
from typing import Optional

import click
from rich.console import Console

from wagecalc.sdk import (
    ConfigNotFoundError,
    ScheduleConfigError,
    get_schedules_path,
    load_projection_config,
    write_default_schedules,
)
from .renderers.projection_renderer import render_schedules


@click.group()
def schedules():
    """Manage raise schedules (schedules.yaml).

    Without a schedules.yaml, the built-in 2025 Alliance and KP
    reference tables are used.
    """
    pass


@schedules.command("show")
@click.option("--schedules", "schedules_path", type=click.Path(exists=True, dir_okay=False),
              help="Schedules YAML to show instead of the configured one")
@click.option("--format", "output_format", type=click.Choice(["table", "json"]), default="table",
              help="Output format (default: table)")
def schedules_show(schedules_path: Optional[str], output_format: str):
    """Show the active raise schedules."""
    try:
        config = load_projection_config(schedules_path)
    except ScheduleConfigError as e:
        raise click.ClickException(str(e))

    if output_format == "json":
        click.echo(json.dumps(config.model_dump(mode="json"), indent=2))
        return

    render_schedules(Console(width=120), config)


@schedules.command("init")
@click.option("--force", is_flag=True, help="Overwrite an existing schedules.yaml")
def schedules_init(force: bool):
    """Write the reference schedules to schedules.yaml for editing."""
    try:
        path = write_default_schedules(overwrite=force)
    except FileExistsError as e:
        raise click.ClickException(f"{e}\nUse --force to overwrite.")
    click.echo(f"Wrote reference schedules to: {path}")


@schedules.command("path")
def schedules_path_cmd():
    """Print the resolved schedules.yaml path and whether it exists."""
    try:
        path = get_schedules_path()
    except ConfigNotFoundError as e:
        raise click.ClickException(str(e))

    click.echo(str(path))
    if not path.exists():
        click.echo("(not found - using built-in reference schedules)")
