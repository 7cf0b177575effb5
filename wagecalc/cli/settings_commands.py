"""Settings CLI commands for Wage Calc.

Manages settings.json - schedules file location.
"""

import click
from pathlib import Path

from wagecalc.sdk import (
    load_settings,
    get_setting,
    set_setting,
    clear_setting,
    get_settings_path,
    get_config_dir,
    ScheduleConfigError,
    load_projection_config,
)


@click.group()
def settings():
    """Manage settings (settings.json).

    Available settings:
    - schedules: custom schedules.yaml path (set via 'settings schedules-file')
    """
    pass


@settings.command("show")
def settings_show():
    """Show current settings and their values."""
    settings_path = get_settings_path()
    current = load_settings()

    click.echo(f"Settings file: {settings_path}")
    click.echo(f"File exists: {settings_path.exists()}")
    click.echo()

    if not current:
        click.echo("No settings configured (using defaults).")
        click.echo()
        click.echo("Effective paths:")
        click.echo(f"  config_dir: {get_config_dir()} (default)")
        return

    click.echo("Current settings:")
    for key, value in current.items():
        click.echo(f"  {key}: {value}")

    click.echo()
    click.echo("Effective paths:")
    click.echo(f"  config_dir: {get_config_dir()}")


@settings.command("schedules-file")
@click.argument("path", required=False, type=click.Path())
@click.option("--clear", is_flag=True, help="Clear custom schedules path, revert to default")
def settings_schedules_file(path, clear):
    """Set or clear a custom schedules.yaml location.

    PATH must be a valid schedules YAML; it is checked before saving.

    Examples:
        wage-calc settings schedules-file ~/proposals/2025.yaml
        wage-calc settings schedules-file --clear
    """
    if clear:
        if clear_setting("schedules"):
            click.echo("Cleared schedules setting.")
        else:
            click.echo("schedules was not set.")
        return

    if not path:
        current = get_setting("schedules")
        if current:
            click.echo(f"Current schedules file: {current}")
        else:
            click.echo("No custom schedules file set.")
        return

    schedules_path = Path(path).expanduser().resolve()
    if not schedules_path.is_file():
        raise click.ClickException(f"File not found: {schedules_path}")

    # Validate before saving
    try:
        load_projection_config(schedules_path)
    except ScheduleConfigError as e:
        raise click.ClickException(str(e))

    set_setting("schedules", str(schedules_path))
    click.echo(f"Set schedules: {schedules_path}")
    click.echo(f"Saved to: {get_settings_path()}")
