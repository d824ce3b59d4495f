"""Settings CLI commands for NYC Tax.

Manages settings.json - default filing status, preset and output format.
"""

import click

from nyctax.sdk import (
    InvalidSettingError,
    get_settings_path,
    load_settings,
    set_setting,
    unset_setting,
)


@click.group()
def settings():
    """Manage settings (settings.json).

    Available settings:
    - filing: default filing status (single, married)
    - preset: default preset for 'budget'
    - output_format: default output format (text, json)
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
        return

    click.echo("Current settings:")
    for key, value in current.items():
        click.echo(f"  {key}: {value}")


@settings.command("set")
@click.argument("key")
@click.argument("value")
def settings_set(key, value):
    """Set a setting value.

    Examples:
        nyc-tax settings set filing married
        nyc-tax settings set preset senior
    """
    try:
        path = set_setting(key, value)
    except InvalidSettingError as e:
        raise click.ClickException(str(e))

    click.echo(f"Set {key}: {value}")
    click.echo(f"Saved to: {path}")


@settings.command("unset")
@click.argument("key")
def settings_unset(key):
    """Clear a setting, reverting to its default."""
    if unset_setting(key):
        click.echo(f"Cleared {key} setting.")
    else:
        click.echo(f"{key} was not set.")
