"""Settings CLI commands for payledger.

Manages settings.json - output format, log level, script strictness.
"""

import click

from payledger.sdk import (
    Settings,
    SettingsError,
    get_setting,
    get_settings_path,
    load_settings,
    set_setting,
    unset_setting,
)


@click.group()
def settings():
    """Manage settings (settings.json).

    Available settings:
    - default_output_format: text, json or yaml
    - log_level: DEBUG, INFO, WARNING or ERROR
    - strict_scripts: true/false, fail on bad script lines
    """
    pass


@settings.command("show")
def settings_show():
    """Show current settings and their effective values."""
    settings_path = get_settings_path()
    current = load_settings()

    click.echo(f"Settings file: {settings_path}")
    click.echo(f"File exists: {settings_path.exists()}")
    click.echo()

    click.echo("Effective settings:")
    for key in Settings.model_fields:
        source = "" if key in current else " (default)"
        click.echo(f"  {key}: {get_setting(key)}{source}")


@settings.command("get")
@click.argument("key")
def settings_get(key):
    """Print the effective value of KEY."""
    if key not in Settings.model_fields:
        raise click.ClickException(f"Unknown setting '{key}'")
    click.echo(get_setting(key))


@settings.command("set")
@click.argument("key")
@click.argument("value")
def settings_set(key, value):
    """Set KEY to VALUE.

    Examples:
        payledger settings set default_output_format json
        payledger settings set strict_scripts false
    """
    try:
        path = set_setting(key, value)
    except SettingsError as e:
        raise click.ClickException(str(e))
    click.echo(f"Set {key}: {get_setting(key)}")
    click.echo(f"Saved to: {path}")


@settings.command("unset")
@click.argument("key")
def settings_unset(key):
    """Remove KEY from settings.json, reverting to its default."""
    if unset_setting(key):
        click.echo(f"Cleared {key}.")
    else:
        click.echo(f"{key} was not set.")
