"""payledger CLI - Run payroll scripts against an in-memory ledger."""

import json
import logging
import os
from pathlib import Path

import click
import yaml
from rich.console import Console

from payledger import __version__
from payledger.sdk import (
    PayrollApp,
    ScriptSyntaxError,
    SettingsError,
    get_setting,
    get_settings,
    ledger_snapshot,
    parse_script,
)

from .renderers.ledger_renderer import render_ledger
from .settings_commands import settings as settings_group

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.version_option(version=__version__, prog_name="payledger")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Override LOG_LEVEL and the log_level setting.",
)
def cli(log_level):
    """payledger - Payroll ledger driven by transaction scripts.

    A script is a list of commands (AddEmp, TimeCard, ChgEmp, Payday, ...),
    one per line. `payledger run` executes it against a fresh in-memory
    ledger and prints the resulting employees and paychecks.

    Log level is taken from (in order):

    \b
    1. --log-level option
    2. LOG_LEVEL environment variable
    3. settings.json 'log_level' key
    """
    level = log_level or os.environ.get("LOG_LEVEL") or get_setting("log_level")
    logging.getLogger().setLevel(getattr(logging, str(level).upper(), logging.INFO))


cli.add_command(settings_group)


@cli.command("run")
@click.argument("script", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json", "yaml"]),
    help="Output format (default: 'default_output_format' setting, else text).",
)
@click.option("--lenient", is_flag=True, help="Stop parsing at the first bad line instead of failing.")
def run_script(script, output_format, lenient):
    """Run SCRIPT against a fresh ledger and show the result.

    Failed transactions are skipped and listed in the run summary; a
    syntax error in the script aborts before anything runs (unless
    --lenient).

    Examples:
        payledger run payroll.scr
        payledger run payroll.scr --format json
    """
    try:
        settings = get_settings()
    except SettingsError as e:
        raise click.ClickException(str(e))

    output_format = output_format or settings.default_output_format
    strict = settings.strict_scripts and not lenient

    try:
        app = PayrollApp(script.read_text(), strict=strict)
    except ScriptSyntaxError as e:
        raise click.ClickException(f"{script.name}: {e}")

    report = app.run()
    data = ledger_snapshot(app.dao, report, app.disbursements)

    if output_format == "json":
        click.echo(json.dumps(data, indent=2))
    elif output_format == "yaml":
        click.echo(yaml.safe_dump(data, sort_keys=False), nl=False)
    else:
        render_ledger(Console(), data)


@cli.command("check")
@click.argument("script", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def check_script(script):
    """Parse SCRIPT and list its commands without running them."""
    try:
        commands = parse_script(script.read_text())
    except ScriptSyntaxError as e:
        raise click.ClickException(f"{script.name}: {e}")

    for i, command in enumerate(commands, start=1):
        click.echo(f"{i:4d}  {command}")
    click.echo(f"\n{len(commands)} command(s) OK")


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
