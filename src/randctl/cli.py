"""Root CLI group for randctl with global flags and command registration."""

from __future__ import annotations

import click

from randctl import __version__
from randctl.commands import register_commands
from randctl.commands._context import AppContext
from randctl.config.settings import RandSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="randctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the generated value.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logs and timing.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """randctl — secure random strings, passwords, and identifiers."""
    ctx.ensure_object(dict)
    # Callers (tests, embedding applications) may pre-seed an entropy source.
    source = ctx.obj.get("source") if isinstance(ctx.obj, dict) else None
    settings = RandSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings, source=source)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
