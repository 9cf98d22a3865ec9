"""Root CLI group for touban with global flags and command registration."""

from __future__ import annotations

import click

from touban import __version__
from touban.commands import register_commands
from touban.commands._context import AppContext
from touban.config.settings import ToubanSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="touban")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the token.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logging.")
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
    """touban — とうばんのしょ, a duty rotation kept in a single token."""
    settings = ToubanSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings, command=ctx.invoked_subcommand)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
