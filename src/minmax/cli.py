"""Root CLI group for minmax with global flags and command registration."""

from __future__ import annotations

import click

from minmax import __version__
from minmax.commands import register_commands
from minmax.commands._context import AppContext
from minmax.config.settings import MinmaxSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="minmax")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the result value.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "--allow-strings",
    is_flag=True,
    help="Accept non-numeric operands and compare them as strings.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    allow_strings: bool,
) -> None:
    """minmax — min, max and clamp over numbers, tuples and strings."""
    ctx.ensure_object(dict)
    settings = MinmaxSettings.from_cli(
        config_path=config_path,
        # Flag only ever turns strings on; otherwise defer to config.
        allow_strings=True if allow_strings else None,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
