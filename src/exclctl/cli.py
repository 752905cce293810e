"""Root CLI group for exclctl with global flags and command registration."""

from __future__ import annotations

import click

from exclctl import __version__
from exclctl.commands import register_commands
from exclctl.commands._base import ExclGroup
from exclctl.commands._context import AppContext
from exclctl.config.settings import ExclSettings


@click.group(
    cls=ExclGroup,
    invoke_without_command=True,
    examples="""\
  exclctl check
  exclctl expand --start 2024-12-01 --end 2025-01-01
  exclctl --json -c exclctl.toml expand -s 2024-12-23 -e 2024-12-28""",
)
@click.version_option(version=__version__, prog_name="exclctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
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
    """exclctl — exclusion rules for time tracking."""
    settings = ExclSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
