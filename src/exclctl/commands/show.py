"""Command: diagnostic dump of exclusion rules."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from exclctl.commands._base import ExclCommand, rule_options

if TYPE_CHECKING:
    from exclctl.commands._context import AppContext


@click.command(
    cls=ExclCommand,
    examples="""\
  exclctl show
  exclctl show --no-config --rule "exc friday >16:00:00"
  exclctl -c ~/work/exclctl.toml show""",
)
@rule_options
@click.pass_obj
def show(app: AppContext, rules: tuple[str, ...], no_config: bool) -> None:
    """Print every exclusion rule in its labeled debug form."""
    app.emit(app.service(rules, no_config=no_config).show())
