"""Command: validate exclusion rule syntax."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from exclctl.commands._base import ExclCommand, rule_options

if TYPE_CHECKING:
    from exclctl.commands._context import AppContext


@click.command(
    cls=ExclCommand,
    examples="""\
  exclctl check
  exclctl --json check --no-config --rule "exc day off 2024-12-25"
  exclctl check --rule "exc saturday >00:00:00" --rule "exc sunday >00:00:00"
  exclctl -v check""",
)
@rule_options
@click.pass_obj
def check(app: AppContext, rules: tuple[str, ...], no_config: bool) -> None:
    """Validate the syntax of configured and extra exclusion rules.

    Only syntax is checked; time blocks and dates are decoded by expand.
    """
    app.emit(app.service(rules, no_config=no_config).check())
