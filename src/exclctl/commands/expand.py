"""Command: project exclusion rules onto a date range."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

import click

from exclctl.commands._base import ExclCommand, rule_options

if TYPE_CHECKING:
    from exclctl.commands._context import AppContext

DATETIME_FORMATS = ["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%d %H:%M:%S"]


@click.command(
    cls=ExclCommand,
    examples="""\
  exclctl expand --start 2024-12-01 --end 2025-01-01
  exclctl expand -s 2024-12-23 -e 2024-12-28 --rule "exc day off 2024-12-25"
  exclctl -q expand -s "2024-12-02 08:00:00" -e "2024-12-02 18:00:00"
  exclctl --json expand -s 2024-12-01 -e 2025-01-01 --no-config -r "exc monday <09:00:00"
  exclctl expand -s 2024-01-01 -e 2025-01-01""",
)
@click.option(
    "-s",
    "--start",
    type=click.DateTime(formats=DATETIME_FORMATS),
    required=True,
    help="Inclusive start of the range.",
)
@click.option(
    "-e",
    "--end",
    type=click.DateTime(formats=DATETIME_FORMATS),
    required=True,
    help="Exclusive end of the range.",
)
@rule_options
@click.pass_obj
def expand(
    app: AppContext,
    start: datetime,
    end: datetime,
    rules: tuple[str, ...],
    no_config: bool,
) -> None:
    """List the intervals every exclusion rule covers within [START, END)."""
    app.emit(app.service(rules, no_config=no_config).expand(start, end))
