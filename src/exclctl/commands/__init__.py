"""Subcommand modules for exclctl.

Provides register_commands() which uses deferred imports to keep
``exclctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from exclctl.commands.check import check
    from exclctl.commands.expand import expand
    from exclctl.commands.show import show

    cli.add_command(check)
    cli.add_command(show)
    cli.add_command(expand)
