"""Custom Click base classes and shared options.

ExclCommand and ExclGroup accept an ``examples`` parameter; passing
``--examples`` prints them and exits, keeping ``--help`` concise.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

import click

_F = TypeVar("_F", bound=Callable[..., Any])


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command or group."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class ExclCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class ExclGroup(click.Group):
    """Click Group whose subcommands default to :class:`ExclCommand`."""

    command_class = ExclCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


def rule_options(func: _F) -> _F:
    """Add ``--rule`` (repeatable) and ``--no-config`` to a command."""
    func = click.option(
        "--no-config",
        is_flag=True,
        help="Ignore rules from exclctl.toml; use only --rule values.",
    )(func)
    func = click.option(
        "-r",
        "--rule",
        "rules",
        multiple=True,
        help="Extra exclusion rule line, e.g. 'exc monday <09:00:00'. Repeatable.",
    )(func)
    return func
