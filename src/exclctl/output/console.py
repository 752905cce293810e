"""Rich Console factory and theme for exclctl output.

Consoles render into a StringIO buffer so renderers stay pure
``ServiceResult -> str`` functions.  In non-TTY environments (tests,
pipes) Rich disables color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

EXCL_THEME = Theme(
    {
        "excl.ok": "bold green",
        "excl.error": "bold red",
        "excl.warning": "bold yellow",
        "excl.op": "bold cyan",
        "excl.key": "dim",
        "excl.rule": "bold",
        "excl.exclude": "red",
        "excl.include": "green",
        "excl.time": "blue",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=EXCL_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_effect(additive: bool) -> str:
    """Style for an interval that re-includes (additive) or excludes time."""
    return "excl.include" if additive else "excl.exclude"
