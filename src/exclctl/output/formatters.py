"""Output mode dispatch for ServiceResult.

The CLI renders results for humans (Rich), for scripts (--quiet), or
for machines (--json).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from exclctl.output.renderers import DEFAULT_TIME_FORMAT, render_quiet, render_result

if TYPE_CHECKING:
    from exclctl.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output flags resolved from the CLI."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    time_format: str = DEFAULT_TIME_FORMAT


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult according to *settings*.

    JSON wins over quiet, quiet wins over the human renderer.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result, time_format=settings.time_format)
    return render_result(result, verbose=settings.verbose, time_format=settings.time_format)
