"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``.  Owns logging setup, service construction, and
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

import click

from exclctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from exclctl.config.settings import ExclSettings
    from exclctl.services.exclusions import ExclusionService
    from exclctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: ExclSettings) -> None:
        self.settings = settings

        from exclctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def service(self, extra: Iterable[str] = (), *, no_config: bool = False) -> ExclusionService:
        """Build an ExclusionService over configured rules plus *extra*."""
        from exclctl.services.exclusions import ExclusionService

        return ExclusionService.from_settings(
            self.settings,
            extra=extra,
            include_config=not no_config,
        )

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout.  Warnings go to stderr so they do
          not pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            time_format=self.settings.output.time_format,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
