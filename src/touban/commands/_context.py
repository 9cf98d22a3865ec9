"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. Provides the ledger service and centralized result
emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from touban.output.formatters import OutputSettings, format_result
from touban.services.ledger import LedgerService

if TYPE_CHECKING:
    from touban.config.settings import ToubanSettings
    from touban.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: ToubanSettings, *, command: str | None = None) -> None:
        self.settings = settings
        self.service = LedgerService()

        from touban.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose, log_json=settings.log_json, command=command
        )

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout, returns normally. Warnings go to
          stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            width=self.settings.output.width,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # JSON carries warnings in its payload; quiet mode stays quiet.
            if not (settings.json_output or settings.quiet):
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
