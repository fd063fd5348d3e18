"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. Opens the roster lazily so ``--help`` and
``--version`` never touch the database, and routes results to
stdout/stderr with the matching exit code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from stargate.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from stargate.config.settings import StargateSettings
    from stargate.infrastructure.roster import Roster
    from stargate.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: StargateSettings) -> None:
        self.settings = settings
        self._roster: Roster | None = None

        from stargate.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from stargate.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def roster(self) -> Roster:
        """The roster (opened on first access, seeded if configured)."""
        if self._roster is None:
            from stargate.infrastructure.roster import Roster

            self._roster = Roster(self.settings)
            if self.settings.seed.on_startup:
                from stargate.services.seed import SeedService

                seeded = SeedService(self._roster).seed_development_data()
                if not seeded.ok:
                    self.emit(seeded)
        return self._roster

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: stdout, exit 0. Warnings go to stderr (human mode).
        * Failure: stderr, exit 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
