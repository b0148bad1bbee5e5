"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Owns the entropy source and centralizes result
emission (stdout/stderr routing and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from randctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from randctl.config.settings import RandSettings
    from randctl.domain.entropy import EntropySource
    from randctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The entropy source is created lazily so ``--help`` and ``--version``
    never touch it.
    """

    def __init__(self, settings: RandSettings, source: EntropySource | None = None) -> None:
        self.settings = settings
        self._source = source

        from randctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from randctl.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def source(self) -> EntropySource:
        """The entropy source (system CSPRNG unless injected)."""
        if self._source is None:
            from randctl.infrastructure.entropy import SystemEntropySource

            self._source = SystemEntropySource()
        return self._source

    def emit(self, result: ServiceResult, *, reveal: bool = False) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout. Warnings go to stderr so they never
          pollute piped output.
        * Failure: writes to stderr and exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            reveal=reveal,
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
