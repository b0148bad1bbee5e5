"""Output mode selection.

The CLI renders ServiceResult for humans (Rich), for machines (--json),
or for pipes (--quiet: the bare primary value).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from randctl.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from randctl.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Rendering switches derived from global CLI flags.

    ``reveal`` only affects human output; JSON and quiet modes always carry
    the value since they exist to be consumed by other programs.
    """

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    reveal: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult according to *settings*."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose, reveal=settings.reveal)
