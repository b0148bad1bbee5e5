"""Command: generate a non-sensitive random string."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from randctl.commands._base import RandCommand
from randctl.commands._options import charset_options
from randctl.services.generate import GenerateService

if TYPE_CHECKING:
    from randctl.commands._context import AppContext


@click.command(
    "string",
    cls=RandCommand,
    examples="""\
  randctl string 16
  randctl string 12 --no-special --min-numeric 2
  randctl string 24 --override-special '-_' --min-special 1
  randctl -q string 32 --no-upper --no-special""",
)
@click.argument("length", type=int)
@charset_options
@click.pass_obj
def string_cmd(
    app: AppContext,
    length: int,
    numeric: bool,
    lower: bool,
    upper: bool,
    special: bool,
    min_numeric: int,
    min_lower: int,
    min_upper: int,
    min_special: int,
    override_special: str | None,
) -> None:
    """Generate a random string of LENGTH characters."""
    result = GenerateService(app.source, app.settings).generate_string(
        length,
        numeric=numeric,
        lower=lower,
        upper=upper,
        special=special,
        min_numeric=min_numeric,
        min_lower=min_lower,
        min_upper=min_upper,
        min_special=min_special,
        override_special=override_special,
    )
    app.emit(result)
