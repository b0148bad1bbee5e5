"""Command: generate a password and its bcrypt hash."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from randctl.commands._base import RandCommand
from randctl.commands._options import charset_options
from randctl.services.generate import GenerateService

if TYPE_CHECKING:
    from randctl.commands._context import AppContext


@click.command(
    cls=RandCommand,
    examples="""\
  randctl password 20
  randctl password 16 --min-upper 1 --min-lower 1 --min-numeric 1 --min-special 1
  randctl password 24 --show
  randctl -q password 32 > secret.txt
  randctl --json password 16 --no-special""",
)
@click.argument("length", type=int)
@charset_options
@click.option("--show", is_flag=True, help="Print the password in human output.")
@click.pass_obj
def password(
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
    show: bool,
) -> None:
    """Generate a password of LENGTH characters.

    bcrypt hashes at most 72 bytes, so LENGTH must not exceed 72.

    Human output hides the value unless --show is given (or
    ``[password] reveal = true``). --json and --quiet always include it.
    """
    result = GenerateService(app.source, app.settings).generate_password(
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
    app.emit(result, reveal=show or app.settings.password.reveal)
