"""Command: generate a random identifier."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from randctl.commands._base import RandCommand
from randctl.services.generate import GenerateService

if TYPE_CHECKING:
    from randctl.commands._context import AppContext


@click.command(
    "id",
    cls=RandCommand,
    examples="""\
  randctl id
  randctl id 16
  randctl id 8 --prefix web-
  randctl -q id 32""",
)
@click.argument("byte_length", type=int, required=False)
@click.option("--prefix", default=None, help="Prefix added verbatim to every presentation.")
@click.pass_obj
def id_cmd(app: AppContext, byte_length: int | None, prefix: str | None) -> None:
    """Generate BYTE_LENGTH random bytes as base64, hex, and decimal.

    BYTE_LENGTH defaults to ``[id] default_byte_length`` (8).
    """
    if byte_length is None:
        byte_length = app.settings.id.default_byte_length
    result = GenerateService(app.source, app.settings).generate_id(byte_length, prefix=prefix)
    app.emit(result)
