"""Command group: import existing values (string, password, id)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from randctl.commands._base import RandGroup
from randctl.services.imports import ImportService

if TYPE_CHECKING:
    from randctl.commands._context import AppContext

_IMPORT_EXAMPLES = """\
  randctl import string 'aB3$xY9!'
  randctl import password 'correct-horse' --show
  randctl import id p-9Yfz3g4Wdxo
  randctl import id 'my,prefix,9Yfz3g4Wdxo'"""


@click.group("import", cls=RandGroup, examples=_IMPORT_EXAMPLES)
@click.pass_obj
def import_group(app: AppContext) -> None:
    """Re-derive result fields from an existing value."""


@import_group.command("string")
@click.argument("value")
@click.pass_obj
def import_string(app: AppContext, value: str) -> None:
    """Import VALUE as a random string."""
    app.emit(ImportService(app.source, app.settings).import_string(value))


@import_group.command("password")
@click.argument("value")
@click.option("--show", is_flag=True, help="Print the password in human output.")
@click.pass_obj
def import_password(app: AppContext, value: str, show: bool) -> None:
    """Import VALUE as a password and hash it."""
    result = ImportService(app.source, app.settings).import_password(value)
    app.emit(result, reveal=show or app.settings.password.reveal)


@import_group.command(
    "id",
    examples="""\
  randctl import id 9Yfz3g4Wdxo
  randctl import id 'web-,9Yfz3g4Wdxo'""",
)
@click.argument("import_id")
@click.pass_obj
def import_id_cmd(app: AppContext, import_id: str) -> None:
    """Import IMPORT_ID, given as B64URL or PREFIX,B64URL."""
    app.emit(ImportService(app.source, app.settings).import_id(import_id))
