"""Command: check a password against a bcrypt hash."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from randctl.commands._base import RandCommand
from randctl.services.verify import VerifyService

if TYPE_CHECKING:
    from randctl.commands._context import AppContext


@click.command(
    cls=RandCommand,
    examples="""\
  randctl verify 'correct-horse' '$2b$10$...'
  randctl -q verify "$PASSWORD" '$2b$10$...'""",
)
@click.argument("value")
@click.argument("bcrypt_hash")
@click.pass_obj
def verify(app: AppContext, value: str, bcrypt_hash: str) -> None:
    """Check whether VALUE matches BCRYPT_HASH.

    Exits 0 either way; the result reports ``match``.
    """
    app.emit(VerifyService(app.source, app.settings).verify_password(value, bcrypt_hash))
