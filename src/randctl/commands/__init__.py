"""Subcommand modules for randctl.

Provides register_commands() which uses deferred imports to keep
``randctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all commands on the root CLI group.

    One group (import) and four standalone commands.
    """
    from randctl.commands.import_cmd import import_group

    cli.add_command(import_group)

    from randctl.commands.id_cmd import id_cmd
    from randctl.commands.password import password
    from randctl.commands.string_cmd import string_cmd
    from randctl.commands.verify import verify

    cli.add_command(string_cmd)
    cli.add_command(password)
    cli.add_command(id_cmd)
    cli.add_command(verify)
