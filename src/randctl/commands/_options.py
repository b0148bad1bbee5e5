"""Shared Click options for the constrained string commands."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import click

_CLASS_HELP = {
    "numeric": "digits 0-9",
    "lower": "lowercase letters",
    "upper": "uppercase letters",
    "special": "special characters",
}


def charset_options[**P, R](func: Callable[P, R]) -> Callable[P, R]:
    """Attach include/exclude flags, minimums, and --override-special."""
    options: list[Callable[[Any], Any]] = []
    for name, label in _CLASS_HELP.items():
        options.append(
            click.option(
                f"--{name}/--no-{name}",
                default=True,
                show_default=True,
                help=f"Include {label} in the optional pool.",
            )
        )
    for name, label in _CLASS_HELP.items():
        options.append(
            click.option(
                f"--min-{name}",
                type=click.IntRange(min=0),
                default=0,
                show_default=True,
                help=f"Minimum number of {label}.",
            )
        )
    options.append(
        click.option(
            "--override-special",
            default=None,
            help="Replace the default special character set "
            "(the special class must still be enabled to use it beyond minimums).",
        )
    )
    for option in reversed(options):
        func = option(func)
    return func
