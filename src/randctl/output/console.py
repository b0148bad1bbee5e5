"""Rich Console factory and theme for randctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract. In non-TTY environments (tests,
pipes) Rich disables color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

RAND_THEME = Theme(
    {
        "rnd.ok": "bold green",
        "rnd.error": "bold red",
        "rnd.warning": "bold yellow",
        "rnd.op": "bold cyan",
        "rnd.key": "dim",
        "rnd.id": "bold blue",
        "rnd.value": "bold",
        "rnd.secret": "bold magenta",
        "rnd.hidden": "dim italic",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width. Wide by default so long values
            never wrap mid-string.
    """
    return Console(
        file=StringIO(),
        theme=RAND_THEME,
        no_color=no_color,
        highlight=False,
        soft_wrap=True,
        width=width or 160,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
