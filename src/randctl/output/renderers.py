"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console backed by StringIO. Renderers are
dispatched by ``result.op`` in :func:`render_result`; unknown ops fall
through to a generic key-value renderer.

Generated values are always wrapped in ``Text`` so characters such as
``[`` or ``:`` are never parsed as markup or emoji codes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from randctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from randctl.services.result import ServiceResult

SENSITIVE_OPS = frozenset({"generate_password", "import_password"})
HIDDEN_PLACEHOLDER = "(hidden, pass --show to reveal)"

_PRESENTATION_KEYS = ("b64_url", "b64_std", "hex", "dec")
_KNOB_KEYS = (
    "numeric",
    "lower",
    "upper",
    "special",
    "min_numeric",
    "min_lower",
    "min_upper",
    "min_special",
    "override_special",
)


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False, reveal: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose, reveal=reveal)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render only the primary value, for piping into other programs."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"

    data = result.data
    if "result" in data:
        return str(data["result"])
    if "b64_url" in data:
        return str(data["b64_url"])
    if "match" in data:
        return "match" if data["match"] else "mismatch"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text.assemble(("OK", "rnd.ok"), (f"  {result.op}", "rnd.op")))


def _field(console: Console, key: str, value: Any, *, style: str = "") -> None:
    """Print a single indented key-value field."""
    if not style and (key == "id" or key.endswith("_id")):
        style = "rnd.id"
    console.print(Text.assemble((f"  {key}: ", "rnd.key"), (str(value), style)))


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block including the telemetry span tree."""
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for key, value in result.meta.items():
        if key == "telemetry":
            _render_span(console, value, indent=4)
        else:
            console.print(Text(f"    {key}: {value}"))


def _render_span(console: Console, span: dict[str, Any], indent: int = 4) -> None:
    """Render a span and its children with their timing and annotations."""
    duration = span.get("duration_ms", 0.0)
    style = "bold red" if duration > 1000 else "yellow" if duration > 100 else "dim"
    line = Text(" " * indent)
    line.append(f"{duration:>9.3f}ms", style=style)
    line.append(f"  {span.get('name', '?')}")
    annotations = span.get("annotations") or {}
    if annotations:
        line.append(f"  ({', '.join(f'{k}={v}' for k, v in annotations.items())})", style="dim")
    console.print(line)
    for child in span.get("children", []):
        _render_span(console, child, indent=indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    line = Text("ERROR", style="rnd.error")
    line.append(f"  {result.op}", style="rnd.op")
    line.append(f": {msg}")
    if err:
        line.append(f" [{err.code}]", style="dim")
    console.print(line)
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for key, value in err.detail.items():
            console.print(Text(f"    {key}: {value}"))


# ── Value renderers ───────────────────────────────────────────────────


def _render_value(
    result: ServiceResult, console: Console, *, verbose: bool = False, reveal: bool = False
) -> None:
    """Render string and password results (generated or imported)."""
    d = result.data
    sensitive = result.op in SENSITIVE_OPS
    _status_line(console, result)
    _field(console, "id", d.get("id", ""))
    if sensitive and not reveal:
        _field(console, "result", HIDDEN_PLACEHOLDER, style="rnd.hidden")
    else:
        style = "rnd.secret" if sensitive else "rnd.value"
        _field(console, "result", d.get("result", ""), style=style)
    _field(console, "length", d.get("length", ""))

    if verbose:
        if "bcrypt_hash" in d:
            _field(console, "bcrypt_hash", d["bcrypt_hash"])
        for key in _KNOB_KEYS:
            if key in d:
                _field(console, key, d[key])
        composition = d.get("composition")
        if composition:
            table = Table(show_header=True, pad_edge=False, expand=False)
            table.add_column("Class")
            table.add_column("Count", justify="right")
            for name, count in composition.items():
                table.add_row(name, str(count))
            console.print(table)
        _render_meta(console, result)


def _render_identifier(
    result: ServiceResult, console: Console, *, verbose: bool = False, reveal: bool = False
) -> None:
    """Render generate_id and import_id results as a presentation table."""
    d = result.data
    _status_line(console, result)
    _field(console, "id", d.get("id", ""))
    _field(console, "byte_length", d.get("byte_length", ""))
    if d.get("prefix"):
        _field(console, "prefix", d["prefix"])

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Format", style="rnd.key", no_wrap=True)
    table.add_column("Value", style="rnd.value", no_wrap=True)
    for key in _PRESENTATION_KEYS:
        if key in d:
            table.add_row(key, Text(str(d[key])))
    console.print(table)
    if verbose:
        _render_meta(console, result)


def _render_verify(
    result: ServiceResult, console: Console, *, verbose: bool = False, reveal: bool = False
) -> None:
    _status_line(console, result)
    match = bool(result.data.get("match"))
    _field(console, "match", "yes" if match else "no", style="rnd.ok" if match else "rnd.warning")
    if verbose:
        _render_meta(console, result)


def _render_generic(
    result: ServiceResult, console: Console, *, verbose: bool = False, reveal: bool = False
) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


_OP_RENDERERS = {
    "generate_string": _render_value,
    "generate_password": _render_value,
    "import_string": _render_value,
    "import_password": _render_value,
    "generate_id": _render_identifier,
    "import_id": _render_identifier,
    "verify_password": _render_verify,
}
