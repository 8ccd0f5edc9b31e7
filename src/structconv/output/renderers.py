"""Rich renderers for DecodeResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from structconv.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from structconv.domain.errors import DecodeReport
    from structconv.services.result import DecodeResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: DecodeResult, *, verbose: bool = False) -> str:
    """Render a DecodeResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()
    if result.ok:
        _render_record(result, console)
    else:
        _render_error(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


def render_report(report: DecodeReport, *, verbose: bool = False) -> str:
    """Render a bare DecodeReport as a table of failing fields."""
    console = create_console()
    _report_table(console, report, verbose=verbose)
    return get_output(console).rstrip("\n")


# ── Helpers ───────────────────────────────────────────────────────────


def _field(console: Console, key: str, value: Any, indent: int) -> None:
    """Print one key-value line, recursing into nested dicts."""
    pad = "  " * indent
    if isinstance(value, dict):
        console.print(Text(f"{pad}{key}:", style="sc.key"))
        for sub_key, sub_value in value.items():
            _field(console, sub_key, sub_value, indent + 1)
        return
    k = Text(f"{pad}{key}:", style="sc.key")
    v = Text(repr(value), style="sc.value")
    console.print(k, v)


def _report_table(console: Console, report: DecodeReport, *, verbose: bool) -> None:
    with_value = verbose or any(err.value for err in report.errors)
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Field", style="sc.path")
    if with_value:
        table.add_column("Value")
    table.add_column("Messages")
    for err in report.errors:
        # Text cells: field paths like map[DB] are not markup
        row = [Text(err.name)]
        if with_value:
            row.append(Text(err.value))
        row.append(Text("; ".join(err.messages)))
        table.add_row(*row)
    console.print(table)


# ── Renderers ─────────────────────────────────────────────────────────


def _render_record(result: DecodeResult, console: Console) -> None:
    console.print(Text.assemble(("OK", "sc.ok"), "  ", (result.target, "sc.target")))
    for key, value in result.data.items():
        _field(console, key, value, indent=1)


def _render_error(result: DecodeResult, console: Console, *, verbose: bool = False) -> None:
    report = result.error
    msg = report.message if report else "Unknown error"
    console.print(
        Text.assemble(("ERROR", "sc.error"), "  ", (result.target, "sc.target"), f": {msg}")
    )
    if report and report.errors:
        _report_table(console, report, verbose=verbose)
