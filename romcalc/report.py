"""Batch report — renders LineResults as a Rich table with a summary line."""

from __future__ import annotations

from typing import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from romcalc.models import LineResult


def summarize(results: Sequence[LineResult]) -> tuple[int, int]:
    """Return (ok_count, error_count)."""
    ok = sum(1 for r in results if r.ok)
    return ok, len(results) - ok


def render_results(results: Sequence[LineResult], console: Console) -> None:
    """Render a Rich table of expressions and their results."""
    if not results:
        console.print("[yellow]No expressions processed.[/yellow]")
        return

    table = Table(title="romcalc", show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Expression", min_width=15)
    table.add_column("Result", style="green")
    table.add_column("Status", justify="center")

    for r in results:
        if r.ok:
            table.add_row(str(r.line_no), escape(r.expression), r.result, "[green]ok[/green]")
        else:
            table.add_row(str(r.line_no), escape(r.expression), f"[red]{r.error}[/red]", "[red]error[/red]")

    console.print()
    console.print(table)

    ok, failed = summarize(results)
    style = "green" if failed == 0 else "yellow"
    console.print(f"[{style}]{ok} ok, {failed} error(s)[/{style}]")
    console.print()
