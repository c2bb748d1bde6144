"""CLI for the romcalc Roman numeral calculator.

Usage:
    python -m romcalc eval "II + III * II"       # VIII
    python -m romcalc eval -- "-V * IV"          # -XX (use -- before a leading minus)
    python -m romcalc run expressions.txt        # One output line per input line
    python -m romcalc run --table < input.txt    # Plus a summary table on stderr
    python -m romcalc postfix "(II + III) * II"  # II III + II *
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from romcalc.config import load_settings
from romcalc.errors import RomanCalcError
from romcalc.models import format_postfix
from romcalc.parser import parse
from romcalc.report import render_results
from romcalc.session import process_lines, solve

app = typer.Typer(
    name="romcalc",
    help="Arithmetic on Roman numerals",
    no_args_is_help=True,
)
console = Console(stderr=True)


@app.command("eval")
def cmd_eval(
    expression: List[str] = typer.Argument(help="Expression, e.g. '(II + III) * II'"),
) -> None:
    """Evaluate a single expression."""
    try:
        typer.echo(solve(" ".join(expression)))
    except RomanCalcError as e:
        typer.echo(f"error: {e}")
        raise typer.Exit(1)


@app.command("postfix")
def cmd_postfix(
    expression: List[str] = typer.Argument(help="Expression, e.g. 'II + III * II'"),
) -> None:
    """Show the postfix (Reverse Polish) form of an expression."""
    try:
        typer.echo(format_postfix(parse(" ".join(expression))))
    except RomanCalcError as e:
        typer.echo(f"error: {e}")
        raise typer.Exit(1)


@app.command("run")
def cmd_run(
    file: Optional[Path] = typer.Argument(None, help="Input file, one expression per line (default: stdin)"),
    echo: Optional[bool] = typer.Option(None, "--echo/--no-echo", help="Prefix results with the expression [env: ROMCALC_ECHO]"),
    trace: Optional[bool] = typer.Option(None, "--trace/--no-trace", help="Print postfix form to stderr [env: ROMCALC_TRACE]"),
    fail_fast: Optional[bool] = typer.Option(None, "--fail-fast/--keep-going", help="Stop at the first error [env: ROMCALC_FAIL_FAST]"),
    table: bool = typer.Option(False, "--table", "-t", help="Render a summary table on stderr when done"),
    as_json: bool = typer.Option(False, "--json", help="Emit one JSON object per line"),
) -> None:
    """Evaluate expressions line by line until input is exhausted."""
    settings = load_settings().override(echo=echo, trace=trace, fail_fast=fail_fast)

    if file is None or str(file) == "-":
        stream = sys.stdin
    else:
        if not file.is_file():
            console.print(f"[red]Input file not found: {file}[/red]")
            raise typer.Exit(2)
        stream = file.open(encoding="utf-8")

    results = []
    try:
        for record in process_lines(
            stream,
            trace=console if settings.trace else None,
            fail_fast=settings.fail_fast,
        ):
            if as_json:
                typer.echo(json.dumps(record.to_dict()))
            else:
                typer.echo(record.render(echo=settings.echo))
            results.append(record)
    finally:
        if stream is not sys.stdin:
            stream.close()

    if table:
        render_results(results, console)

    if settings.fail_fast and results and not results[-1].ok:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
