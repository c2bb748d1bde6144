"""romcalc session — feeds expressions through parse → evaluate → encode.

Data flow per line:
1. Parse the raw text into a postfix token list
2. Optionally trace the postfix form to the diagnostics console
3. Evaluate the postfix list to an integer
4. Encode the integer as a Roman numeral
5. Record the result, or the error message, in a LineResult

A failing line never affects the lines after it.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from rich.console import Console
from rich.markup import escape

from romcalc.errors import RomanCalcError
from romcalc.evaluator import evaluate
from romcalc.models import LineResult, format_postfix
from romcalc.numerals import encode
from romcalc.parser import parse


def solve(expression: str) -> str:
    """Evaluate an expression and return the result as a Roman numeral.

    Raises:
        RomanCalcError: Any parse, evaluation or encoding failure.
    """
    return encode(evaluate(parse(expression)))


def process_line(
    expression: str,
    line_no: int = 1,
    trace: Optional[Console] = None,
) -> LineResult:
    """Process one expression, capturing expression errors in the result.

    Args:
        expression: Raw expression text (trailing newline allowed).
        line_no: 1-based position of the line in its batch.
        trace: Console that receives the postfix form when given.
    """
    expression = expression.rstrip("\r\n")
    record = LineResult(line_no=line_no, expression=expression)
    try:
        record.postfix = parse(expression)
        if trace is not None:
            trace.print(f"[dim]{line_no}: {escape(format_postfix(record.postfix)) or '(empty)'}[/dim]")
        record.result = encode(evaluate(record.postfix))
    except RomanCalcError as e:
        record.error = str(e)
    return record


def process_lines(
    lines: Iterable[str],
    trace: Optional[Console] = None,
    fail_fast: bool = False,
) -> Iterator[LineResult]:
    """Process lines in order, yielding one LineResult per line.

    Lines are consumed lazily so interactive input is answered line by line.
    With fail_fast, iteration stops after the first failing line (which is
    still yielded).
    """
    for line_no, line in enumerate(lines, start=1):
        record = process_line(line, line_no, trace=trace)
        yield record
        if fail_fast and not record.ok:
            return
