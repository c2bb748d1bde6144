"""romcalc — Roman numeral expression calculator.

Parses arithmetic expressions written with Roman numerals, converts them to
postfix form with a shunting-yard pass and evaluates them with integer
arithmetic that truncates toward zero. ``Z`` stands for zero.

Usage:
    python -m romcalc eval "(II + III) * II"   # X
    python -m romcalc run expressions.txt      # One result per line
    echo "-V * IV" | python -m romcalc run     # Reads stdin
    python -m romcalc postfix "II+III*II"      # II III II * +
"""

from romcalc.errors import (
    BadSymbolError,
    DivisionByZeroError,
    MalformedExpressionError,
    NumeralOverflowError,
    RomanCalcError,
    UnbalancedBracketsError,
)
from romcalc.evaluator import evaluate
from romcalc.numerals import decode, encode
from romcalc.parser import parse
from romcalc.session import solve

__all__ = [
    "BadSymbolError",
    "DivisionByZeroError",
    "MalformedExpressionError",
    "NumeralOverflowError",
    "RomanCalcError",
    "UnbalancedBracketsError",
    "decode",
    "encode",
    "evaluate",
    "parse",
    "solve",
]
