"""Error types raised while parsing and evaluating Roman numeral expressions.

Every error derives from RomanCalcError (a ValueError) and aborts only the
expression being processed. The message is what the CLI prints after
``error: ``.
"""

from __future__ import annotations

from typing import Optional


class RomanCalcError(ValueError):
    """Base class for all expression errors."""

    message = "Invalid expression"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.message)


class BadSymbolError(RomanCalcError):
    """An unrecognized character was found while scanning."""

    def __init__(self, position: int, symbol: Optional[str] = None) -> None:
        self.position = position
        self.symbol = symbol
        super().__init__(f"Bad symbol on position {position}")


class UnbalancedBracketsError(RomanCalcError):
    """A ')' without a matching '(' or a '(' that is never closed."""

    message = "Invalid bracket sequence in expression"


class DivisionByZeroError(RomanCalcError, ZeroDivisionError):
    message = "Division by zero"


class NumeralOverflowError(RomanCalcError, OverflowError):
    """A value is too large in magnitude to be written as a Roman numeral."""

    message = "Roman number overflow"

    def __init__(self, value: Optional[int] = None) -> None:
        self.value = value
        super().__init__()


class MalformedExpressionError(RomanCalcError):
    """The postfix sequence does not reduce to exactly one value."""

    message = "Invalid expression format"
