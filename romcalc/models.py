"""Data models for romcalc.

Token variants (Value, Operator, Bracket) that flow parser → evaluator, and
LineResult, the per-line record that flows session → report → CLI.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from romcalc.numerals import encode

OPERATOR_SYMBOLS = "+-*/"
OPEN_BRACKET = "("
CLOSE_BRACKET = ")"


class TokenKind(str, Enum):
    """Token variants."""

    VALUE = "value"
    OPERATOR = "operator"
    BRACKET = "bracket"


# Shunting-yard priorities: higher binds tighter
VALUE_PRIORITY = 3
_OPERATOR_PRIORITY = {"+": 0, "-": 0, "*": 1, "/": 1}
BRACKET_PRIORITY = -1


@dataclass(frozen=True)
class Value:
    """A resolved operand."""

    number: int

    kind = TokenKind.VALUE
    priority = VALUE_PRIORITY

    def __str__(self) -> str:
        try:
            return encode(self.number)
        except OverflowError:
            return str(self.number)


@dataclass(frozen=True)
class Operator:
    """A binary operator: one of + - * /."""

    symbol: str

    kind = TokenKind.OPERATOR

    def __post_init__(self) -> None:
        if self.symbol not in _OPERATOR_PRIORITY:
            raise ValueError(f"Unknown operator: {self.symbol!r}")

    @property
    def priority(self) -> int:
        return _OPERATOR_PRIORITY[self.symbol]

    def __str__(self) -> str:
        return self.symbol


@dataclass(frozen=True)
class Bracket:
    """A parenthesis. Structural only, never part of a postfix sequence."""

    opening: bool

    kind = TokenKind.BRACKET
    priority = BRACKET_PRIORITY

    def __str__(self) -> str:
        return OPEN_BRACKET if self.opening else CLOSE_BRACKET


Token = Union[Value, Operator, Bracket]


def format_postfix(tokens: list[Token]) -> str:
    """Render a postfix sequence as space-separated text, e.g. 'II III +'."""
    return " ".join(str(t) for t in tokens)


@dataclass
class LineResult:
    """Outcome of processing a single input line."""

    line_no: int
    expression: str
    result: Optional[str] = None
    error: Optional[str] = None
    postfix: list[Token] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None

    def render(self, echo: bool = False) -> str:
        """Output line: the bare result, or 'error: <message>'."""
        text = self.result if self.ok else f"error: {self.error}"
        if echo:
            return f"{self.expression.strip()} = {text}"
        return text

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "line": self.line_no,
            "expression": self.expression,
            "result": self.result,
            "error": self.error,
            "postfix": format_postfix(self.postfix),
        }
