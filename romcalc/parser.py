"""Infix → postfix conversion for Roman numeral expressions.

Shunting-yard over the whitespace-stripped input:
1. Numeral runs are decoded into Value tokens (signed by a pending unary minus)
2. '(' goes on the operator stack, ')' unwinds it to the matching '('
3. Binary operators pop everything of equal or higher priority, then push
4. Leftover operators are flushed to the output at the end

A '-' is unary when it is followed by '(' or a numeral letter and it starts
the expression or follows an operator or a bracket. A unary minus emits
nothing; it only negates the next numeral run.
"""

from __future__ import annotations

from romcalc.errors import BadSymbolError, UnbalancedBracketsError
from romcalc.models import (
    CLOSE_BRACKET,
    OPEN_BRACKET,
    OPERATOR_SYMBOLS,
    Bracket,
    Operator,
    Token,
    TokenKind,
    Value,
)
from romcalc.numerals import decode, is_numeral


def strip_whitespace(raw: str) -> str:
    """Drop every whitespace character from raw."""
    return "".join(c for c in raw if not c.isspace())


def _is_operator(char: str) -> bool:
    return char in OPERATOR_SYMBOLS


class _Parser:
    """Working state for a single parse: cursor, operator stack, output."""

    def __init__(self, data: str) -> None:
        self.data = data
        self.position = 0
        self.stack: list[Token] = []
        self.out: list[Token] = []

    def is_unary(self, current: int) -> bool:
        data = self.data
        if data[current] != "-" or current + 1 >= len(data):
            return False
        following = data[current + 1]
        if following != OPEN_BRACKET and not is_numeral(following):
            return False
        if current == 0:
            return True
        previous = data[current - 1]
        return _is_operator(previous) or previous in (OPEN_BRACKET, CLOSE_BRACKET)

    def read_number(self) -> int:
        start = self.position
        while self.position < len(self.data) and is_numeral(self.data[self.position]):
            self.position += 1
        return decode(self.data[start:self.position])

    def close_bracket(self) -> None:
        while self.stack and self.stack[-1].kind != TokenKind.BRACKET:
            self.out.append(self.stack.pop())
        if not self.stack:
            raise UnbalancedBracketsError()
        self.stack.pop()

    def push_operator(self, operator: Operator) -> None:
        while self.stack and self.stack[-1].priority >= operator.priority:
            self.out.append(self.stack.pop())
        self.stack.append(operator)

    def run(self) -> list[Token]:
        sign = 1
        while self.position < len(self.data):
            char = self.data[self.position]

            if is_numeral(char):
                self.out.append(Value(self.read_number() * sign))
                sign = 1
                continue

            if char == OPEN_BRACKET:
                self.stack.append(Bracket(opening=True))
            elif char == CLOSE_BRACKET:
                self.close_bracket()
            elif _is_operator(char):
                if self.is_unary(self.position):
                    sign = -1
                    self.position += 1
                    continue
                self.push_operator(Operator(char))
            else:
                raise BadSymbolError(self.position + 1, char)

            sign = 1
            self.position += 1

        while self.stack:
            token = self.stack.pop()
            if token.kind != TokenKind.OPERATOR:
                raise UnbalancedBracketsError()
            self.out.append(token)

        return self.out


def parse(raw: str) -> list[Token]:
    """Convert an infix expression to a postfix token list.

    Args:
        raw: Expression text, e.g. "(II + III) * -IV". Whitespace is ignored.

    Returns:
        Value and Operator tokens in postfix order. Empty for blank input.

    Raises:
        BadSymbolError: On a character that is not a numeral letter, operator
            or bracket. The position is 1-based in the whitespace-free text.
        UnbalancedBracketsError: On a ')' without '(' or an unclosed '('.
    """
    return _Parser(strip_whitespace(raw)).run()
