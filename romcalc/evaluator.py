"""Postfix evaluation with integer arithmetic.

Division truncates toward zero (-7 / 2 is -3), unlike Python's floor
division. Intermediate values are unbounded; the ±3999 limit applies only when
the final value is encoded.
"""

from __future__ import annotations

from typing import Iterable

from romcalc.errors import DivisionByZeroError, MalformedExpressionError
from romcalc.models import Operator, Token, TokenKind, Value


def divide(left: int, right: int) -> int:
    """Integer division truncating toward zero.

    Raises:
        DivisionByZeroError: If right is 0.
    """
    if right == 0:
        raise DivisionByZeroError()
    if (left <= 0 and right < 0) or (left >= 0 and right > 0):
        return left // right
    return -(abs(left) // abs(right))


def apply_operator(operator: Operator, left: Value, right: Value) -> Value:
    """Combine two values into a new one."""
    a, b = left.number, right.number
    if operator.symbol == "+":
        return Value(a + b)
    if operator.symbol == "-":
        return Value(a - b)
    if operator.symbol == "*":
        return Value(a * b)
    return Value(divide(a, b))


def evaluate(tokens: Iterable[Token]) -> int:
    """Reduce a postfix token sequence to a single integer.

    An empty sequence evaluates to 0.

    Raises:
        MalformedExpressionError: If an operator lacks two operands, a token
            other than a value or operator appears, or more than one value is
            left over.
        DivisionByZeroError: If a divisor evaluates to zero.
    """
    stack: list[Value] = []
    seen = False

    for token in tokens:
        seen = True
        if token.kind == TokenKind.VALUE:
            stack.append(token)
        elif token.kind == TokenKind.OPERATOR:
            if len(stack) < 2:
                raise MalformedExpressionError()
            right = stack.pop()
            left = stack.pop()
            stack.append(apply_operator(token, left, right))
        else:
            raise MalformedExpressionError()

    if not seen:
        return 0
    if len(stack) != 1:
        raise MalformedExpressionError()
    return stack[0].number
