"""Conversion between integers and Roman numeral text.

``Z`` is the zero symbol. Encoding is limited to magnitudes up to 3999;
negative values get a leading ``-``. Decoding does not validate numeral
well-formedness: any run of known letters produces a number.
"""

from __future__ import annotations

from romcalc.errors import BadSymbolError, NumeralOverflowError

ZERO_SYMBOL = "Z"
MAX_VALUE = 3999

# Additive value of each letter
_ADDITIVE: dict[str, int] = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}

# Combined value of the standard subtractive pairs (high - low)
_SUBTRACTIVE: dict[tuple[str, str], int] = {
    ("I", "V"): 4,
    ("I", "X"): 9,
    ("X", "L"): 40,
    ("X", "C"): 90,
    ("C", "D"): 400,
    ("C", "M"): 900,
}

# Encoding weights in descending order, subtractive pairs included
_WEIGHTS: list[tuple[int, str]] = [
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
]

NUMERAL_LETTERS = frozenset(_ADDITIVE) | {ZERO_SYMBOL}


def is_numeral(char: str) -> bool:
    """True if char is one of IVXLCDM or the zero symbol."""
    return char in NUMERAL_LETTERS


def _letter_value(letter: str) -> int:
    return _ADDITIVE.get(letter, 0)


def decode(text: str) -> int:
    """Convert Roman numeral text to an integer.

    A letter preceded by a smaller one forms a subtractive pair: the pair is
    worth its table value (``IV`` is 4), so the previous letter, already
    counted, is taken back out. Ascending pairs missing from the table (``IL``)
    add nothing for the second letter. ``Z`` alone is 0 and counts as 0 inside
    a longer run.

    Args:
        text: Letters from IVXLCDMZ, e.g. "MCMXCIV".

    Returns:
        The integer value.

    Raises:
        BadSymbolError: If text contains any other character.
    """
    if text == ZERO_SYMBOL:
        return 0

    for index, letter in enumerate(text):
        if not is_numeral(letter):
            raise BadSymbolError(index + 1, letter)

    total = 0
    previous = None
    for letter in text:
        current = _letter_value(letter)
        if previous is not None and _letter_value(previous) < current:
            prev_value = _letter_value(previous)
            total += _SUBTRACTIVE.get((previous, letter), prev_value) - prev_value
        else:
            total += current
        previous = letter
    return total


def encode(value: int) -> str:
    """Convert an integer to Roman numeral text.

    Zero becomes ``Z``; negative values are prefixed with ``-``.

    Raises:
        NumeralOverflowError: If abs(value) exceeds 3999.
    """
    if value == 0:
        return ZERO_SYMBOL
    if abs(value) > MAX_VALUE:
        raise NumeralOverflowError(value)

    parts = []
    if value < 0:
        parts.append("-")
        value = abs(value)

    while value > 0:
        for weight, glyph in _WEIGHTS:
            if value >= weight:
                value -= weight
                parts.append(glyph)
                break
    return "".join(parts)
