from __future__ import annotations

_SUFFIXES = ("th", "st", "nd", "rd")

_ROMAN = (
    (1000, "M"), (900, "CM"), (500, "D"), (400, "CD"),
    (100, "C"), (90, "XC"), (50, "L"), (40, "XL"),
    (10, "X"), (9, "IX"), (5, "V"), (4, "IV"), (1, "I"),
)

def ordinal(n: int) -> str:
    """1 -> '1st', 12 -> '12th', 23 -> '23rd'."""
    v = abs(n) % 100
    if 11 <= v <= 13:
        return f"{n}th"
    r = v % 10
    return f"{n}{_SUFFIXES[r] if r < 4 else 'th'}"

def to_roman_numeral(n: int) -> str:
    """Roman numeral for 1..3999; anything else is returned as plain digits."""
    if n < 1 or n > 3999:
        return str(n)
    out = []
    for value, glyph in _ROMAN:
        while n >= value:
            out.append(glyph)
            n -= value
    return "".join(out)
