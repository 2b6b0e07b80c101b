"""Clock and integer-parsing helpers shared by the simulation."""

from __future__ import annotations

import time

_WHITESPACE = frozenset("\t\n\v\f\r ")


def parse_int(text: str) -> int:
    """Parse a leading integer from text, stopping at the first non-digit.

    Leading whitespace and a single sign are accepted. Text without
    leading digits parses as 0, so this never raises on bad input.
    """
    rest = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for char in rest:
        if not ("0" <= char <= "9"):
            break
        digits.append(char)
    value = int("".join(digits)) if digits else 0
    return sign * value


def now_ms() -> int:
    """Return the wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000