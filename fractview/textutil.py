"""Small text helpers: numeric argument checks, prefix comparison, decimal parsing."""

from __future__ import annotations

import sys

_WHITESPACE = frozenset(chr(code) for code in range(9, 14)) | {" "}


def parse_double(text: str) -> float:
    """Parse a decimal number the way the command line expects it.

    Leading whitespace is skipped, then any run of ``+`` and ``-`` signs
    (each ``-`` flips the sign).  Every character up to an optional ``.``
    counts as a digit of the integer part, and every character after it as a
    digit of the fractional part.
    """
    chars = iter(text.lstrip("".join(_WHITESPACE)))
    sign = 1
    integer_part = 0
    fractional_part = 0.0
    weight = 1.0

    current = next(chars, "")
    while current in ("+", "-") and current:
        if current == "-":
            sign = -sign
        current = next(chars, "")

    while current and current != ".":
        integer_part = integer_part * 10 + (ord(current) - 48)
        current = next(chars, "")

    if current == ".":
        current = next(chars, "")

    while current:
        weight /= 10
        fractional_part += (ord(current) - 48) * weight
        current = next(chars, "")

    return (integer_part + fractional_part) * sign


def is_numeric_arg(arg: str) -> bool:
    """Tell whether ``arg`` looks like ``-?digits`` with at most one ``.``.

    The first character must be a ``-`` or a digit; the rest may only be
    digits and a single decimal point.
    """
    if not arg:
        return False
    first, rest = arg[0], arg[1:]
    if first != "-" and not first.isascii() or (first != "-" and not first.isdigit()):
        return False
    if any(not (ch.isascii() and ch.isdigit()) and ch != "." for ch in rest):
        return False
    return rest.count(".") <= 1


def prefix_compare(s1: str | None, s2: str | None, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns zero when they agree on that prefix, otherwise the difference of
    the first differing bytes (a missing byte counts as zero).  A missing
    string or a non-positive ``n`` compares as equal.
    """
    if s1 is None or s2 is None or n <= 0:
        return 0
    left = s1.encode("utf-8")
    right = s2.encode("utf-8")
    for index in range(n):
        a = left[index] if index < len(left) else 0
        b = right[index] if index < len(right) else 0
        if a != b or a == 0:
            return a - b
    return 0


def write_error(message: str | None) -> None:
    """Write ``message`` to standard error as it is."""
    if message is None:
        return
    sys.stderr.write(message)
    sys.stderr.flush()