"""Word splitting and substring search used by the XPM reader."""

from __future__ import annotations

import re

_SEPARATORS = re.compile(r"[ \t]+")


def split_words(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs only."""
    return [word for word in _SEPARATORS.split(text) if word]


def find(text: str, needle: str, limit: int) -> int:
    """Position of the first ``needle`` in ``text``, or -1.

    The search fails at once when the needle is longer than ``limit``.
    """
    if not needle:
        raise ValueError("needle must not be empty")
    if len(needle) > limit:
        return -1
    return text.find(needle)


def find_outside_quotes(text: str, needle: str, limit: int) -> int:
    """Like :func:`find`, but ignore matches inside double-quoted parts."""
    if not needle:
        raise ValueError("needle must not be empty")
    if len(needle) > limit:
        return -1
    quoted = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1