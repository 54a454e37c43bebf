"""Reading XPM pixmaps into in-memory images."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Iterator

from .colornames import text_to_rgb
from .image import Image
from .wordtab import find, find_outside_quotes, split_words

TRANSPARENT = 0xFF000000

_QUOTED = re.compile(r'"([^"]*)"')
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be turned into an image."""


def _blank(text: str, start: int, length: int) -> str:
    stop = min(len(text), start + max(length, 0))
    return text[:start] + " " * (stop - start) + text[stop:]


def strip_comments(text: str) -> str:
    """Blank out C comments that lie outside double-quoted strings.

    Comment characters are replaced by spaces, so the text keeps its length.
    A ``//`` comment is blanked together with the newline that ends it.
    """
    while (begin := find_outside_quotes(text, "/*", len(text))) != -1:
        end = find(text[begin + 2 :], "*/", len(text) - begin - 2)
        text = _blank(text, begin, end + 4)
    while (begin := find_outside_quotes(text, "//", len(text))) != -1:
        end = find(text[begin + 2 :], "\n", len(text) - begin - 2)
        text = _blank(text, begin, end + 3)
    return text


def _atoi(word: str) -> int:
    match = _LEADING_INT.match(word)
    return int(match.group(1)) if match else 0


def _next_line(rows: Iterator[str], what: str) -> str:
    line = next(rows, None)
    if line is None:
        raise XpmError(f"XPM data ends before the {what} line")
    return line


def _color_value(line: str, cpp: int) -> int:
    tokens = split_words(line[cpp:])
    try:
        index = tokens.index("c") + 1
    except ValueError:
        raise XpmError(f"colour line {line!r} has no 'c' entry") from None
    if index >= len(tokens):
        raise XpmError(f"colour line {line!r} has no colour after 'c'")
    suffix = tokens[index + 1] if index + 1 < len(tokens) else None
    return text_to_rgb(tokens[index], suffix)


def parse_xpm_lines(lines: Iterable[str]) -> Image:
    """Build an image from the strings of an XPM file, header first.

    Colour keys that are not defined give black; the colour ``None`` gives
    a fully transparent pixel value.
    """
    rows = iter(lines)
    words = split_words(_next_line(rows, "header"))
    if len(words) < 4:
        raise XpmError("XPM header needs width, height, colour count and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if 0 in (width, height, ncolors, cpp):
        raise XpmError(f"invalid XPM header {words[:4]!r}")
    if ncolors < 0 or cpp < 0:
        raise XpmError(f"invalid XPM header {words[:4]!r}")

    # Short keys are looked up directly and a later definition replaces an
    # earlier one; longer keys are searched and the first definition wins.
    direct = cpp <= 2
    table: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(rows, "colour")
        key = line[:cpp]
        value = _color_value(line, cpp)
        if direct:
            table[key] = value
        else:
            table.setdefault(key, value)

    try:
        image = Image(width, height)
    except ValueError as exc:
        raise XpmError(str(exc)) from exc

    for y in range(height):
        line = _next_line(rows, "pixel")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row {y} is shorter than {width * cpp} characters")
        for x in range(width):
            color = table.get(line[x * cpp : (x + 1) * cpp], 0)
            if color == -1:
                color = TRANSPARENT
            image.put_pixel(x, y, color)
    return image


def _quoted_strings(text: str) -> Iterator[str]:
    for match in _QUOTED.finditer(text):
        yield match.group(1)


def parse_xpm_text(text: str) -> Image:
    """Build an image from the full text of an XPM file."""
    return parse_xpm_lines(_quoted_strings(strip_comments(text)))


def load_xpm(path: str | os.PathLike[str]) -> Image:
    """Read an XPM file from disk."""
    with open(path, encoding="latin-1") as handle:
        text = handle.read()
    return parse_xpm_text(text)