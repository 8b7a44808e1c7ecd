"""Reader for XPM (X PixMap) images.

An XPM document is a C array of strings: a header line
``"<width> <height> <colours> <chars-per-pixel>"``, one line per colour
(``"<chars> c <colour>"``), then one line of pixel characters per row.
Colours are ``#RRGGBB`` hex values or names from the colour table; the
name ``none`` marks a transparent pixel, which is stored as ``0xFF000000``.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from os import PathLike

from .colors import lookup_color
from .image import Image
from .text import find, find_unquoted, split_words

TRANSPARENT = 0xFF000000
_NAME_LIMIT = 63

_INT = re.compile(r"\s*([+-]?\d+)")
_HEX = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be decoded."""


def _atoi(word: str) -> int:
    match = _INT.match(word)
    return int(match.group(1)) if match else 0


def _hex_value(digits: str) -> int:
    match = _HEX.match(digits)
    if not match:
        return 0
    value = int(match.group(2), 16)
    if match.group(1) == "-":
        value = -value
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def _blank(text: str, start: int, stop: int) -> str:
    stop = min(stop, len(text))
    return text[:start] + " " * (stop - start) + text[stop:]


def strip_comments(text: str) -> str:
    """Replace ``/* */`` and ``//`` comments outside strings with spaces.

    The result has the same length as ``text``.  A line comment is blanked
    together with the newline that ends it; an unterminated comment is
    blanked to the end of the text.
    """
    while (begin := find_unquoted(text, "/*")) != -1:
        end = find(text[begin + 2 :], "*/")
        stop = len(text) if end == -1 else begin + end + 4
        text = _blank(text, begin, stop)
    while (begin := find_unquoted(text, "//")) != -1:
        end = find(text[begin + 2 :], "\n")
        stop = len(text) if end == -1 else begin + end + 3
        text = _blank(text, begin, stop)
    return text


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of each double-quoted string in ``text``, in order."""
    pos = 0
    while True:
        opening = text.find('"', pos)
        if opening == -1:
            return
        closing = text.find('"', opening + 1)
        if closing == -1:
            return
        yield text[opening + 1 : closing]
        pos = closing + 1


def parse_color(name: str, end: str | None = None) -> int:
    """Return the colour value of an XPM colour specification.

    ``#`` introduces a hex value.  Otherwise ``name`` (joined with ``end``
    by a space when given) is looked up in the colour table; an unknown
    name gives 0 and ``none`` gives -1.
    """
    if name.startswith("#"):
        return _hex_value(name[1:])
    if end is not None:
        name = f"{name} {end}"[:_NAME_LIMIT]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"missing {what}") from None


def _read_header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError(f"bad header: {line!r}")
    values = tuple(_atoi(word) for word in words[:4])
    if any(value <= 0 for value in values):
        raise XpmError(f"bad header: {line!r}")
    width, height, ncolors, cpp = values
    return width, height, ncolors, cpp


def _read_color(line: str, cpp: int) -> tuple[str, int]:
    words = split_words(line[cpp:])
    try:
        index = words.index("c") + 1
    except ValueError:
        raise XpmError(f"colour line without 'c' key: {line!r}") from None
    if index >= len(words):
        raise XpmError(f"colour line without a colour: {line!r}")
    end = words[index + 1] if index + 1 < len(words) else None
    return line[:cpp], parse_color(words[index], end)


def parse_xpm_lines(lines: Iterable[str]) -> Image:
    """Decode XPM strings (header, colour lines, pixel rows) into an image."""
    source = iter(lines)
    width, height, ncolors, cpp = _read_header(_next_line(source, "header"))

    palette: dict[str, int] = {}
    for _ in range(ncolors):
        key, value = _read_color(_next_line(source, "colour line"), cpp)
        if cpp <= 2:
            palette[key] = value
        else:
            palette.setdefault(key, value)

    image = Image(width, height)
    for y in range(height):
        row = _next_line(source, "pixel row")
        for x in range(width):
            color = palette.get(row[cpp * x : cpp * (x + 1)], 0)
            image.put_pixel(x, y, TRANSPARENT if color == -1 else color)
    return image


def parse_xpm_text(text: str) -> Image:
    """Decode the text of an XPM file."""
    return parse_xpm_lines(quoted_lines(strip_comments(text)))


def read_xpm(path: str | PathLike[str]) -> Image:
    """Read and decode an XPM file."""
    with open(path, encoding="latin-1") as handle:
        return parse_xpm_text(handle.read())