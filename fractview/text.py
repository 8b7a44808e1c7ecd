"""Small string helpers used by the XPM reader.

Words are separated by spaces and tabs only; other whitespace, such as
newlines, belongs to the word it touches.
"""

from __future__ import annotations

import re

_SEPARATORS = re.compile(r"[ \t]+")


def split_words(text: str) -> list[str]:
    """Split ``text`` into words separated by runs of spaces and tabs."""
    return [word for word in _SEPARATORS.split(text) if word]


def _check_needle(needle: str) -> None:
    if not needle:
        raise ValueError("needle must not be empty")


def find(text: str, needle: str) -> int:
    """Return the index of the first ``needle`` in ``text``, or -1."""
    _check_needle(needle)
    return text.find(needle)


def find_unquoted(text: str, needle: str) -> int:
    """Return the index of the first ``needle`` outside double quotes, or -1.

    A double quote toggles the quoted state before the comparison at its own
    position, so a match may start on a closing quote but never on an
    opening one.
    """
    _check_needle(needle)
    last_start = len(text) - len(needle)
    quoted = False
    for pos, char in enumerate(text[: last_start + 1]):
        if char == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1