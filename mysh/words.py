"""Word splitting and small string helpers used by the shell."""

from __future__ import annotations

import re
from typing import Callable, Iterator

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1

_LEADING_INT = re.compile(r"([+-]*)([0-9]*)", re.ASCII)

_CAPITALIZE_SEPARATORS = frozenset(
    " " + "".join(chr(code) for code in (*range(33, 48), *range(58, 65), *range(91, 97)))
)


def is_blank(char: str) -> bool:
    """Return True for the characters that separate command words.

    Space, tab and the empty string (end of text) count as blanks.
    """
    return char in ("", " ", "\t")


def is_identifier_char(char: str) -> bool:
    """Return True for ASCII letters, digits and the underscore."""
    return len(char) == 1 and (
        "a" <= char <= "z" or "A" <= char <= "Z" or "0" <= char <= "9" or char == "_"
    )


def _runs(text: str, is_separator: Callable[[str], bool]) -> Iterator[str]:
    """Yield the maximal runs of non-separator characters in ``text``."""
    current: list[str] = []
    for char in text:
        if is_separator(char):
            if current:
                yield "".join(current)
                current = []
        else:
            current.append(char)
    if current:
        yield "".join(current)


def split_words(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs."""
    return list(_runs(text, is_blank))


def split_on(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    return [piece for piece in text.split(sep) if piece]


def count_words(text: str, is_separator: Callable[[str], bool]) -> int:
    """Count the words of ``text`` delimited by characters matching ``is_separator``."""
    return sum(1 for _ in _runs(text, is_separator))


def parse_int(text: str) -> int:
    """Parse a leading signed decimal integer.

    Any number of leading ``+``/``-`` signs is accepted, each ``-`` flipping
    the sign. Parsing stops at the first non-digit. Text without digits and
    values outside the 32-bit signed range give 0.
    """
    match = _LEADING_INT.match(text)
    signs, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits)
    if signs.count("-") % 2:
        value = -value
    if not _INT32_MIN <= value <= _INT32_MAX:
        return 0
    return value


def has_prefix(text: str, prefix: str) -> bool:
    """Return True when ``text`` starts with ``prefix``."""
    return text.startswith(prefix)


def _ascii_lower(text: str) -> str:
    return "".join(chr(ord(c) + 32) if "A" <= c <= "Z" else c for c in text)


def capitalize(text: str) -> str:
    """Lower-case ``text`` then upper-case each letter that starts a word.

    A word starts at the beginning of the text or after a space or ASCII
    punctuation character; digits do not start a new word.
    """
    result: list[str] = []
    after_separator = True
    for char in _ascii_lower(text):
        if after_separator and "a" <= char <= "z":
            char = chr(ord(char) - 32)
        result.append(char)
        after_separator = char in _CAPITALIZE_SEPARATORS
    return "".join(result)


def find(text: str, needle: str) -> int:
    """Return the index of the first occurrence of ``needle`` or -1."""
    return text.find(needle)


def is_alpha(text: str) -> bool:
    """Return True when every character lies in the accepted letter range.

    The empty string is accepted. The range is ``A``-``[`` and ``a``-``z``.
    """
    return all(65 <= ord(c) <= 122 and not 92 <= ord(c) <= 96 for c in text)