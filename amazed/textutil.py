"""Small text helpers used when reading a maze description."""

from __future__ import annotations

import re
import string

_INT_MIN = -2147483648
_INT_MAX = 2147483647
_LETTERS = frozenset(string.ascii_letters)
_DIGITS = frozenset(string.digits)
_ALPHANUMERIC = _LETTERS | _DIGITS


def get_number(text: str) -> int:
    """Read the first run of digits in ``text`` as an integer.

    Every ``-`` seen before that run flips the sign. A value outside the
    32-bit signed range gives 0, as does text without digits.
    """
    sign = 1
    value = 0
    for position, char in enumerate(text):
        if char == "-":
            sign = -sign
        if char in _DIGITS:
            value = value * 10 + int(char)
            following = text[position + 1 : position + 2]
            if following not in _DIGITS or not following:
                break
    value *= sign
    if value < _INT_MIN or value > _INT_MAX:
        return 0
    return value


def has_alpha(text: str) -> bool:
    """Tell whether ``text`` holds at least one ASCII letter."""
    return any(char in _LETTERS for char in text)


def has_non_alphanumeric(text: str) -> bool:
    """Tell whether ``text`` holds a character that is not an ASCII letter or digit."""
    return any(char not in _ALPHANUMERIC for char in text)


def split_words(text: str, delimiters: str) -> list[str]:
    """Split ``text`` on any character of ``delimiters``, dropping empty words."""
    if not delimiters:
        return [text] if text else []
    pattern = "[" + "".join(re.escape(char) for char in delimiters) + "]"
    return [word for word in re.split(pattern, text) if word]


def number_length(n: int) -> int:
    """Count the characters needed to write ``n`` in decimal, sign included."""
    length = len(str(abs(n)))
    return length + 1 if n < 0 else length