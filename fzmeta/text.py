"""String helpers: searching, splitting, parsing and ASCII character classes."""

from __future__ import annotations

import string

_UPPER = frozenset(string.ascii_uppercase)
_LOWER = frozenset(string.ascii_lowercase)
# The digit class used for identifiers excludes '0'; decimal parsing accepts it.
_NONZERO_DIGITS = frozenset("123456789")
_DECIMAL_DIGITS = frozenset(string.digits)
_SYMBOLS = frozenset("~!$%^&*-=+<.>/?|\\{}()[]#,;:@")
_SPACES = frozenset(" \r\t\f\v\n")


def find_last(text: str, substring: str) -> int | None:
    """Return the index of the last occurrence of ``substring`` in ``text``, or None."""
    if len(substring) > len(text):
        return None
    index = text.rfind(substring)
    return None if index < 0 else index


def split_once(text: str, separator: str) -> list[str]:
    """Split ``text`` at the first ``separator``.

    The second part keeps the separator at its start. An empty list is
    returned when the separator does not occur.
    """
    if len(separator) != 1:
        raise ValueError(
            f"split_once expects a single separator character, got {separator!r}"
        )
    index = text.find(separator)
    if index < 0:
        return []
    return [text[:index], text[index:]]


def bool_from_string(text: str) -> bool:
    """Parse the literals ``true`` and ``false``."""
    if text == "false":
        return False
    if text == "true":
        return True
    raise ValueError(f"not a boolean literal: {text!r}")


def float_from_string(text: str) -> float:
    """Parse an unsigned decimal made of digits and a decimal point."""
    value = 0.0
    decimals: int | None = None
    for c in text:
        if c in _DECIMAL_DIGITS:
            value = value * 10.0 + int(c)
            if decimals is not None:
                decimals += 1
        elif c == ".":
            decimals = 0
        else:
            raise ValueError(f"not a number: {text!r}")
    if decimals is not None:
        value /= 10**decimals
    return value


def int_from_string(text: str) -> int:
    """Parse an unsigned integer made only of decimal digits."""
    value = 0
    for c in text:
        if c not in _DECIMAL_DIGITS:
            raise ValueError(f"not an integer: {text!r}")
        value = value * 10 + int(c)
    return value


def is_alpha_upper(c: str) -> bool:
    return c in _UPPER


def is_alpha_lower(c: str) -> bool:
    return c in _LOWER


def is_alpha(c: str) -> bool:
    """True for ASCII letters."""
    return c in _UPPER or c in _LOWER


def is_digit(c: str) -> bool:
    """True for the digits 1 to 9; '0' is not included."""
    return c in _NONZERO_DIGITS


def is_alphanum(c: str) -> bool:
    """True for ASCII letters and the digits 1 to 9."""
    return is_alpha(c) or is_digit(c)


def is_symbol(c: str) -> bool:
    """True for ASCII punctuation used as operators and delimiters."""
    return c in _SYMBOLS


def is_space(c: str) -> bool:
    """True for ASCII whitespace."""
    return c in _SPACES


def to_upper(c: str) -> str:
    """Upper-case an ASCII lower-case letter; anything else is returned unchanged."""
    return c.upper() if c in _LOWER else c


def to_lower(c: str) -> str:
    """Lower-case an ASCII upper-case letter; anything else is returned unchanged."""
    return c.lower() if c in _UPPER else c