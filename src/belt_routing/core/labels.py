"""Sort keys parsed from display names like ``"Jita IV - Asteroid Belt 2"``."""

from __future__ import annotations

import re
from typing import Callable, NamedTuple

LABEL_TOKEN_COUNT = 6

_ROMAN_PATTERN = re.compile(
    r"^M{0,3}(CM|CD|D?C{0,3})(XC|XL|L?X{0,3})(IX|IV|V?I{0,3})$", re.IGNORECASE
)
_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}
_UNSIGNED_PATTERN = re.compile(r"^\+?[0-9]+$")


class MalformedLabelError(ValueError):
    """Raised if a name does not split into the expected number of tokens."""

    pass


class InvalidOrdinalError(ValueError):
    """Raised if the group token of a name is not a valid Roman numeral."""

    pass


class LabelKey(NamedTuple):
    """Ordinal sort key of a point."""

    group_ordinal: int
    sub_index: int


KeyExtractor = Callable[[str], LabelKey]


def parse_roman(token: str) -> int:
    """Value of a Roman numeral between I and MMMCMXCIX.

    Raises
    ------
    InvalidOrdinalError
        If token is empty or not a canonical Roman numeral
    """
    if not token or not _ROMAN_PATTERN.match(token):
        raise InvalidOrdinalError(f"Not a Roman numeral: {token!r}")
    values = [_ROMAN_VALUES[char] for char in token.upper()]
    total = 0
    for value, following in zip(values, values[1:] + [0]):
        total += -value if value < following else value
    return total


def parse_unsigned(token: str, default: int = 0) -> int:
    """Unsigned integer value of token, or default if it does not parse."""
    if not _UNSIGNED_PATTERN.match(token):
        return default
    return int(token)


def parse_label(name: str) -> LabelKey:
    """Parse ``"<cloud> <roman> - <noun> <noun> <number>"`` into a LabelKey.

    The sub-index falls back to 0 if the last token is not a number.

    Parameters
    ----------
    name : str
        Display name of the point

    Returns
    -------
    LabelKey
        Group ordinal from the second token, sub-index from the sixth

    Raises
    ------
    MalformedLabelError
        If the name does not consist of exactly six whitespace-separated tokens
    InvalidOrdinalError
        If the second token is not a Roman numeral
    """
    tokens = name.split()
    if len(tokens) != LABEL_TOKEN_COUNT:
        raise MalformedLabelError(
            f"Expected {LABEL_TOKEN_COUNT} tokens, got {len(tokens)} in {name!r}"
        )
    return LabelKey(
        group_ordinal=parse_roman(tokens[1]),
        sub_index=parse_unsigned(tokens[5]),
    )


__all__ = [
    "LABEL_TOKEN_COUNT",
    "MalformedLabelError",
    "InvalidOrdinalError",
    "LabelKey",
    "KeyExtractor",
    "parse_roman",
    "parse_unsigned",
    "parse_label",
]
