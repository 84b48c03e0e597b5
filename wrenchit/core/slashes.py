"""
Slash and backslash delimiter removal.

Dashboard exports wrap string boundaries in slash runs (``/"key/"``,
``///"value///"``, ``\\/"k\\/"``). The patterns here strip those runs while
leaving URLs and paths alone: a run is never removed when it follows a
word-like character, and trailing slashes are only removed from values that
contain no other slash.
"""

from .constants import (
    DEFAULT_REGEX_TIMEOUT,
    LEADING_FORWARD_SLASHES,
    LEADING_SLASH_LITERALS,
    LEADING_SLASHES,
    QUOTE,
    SYMMETRIC_SLASHES,
    TRAILING_SLASHES,
)
from .regex_utils import safe_regex_sub


def strip_symmetric_slashes(text: str, timeout: int = DEFAULT_REGEX_TIMEOUT) -> str:
    """Collapse ``///"value///"`` to ``"value"``."""
    return safe_regex_sub(SYMMETRIC_SLASHES, r"\1\2\3", text, timeout=timeout)


def strip_leading_slashes(text: str, timeout: int = DEFAULT_REGEX_TIMEOUT) -> str:
    """Drop slash/backslash runs sitting directly before a quote."""
    return safe_regex_sub(LEADING_SLASHES, "", text, timeout=timeout)


def strip_leading_forward_slashes(
    text: str, timeout: int = DEFAULT_REGEX_TIMEOUT
) -> str:
    """Drop forward-slash runs sitting directly before a quote."""
    return safe_regex_sub(LEADING_FORWARD_SLASHES, "", text, timeout=timeout)


def strip_slash_delimiters(text: str, timeout: int = DEFAULT_REGEX_TIMEOUT) -> str:
    """
    Remove slash delimiters around quoted strings.

    The symmetric rule must run first; the leading rule on its own would eat
    the left half of ``/"key/"`` and leave ``"key/"`` behind.
    """
    result = strip_symmetric_slashes(text, timeout)
    return strip_leading_slashes(result, timeout)


def strip_leading_slash_literals(text: str) -> str:
    """Replace the first ``///"``, ``//"`` and ``/"`` occurrences with a quote."""
    result = text
    for literal in LEADING_SLASH_LITERALS:
        result = result.replace(literal, QUOTE, 1)
    return result


def strip_trailing_slashes(text: str, timeout: int = DEFAULT_REGEX_TIMEOUT) -> str:
    """Turn ``"CommerceId/"`` into ``"CommerceId"``; values with other slashes stay."""
    return safe_regex_sub(TRAILING_SLASHES, r'"\1"', text, timeout=timeout)
