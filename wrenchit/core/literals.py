"""
String-literal handling for JSON text that was stored or exported as a string.

These helpers lean on the standard ``json`` decoder for the actual unescaping,
so every escape sequence JSON knows about is resolved exactly once per call.
"""

import json
from typing import Optional

from .constants import MAX_UNESCAPE_PASSES, QUOTE
from .fixpoint import fixed_point


def is_quote_delimited(text: str) -> bool:
    """Return True if ``text`` starts and ends with a double quote."""
    return text.startswith(QUOTE) and text.endswith(QUOTE)


def unwrap_string_literal(text: str) -> str:
    """
    Remove one level of JSON string-literal wrapping.

    ``"{\\"a\\": 1}"`` becomes ``{"a": 1}``. When the literal does not decode,
    the first and last characters are dropped without unescaping so that a
    recognisable but malformed wrapper still loses one layer. Text that is not
    quote-delimited is returned unchanged.
    """
    if not is_quote_delimited(text):
        return text
    try:
        inner = json.loads(text)
    except (ValueError, RecursionError):
        return text[1:-1]
    if isinstance(inner, str):
        return inner
    return text


def wrap_and_unescape(text: str) -> str:
    """
    Decode ``text`` as if it were the body of a JSON string literal.

    Resolves ``{\\"k\\":\\"v\\"}`` and deeper escaping in one shot. Raises
    ``json.JSONDecodeError`` when the text holds an unescaped quote or a raw
    control character; the strategy pipeline treats that as a non-match.
    """
    result = json.loads(f"{QUOTE}{text}{QUOTE}")
    return result if isinstance(result, str) else text


def unescape_backslashes_once(text: str) -> str:
    r"""Strip one level of ``\"``, ``\/`` and ``\\`` escaping, in that order."""
    return text.replace('\\"', '"').replace("\\/", "/").replace("\\\\", "\\")


def unescape_backslashes(text: str, max_passes: Optional[int] = None) -> str:
    """Repeat ``unescape_backslashes_once`` until stable or the pass cap is hit."""
    if max_passes is None:
        max_passes = MAX_UNESCAPE_PASSES
    return fixed_point(unescape_backslashes_once, text, max_passes)
