"""
Whole-document structural fixes: outer quote wrapping and trailing commas.
"""

from .constants import (
    BOM,
    CRLF,
    DEFAULT_REGEX_TIMEOUT,
    TRAILING_COMMA,
    WRAPPED_ARRAY,
    WRAPPED_OBJECT,
)
from .regex_utils import safe_regex_sub


def strip_bom(text: str) -> str:
    """Remove a single leading byte-order mark."""
    return text[len(BOM):] if text.startswith(BOM) else text


def normalize_line_endings(text: str, timeout: int = DEFAULT_REGEX_TIMEOUT) -> str:
    """Convert CRLF and lone CR line endings to LF."""
    return safe_regex_sub(CRLF, "\n", text, timeout=timeout)


def strip_document_quotes(text: str, timeout: int = DEFAULT_REGEX_TIMEOUT) -> str:
    """Turn ``"{...}"`` or ``"[...]"`` spanning the whole text into ``{...}`` / ``[...]``."""
    result = safe_regex_sub(WRAPPED_OBJECT, r"\1", text, timeout=timeout)
    return safe_regex_sub(WRAPPED_ARRAY, r"\1", result, timeout=timeout)


def remove_trailing_commas(text: str, timeout: int = DEFAULT_REGEX_TIMEOUT) -> str:
    """Drop commas directly before a closing ``}`` or ``]``."""
    return safe_regex_sub(TRAILING_COMMA, r"\1", text, timeout=timeout)
