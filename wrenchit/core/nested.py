"""
Unquoting of JSON objects and arrays that were stored as raw string values.

    "Content":"{"key":"val"}"  ->  "Content":{"key":"val"}
"""

from typing import Optional

from .constants import BRACKET_PAIRS, MAX_UNQUOTE_PASSES, QUOTE
from .fixpoint import fixed_point


def find_matching_close(text: str, open_pos: int, open_char: str, close_char: str) -> int:
    """
    Return the index of the bracket closing the one at ``open_pos``.

    Only brackets of the same kind are counted. Returns -1 when the structure
    is never closed.
    """
    depth = 1
    pos = open_pos + 1
    while pos < len(text):
        char = text[pos]
        if char == open_char:
            depth += 1
        elif char == close_char:
            depth -= 1
            if depth == 0:
                return pos
        pos += 1
    return -1


def unquote_first_nested_value(text: str) -> str:
    """
    Remove the quote pair around the first quoted object or array value.

    Objects are searched before arrays. An occurrence is only unquoted when
    its matching close bracket is immediately followed by a quote; otherwise
    the search moves on. Returns ``text`` unchanged when nothing qualifies.
    """
    for open_char, close_char in BRACKET_PAIRS:
        marker = f":{QUOTE}{open_char}"
        search_from = 0
        while True:
            idx = text.find(marker, search_from)
            if idx == -1:
                break
            quote_pos = idx + 1
            close_pos = find_matching_close(text, idx + 2, open_char, close_char)
            if close_pos != -1 and text[close_pos + 1 : close_pos + 2] == QUOTE:
                return (
                    text[:quote_pos]
                    + text[quote_pos + 1 : close_pos + 1]
                    + text[close_pos + 2 :]
                )
            search_from = idx + 1
    return text


def unquote_nested_json(text: str, max_passes: Optional[int] = None) -> str:
    """
    Unquote every nested object/array value, including values exposed by
    earlier removals.

    Each removal shortens the text by two characters, so the loop converges;
    ``max_passes`` is an additional guard for pathological input.
    """
    if max_passes is None:
        max_passes = MAX_UNQUOTE_PASSES
    return fixed_point(unquote_first_nested_value, text, max_passes)
