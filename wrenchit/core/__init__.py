"""
wrenchit repair core.

Pure text transforms used by the repair strategies. The deep cleaner lives in
``wrenchit.core.cleaner`` and is imported from there.
"""

from .fixpoint import fixed_point
from .literals import (
    unescape_backslashes,
    unescape_backslashes_once,
    unwrap_string_literal,
    wrap_and_unescape,
)
from .nested import unquote_first_nested_value, unquote_nested_json
from .slashes import (
    strip_leading_forward_slashes,
    strip_leading_slash_literals,
    strip_leading_slashes,
    strip_slash_delimiters,
    strip_symmetric_slashes,
    strip_trailing_slashes,
)
from .structure import (
    normalize_line_endings,
    remove_trailing_commas,
    strip_bom,
    strip_document_quotes,
)

__all__ = [
    "fixed_point",
    "unwrap_string_literal",
    "wrap_and_unescape",
    "unescape_backslashes",
    "unescape_backslashes_once",
    "unquote_first_nested_value",
    "unquote_nested_json",
    "strip_symmetric_slashes",
    "strip_leading_slashes",
    "strip_leading_forward_slashes",
    "strip_slash_delimiters",
    "strip_leading_slash_literals",
    "strip_trailing_slashes",
    "strip_bom",
    "normalize_line_endings",
    "strip_document_quotes",
    "remove_trailing_commas",
]
