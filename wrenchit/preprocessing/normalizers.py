"""
Text normalization preprocessing steps.

This module contains the steps that normalize the document envelope: byte
order marks, line endings and whole-document quote wrapping.
"""

from ..core.literals import unwrap_string_literal
from ..core.structure import normalize_line_endings, strip_bom, strip_document_quotes
from ..utils.config import CleanLimits
from .base import PreprocessingStepBase


class ByteOrderMarkStripper(PreprocessingStepBase):
    """Removes a leading UTF-8 byte-order mark."""

    def process(self, text: str, config: CleanLimits) -> str:
        return strip_bom(text)


class LineEndingNormalizer(PreprocessingStepBase):
    """Normalizes CRLF and CR line endings to LF."""

    def process(self, text: str, config: CleanLimits) -> str:
        return normalize_line_endings(text, config.regex_timeout)


class StringLiteralUnwrapper(PreprocessingStepBase):
    """Removes one or more levels of JSON string-literal wrapping."""

    def __init__(self, levels: int = 1):
        self.levels = levels

    def process(self, text: str, config: CleanLimits) -> str:
        result = text
        for _ in range(self.levels):
            result = unwrap_string_literal(result)
        return result

    def __repr__(self) -> str:
        return f"{type(self).__name__}(levels={self.levels})"


class DocumentQuoteStripper(PreprocessingStepBase):
    """Strips a quote pair wrapping the whole object or array."""

    def process(self, text: str, config: CleanLimits) -> str:
        return strip_document_quotes(text, config.regex_timeout)
