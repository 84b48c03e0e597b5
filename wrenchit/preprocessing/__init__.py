"""
Deep-clean preprocessing module.

Each cleaning concern is a small step class; ``PreprocessingPipeline``
composes them into the fixed-order deep cleaner.
"""

from .base import PreprocessingStepBase
from .normalizers import (
    ByteOrderMarkStripper,
    DocumentQuoteStripper,
    LineEndingNormalizer,
    StringLiteralUnwrapper,
)
from .pipeline import PreprocessingPipeline
from .repairers import (
    LeadingSlashStripper,
    NestedJsonUnquoter,
    SlashDelimiterStripper,
    SymmetricSlashStripper,
    TrailingCommaRemover,
    TrailingSlashStripper,
)
from .unescapers import BackslashUnescaper

__all__ = [
    "PreprocessingPipeline",
    "PreprocessingStepBase",
    "ByteOrderMarkStripper",
    "LineEndingNormalizer",
    "StringLiteralUnwrapper",
    "DocumentQuoteStripper",
    "SymmetricSlashStripper",
    "LeadingSlashStripper",
    "SlashDelimiterStripper",
    "TrailingSlashStripper",
    "NestedJsonUnquoter",
    "BackslashUnescaper",
    "TrailingCommaRemover",
]
