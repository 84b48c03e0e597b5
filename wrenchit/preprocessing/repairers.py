"""
Delimiter and structure repair preprocessing steps.

This module contains the steps that remove export artifacts around string
values (slash delimiters, trailing slashes), unquote nested JSON values and
drop trailing commas.
"""

from ..core.nested import unquote_nested_json
from ..core.slashes import (
    strip_leading_slash_literals,
    strip_leading_slashes,
    strip_slash_delimiters,
    strip_symmetric_slashes,
    strip_trailing_slashes,
)
from ..core.structure import remove_trailing_commas
from ..utils.config import CleanLimits
from .base import PreprocessingStepBase


class SymmetricSlashStripper(PreprocessingStepBase):
    """Removes slash runs wrapping both sides of a quoted string."""

    def process(self, text: str, config: CleanLimits) -> str:
        return strip_symmetric_slashes(text, config.regex_timeout)


class LeadingSlashStripper(PreprocessingStepBase):
    """Removes slash runs before quotes, then mops up literal leftovers."""

    def process(self, text: str, config: CleanLimits) -> str:
        result = strip_leading_slashes(text, config.regex_timeout)
        return strip_leading_slash_literals(result)


class SlashDelimiterStripper(PreprocessingStepBase):
    """Applies the symmetric and leading slash rules together."""

    def process(self, text: str, config: CleanLimits) -> str:
        return strip_slash_delimiters(text, config.regex_timeout)


class TrailingSlashStripper(PreprocessingStepBase):
    """Removes trailing slash runs from slash-free string values."""

    def process(self, text: str, config: CleanLimits) -> str:
        return strip_trailing_slashes(text, config.regex_timeout)


class NestedJsonUnquoter(PreprocessingStepBase):
    """Turns quoted object/array values back into real nested values."""

    def process(self, text: str, config: CleanLimits) -> str:
        return unquote_nested_json(text, config.max_unquote_passes)


class TrailingCommaRemover(PreprocessingStepBase):
    """Removes commas directly before closing brackets."""

    def process(self, text: str, config: CleanLimits) -> str:
        return remove_trailing_commas(text, config.regex_timeout)
