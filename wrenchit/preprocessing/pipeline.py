"""
Preprocessing pipeline for composable cleaning steps.

This module implements the pipeline pattern used by the deep cleaner. Step
order is significant: unescaping has to happen before the final slash and
comma cleanup, and nested values have to be unquoted before the second
trailing-slash pass.
"""

import logging
from typing import Optional

from ..core.interfaces import PreprocessingStep
from ..utils.config import CleanLimits
from .normalizers import (
    ByteOrderMarkStripper,
    DocumentQuoteStripper,
    LineEndingNormalizer,
    StringLiteralUnwrapper,
)
from .repairers import (
    LeadingSlashStripper,
    NestedJsonUnquoter,
    SlashDelimiterStripper,
    SymmetricSlashStripper,
    TrailingCommaRemover,
    TrailingSlashStripper,
)
from .unescapers import BackslashUnescaper

logger = logging.getLogger(__name__)


class PreprocessingPipeline:
    """Manages a sequence of preprocessing steps applied to JSON text."""

    def __init__(self, steps: Optional[list[PreprocessingStep]] = None):
        self.steps = steps or []

    def add_step(self, step: PreprocessingStep) -> None:
        """Add a preprocessing step to the pipeline."""
        self.steps.append(step)

    def process(self, text: str, config: Optional[CleanLimits] = None) -> str:
        """Apply all applicable preprocessing steps to the text."""
        if config is None:
            config = CleanLimits()

        result = text
        for step in self.steps:
            if step.should_apply(config):
                updated = step.process(result, config)
                if updated != result:
                    logger.debug(f"{step!r} changed {len(result)} -> {len(updated)} chars")
                result = updated
        return result

    @classmethod
    def create_deep_clean_pipeline(cls) -> "PreprocessingPipeline":
        """Create the fixed-order multi-pass cleaning pipeline."""
        pipeline = cls()

        # Envelope
        pipeline.add_step(ByteOrderMarkStripper())
        pipeline.add_step(LineEndingNormalizer())
        pipeline.add_step(StringLiteralUnwrapper(levels=2))

        # Delimiters before unescaping
        pipeline.add_step(SymmetricSlashStripper())
        pipeline.add_step(LeadingSlashStripper())

        pipeline.add_step(BackslashUnescaper())

        # Unescaping can reveal new slash-before-quote patterns
        pipeline.add_step(SlashDelimiterStripper())
        pipeline.add_step(TrailingSlashStripper())
        pipeline.add_step(NestedJsonUnquoter())
        pipeline.add_step(TrailingSlashStripper())

        # Final cleanup
        pipeline.add_step(DocumentQuoteStripper())
        pipeline.add_step(TrailingCommaRemover())

        return pipeline
