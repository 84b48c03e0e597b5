"""
Base classes for preprocessing steps.

This module contains the base class used by deep-clean steps so they can be
composed in a pipeline.
"""

from ..utils.config import CleanLimits


class PreprocessingStepBase:
    """Base class for preprocessing steps with common functionality."""

    def should_apply(self, _config: CleanLimits) -> bool:
        """Default implementation - always apply. Override in subclasses."""
        return True

    def process(self, text: str, _config: CleanLimits) -> str:
        """Process the text. Must be implemented by subclasses."""
        raise NotImplementedError("Subclasses must implement process()")

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
