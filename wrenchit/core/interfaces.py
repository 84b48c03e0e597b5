"""
Protocols for the composable parts of the repair system.
"""

from typing import Any, Protocol


class PreprocessingStep(Protocol):
    """Protocol for steps in the deep-clean pipeline."""

    def process(self, text: str, config: Any) -> str:
        """Process the input text according to this preprocessing step."""
        ...

    def should_apply(self, config: Any) -> bool:
        """Determine if this step should be applied given the configuration."""
        ...


class TextTransform(Protocol):
    """Protocol for pure text transforms used as repair strategies."""

    def __call__(self, text: str) -> str:
        ...
