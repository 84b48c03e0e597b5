"""
Input limits for wrenchit.
This module guards the command layer against oversized documents.
"""

from typing import Optional

from ..utils.config import RepairLimits
from .exceptions import SecurityError


class LimitValidator:
    """Validates repair limits before text reaches the cleaning pipeline."""

    def __init__(self, limits: Optional[RepairLimits] = None):
        self.limits = limits or RepairLimits()

    def validate_input_size(self, text: str) -> None:
        """Validate that input text size is within limits."""
        if len(text) > self.limits.max_input_size:
            raise SecurityError(
                f"Input size {len(text)} exceeds limit {self.limits.max_input_size}"
            )
