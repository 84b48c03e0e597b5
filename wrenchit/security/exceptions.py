"""
Exception hierarchy for wrenchit.

Errors raised inside a single repair strategy never leave the strategy
pipeline; only the command layer and the ``loads`` convenience wrapper raise
these exceptions to callers.
"""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..recovery.core.tracker import StrategyAttempt


class WrenchError(Exception):
    """Base class for all wrenchit errors."""


class RepairError(WrenchError):
    """Raised when no repair strategy produced parseable JSON."""

    def __init__(
        self,
        message: str,
        best_attempt: str = "",
        attempts: Optional[list["StrategyAttempt"]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.best_attempt = best_attempt
        self.attempts = attempts or []

    def __str__(self) -> str:
        if not self.attempts:
            return self.message
        return f"{self.message} ({len(self.attempts)} strategies tried)"


class EmptyInputError(WrenchError, ValueError):
    """Raised when a command receives blank input."""


class Base64DecodeError(WrenchError, ValueError):
    """Raised when text is not valid Base64 or does not decode to UTF-8."""


class SecurityError(WrenchError):
    """Raised when input exceeds the configured limits."""
