"""
Strategy attempt tracking.

This module records what each repair strategy produced so a failed repair
can still report the best attempt and why every strategy was rejected.
"""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class StrategyAttempt:
    """Outcome of running one strategy against the raw input."""

    index: int
    name: str
    candidate: Optional[str] = None
    error: Optional[str] = None

    @property
    def produced_candidate(self) -> bool:
        """Whether the strategy's transform itself completed."""
        return self.candidate is not None

    @property
    def parsed(self) -> bool:
        """Whether the candidate was accepted by the JSON parser."""
        return self.candidate is not None and self.error is None


@dataclass
class AttemptState:
    """Attempts recorded so far and the current best attempt."""

    attempts: list[StrategyAttempt] = field(default_factory=list)
    best_attempt: str = ""


class AttemptTracker:
    """Collects strategy attempts during one pipeline invocation."""

    def __init__(self, raw: str):
        self.state = AttemptState(best_attempt=raw)

    @property
    def attempts(self) -> list[StrategyAttempt]:
        return self.state.attempts

    @property
    def best_attempt(self) -> str:
        return self.state.best_attempt

    def record_transform_error(self, index: int, name: str, error: Exception) -> None:
        """Record a strategy whose transform raised; the best attempt is kept."""
        self.state.attempts.append(
            StrategyAttempt(index=index, name=name, error=_describe(error))
        )

    def record_candidate(self, index: int, name: str, candidate: str) -> StrategyAttempt:
        """Record a produced candidate and make it the best attempt."""
        attempt = StrategyAttempt(index=index, name=name, candidate=candidate)
        self.state.attempts.append(attempt)
        self.state.best_attempt = candidate
        return attempt

    def record_parse_error(self, attempt: StrategyAttempt, error: Exception) -> None:
        attempt.error = _describe(error)

    def get_summary(self) -> dict[str, Any]:
        """Summarize the attempts for diagnostics."""
        return {
            "total_attempts": len(self.state.attempts),
            "transform_errors": [
                a.name for a in self.state.attempts if not a.produced_candidate
            ],
            "parse_errors": {
                a.name: a.error
                for a in self.state.attempts
                if a.produced_candidate and a.error is not None
            },
        }


def _describe(error: Exception) -> str:
    return f"{type(error).__name__}: {error}"
