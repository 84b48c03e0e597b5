"""
Strategy pipeline for repairing malformed JSON text.

Each strategy is a pure transform applied to the original raw input, never to
the output of a previous strategy. Strategies are tried from least to most
aggressive and the first candidate accepted by the standard JSON parser wins.
When none is accepted, the last candidate produced is returned as the best
attempt so the caller always has something to show.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, NoReturn, Optional

from ..core.cleaner import deep_clean
from ..core.constants import BOM, NO_STRATEGY_MATCHED
from ..core.fixpoint import fixed_point
from ..core.interfaces import TextTransform
from ..core.literals import unwrap_string_literal, wrap_and_unescape
from ..core.slashes import strip_leading_forward_slashes, strip_symmetric_slashes
from ..security.exceptions import RepairError
from ..utils.config import CleanLimits, RepairConfig
from .core.tracker import AttemptTracker, StrategyAttempt

logger = logging.getLogger(__name__)

# Errors that mean "this strategy does not apply", never "the pipeline failed".
STRATEGY_ERRORS = (ValueError, TypeError, RecursionError)


@dataclass(frozen=True)
class RepairStrategy:
    """A named candidate transform."""

    name: str
    transform: TextTransform

    def __call__(self, text: str) -> str:
        return self.transform(text)


@dataclass
class RepairResult:
    """Outcome of one repair: either a parsed value or a best attempt."""

    success: bool
    cleaned_text: str
    value: Any = None
    error: Optional[str] = None
    strategy: Optional[str] = None
    attempts: list[StrategyAttempt] = field(default_factory=list)

    @property
    def best_attempt(self) -> str:
        """The text to show the user; the winning candidate on success."""
        return self.cleaned_text

    @classmethod
    def succeeded(
        cls,
        value: Any,
        cleaned_text: str,
        strategy: str,
        attempts: Optional[list[StrategyAttempt]] = None,
    ) -> "RepairResult":
        return cls(
            success=True,
            cleaned_text=cleaned_text,
            value=value,
            strategy=strategy,
            attempts=attempts or [],
        )

    @classmethod
    def failed(
        cls,
        error: str,
        best_attempt: str,
        attempts: Optional[list[StrategyAttempt]] = None,
    ) -> "RepairResult":
        return cls(
            success=False,
            cleaned_text=best_attempt,
            error=error,
            attempts=attempts or [],
        )


def _reject_constant(name: str) -> NoReturn:
    raise ValueError(f"Non-standard JSON constant: {name}")


def parse_strict(text: str) -> Any:
    """Parse ``text`` as standard JSON; ``NaN`` and ``Infinity`` are rejected."""
    return json.loads(text, parse_constant=_reject_constant)


def trim(text: str) -> str:
    """Strip surrounding whitespace and byte-order marks."""
    return fixed_point(lambda t: t.strip().strip(BOM), text)


def build_strategies(limits: Optional[CleanLimits] = None) -> list[RepairStrategy]:
    """Build the ordered strategy list, with deep cleaning bound to ``limits``."""

    def _identity(text: str) -> str:
        return text

    def _unwrap(text: str) -> str:
        return unwrap_string_literal(trim(text))

    def _escape_wrap(text: str) -> str:
        return wrap_and_unescape(trim(text))

    def _one_pass_slashes(text: str) -> str:
        # Narrower than the deep cleaner on purpose; later strategies cover more.
        return strip_leading_forward_slashes(trim(text)).replace('\\"', '"')

    def _symmetric_slashes(text: str) -> str:
        return strip_symmetric_slashes(trim(text))

    def _deep_clean(text: str) -> str:
        return deep_clean(trim(text), limits)

    def _deep_clean_unwrap(text: str) -> str:
        return unwrap_string_literal(deep_clean(trim(text), limits))

    return [
        RepairStrategy("identity", _identity),
        RepairStrategy("trim", trim),
        RepairStrategy("unwrap", _unwrap),
        RepairStrategy("escape_wrap", _escape_wrap),
        RepairStrategy("one_pass_slashes", _one_pass_slashes),
        RepairStrategy("symmetric_slashes", _symmetric_slashes),
        RepairStrategy("deep_clean", _deep_clean),
        RepairStrategy("deep_clean_unwrap", _deep_clean_unwrap),
    ]


DEFAULT_STRATEGIES = build_strategies()


def repair_json(
    raw: str,
    config: Optional[RepairConfig] = None,
    strategies: Optional[list[RepairStrategy]] = None,
) -> RepairResult:
    """
    Try each strategy against ``raw`` and return the first parseable result.

    Args:
        raw: Possibly malformed JSON text
        config: Optional repair configuration; its clean limits bind the
            deep-clean strategies
        strategies: Optional replacement for the default strategy list

    Returns:
        RepairResult carrying the parsed value, or the best attempt and an
        error message when no strategy produced valid JSON
    """
    if strategies is None:
        if config is None:
            strategies = DEFAULT_STRATEGIES
        else:
            strategies = build_strategies(config.clean)

    tracker = AttemptTracker(raw)

    for index, strategy in enumerate(strategies, start=1):
        try:
            candidate = strategy(raw)
        except STRATEGY_ERRORS as exc:
            logger.debug(f"Strategy {index} ({strategy.name}) could not run: {exc}")
            tracker.record_transform_error(index, strategy.name, exc)
            continue

        attempt = tracker.record_candidate(index, strategy.name, candidate)
        try:
            value = parse_strict(candidate)
        except STRATEGY_ERRORS as exc:
            logger.debug(f"Strategy {index} ({strategy.name}) rejected: {exc}")
            tracker.record_parse_error(attempt, exc)
            continue

        logger.debug(f"Strategy {index} ({strategy.name}) produced valid JSON")
        return RepairResult.succeeded(value, candidate, strategy.name, tracker.attempts)

    logger.info(
        f"{NO_STRATEGY_MATCHED} Tried {len(tracker.attempts)} strategies; "
        f"returning best attempt ({len(tracker.best_attempt)} chars)"
    )
    return RepairResult.failed(NO_STRATEGY_MATCHED, tracker.best_attempt, tracker.attempts)


def loads(raw: str, config: Optional[RepairConfig] = None) -> Any:
    """
    Repair and parse ``raw``, raising ``RepairError`` when nothing parses.

    The raised error carries the best attempt and the per-strategy attempts.
    """
    result = repair_json(raw, config)
    if not result.success:
        raise RepairError(result.error or NO_STRATEGY_MATCHED, result.best_attempt, result.attempts)
    return result.value
