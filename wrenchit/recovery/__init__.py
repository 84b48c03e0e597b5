"""
wrenchit repair strategies.

This module provides the ordered strategy pipeline and its result types.
"""

from .core.tracker import StrategyAttempt
from .strategies import (
    DEFAULT_STRATEGIES,
    RepairResult,
    RepairStrategy,
    build_strategies,
    loads,
    parse_strict,
    repair_json,
)

__all__ = [
    "repair_json",
    "loads",
    "parse_strict",
    "build_strategies",
    "DEFAULT_STRATEGIES",
    "RepairStrategy",
    "RepairResult",
    "StrategyAttempt",
]
