"""
Recovery core module.

Internal bookkeeping for the strategy pipeline. The strategies and the
public repair API live in the parent recovery module.
"""

from .tracker import AttemptState, AttemptTracker, StrategyAttempt

__all__ = ["AttemptState", "AttemptTracker", "StrategyAttempt"]
