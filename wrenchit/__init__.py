"""
wrenchit - repair JSON mangled by dashboard export tools.

Exports from dashboard tools often pile several corruption layers on top of
each other: the whole document wrapped in quotes, slash delimiters around
string boundaries, multi-level backslash escaping, and nested JSON stored as
raw string values. wrenchit tries a fixed list of independent strategies,
from "already valid" to a full multi-pass deep clean, and keeps the first
candidate the standard JSON parser accepts.

Quick Start:
    import wrenchit

    result = wrenchit.repair_json('///"status///":///"ok///"')
    if result.success:
        print(result.value)
    else:
        print(result.error, result.best_attempt)

    data = wrenchit.loads('{\\"a\\": [1, 2]}')  # raises RepairError on failure

    cleaned = wrenchit.deep_clean(raw_text)
"""

from .commands import FixOutcome, decode_base64, encode_base64, fix_json
from .core.cleaner import deep_clean
from .recovery.strategies import (
    DEFAULT_STRATEGIES,
    RepairResult,
    RepairStrategy,
    build_strategies,
    loads,
    repair_json,
)
from .security.exceptions import (
    Base64DecodeError,
    EmptyInputError,
    RepairError,
    SecurityError,
    WrenchError,
)
from .utils.config import CleanLimits, OutputSettings, RepairConfig, RepairLimits

__version__ = "0.1.0"
__author__ = "wrenchit contributors"

__all__ = [
    # Repair pipeline
    "repair_json", "loads", "deep_clean", "build_strategies", "DEFAULT_STRATEGIES",
    "RepairStrategy", "RepairResult",
    # Commands
    "fix_json", "encode_base64", "decode_base64", "FixOutcome",
    # Configuration classes
    "RepairConfig", "RepairLimits", "CleanLimits", "OutputSettings",
    # Exception classes
    "WrenchError", "RepairError", "EmptyInputError", "Base64DecodeError", "SecurityError",
]
