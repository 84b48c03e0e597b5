"""
wrenchit error types and input limits.
"""

from .exceptions import (
    Base64DecodeError,
    EmptyInputError,
    RepairError,
    SecurityError,
    WrenchError,
)
from .limits import LimitValidator

__all__ = [
    "WrenchError",
    "RepairError",
    "EmptyInputError",
    "Base64DecodeError",
    "SecurityError",
    "LimitValidator",
]
