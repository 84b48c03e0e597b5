"""
Configuration and limits for wrenchit.

The defaults reproduce the fixed behaviour of the cleaning pipeline; callers
only need a custom configuration to tighten limits or change output layout.
"""

from dataclasses import dataclass
from typing import Any, Optional

from ..core.constants import (
    DEFAULT_REGEX_TIMEOUT,
    MAX_UNESCAPE_PASSES,
    MAX_UNQUOTE_PASSES,
)


@dataclass
class RepairLimits:
    """Input size limits applied before repair."""
    max_input_size: int = 10 * 1024 * 1024

    def __post_init__(self) -> None:
        if self.max_input_size <= 0:
            raise ValueError("max_input_size must be positive")


@dataclass
class CleanLimits:
    """Iteration and timeout bounds for the deep cleaner."""
    max_unescape_passes: int = MAX_UNESCAPE_PASSES
    max_unquote_passes: int = MAX_UNQUOTE_PASSES
    regex_timeout: int = DEFAULT_REGEX_TIMEOUT

    def __post_init__(self) -> None:
        if self.max_unescape_passes < 0:
            raise ValueError("max_unescape_passes must not be negative")
        if self.max_unquote_passes <= 0:
            raise ValueError("max_unquote_passes must be positive")
        if self.regex_timeout < 0:
            raise ValueError("regex_timeout must not be negative")


@dataclass
class OutputSettings:
    """Serialization settings for repaired documents."""
    indent: int = 2
    ensure_ascii: bool = False


@dataclass
class RepairConfig:
    """Configuration options for wrenchit repairs."""

    limits: Optional[RepairLimits] = None
    clean: Optional[CleanLimits] = None
    output: Optional[OutputSettings] = None

    def __init__(
        self,
        *,
        limits: Optional[RepairLimits] = None,
        clean: Optional[CleanLimits] = None,
        output: Optional[OutputSettings] = None,
        **options: Any,
    ):
        self.limits = limits or RepairLimits(
            max_input_size=options.get("max_input_size", 10 * 1024 * 1024)
        )
        self.clean = clean or CleanLimits(
            max_unescape_passes=options.get("max_unescape_passes", MAX_UNESCAPE_PASSES),
            max_unquote_passes=options.get("max_unquote_passes", MAX_UNQUOTE_PASSES),
            regex_timeout=options.get("regex_timeout", DEFAULT_REGEX_TIMEOUT),
        )
        self.output = output or OutputSettings(
            indent=options.get("indent", 2),
            ensure_ascii=options.get("ensure_ascii", False),
        )

    @classmethod
    def default(cls) -> "RepairConfig":
        """Create the default configuration."""
        return cls()

    @property
    def max_input_size(self) -> int:
        """Maximum input size in characters."""
        assert self.limits is not None
        return self.limits.max_input_size

    @property
    def indent(self) -> int:
        """Indentation used when pretty-printing repaired JSON."""
        assert self.output is not None
        return self.output.indent

    @property
    def ensure_ascii(self) -> bool:
        """Whether non-ASCII characters are escaped in the output."""
        assert self.output is not None
        return self.output.ensure_ascii
