"""
Safe regex utilities with timeout protection.

The cleaning transforms run over untrusted input, so every substitution is
wrapped in a SIGALRM timeout where the platform and thread allow it.
"""

import logging
import re
import signal
import threading
from re import Match, Pattern
from typing import Any, Callable, Union

from .constants import DEFAULT_REGEX_TIMEOUT

logger = logging.getLogger(__name__)


class RegexTimeout(Exception):
    """Exception raised when regex operation exceeds timeout."""


def timeout_handler(signum: int, frame: Any) -> None:
    """Signal handler for regex timeout."""
    raise RegexTimeout("Regex operation timed out")


def _can_use_alarm(timeout: int) -> bool:
    return (
        timeout > 0
        and hasattr(signal, "SIGALRM")
        and threading.current_thread() is threading.main_thread()
    )


def safe_regex_sub(
    pattern: Union[str, Pattern[str]],
    repl: Union[str, Callable[[Match[str]], str]],
    string: str,
    count: int = 0,
    timeout: int = DEFAULT_REGEX_TIMEOUT,
) -> str:
    """
    Perform regex substitution with timeout protection.

    Args:
        pattern: Regular expression pattern, compiled or not
        repl: Replacement string or function
        string: Input string to process
        count: Maximum number of replacements, 0 for all
        timeout: Timeout in seconds, 0 disables the alarm

    Returns:
        String with substitutions applied, or the original string on timeout
    """
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern

    if not _can_use_alarm(timeout):
        return compiled.sub(repl, string, count=count)

    previous = signal.signal(signal.SIGALRM, timeout_handler)
    signal.alarm(timeout)
    try:
        return compiled.sub(repl, string, count=count)
    except RegexTimeout:
        logger.warning(f"Regex substitution timed out on pattern: {compiled.pattern[:50]}")
        return string
    finally:
        signal.alarm(0)
        signal.signal(
            signal.SIGALRM, previous if previous is not None else signal.SIG_DFL
        )
