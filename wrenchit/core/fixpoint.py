"""
Fixed-point iteration for text transforms.
"""

from typing import Callable, Optional


def fixed_point(
    transform: Callable[[str], str], text: str, max_passes: Optional[int] = None
) -> str:
    """
    Apply ``transform`` until the output stops changing.

    Args:
        transform: Pure text transform
        text: Starting text
        max_passes: Upper bound on applications, ``None`` for no bound

    Returns:
        The first output equal to its input, or the output after
        ``max_passes`` applications
    """
    passes = 0
    result = text
    while max_passes is None or passes < max_passes:
        updated = transform(result)
        passes += 1
        if updated == result:
            break
        result = updated
    return result
