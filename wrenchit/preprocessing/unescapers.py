"""
Backslash unescaping preprocessing step.
"""

from ..core.literals import unescape_backslashes
from ..utils.config import CleanLimits
from .base import PreprocessingStepBase


class BackslashUnescaper(PreprocessingStepBase):
    r"""
    Strips nested backslash escaping one level per pass.

    Each pass rewrites ``\"`` to ``"``, ``\/`` to ``/`` and ``\\`` to ``\``.
    Passes stop once the text is stable or ``max_unescape_passes`` is reached,
    so four levels of escaped quotes resolve within the default cap of five.
    """

    def should_apply(self, config: CleanLimits) -> bool:
        return config.max_unescape_passes > 0

    def process(self, text: str, config: CleanLimits) -> str:
        return unescape_backslashes(text, config.max_unescape_passes)
