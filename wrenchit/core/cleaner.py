"""
Multi-pass deep cleaner for JSON mangled by dashboard export tools.

Handles, in one fixed-order pass:
 - BOM and Windows line endings
 - outer "..." wrapping, one or two levels
 - symmetrical slash wrapping:  /"key/"  //"v//"  ///"x///"  \\/"k\\/"
 - slashes directly before quotes outside URL context
 - multi-level backslash escaping and escaped forward slashes
 - nested JSON objects/arrays stored as unescaped string values
 - trailing commas before } or ]
"""

from typing import Optional

from ..preprocessing.pipeline import PreprocessingPipeline
from ..utils.config import CleanLimits

_DEEP_CLEAN_PIPELINE = PreprocessingPipeline.create_deep_clean_pipeline()


def deep_clean(text: str, limits: Optional[CleanLimits] = None) -> str:
    """Run the full deep-clean pipeline over ``text``."""
    return _DEEP_CLEAN_PIPELINE.process(text, limits)
