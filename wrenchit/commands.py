"""
Text commands exposed to editors and the command line.

These wrap the repair pipeline with the policy a host needs: blank input is
rejected before any work happens, a failed JSON repair still hands back the
best attempt, and a failed Base64 decode hands back nothing.
"""

import base64
import json
import logging
from dataclasses import dataclass
from typing import Optional

from .recovery.strategies import repair_json
from .security.exceptions import Base64DecodeError, EmptyInputError
from .security.limits import LimitValidator
from .utils.config import RepairConfig

logger = logging.getLogger(__name__)


@dataclass
class FixOutcome:
    """Replacement text for the host plus an optional warning."""

    text: str
    ok: bool
    message: Optional[str] = None
    strategy: Optional[str] = None


def fix_json(text: str, config: Optional[RepairConfig] = None) -> FixOutcome:
    """
    Repair ``text`` and return the text that should replace it.

    On success the parsed value is pretty-printed. On failure the best
    attempt is returned with ``ok=False`` and a warning message so the user
    can see what is still broken.
    """
    if not text.strip():
        raise EmptyInputError("Input is empty.")

    config = config or RepairConfig.default()
    LimitValidator(config.limits).validate_input_size(text)

    result = repair_json(text, config)
    if not result.success:
        message = (
            "JSON is still invalid after cleaning. Content replaced with the "
            f"best attempt for inspection. {result.error}"
        )
        return FixOutcome(text=result.best_attempt, ok=False, message=message)

    formatted = json.dumps(
        result.value, indent=config.indent, ensure_ascii=config.ensure_ascii
    )
    logger.debug(f"Repaired JSON with strategy {result.strategy}")
    return FixOutcome(text=formatted, ok=True, strategy=result.strategy)


def encode_base64(text: str) -> str:
    """Encode ``text`` as UTF-8 and return its Base64 form."""
    if not text:
        raise EmptyInputError("Select the text to encode as Base64.")
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def decode_base64(text: str) -> str:
    """
    Decode Base64 ``text`` to a UTF-8 string.

    Raises:
        EmptyInputError: if ``text`` is empty
        Base64DecodeError: if ``text`` is not Base64 or not UTF-8 once decoded
    """
    if not text:
        raise EmptyInputError("Select the Base64 text to decode.")
    try:
        raw = base64.b64decode(text.strip(), validate=True)
        return raw.decode("utf-8")
    except (ValueError, UnicodeDecodeError) as exc:
        raise Base64DecodeError("The selected text is not valid Base64.") from exc
