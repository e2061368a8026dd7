"""Free-text numeric coercion shared by every input model.

Form fields arrive as raw text.  Anything that is not a plain decimal
number falls back to a caller-chosen default instead of failing:

  parse_number("12.5")        → 12.5
  parse_number("")            → 0.0
  parse_number("abc", 30.0)   → 30.0
  parse_number("1,200")       → 0.0    (no thousands separators)

``numeric(fallback)`` wraps the same rule as a pydantic ``BeforeValidator``
so input models can be constructed straight from form strings.
"""

from __future__ import annotations

import logging
import math
import re
from functools import partial
from typing import Annotated, Any

from pydantic import BeforeValidator

logger = logging.getLogger(__name__)

_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_number(text: Any, fallback: float | None = 0.0) -> float | None:
    """Coerce ``text`` to a float, returning ``fallback`` when it is not a number."""
    if text is None or isinstance(text, bool):
        return fallback

    if isinstance(text, (int, float)):
        value = float(text)
    else:
        stripped = str(text).strip()
        if not stripped:
            return fallback
        if _DECIMAL_RE.fullmatch(stripped) is None:
            logger.debug("Unparsable numeric input %r, using %r", text, fallback)
            return fallback
        value = float(stripped)

    if not math.isfinite(value):
        logger.debug("Non-finite numeric input %r, using %r", text, fallback)
        return fallback
    return value


def numeric(fallback: float = 0.0) -> Any:
    """Annotated float type that coerces free text with ``fallback``."""
    return Annotated[float, BeforeValidator(partial(parse_number, fallback=fallback))]


Number = numeric(0.0)
"""Float field that degrades to 0 for empty or unparsable text."""

OptionalNumber = Annotated[float | None, BeforeValidator(partial(parse_number, fallback=None))]
"""Float field that degrades to ``None`` so callers can tell "missing" apart."""
