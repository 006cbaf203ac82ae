"""Display formatting with documented fallback literals."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from numbers import Real
from typing import Any

NOT_AVAILABLE = "N/A"
NOT_EVALUATED = "Not Evaluated"
NONE_PROVIDED = "None provided."
UNNAMED_CANDIDATE = "Unnamed Candidate"
NO_CANDIDATE = "None"
NO_TOR_TEXT = "No ToR text provided."
NO_JUSTIFICATION = "No justification provided."
NO_DETAILED_EXPLANATION = "No detailed explanation provided."
NO_RECOMMENDATION_REASON = "No reason provided for recommended candidate."
NO_REASON = "No reason provided."

HIGHLY_SUITABLE = "Highly Suitable"
SUITABLE = "Suitable"


def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return math.isfinite(value)


def format_score(value: Any, fallback: str = NOT_AVAILABLE) -> str:
    """Two-decimal representation of ``value``, or ``fallback`` when it is missing.

    Halves of the exact binary value round away from zero, so ``8.125`` gives
    ``8.13`` while ``1.005`` (stored just below the half) gives ``1.00``.
    """
    if not _is_number(value):
        return fallback
    return f"{Decimal(value).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP):f}"


def format_text(value: Any, fallback: str) -> str:
    """``value`` verbatim when it is a non-empty string, else ``fallback``."""
    if isinstance(value, str) and value:
        return value
    return fallback


def format_weight(value: Any, fallback: str = NOT_AVAILABLE) -> str:
    if not _is_number(value):
        return fallback
    if float(value).is_integer():
        return f"{int(value)}%"
    return f"{value:g}%"


def format_rank(value: Any, fallback: str = NOT_AVAILABLE) -> str:
    if not _is_number(value):
        return fallback
    return str(int(value)) if float(value).is_integer() else str(value)


def recommendation_tier(recommendation: Any) -> str:
    """Badge tier: ``high``, ``medium`` or ``low``."""
    if recommendation == HIGHLY_SUITABLE:
        return "high"
    if recommendation == SUITABLE:
        return "medium"
    return "low"
