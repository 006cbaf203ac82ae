"""Per-candidate evidence lookup for the comparison table."""

from __future__ import annotations

from typing import Iterable

from ..schemas import Candidate
from .lookup import lookup

NO_EVIDENCE_IN_CV = "No evidence in CV."
NO_WORK_HERE = "No work here"


def build_fulfillment(candidate: Candidate, criterion_names: Iterable[str]) -> dict[str, str]:
    """Map every criterion name to evidence text or the ``No work here`` sentinel.

    The first ``detailed_evaluation`` entry with an exactly matching criterion
    wins. Its justification is used only when the score is positive and the text
    is neither empty nor the service's own no-evidence marker.
    """
    evaluations = candidate.detailed_evaluation
    fulfillment: dict[str, str] = {}
    for name in criterion_names:
        entry = lookup(evaluations, lambda item: item.criterion == name, None)
        if (
            entry is not None
            and entry.score is not None
            and entry.score > 0
            and entry.justification
            and entry.justification != NO_EVIDENCE_IN_CV
        ):
            fulfillment[name] = entry.justification
        else:
            fulfillment[name] = NO_WORK_HERE
    return fulfillment
