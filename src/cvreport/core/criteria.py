"""Criteria normalization into the fixed three-category hierarchy."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ..schemas import Criterion
from .lookup import lookup


@dataclass(frozen=True, slots=True)
class CriteriaItem:
    name: str
    weight: float


@dataclass(frozen=True, slots=True)
class CriteriaCategory:
    """One weighted category with its named sub-criteria."""

    category: str
    weight: float
    subitems: tuple[CriteriaItem, ...]


# (category, weight, ((sub-criterion, default weight), ...)). Names are the
# exact labels emitted by the scoring service.
CRITERIA_BLUEPRINT: tuple[tuple[str, float, tuple[tuple[str, float], ...]], ...] = (
    (
        "General Qualifications",
        20,
        (
            ("Education", 10),
            ("Years of Experience", 10),
        ),
    ),
    (
        "Adequacy for the Assignment",
        50,
        (
            ("Relevant Project Experience", 25),
            ("Donor Experience (WB, ADB, etc.)", 15),
            ("Regional Experience", 10),
        ),
    ),
    (
        "Specific Skills & Competencies",
        30,
        (
            ("Technical Skills", 15),
            ("Language Proficiency", 10),
            ("Certifications", 5),
        ),
    ),
)

TOTAL_WEIGHT = 100


def criterion_weight(criteria: Iterable[Criterion], name: str, default: float) -> float:
    """Weight of the first criterion named ``name``; null or zero weights use ``default``."""
    match = lookup(criteria, lambda item: item.criterion == name, None)
    if match is None or not match.weight:
        return default
    return match.weight


def normalize_criteria(criteria: Iterable[Criterion]) -> list[CriteriaCategory]:
    """Project the flat criteria list onto the fixed hierarchy.

    Always returns three categories with 2, 3 and 3 subitems. Criteria that are
    not part of the hierarchy are left out.
    """
    items = list(criteria)
    return [
        CriteriaCategory(
            category=category,
            weight=weight,
            subitems=tuple(
                CriteriaItem(name=name, weight=criterion_weight(items, name, default))
                for name, default in subitems
            ),
        )
        for category, weight, subitems in CRITERIA_BLUEPRINT
    ]
