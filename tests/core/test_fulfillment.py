from __future__ import annotations

from typing import Any

from cvreport.core import NO_WORK_HERE, build_fulfillment
from cvreport.schemas import Candidate


def build_candidate(*evaluations: dict[str, Any]) -> Candidate:
    return Candidate.model_validate({"candidate_name": "A", "detailed_evaluation": list(evaluations)})


def test_fulfillment_uses_positive_scored_justification():
    candidate = build_candidate({"criterion": "Education", "weight": 12, "score": 8, "justification": "Has MSc"})

    assert build_fulfillment(candidate, ["Education"]) == {"Education": "Has MSc"}


def test_fulfillment_has_one_entry_per_criterion():
    candidate = build_candidate({"criterion": "Education", "score": 8, "justification": "Has MSc"})
    names = ["Education", "Regional Experience", "Project Management"]

    fulfillment = build_fulfillment(candidate, names)

    assert list(fulfillment) == names
    assert fulfillment["Regional Experience"] == NO_WORK_HERE
    assert all(value for value in fulfillment.values())


def test_fulfillment_hides_zero_score_justification():
    candidate = build_candidate({"criterion": "Education", "score": 0, "justification": "Has MSc"})

    assert build_fulfillment(candidate, ["Education"]) == {"Education": NO_WORK_HERE}


def test_fulfillment_treats_no_evidence_marker_as_sentinel():
    candidate = build_candidate({"criterion": "Education", "score": 9, "justification": "No evidence in CV."})

    assert build_fulfillment(candidate, ["Education"]) == {"Education": NO_WORK_HERE}


def test_fulfillment_handles_missing_score_and_empty_justification():
    candidate = build_candidate(
        {"criterion": "Education", "justification": "Has MSc"},
        {"criterion": "Certifications", "score": 4, "justification": ""},
    )

    assert build_fulfillment(candidate, ["Education", "Certifications"]) == {
        "Education": NO_WORK_HERE,
        "Certifications": NO_WORK_HERE,
    }


def test_fulfillment_first_duplicate_wins():
    candidate = build_candidate(
        {"criterion": "Education", "score": 0, "justification": "first"},
        {"criterion": "Education", "score": 9, "justification": "second"},
    )

    assert build_fulfillment(candidate, ["Education"]) == {"Education": NO_WORK_HERE}


def test_fulfillment_empty_criteria():
    candidate = build_candidate({"criterion": "Education", "score": 8, "justification": "Has MSc"})

    assert build_fulfillment(candidate, []) == {}
