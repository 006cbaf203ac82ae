from __future__ import annotations

import copy
from typing import Any

import pytest

from cvreport.schemas import EvaluationResult

SAMPLE_PAYLOAD: dict[str, Any] = {
    "tor_text": "Senior water sector engineer for a regional infrastructure programme.",
    "criteria": [
        {"criterion": "Education", "weight": 12},
        {"criterion": "Relevant Project Experience", "weight": 30},
        {"criterion": "Project Management", "weight": 8},
    ],
    "candidates": [
        {
            "candidate_name": "Amina Diallo",
            "recommendation": "Highly Suitable",
            "scores": {
                "general_qualifications": {"education": 9, "years_of_experience": 8.5, "total": 17.5},
                "adequacy_for_assignment": {
                    "relevant_project_experience": 22,
                    "donor_experience": 12,
                    "regional_experience": 9,
                    "total": 43,
                },
                "specific_skills_competencies": {
                    "technical_skills": 13,
                    "language_proficiency": 9,
                    "certifications": 4,
                    "total": 26,
                },
                "total_score": 86.5,
            },
            "summary_justification": {
                "key_strengths": "Deep donor-funded project record.",
                "key_weaknesses": "Limited certification history.",
            },
            "detailed_evaluation": [
                {"criterion": "Education", "weight": 12, "score": 9, "justification": "MSc Civil Engineering"},
                {
                    "criterion": "Relevant Project Experience",
                    "weight": 30,
                    "score": 22,
                    "justification": "Led three ADB water projects",
                },
                {"criterion": "Project Management", "weight": 8, "score": 0, "justification": "Mentions PMP"},
            ],
        },
        {
            "candidate_name": "Jonas Weber",
            "recommendation": "Suitable",
            "scores": {"total_score": 91.25},
            "summary_justification": {"key_strengths": "", "key_weaknesses": None},
            "detailed_evaluation": [
                {"criterion": "Education", "weight": 12, "score": 7, "justification": "No evidence in CV."},
                {"criterion": "Project Management", "weight": 8, "score": 6, "justification": "PMP certified"},
            ],
        },
    ],
    "comparison_matrix": [
        {"candidate_name": "Amina Diallo", "total_score": 86.5, "rank": 2},
        {"candidate_name": "Jonas Weber", "total_score": 91.25, "rank": 1},
    ],
    "final_recommendation": {
        "best_candidate": "Jonas Weber",
        "final_decision": "Recommend for interview",
        "justification": {
            "detailed_explanation": "Strongest overall profile.",
            "why_he": "Highest total score and PMP certification.",
            "why_not_others": [
                {"candidate_name": "Amina Diallo", "reason": "Lower total score."},
            ],
        },
    },
}


@pytest.fixture
def payload() -> dict[str, Any]:
    return copy.deepcopy(SAMPLE_PAYLOAD)


@pytest.fixture
def result(payload: dict[str, Any]) -> EvaluationResult:
    return EvaluationResult.model_validate(payload)
