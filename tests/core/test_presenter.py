from __future__ import annotations

import pytest

from cvreport.core import format_rank, format_score, format_text, format_weight, recommendation_tier


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (8, "8.00"),
        (7.4567, "7.46"),
        (8.125, "8.13"),
        (-8.125, "-8.13"),
        (1.005, "1.00"),
        (2.5, "2.50"),
        (0, "0.00"),
        (None, "N/A"),
        (float("nan"), "N/A"),
        (float("inf"), "N/A"),
        ("8", "N/A"),
        (True, "N/A"),
    ],
)
def test_format_score(value, expected):
    assert format_score(value) == expected


def test_format_score_custom_fallback():
    assert format_score(None, "-") == "-"


@pytest.mark.parametrize(
    ("value", "fallback", "expected"),
    [
        ("Has MSc", "None provided.", "Has MSc"),
        ("", "None provided.", "None provided."),
        (None, "Unnamed Candidate", "Unnamed Candidate"),
        (42, "Not Evaluated", "Not Evaluated"),
    ],
)
def test_format_text(value, fallback, expected):
    assert format_text(value, fallback) == expected


def test_format_weight_and_rank():
    assert format_weight(12) == "12%"
    assert format_weight(12.5) == "12.5%"
    assert format_weight(None) == "N/A"
    assert format_rank(1) == "1"
    assert format_rank(None) == "N/A"


def test_recommendation_tier():
    assert recommendation_tier("Highly Suitable") == "high"
    assert recommendation_tier("Suitable") == "medium"
    assert recommendation_tier("Not Suitable") == "low"
    assert recommendation_tier("Not Evaluated") == "low"
