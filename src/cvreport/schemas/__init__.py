"""Pydantic schema definitions for the evaluation payload and app config."""

from __future__ import annotations

from .config import AppConfig, load_config
from .evaluation import (
    Candidate,
    CandidateSummary,
    ComparisonEntry,
    Criterion,
    DetailedEvaluation,
    EvaluationResult,
    FinalRecommendation,
    Justification,
    Scores,
    StructuredJustification,
    TextJustification,
    WhyNotOther,
)

__all__ = [
    "AppConfig",
    "Candidate",
    "CandidateSummary",
    "ComparisonEntry",
    "Criterion",
    "DetailedEvaluation",
    "EvaluationResult",
    "FinalRecommendation",
    "Justification",
    "Scores",
    "StructuredJustification",
    "TextJustification",
    "WhyNotOther",
    "load_config",
]
