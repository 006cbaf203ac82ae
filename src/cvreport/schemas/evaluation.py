"""Pydantic models for the evaluation payload returned by the scoring service."""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import (
    AliasChoices,
    AliasGenerator,
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel


def _snake_or_camel(name: str) -> AliasChoices:
    return AliasChoices(name, to_camel(name))


class PayloadModel(BaseModel):
    """Read-only model that accepts snake_case or camelCase keys and ignores nulls.

    The service may send ``null`` for any leaf, list or object. Null values are
    dropped before validation so every field falls back to its declared default,
    and null entries inside lists are skipped.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=AliasGenerator(validation_alias=_snake_or_camel),
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        cleaned: dict[str, Any] = {}
        for key, value in data.items():
            if value is None:
                continue
            if isinstance(value, list):
                value = [item for item in value if item is not None]
            cleaned[key] = value
        return cleaned


class Criterion(PayloadModel):
    """Named evaluation dimension with its weight (percentage of the total)."""

    criterion: str | None = None
    weight: float | None = None


class GeneralQualifications(PayloadModel):
    education: float | None = None
    years_of_experience: float | None = None
    total: float | None = None


class AdequacyForAssignment(PayloadModel):
    relevant_project_experience: float | None = None
    donor_experience: float | None = None
    regional_experience: float | None = None
    total: float | None = None


class SpecificSkillsCompetencies(PayloadModel):
    technical_skills: float | None = None
    language_proficiency: float | None = None
    certifications: float | None = None
    total: float | None = None


class Scores(PayloadModel):
    """Category subtotals and the overall score of one candidate."""

    general_qualifications: GeneralQualifications = Field(default_factory=GeneralQualifications)
    adequacy_for_assignment: AdequacyForAssignment = Field(default_factory=AdequacyForAssignment)
    specific_skills_competencies: SpecificSkillsCompetencies = Field(
        default_factory=SpecificSkillsCompetencies
    )
    total_score: float | None = None


class CandidateSummary(PayloadModel):
    key_strengths: str | None = None
    key_weaknesses: str | None = None


class DetailedEvaluation(PayloadModel):
    """Per-criterion score and rationale for one candidate."""

    criterion: str | None = None
    weight: float | None = None
    score: float | None = None
    justification: str | None = None


class Candidate(PayloadModel):
    """Evaluated candidate as reported by the scoring service."""

    name: str | None = Field(
        default=None,
        validation_alias=AliasChoices("candidate_name", "candidateName", "name"),
    )
    recommendation: str | None = None
    scores: Scores = Field(default_factory=Scores)
    summary: CandidateSummary = Field(
        default_factory=CandidateSummary,
        validation_alias=AliasChoices("summary_justification", "summaryJustification", "summary"),
    )
    detailed_evaluation: list[DetailedEvaluation] = Field(default_factory=list)


class ComparisonEntry(PayloadModel):
    candidate_name: str | None = None
    total_score: float | None = None
    rank: int | None = None


class WhyNotOther(PayloadModel):
    candidate_name: str | None = None
    reason: str | None = None


class TextJustification(PayloadModel):
    """Plain-text justification of the final recommendation."""

    kind: Literal["text"] = Field(default="text", validation_alias="kind")
    text: str | None = None


class StructuredJustification(PayloadModel):
    """Broken-down justification of the final recommendation."""

    kind: Literal["structured"] = Field(default="structured", validation_alias="kind")
    detailed_explanation: str | None = None
    why_he: str | None = None
    why_not_others: list[WhyNotOther] = Field(default_factory=list)


Justification = Annotated[
    Union[TextJustification, StructuredJustification],
    Field(discriminator="kind"),
]


class FinalRecommendation(PayloadModel):
    best_candidate: str | None = None
    final_decision: str | None = None
    justification: Justification = Field(default_factory=StructuredJustification)

    @field_validator("justification", mode="before")
    @classmethod
    def _tag_justification(cls, value: Any) -> Any:
        """Attach the ``kind`` discriminator to the raw wire shape."""
        if isinstance(value, (TextJustification, StructuredJustification)):
            return value
        if isinstance(value, str):
            return {"kind": "text", "text": value}
        if isinstance(value, dict):
            if value.get("kind") in ("text", "structured"):
                return value
            return {**value, "kind": "structured"}
        # Out of contract: anything else is coerced to its text form.
        return {"kind": "text", "text": str(value)}


class EvaluationResult(PayloadModel):
    """Root of one analysis run; treated as read-only input by the engine."""

    tor_text: str | None = None
    criteria: list[Criterion] = Field(default_factory=list)
    candidates: list[Candidate] = Field(default_factory=list)
    comparison_matrix: list[ComparisonEntry] = Field(default_factory=list)
    final_recommendation: FinalRecommendation = Field(default_factory=FinalRecommendation)

    @property
    def criterion_names(self) -> list[str]:
        """Named criteria in received order; unnamed entries are skipped."""
        return [item.criterion for item in self.criteria if item.criterion is not None]
