"""Report assembly: one ordered section tree from an evaluation result."""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from ..schemas import (
    Candidate,
    EvaluationResult,
    FinalRecommendation,
    StructuredJustification,
    TextJustification,
)
from ..schemas.config import DEFAULT_REPORT_TITLE, DEFAULT_SCORE_DISCLAIMER
from .criteria import CRITERIA_BLUEPRINT, TOTAL_WEIGHT, normalize_criteria
from .fulfillment import NO_WORK_HERE, build_fulfillment
from .presenter import (
    NO_CANDIDATE,
    NO_DETAILED_EXPLANATION,
    NO_JUSTIFICATION,
    NO_REASON,
    NO_RECOMMENDATION_REASON,
    NO_TOR_TEXT,
    NONE_PROVIDED,
    NOT_AVAILABLE,
    NOT_EVALUATED,
    UNNAMED_CANDIDATE,
    format_rank,
    format_score,
    format_text,
    format_weight,
    recommendation_tier,
)
from .ranking import sort_ranking
from .tree import Badge, BulletList, ListItem, Node, Paragraph, Section, Table

NO_OTHER_CANDIDATES = "No other candidates evaluated."
RANKING_COLUMNS = ("Candidate Name", "Total Score", "Rank")
COMPARISON_NAME_COLUMN = "Candidate Name"


@dataclass(frozen=True, slots=True)
class AssemblerSettings:
    title: str = DEFAULT_REPORT_TITLE
    score_disclaimer: str = DEFAULT_SCORE_DISCLAIMER


def _weighted(label: str, weight: float) -> str:
    return f"{label} – {format_weight(weight)}"


class ReportAssembler:
    """Builds the section tree every renderer walks.

    Section order is fixed: Terms of Reference, Evaluation Criteria, Candidates,
    Comparison Ranking, Final Recommendation, CV Comparison Table. Candidates
    keep their received order; only the ranking table is sorted.
    """

    def __init__(self, settings: AssemblerSettings | None = None) -> None:
        self._settings = settings or AssemblerSettings()
        self._logger = structlog.get_logger(__name__)

    def assemble(self, result: EvaluationResult) -> Section:
        sections = (
            self._tor_section(result),
            self._criteria_section(result),
            self._candidates_section(result),
            self._ranking_section(result),
            self._recommendation_section(result.final_recommendation),
            self._comparison_section(result),
        )
        tree = Section(title=self._settings.title, level=0, children=sections, key="report")
        self._logger.debug(
            "report.assembled",
            candidate_count=len(result.candidates),
            criteria_count=len(result.criteria),
            justification_kind=result.final_recommendation.justification.kind,
        )
        return tree

    @staticmethod
    def _tor_section(result: EvaluationResult) -> Section:
        return Section(
            title="Terms of Reference",
            level=1,
            key="tor",
            children=(Paragraph(format_text(result.tor_text, NO_TOR_TEXT)),),
        )

    @staticmethod
    def _criteria_section(result: EvaluationResult) -> Section:
        categories: list[Node] = [
            Section(
                title=_weighted(category.category, category.weight),
                level=2,
                children=(
                    BulletList(
                        items=tuple(
                            ListItem(_weighted(item.name, item.weight))
                            for item in category.subitems
                        )
                    ),
                ),
            )
            for category in normalize_criteria(result.criteria)
        ]
        categories.append(Section(title=_weighted("Total Score", TOTAL_WEIGHT), level=2))
        return Section(
            title="Evaluation Criteria",
            level=1,
            key="criteria",
            collapsible=True,
            children=tuple(categories),
        )

    def _candidates_section(self, result: EvaluationResult) -> Section:
        return Section(
            title="Candidates",
            level=1,
            key="candidates",
            children=tuple(self._candidate_section(candidate) for candidate in result.candidates),
        )

    def _candidate_section(self, candidate: Candidate) -> Section:
        recommendation = format_text(candidate.recommendation, NOT_EVALUATED)
        total = format_score(candidate.scores.total_score)
        children: tuple[Node, ...] = (
            Badge(
                text=recommendation,
                tier=recommendation_tier(recommendation),
                label="Recommendation",
            ),
            Paragraph(f"{total} ({self._settings.score_disclaimer})", label="Total Score"),
            Paragraph(format_text(candidate.summary.key_strengths, NONE_PROVIDED), label="Strengths"),
            Paragraph(format_text(candidate.summary.key_weaknesses, NONE_PROVIDED), label="Weaknesses"),
            Section(
                title="Score Breakdown",
                level=3,
                children=(BulletList(items=self._score_breakdown(candidate)),),
            ),
            Section(
                title="Detailed Evaluation",
                level=3,
                collapsible=True,
                children=(self._detailed_evaluation(candidate),),
            ),
        )
        return Section(
            title=format_text(candidate.name, UNNAMED_CANDIDATE),
            level=2,
            key="candidate",
            children=children,
        )

    @staticmethod
    def _score_breakdown(candidate: Candidate) -> tuple[ListItem, ...]:
        scores = candidate.scores
        category_scores = (
            (
                scores.general_qualifications.education,
                scores.general_qualifications.years_of_experience,
            ),
            (
                scores.adequacy_for_assignment.relevant_project_experience,
                scores.adequacy_for_assignment.donor_experience,
                scores.adequacy_for_assignment.regional_experience,
            ),
            (
                scores.specific_skills_competencies.technical_skills,
                scores.specific_skills_competencies.language_proficiency,
                scores.specific_skills_competencies.certifications,
            ),
        )
        items: list[ListItem] = []
        for (category, weight, subitems), values in zip(CRITERIA_BLUEPRINT, category_scores):
            items.append(
                ListItem(
                    _weighted(category, weight),
                    children=tuple(
                        ListItem(f"{name}: {format_score(value)} ({format_weight(sub_weight)})")
                        for (name, sub_weight), value in zip(subitems, values)
                    ),
                )
            )
        return tuple(items)

    @staticmethod
    def _detailed_evaluation(candidate: Candidate) -> Node:
        if not candidate.detailed_evaluation:
            return Paragraph(NONE_PROVIDED)
        return BulletList(
            items=tuple(
                ListItem(
                    format_text(entry.criterion, NOT_AVAILABLE),
                    children=(
                        ListItem(f"Weight: {format_weight(entry.weight)}"),
                        ListItem(f"Score: {format_score(entry.score)}"),
                        ListItem(f"Justification: {format_text(entry.justification, NONE_PROVIDED)}"),
                    ),
                )
                for entry in candidate.detailed_evaluation
            )
        )

    @staticmethod
    def _ranking_section(result: EvaluationResult) -> Section:
        rows = tuple(
            (
                format_text(entry.candidate_name, UNNAMED_CANDIDATE),
                format_score(entry.total_score),
                format_rank(entry.rank),
            )
            for entry in sort_ranking(result.comparison_matrix)
        )
        return Section(
            title="Comparison Ranking",
            level=1,
            key="ranking",
            children=(Table(columns=RANKING_COLUMNS, rows=rows),),
        )

    @staticmethod
    def _recommendation_section(recommendation: FinalRecommendation) -> Section:
        children: list[Node] = [
            Paragraph(format_text(recommendation.best_candidate, NO_CANDIDATE), label="Best Candidate"),
            Paragraph(format_text(recommendation.final_decision, NOT_EVALUATED), label="Decision"),
        ]
        justification = recommendation.justification
        if isinstance(justification, TextJustification):
            children.append(
                Section(
                    title="Justification",
                    level=2,
                    key="justification",
                    children=(Paragraph(format_text(justification.text, NO_JUSTIFICATION)),),
                )
            )
        elif isinstance(justification, StructuredJustification):
            children.extend(_structured_justification(justification))
        else:
            raise TypeError(f"Unsupported justification variant: {type(justification).__name__}")
        return Section(
            title="Final Recommendation",
            level=1,
            key="recommendation",
            children=tuple(children),
        )

    @staticmethod
    def _comparison_section(result: EvaluationResult) -> Section:
        # One column per criteria entry; unnamed entries keep their column.
        headers = tuple(format_text(item.criterion, NOT_AVAILABLE) for item in result.criteria)
        rows = []
        for candidate in result.candidates:
            fulfillment = build_fulfillment(candidate, result.criterion_names)
            rows.append(
                (
                    format_text(candidate.name, UNNAMED_CANDIDATE),
                    *(
                        NO_WORK_HERE if item.criterion is None else fulfillment[item.criterion]
                        for item in result.criteria
                    ),
                )
            )
        return Section(
            title="CV Comparison Table",
            level=1,
            key="comparison",
            children=(Table(columns=(COMPARISON_NAME_COLUMN, *headers), rows=tuple(rows)),),
        )


def _structured_justification(justification: StructuredJustification) -> tuple[Section, ...]:
    if justification.why_not_others:
        others: Node = BulletList(
            items=tuple(
                ListItem(
                    f"Candidate: {format_text(other.candidate_name, UNNAMED_CANDIDATE)}",
                    children=(ListItem(f"Reason: {format_text(other.reason, NO_REASON)}"),),
                )
                for other in justification.why_not_others
            )
        )
    else:
        others = Paragraph(NO_OTHER_CANDIDATES)
    return (
        Section(
            title="Detailed Explanation",
            level=2,
            key="detailed_explanation",
            children=(Paragraph(format_text(justification.detailed_explanation, NO_DETAILED_EXPLANATION)),),
        ),
        Section(
            title="Why Recommended Candidate",
            level=2,
            key="why_recommended",
            children=(Paragraph(format_text(justification.why_he, NO_RECOMMENDATION_REASON)),),
        ),
        Section(
            title="Why Not Others",
            level=2,
            key="why_not_others",
            children=(others,),
        ),
    )


def assemble_report(result: EvaluationResult, settings: AssemblerSettings | None = None) -> Section:
    """Convenience wrapper around :class:`ReportAssembler`."""
    return ReportAssembler(settings).assemble(result)
