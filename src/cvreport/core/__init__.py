"""Report synthesis core: derivations and section tree assembly."""

from __future__ import annotations

# NOTE: keep imports explicit for export clarity.
from .assembler import AssemblerSettings, ReportAssembler, assemble_report
from .criteria import CriteriaCategory, CriteriaItem, normalize_criteria
from .fulfillment import NO_EVIDENCE_IN_CV, NO_WORK_HERE, build_fulfillment
from .lookup import lookup
from .presenter import format_rank, format_score, format_text, format_weight, recommendation_tier
from .ranking import sort_ranking
from .tree import Badge, BulletList, ListItem, Node, Paragraph, Section, Table, outline, walk

__all__ = [
    "AssemblerSettings",
    "Badge",
    "BulletList",
    "CriteriaCategory",
    "CriteriaItem",
    "ListItem",
    "NO_EVIDENCE_IN_CV",
    "NO_WORK_HERE",
    "Node",
    "Paragraph",
    "ReportAssembler",
    "Section",
    "Table",
    "assemble_report",
    "build_fulfillment",
    "format_rank",
    "format_score",
    "format_text",
    "format_weight",
    "lookup",
    "normalize_criteria",
    "outline",
    "recommendation_tier",
    "sort_ranking",
    "walk",
]
