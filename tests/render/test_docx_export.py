from __future__ import annotations

import io
from typing import Any

from docx import Document
from docx.table import Table as DocxTable

from cvreport.core import assemble_report
from cvreport.render import DocxRenderer
from cvreport.schemas import EvaluationResult


def export(result: EvaluationResult) -> Any:
    payload = DocxRenderer().render(assemble_report(result))
    return Document(io.BytesIO(payload))


def heading_texts(document: Any) -> list[str]:
    return [
        p.text
        for p in document.paragraphs
        if p.style.name == "Title" or p.style.name.startswith("Heading")
    ]


def test_export_writes_title_and_sections(result: EvaluationResult):
    document = export(result)

    assert document.paragraphs[0].style.name == "Title"
    assert document.paragraphs[0].text == "CV Comparison Report"
    assert document.core_properties.title == "CV Comparison Report"
    headings = heading_texts(document)
    for title in (
        "Terms of Reference",
        "Evaluation Criteria",
        "Candidates",
        "Comparison Ranking",
        "Final Recommendation",
        "CV Comparison Table",
    ):
        assert title in headings


def test_export_tables_are_bordered_with_header_row(result: EvaluationResult):
    document = export(result)

    assert len(document.tables) == 2
    ranking, comparison = document.tables
    assert all(table.style.name == "Table Grid" for table in document.tables)
    assert [cell.text for cell in ranking.rows[0].cells] == ["Candidate Name", "Total Score", "Rank"]
    assert len(ranking.rows) == 1 + len(result.comparison_matrix)
    assert [cell.text for cell in ranking.rows[1].cells] == ["Jonas Weber", "91.25", "1"]
    assert [cell.text for cell in comparison.rows[0].cells] == [
        "Candidate Name",
        "Education",
        "Relevant Project Experience",
        "Project Management",
    ]
    assert len(comparison.rows) == 1 + len(result.candidates)


def test_export_nests_bullet_lists(result: EvaluationResult):
    document = export(result)

    styles = {p.text: p.style.name for p in document.paragraphs}
    assert styles["Education – 12%"] == "List Bullet"
    assert styles["Adequacy for the Assignment – 50%"] == "List Bullet"
    assert styles["Relevant Project Experience: 22.00 (25%)"] == "List Bullet 2"


def test_string_justification_export(payload: dict[str, Any]):
    payload["final_recommendation"]["justification"] = "Candidate A is strongest."
    document = export(EvaluationResult.model_validate(payload))

    headings = heading_texts(document)
    assert headings.count("Justification") == 1
    assert "Why Not Others" not in headings
    texts = [p.text for p in document.paragraphs]
    index = texts.index("Justification")
    assert texts[index + 1] == "Candidate A is strongest."


def test_export_runs_headless_on_empty_payload():
    document = export(EvaluationResult.model_validate({}))

    body = list(document.iter_inner_content())
    tables = [block for block in body if isinstance(block, DocxTable)]
    assert len(tables) == 2
    assert [cell.text for cell in tables[1].rows[0].cells] == ["Candidate Name"]
    assert len(tables[1].rows) == 1
    assert "No other candidates evaluated." in [p.text for p in document.paragraphs]


def test_export_writes_badge_label_from_tree(result: EvaluationResult):
    document = export(result)

    badges = [p for p in document.paragraphs if p.text.startswith("Recommendation: ")]
    assert [p.text for p in badges] == ["Recommendation: Highly Suitable", "Recommendation: Suitable"]
    assert badges[0].runs[0].bold


def test_export_comparison_table_has_column_per_criterion(payload: dict[str, Any]):
    payload["criteria"] = [{"criterion": "Education", "weight": 10}, {"weight": 5}]
    document = export(EvaluationResult.model_validate(payload))

    comparison = document.tables[1]
    assert [cell.text for cell in comparison.rows[0].cells] == ["Candidate Name", "Education", "N/A"]
    assert [cell.text for cell in comparison.rows[2].cells] == ["Jonas Weber", "No work here", "No work here"]
