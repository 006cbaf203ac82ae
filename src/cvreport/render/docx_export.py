"""Word document export of the section tree."""

from __future__ import annotations

import io

from docx import Document
from docx.document import Document as DocumentObject
from docx.shared import RGBColor

from ..core.tree import Badge, BulletList, ListItem, Node, Paragraph, Section, Table

MAX_HEADING_LEVEL = 9
MAX_LIST_DEPTH = 3

_BADGE_COLORS = {
    "high": RGBColor(0x16, 0x65, 0x34),
    "medium": RGBColor(0x85, 0x4D, 0x0E),
    "low": RGBColor(0x99, 0x1B, 0x1B),
}


def _list_style(depth: int) -> str:
    depth = min(depth, MAX_LIST_DEPTH - 1)
    return "List Bullet" if depth == 0 else f"List Bullet {depth + 1}"


class DocxRenderer:
    """Writes headings, bullet lists and bordered tables with python-docx.

    Heading levels come straight from the section depth, so the document
    outline matches the interactive view. Needs no UI state and runs headless.
    """

    def __init__(self, *, table_style: str = "Table Grid") -> None:
        self._table_style = table_style

    def build(self, tree: Section) -> DocumentObject:
        document = Document()
        document.core_properties.title = tree.title
        self._node(document, tree)
        return document

    def render(self, tree: Section) -> bytes:
        buffer = io.BytesIO()
        self.build(tree).save(buffer)
        return buffer.getvalue()

    def _node(self, document: DocumentObject, node: Node) -> None:
        if isinstance(node, Section):
            document.add_heading(node.title, level=min(node.level, MAX_HEADING_LEVEL))
            for child in node.children:
                self._node(document, child)
        elif isinstance(node, Paragraph):
            paragraph = document.add_paragraph()
            if node.label is not None:
                paragraph.add_run(f"{node.label}: ").bold = True
            paragraph.add_run(node.text)
        elif isinstance(node, Badge):
            paragraph = document.add_paragraph()
            if node.label is not None:
                paragraph.add_run(f"{node.label}: ").bold = True
            run = paragraph.add_run(node.text)
            run.bold = True
            run.font.color.rgb = _BADGE_COLORS.get(node.tier, _BADGE_COLORS["low"])
        elif isinstance(node, BulletList):
            self._list(document, node.items, depth=0)
        elif isinstance(node, Table):
            self._table(document, node)
        else:
            raise TypeError(f"Unsupported node: {type(node).__name__}")

    def _list(self, document: DocumentObject, items: tuple[ListItem, ...], *, depth: int) -> None:
        for item in items:
            document.add_paragraph(item.text, style=_list_style(depth))
            if item.children:
                self._list(document, item.children, depth=depth + 1)

    def _table(self, document: DocumentObject, table: Table) -> None:
        grid = document.add_table(rows=1, cols=len(table.columns))
        grid.style = self._table_style
        for cell, column in zip(grid.rows[0].cells, table.columns):
            cell.text = column
            for run in cell.paragraphs[0].runs:
                run.bold = True
        for row in table.rows:
            for cell, value in zip(grid.add_row().cells, row):
                cell.text = value
