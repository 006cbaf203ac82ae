"""Renderers producing the interactive view and the exported document."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass

from ..core.assembler import ReportAssembler
from ..core.tree import Section
from ..schemas import EvaluationResult
from .docx_export import DocxRenderer
from .interactive import InteractiveRenderer, UINode, render_page, to_html, ui_outline


@dataclass(slots=True)
class RenderedReport:
    ui: UINode
    html: str
    document: bytes


class ReportRenderer:
    """Runs both renderers over the same assembled tree."""

    def __init__(
        self,
        *,
        interactive: InteractiveRenderer | None = None,
        docx: DocxRenderer | None = None,
    ) -> None:
        self._interactive = interactive or InteractiveRenderer()
        self._docx = docx or DocxRenderer()

    def render(self, tree: Section) -> RenderedReport:
        ui = self._interactive.render(tree)
        return RenderedReport(
            ui=ui,
            html=render_page(ui, title=tree.title),
            document=self._docx.render(tree),
        )


async def export_docx_async(
    result: EvaluationResult,
    *,
    assembler: ReportAssembler | None = None,
    renderer: DocxRenderer | None = None,
) -> bytes:
    """Build the exported document in a worker thread."""
    assembler = assembler or ReportAssembler()
    renderer = renderer or DocxRenderer()
    return await asyncio.to_thread(lambda: renderer.render(assembler.assemble(result)))


__all__ = [
    "DocxRenderer",
    "InteractiveRenderer",
    "RenderedReport",
    "ReportRenderer",
    "UINode",
    "export_docx_async",
    "render_page",
    "to_html",
    "ui_outline",
]
