"""Report pipeline assembly and execution."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pendulum
import structlog
from pydantic import ValidationError

from .core import ReportAssembler
from .render import ReportRenderer
from .schemas import EvaluationResult
from . import __version__


class ReportInputError(ValueError):
    """Raised when an evaluation payload cannot be turned into a result."""


class ResultLoader:
    """Load evaluation results from JSON documents."""

    def load(self, path: Path) -> EvaluationResult:
        with path.open("r", encoding="utf-8") as handle:
            try:
                data = json.load(handle)
            except json.JSONDecodeError as exc:
                raise ReportInputError(f"Invalid evaluation JSON: {exc}") from exc
        return self.parse(data)

    @staticmethod
    def parse(payload: Any) -> EvaluationResult:
        if not isinstance(payload, dict):
            raise ReportInputError("Evaluation payload must be a JSON object")
        try:
            return EvaluationResult.model_validate(payload)
        except ValidationError as exc:
            raise ReportInputError(f"Evaluation payload does not match the expected shape: {exc}") from exc


class OutputWriter:
    """Persist report artifacts."""

    def write_bytes(self, path: Path, payload: bytes) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(payload)

    def write_text(self, path: Path, payload: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(payload, encoding="utf-8")

    def write_json(self, path: Path, payload: dict) -> None:
        self.write_text(path, json.dumps(payload, ensure_ascii=False, indent=2))


@dataclass(slots=True)
class ReportArtifacts:
    docx_path: Path
    html_path: Path
    manifest_path: Path
    manifest: dict[str, Any]


class ReportPipeline:
    """Evaluation result to on-disk report artifacts."""

    def __init__(
        self,
        *,
        assembler: ReportAssembler,
        renderer: ReportRenderer,
        loader: ResultLoader | None = None,
        writer: OutputWriter | None = None,
    ) -> None:
        self._assembler = assembler
        self._renderer = renderer
        self._loader = loader or ResultLoader()
        self._writer = writer or OutputWriter()
        self._logger = structlog.get_logger(__name__)

    def run(self, *, input_path: Path, output_dir: Path, stem: str = "report") -> ReportArtifacts:
        result = self._loader.load(input_path)
        self._logger.info(
            "report.loaded",
            source=str(input_path),
            candidate_count=len(result.candidates),
            criteria_count=len(result.criteria),
        )
        return self.render_result(result, output_dir=output_dir, stem=stem, source=str(input_path))

    def render_result(
        self,
        result: EvaluationResult,
        *,
        output_dir: Path,
        stem: str = "report",
        source: str | None = None,
    ) -> ReportArtifacts:
        tree = self._assembler.assemble(result)
        rendered = self._renderer.render(tree)

        docx_path = output_dir / f"{stem}.docx"
        html_path = output_dir / f"{stem}.html"
        manifest_path = output_dir / f"{stem}.manifest.json"

        self._writer.write_bytes(docx_path, rendered.document)
        self._writer.write_text(html_path, rendered.html)

        manifest = {
            "source": source,
            "title": tree.title,
            "candidate_count": len(result.candidates),
            "criteria_count": len(result.criteria),
            "justification_kind": result.final_recommendation.justification.kind,
            "outputs": {"docx": docx_path.name, "html": html_path.name},
            "generated_at": pendulum.now().to_iso8601_string(),
            "app_version": __version__,
        }
        self._writer.write_json(manifest_path, manifest)

        self._logger.info(
            "report.written",
            docx=str(docx_path),
            html=str(html_path),
            candidate_count=len(result.candidates),
        )
        return ReportArtifacts(
            docx_path=docx_path,
            html_path=html_path,
            manifest_path=manifest_path,
            manifest=manifest,
        )
