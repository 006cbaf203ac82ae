"""Pydantic configuration schema for CLI YAML input."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

DEFAULT_REPORT_TITLE = "CV Comparison Report"
DEFAULT_SCORE_DISCLAIMER = "This score is approximate and can fluctuate by plus or minus 5"
DEFAULT_SERVICE_ENDPOINT = "http://localhost:8000/api/compare-cvs/"


class ReportConfig(BaseModel):
    title: str = DEFAULT_REPORT_TITLE
    score_disclaimer: str = DEFAULT_SCORE_DISCLAIMER

    model_config = ConfigDict(extra="forbid")


class ExportConfig(BaseModel):
    table_style: str = "Table Grid"

    model_config = ConfigDict(extra="forbid")


class ServiceConfig(BaseModel):
    endpoint: str = DEFAULT_SERVICE_ENDPOINT
    timeout: float = Field(default=120.0, gt=0)
    max_files: int = Field(default=10, ge=1)

    model_config = ConfigDict(extra="forbid")


class AppConfig(BaseModel):
    report: ReportConfig = Field(default_factory=ReportConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    service: ServiceConfig = Field(default_factory=ServiceConfig)

    model_config = ConfigDict(extra="forbid")

    def to_settings(self) -> dict[str, Any]:
        return self.model_dump()


def load_config(raw: Any) -> AppConfig:
    if raw is None:
        return AppConfig()
    if not isinstance(raw, dict):
        raise ValidationError.from_exception_data(
            "AppConfig",
            [{"type": "dict_type", "loc": ("config",), "input": raw}],
        )
    return AppConfig.model_validate(raw)
