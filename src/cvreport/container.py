"""Dependency injection container for the report engine."""

from __future__ import annotations

from typing import Any

from dependency_injector import containers, providers

from .client import EvaluationServiceClient
from .core import AssemblerSettings, ReportAssembler
from .pipeline import ReportPipeline
from .render import DocxRenderer, InteractiveRenderer, ReportRenderer
from .schemas.config import AppConfig, load_config


class ReportContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    config = providers.Configuration()

    assembler_settings = providers.Singleton(
        AssemblerSettings,
        title=config.report.title,
        score_disclaimer=config.report.score_disclaimer,
    )

    assembler = providers.Singleton(ReportAssembler, settings=assembler_settings)

    interactive_renderer = providers.Singleton(InteractiveRenderer)
    docx_renderer = providers.Singleton(DocxRenderer, table_style=config.export.table_style)

    report_renderer = providers.Singleton(
        ReportRenderer,
        interactive=interactive_renderer,
        docx=docx_renderer,
    )

    pipeline = providers.Factory(
        ReportPipeline,
        assembler=assembler,
        renderer=report_renderer,
    )

    service_client = providers.Factory(
        EvaluationServiceClient,
        endpoint=config.service.endpoint,
        timeout=config.service.timeout,
        max_files=config.service.max_files,
    )


def create_container(*, settings: dict[str, Any] | AppConfig | None = None) -> ReportContainer:
    """Instantiate the container; missing settings fall back to ``AppConfig`` defaults."""

    app_config = settings if isinstance(settings, AppConfig) else load_config(settings)
    container = ReportContainer()
    container.config.from_dict(app_config.to_settings())
    return container
