"""Typer CLI entrypoint for report generation."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError

from .client import EvaluationServiceError, SubmissionError
from .config import load_config_file
from .container import create_container
from .logging import configure_logging
from .pipeline import ReportInputError
from .schemas import AppConfig

app = typer.Typer(help="CV evaluation report CLI.")

_LOG_FORMATS = ("json", "console")


def _bootstrap(config: Optional[Path], log_level: str, log_format: str) -> AppConfig:
    if log_format not in _LOG_FORMATS:
        raise typer.BadParameter(f"Expected one of {', '.join(_LOG_FORMATS)}", param_name="log_format")
    try:
        app_config = load_config_file(config)
    except (ValueError, ValidationError) as exc:
        raise typer.BadParameter(str(exc), param_name="config") from exc
    configure_logging(log_level, log_format=log_format)  # type: ignore[arg-type]
    return app_config


@app.command()
def render(
    input: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Evaluation result JSON path."),
    output_dir: Path = typer.Option(
        ...,
        file_okay=False,
        dir_okay=True,
        resolve_path=True,
        help="Directory receiving the report artifacts.",
    ),
    stem: str = typer.Option("report", help="Base file name of the artifacts."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
    log_format: str = typer.Option("json", help="Log output format: json or console."),
) -> None:
    """Render a stored evaluation result into the interactive view and document export."""
    app_config = _bootstrap(config, log_level, log_format)
    pipeline = create_container(settings=app_config).pipeline()

    try:
        artifacts = pipeline.run(input_path=input, output_dir=output_dir, stem=stem)
    except ReportInputError as exc:
        raise typer.BadParameter(str(exc), param_name="input") from exc
    typer.echo(
        f"Rendered {artifacts.manifest['candidate_count']} candidates. "
        f"Report saved to {artifacts.docx_path} and {artifacts.html_path}."
    )


@app.command()
def analyze(
    tor: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Terms of Reference text file."),
    cv: List[Path] = typer.Option(..., exists=True, readable=True, dir_okay=False, help="CV file; repeat for each CV."),
    output_dir: Path = typer.Option(
        ...,
        file_okay=False,
        dir_okay=True,
        resolve_path=True,
        help="Directory receiving the report artifacts.",
    ),
    stem: str = typer.Option("report", help="Base file name of the artifacts."),
    endpoint: Optional[str] = typer.Option(None, envvar="CVREPORT_API_URL", help="Evaluation service endpoint."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
    log_format: str = typer.Option("json", help="Log output format: json or console."),
) -> None:
    """Submit a ToR and CVs to the evaluation service and render the result."""
    app_config = _bootstrap(config, log_level, log_format)
    if endpoint:
        app_config = app_config.model_copy(
            update={"service": app_config.service.model_copy(update={"endpoint": endpoint})}
        )
    container = create_container(settings=app_config)
    client = container.service_client()

    try:
        result = client.submit(tor.read_text(encoding="utf-8"), cv)
    except SubmissionError as exc:
        raise typer.BadParameter(str(exc)) from exc
    except EvaluationServiceError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    artifacts = container.pipeline().render_result(
        result,
        output_dir=output_dir,
        stem=stem,
        source=app_config.service.endpoint,
    )
    typer.echo(
        f"Rendered {artifacts.manifest['candidate_count']} candidates. "
        f"Report saved to {artifacts.docx_path} and {artifacts.html_path}."
    )


def main() -> None:
    app()


if __name__ == "__main__":
    main()
