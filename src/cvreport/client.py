"""HTTP client for the remote CV evaluation service."""

from __future__ import annotations

import mimetypes
from contextlib import ExitStack
from pathlib import Path
from typing import Any, Sequence

import requests
import structlog
from pydantic import ValidationError

from .schemas import EvaluationResult
from .schemas.config import DEFAULT_SERVICE_ENDPOINT

ALLOWED_EXTENSIONS: tuple[str, ...] = (".pdf", ".doc", ".docx", ".txt")
DEFAULT_ERROR_MESSAGE = "Failed to process CVs."


class SubmissionError(ValueError):
    """Raised when a submission is rejected before it is sent."""


class EvaluationServiceError(RuntimeError):
    """Raised when the evaluation service fails or answers with an error."""


def validate_submission(tor: str, cv_paths: Sequence[Path], *, max_files: int = 10) -> None:
    if not tor or not tor.strip():
        raise SubmissionError("Please enter the Terms of Reference (ToR).")
    if not cv_paths:
        raise SubmissionError("Please upload at least one CV file.")
    if len(cv_paths) > max_files:
        raise SubmissionError(f"Maximum {max_files} CVs allowed.")
    unsupported = [path.name for path in cv_paths if path.suffix.lower() not in ALLOWED_EXTENSIONS]
    if unsupported:
        raise SubmissionError(f"Unsupported CV file type: {', '.join(unsupported)}")


class EvaluationServiceClient:
    """Submit a ToR and CV files; return the parsed evaluation result."""

    def __init__(
        self,
        endpoint: str = DEFAULT_SERVICE_ENDPOINT,
        *,
        timeout: float = 120.0,
        max_files: int = 10,
        session: requests.Session | None = None,
    ) -> None:
        self._endpoint = endpoint
        self._timeout = timeout
        self._max_files = max_files
        self._session = session or requests.Session()
        self._logger = structlog.get_logger(__name__)

    def submit(self, tor: str, cv_paths: Sequence[Path]) -> EvaluationResult:
        validate_submission(tor, cv_paths, max_files=self._max_files)

        with ExitStack() as stack:
            files = [
                (
                    "cvs",
                    (
                        path.name,
                        stack.enter_context(path.open("rb")),
                        mimetypes.guess_type(path.name)[0] or "application/octet-stream",
                    ),
                )
                for path in cv_paths
            ]
            try:
                response = self._session.post(
                    self._endpoint,
                    data={"tor": tor},
                    files=files,
                    timeout=self._timeout,
                )
            except requests.RequestException as exc:
                self._logger.warning("service.failed", endpoint=self._endpoint, error=str(exc))
                raise EvaluationServiceError(f"Evaluation service unreachable: {exc}") from exc

        body = self._decode(response)
        if not response.ok:
            message = body.get("error") if isinstance(body, dict) else None
            self._logger.warning(
                "service.failed",
                endpoint=self._endpoint,
                status=response.status_code,
                error=message,
            )
            raise EvaluationServiceError(message or DEFAULT_ERROR_MESSAGE)
        if not isinstance(body, dict):
            raise EvaluationServiceError("Evaluation service returned a malformed response.")

        try:
            result = EvaluationResult.model_validate(body)
        except ValidationError as exc:
            raise EvaluationServiceError(f"Evaluation service returned an unexpected payload: {exc}") from exc

        self._logger.info(
            "service.submitted",
            endpoint=self._endpoint,
            cv_count=len(cv_paths),
            candidate_count=len(result.candidates),
        )
        return result

    @staticmethod
    def _decode(response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return None
