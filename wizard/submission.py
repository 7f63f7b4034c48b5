"""Submission collaborator contract and the default logging sink."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from models.onboarding import SubmissionResult

logger = logging.getLogger(__name__)


@runtime_checkable
class SubmissionSink(Protocol):
    """Receives the fully validated onboarding record.

    Implementations deliver the record (for example to an HR API) and report
    the outcome. Retry and persistence policies belong to the sink. Raising
    :class:`core.errors.SubmissionError` (or any exception) marks the
    submission as failed.
    """

    def submit(self, record: Mapping[str, Any]) -> SubmissionResult: ...


class LoggingSubmissionSink:
    """Stand-in sink that logs the submitted record and reports success."""

    def __init__(self, *, log_level: int = logging.INFO) -> None:
        self._log_level = log_level
        self.submitted: list[Mapping[str, Any]] = []

    def submit(self, record: Mapping[str, Any]) -> SubmissionResult:
        reference = uuid.uuid4().hex[:12]
        self.submitted.append(record)
        logger.log(
            self._log_level,
            "Onboarding record %s submitted with sections: %s",
            reference,
            ", ".join(record),
        )
        return SubmissionResult(
            ok=True,
            message="Onboarding form submitted successfully!",
            reference=reference,
        )


__all__ = ["LoggingSubmissionSink", "SubmissionSink"]
