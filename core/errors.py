"""Custom exception types for the onboarding wizard."""

from __future__ import annotations


class OnboardingError(Exception):
    """Base exception for onboarding wizard usage errors."""


class UnknownFieldError(OnboardingError, KeyError):
    """Raised when an edit targets a path outside the onboarding record."""

    def __init__(self, path: str) -> None:
        super().__init__(path)
        self.path = path

    def __str__(self) -> str:
        return f"Unknown onboarding field: {self.path!r}"


class InvalidStepError(OnboardingError, ValueError):
    """Raised when navigation targets a step that cannot be reached directly."""

    def __init__(self, step: object, message: str | None = None) -> None:
        super().__init__(message or f"Cannot navigate to step {step!r}")
        self.step = step


class SubmissionNotAllowedError(OnboardingError):
    """Raised when ``submit`` is called before the review step or while a submission runs."""


class SubmissionError(OnboardingError):
    """Raised by submission sinks when the record could not be delivered."""


class ReferenceDataError(OnboardingError):
    """Raised when an external reference-data file cannot be loaded."""
