"""Pydantic models for onboarding reference data and submissions."""

from .onboarding import Manager, ReferenceData, SubmissionResult

__all__ = [
    "Manager",
    "ReferenceData",
    "SubmissionResult",
]
