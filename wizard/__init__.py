"""Wizard helpers package."""

from __future__ import annotations

from .navigation_controller import OnboardingController
from .step_registry import FIRST_STEP, LAST_STEP, WIZARD_STEPS, StepDefinition

__all__ = [
    "FIRST_STEP",
    "LAST_STEP",
    "OnboardingController",
    "StepDefinition",
    "WIZARD_STEPS",
]
