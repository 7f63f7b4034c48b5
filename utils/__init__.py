"""Utility helpers for the onboarding wizard."""

from __future__ import annotations

from .errors import display_error as display_error
from .i18n import tr as tr
