"""Simple i18n helper utilities."""

from __future__ import annotations

from typing import Final

import streamlit as st

import config
from constants.keys import StateKeys

LocalizedText = tuple[str, str]

STEP_PROGRESS_TEMPLATE: Final[LocalizedText] = (
    "Schritt {step} von {total}: {label}",
    "Step {step} of {total}: {label}",
)
NOT_PROVIDED: Final[LocalizedText] = ("Nicht angegeben", "Not provided")
UNSAVED_CHANGES_WARNING: Final[LocalizedText] = (
    "Du hast ungespeicherte Änderungen. Beim Verlassen gehen sie verloren.",
    "You have unsaved changes. They will be lost if you leave.",
)
SUBMISSION_SUCCESS: Final[LocalizedText] = (
    "Onboarding-Formular erfolgreich übermittelt!",
    "Onboarding form submitted successfully!",
)
SUBMISSION_FAILED: Final[LocalizedText] = (
    "Übermittlung fehlgeschlagen. Bitte versuche es erneut.",
    "Submission failed. Please try again.",
)


def current_lang() -> str:
    """Return the session language, falling back to ``DEFAULT_LANG``."""

    return config.normalise_language(st.session_state.get(StateKeys.LANG), default=config.DEFAULT_LANG)


def tr(de: str, en: str, lang: str | None = None) -> str:
    """Return the string matching the current language.

    Args:
        de: German text.
        en: English text.
        lang: Optional language override (``"de"`` or ``"en"``).

    Returns:
        The localized string for the requested language.
    """
    code = lang or current_lang()
    return de if code == "de" else en


def tr_pair(pair: LocalizedText, lang: str | None = None, **values: object) -> str:
    """Translate ``pair`` and interpolate ``values`` into the result."""

    text = tr(pair[0], pair[1], lang=lang)
    return text.format(**values) if values else text
