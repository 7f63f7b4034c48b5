"""Central configuration for the onboarding wizard.

Settings are read from Streamlit secrets first and fall back to environment
variables (a local ``.env`` file is loaded on import):

``LOG_LEVEL``
    Root log level used by :func:`utils.logging_context.configure_logging`.
``DEFAULT_LANG``
    ``en`` or ``de``; language used for validation messages.
``ONBOARDING_REFERENCE_DATA``
    Optional path to a JSON file replacing the built-in departments, job
    types, relationships, skills catalog and manager directory.
``PRUNE_HIDDEN_FIELDS``
    Reset values of fields that become hidden after an edit (default on).
``REVALIDATE_ON_SUBMIT``
    Re-run every section's rules before handing the record to the
    submission sink (default on).
"""

from __future__ import annotations

import logging
import os
import warnings
from functools import lru_cache
from pathlib import Path

import streamlit as st
from dotenv import load_dotenv
from pydantic import ValidationError

from core.errors import ReferenceDataError
from models.onboarding import ReferenceData

load_dotenv()


logger = logging.getLogger(__name__)

SUPPORTED_LANGUAGES: tuple[str, ...] = ("en", "de")
_LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _coerce_secret_value(value: object) -> str:
    """Return ``value`` as a trimmed string without raising on unexpected types."""

    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    return str(value).strip()


def get_setting(name: str, default: str = "") -> str:
    """Return ``name`` from Streamlit secrets or the environment."""

    try:
        secret = st.secrets[name]
    except Exception:  # no secrets file or key not set
        secret = None
    value = _coerce_secret_value(secret)
    if value:
        return value
    env_value = _coerce_secret_value(os.getenv(name))
    return env_value or default


def _normalise_bool(value: object | None, *, default: bool = False) -> bool:
    """Return ``value`` converted to ``bool`` where possible."""

    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        candidate = value.strip().lower()
        if not candidate:
            return default
        if candidate in {"1", "true", "yes", "y", "on"}:
            return True
        if candidate in {"0", "false", "no", "n", "off"}:
            return False
    warnings.warn(
        "Unsupported boolean value %r; falling back to %s." % (value, default),
        RuntimeWarning,
    )
    return default


def normalise_language(value: object | None, *, default: str = "en") -> str:
    """Return a supported language code for ``value``."""

    if isinstance(value, str):
        candidate = value.strip().lower()[:2]
        if candidate in SUPPORTED_LANGUAGES:
            return candidate
    return default


def normalise_log_level(value: object | None, *, default: str = "INFO") -> str:
    if isinstance(value, str) and value.strip().upper() in _LOG_LEVELS:
        return value.strip().upper()
    return default


LOG_LEVEL = normalise_log_level(get_setting("LOG_LEVEL", "INFO"))
DEFAULT_LANG = normalise_language(get_setting("DEFAULT_LANG", "en"))
REFERENCE_DATA_PATH = get_setting("ONBOARDING_REFERENCE_DATA", "")
PRUNE_HIDDEN_FIELDS = _normalise_bool(get_setting("PRUNE_HIDDEN_FIELDS", ""), default=True)
REVALIDATE_ON_SUBMIT = _normalise_bool(get_setting("REVALIDATE_ON_SUBMIT", ""), default=True)


@lru_cache(maxsize=4)
def load_reference_data(path: str | None = None) -> ReferenceData:
    """Return reference data from ``path`` or the built-in catalog.

    Raises:
        ReferenceDataError: The file is missing or does not match the
            reference-data model.
    """

    if not path:
        return ReferenceData()
    source = Path(path)
    try:
        raw = source.read_text(encoding="utf-8")
    except OSError as error:
        raise ReferenceDataError(f"Cannot read reference data from {source}") from error
    try:
        reference = ReferenceData.model_validate_json(raw)
    except ValidationError as error:
        raise ReferenceDataError(f"Invalid reference data in {source}: {error}") from error
    logger.info("Loaded onboarding reference data from %s", source)
    return reference


def get_reference_data() -> ReferenceData:
    """Return the reference data configured via ``ONBOARDING_REFERENCE_DATA``."""

    return load_reference_data(REFERENCE_DATA_PATH or None)


__all__ = [
    "DEFAULT_LANG",
    "LOG_LEVEL",
    "PRUNE_HIDDEN_FIELDS",
    "REFERENCE_DATA_PATH",
    "REVALIDATE_ON_SUBMIT",
    "SUPPORTED_LANGUAGES",
    "get_reference_data",
    "get_setting",
    "load_reference_data",
    "normalise_language",
]
