"""Helpers for initializing and editing the onboarding record in session state."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Mapping, MutableMapping
from copy import deepcopy
from types import MappingProxyType
from typing import Any, Callable

import streamlit as st

import config
from constants.keys import FieldPaths, Sections, StateKeys, split_field_path
from core.errors import UnknownFieldError
from models.onboarding import ReferenceData

logger = logging.getLogger(__name__)

_NESTED_FIELD_PREFIXES: tuple[str, ...] = (f"{FieldPaths.EXPERIENCE}.",)


def default_record(reference: ReferenceData | None = None) -> dict[str, Any]:
    """Return a fresh, empty onboarding record with section-level defaults."""

    reference = reference or config.get_reference_data()
    return {
        Sections.PERSONAL_INFO: {
            "full_name": None,
            "email": None,
            "phone_number": None,
            "date_of_birth": None,
            "profile_picture": None,
        },
        Sections.JOB_DETAILS: {
            "department": None,
            "position_title": None,
            "start_date": None,
            "job_type": reference.default_job_type,
            "salary": None,
            "manager": None,
        },
        Sections.SKILLS: {
            "primary_skills": [],
            "experience": {},
            "preferred_hours": {"start": None, "end": None},
            "remote_work_preference": 0,
            "manager_approval": None,
            "extra_notes": None,
        },
        Sections.EMERGENCY_CONTACT: {
            "contact_name": None,
            "relationship": "",
            "phone_number": None,
            "guardian_name": None,
            "guardian_phone": None,
        },
        Sections.REVIEW: {"confirmation": False},
    }


def default_value(path: str, reference: ReferenceData | None = None) -> Any:
    """Return the session-start default stored at ``path``."""

    target: Any = default_record(reference)
    for part in split_field_path(path):
        if not isinstance(target, Mapping) or part not in target:
            raise UnknownFieldError(path)
        target = target[part]
    return deepcopy(target)


def _editable_paths() -> frozenset[str]:
    return frozenset(value for key, value in vars(FieldPaths).items() if key.isupper() and isinstance(value, str))


_EDITABLE_PATHS = _editable_paths()


def is_editable_path(path: str) -> bool:
    if path in _EDITABLE_PATHS:
        return True
    return any(path.startswith(prefix) and len(path) > len(prefix) for prefix in _NESTED_FIELD_PREFIXES)


def set_path_value(record: MutableMapping[str, Any], path: str, value: Any) -> None:
    """Write ``value`` at ``path`` inside ``record``.

    Raises:
        UnknownFieldError: ``path`` does not name an editable record field.
    """

    if not is_editable_path(path):
        raise UnknownFieldError(path)
    parts = split_field_path(path)
    target: MutableMapping[str, Any] = record
    for part in parts[:-1]:
        child = target.get(part)
        if not isinstance(child, MutableMapping):
            child = {}
            target[part] = child
        target = child
    target[parts[-1]] = value


def remove_path_value(record: MutableMapping[str, Any], path: str) -> None:
    """Remove the entry at ``path`` when it exists."""

    parts = split_field_path(path)
    target: Any = record
    for part in parts[:-1]:
        target = target.get(part) if isinstance(target, MutableMapping) else None
    if isinstance(target, MutableMapping):
        target.pop(parts[-1], None)


_DEFAULT_STATE_FACTORIES: Mapping[str, Callable[[], Any]] = MappingProxyType(
    {
        StateKeys.STEP: lambda: 1,
        StateKeys.COMPLETED_STEPS: list,
        StateKeys.PENDING_ERRORS: dict,
        StateKeys.RECORD_DIRTY: lambda: False,
        StateKeys.IS_SUBMITTING: lambda: False,
        StateKeys.LAST_SUBMISSION: lambda: None,
        StateKeys.SESSION_ID: lambda: uuid.uuid4().hex[:12],
        StateKeys.LANG: lambda: config.DEFAULT_LANG,
    }
)


def ensure_state(
    session_state: MutableMapping[str, Any] | None = None,
    *,
    reference: ReferenceData | None = None,
) -> MutableMapping[str, Any]:
    """Initialize the session with an empty record and navigation defaults.

    Existing keys are preserved to respect user interactions.
    """

    state = session_state if session_state is not None else st.session_state
    existing = state.get(StateKeys.RECORD)
    if not isinstance(existing, MutableMapping):
        state[StateKeys.RECORD] = default_record(reference)
    else:
        _fill_missing(existing, default_record(reference))
    for key, factory in _DEFAULT_STATE_FACTORIES.items():
        if key not in state:
            state[key] = factory()
    return state


def _fill_missing(target: MutableMapping[str, Any], template: Mapping[str, Any]) -> None:
    for key, value in template.items():
        current = target.get(key)
        if key not in target:
            target[key] = deepcopy(value)
        elif isinstance(value, Mapping) and isinstance(current, MutableMapping):
            _fill_missing(current, value)


def get_record(session_state: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Return the live onboarding record stored in the session."""

    state = session_state if session_state is not None else st.session_state
    record = state.get(StateKeys.RECORD)
    if not isinstance(record, dict):
        raise KeyError(StateKeys.RECORD)
    return record


def reset_state(
    session_state: MutableMapping[str, Any] | None = None,
    *,
    reference: ReferenceData | None = None,
) -> None:
    """Discard the record and navigation state while keeping the language."""

    state = session_state if session_state is not None else st.session_state
    preserve = {StateKeys.LANG, StateKeys.SESSION_ID}
    for key in list(state.keys()):
        if key not in preserve:
            del state[key]
    ensure_state(state, reference=reference)
    logger.debug("Onboarding session state reset")


__all__ = [
    "default_record",
    "default_value",
    "ensure_state",
    "get_record",
    "is_editable_path",
    "remove_path_value",
    "reset_state",
    "set_path_value",
]
