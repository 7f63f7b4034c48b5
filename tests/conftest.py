from copy import deepcopy
from dataclasses import dataclass
from datetime import date
from pathlib import Path
import sys
from typing import Any, Callable

import streamlit as st

import pytest


ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import config  # noqa: E402
from core.rules import RuleContext  # noqa: E402
from models.onboarding import ReferenceData  # noqa: E402

# Monday; the Saturday of the same week is 2026-10-17.
TODAY = date(2026, 10, 12)

_VALID_RECORD: dict[str, Any] = {
    "personal_info": {
        "full_name": "Jane Doe",
        "email": "jane.doe@example.com",
        "phone_number": "+1-555-123-4567",
        "date_of_birth": "1990-05-20",
        "profile_picture": None,
    },
    "job_details": {
        "department": "Engineering",
        "position_title": "Software Engineer",
        "start_date": "2026-10-19",
        "job_type": "Full-time",
        "salary": 95000,
        "manager": "eng-1",
    },
    "skills": {
        "primary_skills": ["Python", "SQL", "Testing"],
        "experience": {"Python": 5, "SQL": 3},
        "preferred_hours": {"start": "09:00", "end": "17:00"},
        "remote_work_preference": 40,
        "manager_approval": None,
        "extra_notes": "Prefers morning stand-ups.",
    },
    "emergency_contact": {
        "contact_name": "John Doe",
        "relationship": "Spouse",
        "phone_number": "+1-555-987-6543",
        "guardian_name": None,
        "guardian_phone": None,
    },
    "review": {"confirmation": True},
}


@dataclass
class _SessionDict(dict[str, object]):
    """Lightweight replacement for ``st.session_state`` during tests."""

    def clear(self) -> None:  # type: ignore[override]
        super().clear()


@pytest.fixture(autouse=True)
def _stub_streamlit_session_state(monkeypatch: pytest.MonkeyPatch) -> None:
    """Replace Streamlit's runtime-bound session state with a plain dictionary."""

    session_state = _SessionDict()
    monkeypatch.setattr(st, "session_state", session_state, raising=False)
    yield


@pytest.fixture(autouse=True)
def _default_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """Pin configuration flags so local ``.env`` files cannot leak into tests."""

    monkeypatch.setattr(config, "DEFAULT_LANG", "en", raising=False)
    monkeypatch.setattr(config, "PRUNE_HIDDEN_FIELDS", True, raising=False)
    monkeypatch.setattr(config, "REVALIDATE_ON_SUBMIT", True, raising=False)
    monkeypatch.setattr(config, "REFERENCE_DATA_PATH", "", raising=False)
    yield


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def reference() -> ReferenceData:
    return ReferenceData()


@pytest.fixture
def rule_context(reference: ReferenceData) -> RuleContext:
    return RuleContext(today=TODAY, reference=reference)


@pytest.fixture
def valid_record() -> dict[str, Any]:
    """Return a fresh record that passes every section on ``TODAY``."""

    return deepcopy(_VALID_RECORD)


@pytest.fixture
def clock() -> Callable[[], date]:
    return lambda: TODAY
