from __future__ import annotations

import logging
from typing import Any

from constants.keys import FieldPaths, StateKeys
from models.onboarding import ReferenceData
from utils.logging_context import (
    configure_logging,
    current_context,
    log_context,
    set_session_id,
    set_wizard_step,
)
from wizard import OnboardingController


def test_log_context_overrides_and_restores() -> None:
    set_session_id("session-123")
    set_wizard_step("personal_info")

    with log_context(wizard_step="review"):
        assert current_context() == {"session_id": "session-123", "wizard_step": "review"}

    assert current_context() == {"session_id": "session-123", "wizard_step": "personal_info"}


def test_blank_values_are_logged_as_dash() -> None:
    set_session_id("  ")
    set_wizard_step(None)

    assert current_context() == {"session_id": "-", "wizard_step": "-"}


def test_controller_logs_carry_session_and_step(caplog: Any, reference: ReferenceData) -> None:
    configure_logging()
    caplog.set_level(logging.INFO, logger="wizard.navigation_controller")
    session_state: dict[str, Any] = {StateKeys.SESSION_ID: "abc123"}
    controller = OnboardingController(session_state=session_state, reference=reference)
    controller.update_field(FieldPaths.FULL_NAME, "Jane")

    controller.next()

    records = [record for record in caplog.records if "blocked" in record.message]
    assert records, "Expected a blocked-step log entry"
    record = records[0]
    assert record.session_id == "abc123"
    assert record.wizard_step == "personal_info"
