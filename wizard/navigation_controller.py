"""Step controller gating wizard navigation on section validation."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, MutableMapping
from copy import deepcopy
from datetime import date
from typing import Any

import streamlit as st

import config
from constants.keys import FieldPaths, StateKeys, split_field_path
from core.errors import InvalidStepError, SubmissionError, SubmissionNotAllowedError
from core.rules import LocalizedText, RuleContext, ValidationResult
from core.schema import validate_record, validate_section
from core.validators import get_path_value
from models.onboarding import ReferenceData, SubmissionResult
from state.ensure_state import ensure_state, get_record, reset_state, set_path_value
from utils.logging_context import set_session_id, set_wizard_step
from wizard import step_registry
from wizard.step_registry import FIRST_STEP, LAST_STEP, StepDefinition
from wizard.submission import LoggingSubmissionSink, SubmissionSink
from wizard.visibility import FieldVisibility, compute_visibility, prune_hidden_fields

logger = logging.getLogger(__name__)

_SUBMISSION_BLOCKED_MESSAGE = "Please fix the highlighted fields before submitting."


class OnboardingController:
    """Manage the current step, the record and submission outside the UI layer.

    The controller keeps all of its state inside ``session_state`` so a
    Streamlit rerun picks up where the previous run stopped. ``clock`` supplies
    the calendar day for every date-dependent rule.
    """

    def __init__(
        self,
        *,
        session_state: MutableMapping[str, Any] | None = None,
        reference: ReferenceData | None = None,
        sink: SubmissionSink | None = None,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self._session_state = session_state if session_state is not None else st.session_state
        self._reference = reference or config.get_reference_data()
        self._sink: SubmissionSink = sink or LoggingSubmissionSink()
        self._clock = clock
        self._last_result = ValidationResult()
        ensure_state(self._session_state, reference=self._reference)
        set_session_id(self.session_id)
        set_wizard_step(self.current_definition.key)

    @property
    def reference(self) -> ReferenceData:
        return self._reference

    @property
    def session_id(self) -> str:
        return str(self._session_state.get(StateKeys.SESSION_ID, "-"))

    @property
    def record(self) -> dict[str, Any]:
        return get_record(self._session_state)

    @property
    def current_step(self) -> int:
        step = self._session_state.get(StateKeys.STEP)
        if not step_registry.is_step(step):
            logger.warning("Invalid step %r in session state; resetting to %s", step, FIRST_STEP)
            self._session_state[StateKeys.STEP] = FIRST_STEP
            return FIRST_STEP
        return step

    @property
    def current_definition(self) -> StepDefinition:
        return step_registry.get_step(self.current_step)

    @property
    def is_first_step(self) -> bool:
        return self.current_step == FIRST_STEP

    @property
    def is_last_step(self) -> bool:
        return self.current_step == LAST_STEP

    @property
    def completed_steps(self) -> tuple[int, ...]:
        raw = self._session_state.get(StateKeys.COMPLETED_STEPS)
        if not isinstance(raw, list):
            return ()
        return tuple(sorted(step for step in raw if step_registry.is_step(step)))

    @property
    def pending_errors(self) -> dict[str, list[LocalizedText]]:
        errors = self._session_state.get(StateKeys.PENDING_ERRORS)
        return errors if isinstance(errors, dict) else {}

    @property
    def last_result(self) -> ValidationResult:
        return self._last_result

    @property
    def is_dirty(self) -> bool:
        return bool(self._session_state.get(StateKeys.RECORD_DIRTY))

    @property
    def is_submitting(self) -> bool:
        return bool(self._session_state.get(StateKeys.IS_SUBMITTING))

    def rule_context(self) -> RuleContext:
        return RuleContext(today=self._clock(), reference=self._reference)

    # --- record editing -------------------------------------------------------

    def get_value(self, path: str) -> Any:
        return get_path_value(self.record, path)

    def update_field(self, path: str, value: Any) -> list[str]:
        """Write ``value`` at ``path`` and apply the prune-on-hide policy.

        Returns the paths whose values were reset because they became hidden.

        Raises:
            UnknownFieldError: ``path`` is not an editable record field.
        """

        record = self.record
        set_path_value(record, path, value)
        self._session_state[StateKeys.RECORD_DIRTY] = True
        errors = self.pending_errors
        parts = split_field_path(path)
        for error_path in [key for key in errors if split_field_path(key)[: len(parts)] == parts]:
            errors.pop(error_path, None)
        pruned: list[str] = []
        if config.PRUNE_HIDDEN_FIELDS:
            pruned = prune_hidden_fields(record, self._clock(), self._reference)
            for pruned_path in pruned:
                errors.pop(pruned_path, None)
        return pruned

    def set_profile_picture(self, upload: Any | None) -> list[str]:
        """Store name, size and content type of an uploaded picture.

        ``upload`` is a Streamlit ``UploadedFile`` (or anything exposing
        ``name``, ``size`` and ``type``); ``None`` clears a removed upload.
        """

        picture = None
        if upload is not None:
            picture = {
                "name": getattr(upload, "name", None),
                "size": getattr(upload, "size", None),
                "content_type": getattr(upload, "type", None),
            }
        return self.update_field(FieldPaths.PROFILE_PICTURE, picture)

    def visibility(self) -> FieldVisibility:
        return compute_visibility(self.record, self._clock(), self._reference)

    # --- validation -----------------------------------------------------------

    def validate_step(self, step: int | None = None) -> ValidationResult:
        """Run the rules scoped to ``step`` (the current step by default)."""

        definition = step_registry.get_step(self.current_step if step is None else step)
        return validate_section(self.record, definition.section, self.rule_context())

    def stale_steps(self) -> list[int]:
        """Return completed steps whose rules fail against the current record."""

        return [step for step in self.completed_steps if not self.validate_step(step).ok]

    def _store_result(self, result: ValidationResult) -> None:
        self._last_result = result
        self._session_state[StateKeys.PENDING_ERRORS] = result.by_field()

    # --- navigation -----------------------------------------------------------

    def next(self) -> ValidationResult:
        """Validate the current step and advance when it passes.

        Forward steps are never validated. On the last step a passing result
        leaves the step unchanged; submission happens through :meth:`submit`.
        """

        step = self.current_step
        result = self.validate_step(step)
        self._store_result(result)
        if not result.ok:
            logger.info(
                "Step %s blocked by %d validation error(s): %s",
                step,
                len(result.errors),
                ", ".join(result.fields),
            )
            return result
        self._mark_completed(step)
        if step < LAST_STEP:
            self._set_step(step + 1)
            logger.info("Advanced from step %s to step %s", step, step + 1)
        return result

    def prev(self) -> int:
        """Go back one step without validating anything."""

        step = self.current_step
        if step > FIRST_STEP:
            self._set_step(step - 1)
            self._store_result(ValidationResult())
            logger.info("Returned from step %s to step %s", step, step - 1)
        return self.current_step

    def go_to(self, step: int) -> int:
        """Jump back to ``step``; forward jumps are rejected.

        Raises:
            InvalidStepError: ``step`` is unknown or lies ahead of the current step.
        """

        if not step_registry.is_step(step):
            raise InvalidStepError(step)
        current = self.current_step
        if step > current:
            raise InvalidStepError(step, f"Cannot skip forward from step {current} to step {step}")
        if step != current:
            self._set_step(step)
            self._store_result(ValidationResult())
            logger.info("Jumped back from step %s to step %s", current, step)
        return step

    def _set_step(self, step: int) -> None:
        self._session_state[StateKeys.STEP] = step
        set_wizard_step(step_registry.get_step(step).key)

    def _mark_completed(self, step: int) -> None:
        completed = self._session_state.get(StateKeys.COMPLETED_STEPS)
        if isinstance(completed, list):
            if step not in completed:
                completed.append(step)
        else:
            self._session_state[StateKeys.COMPLETED_STEPS] = [step]

    # --- submission -----------------------------------------------------------

    def _validate_for_submit(self) -> ValidationResult:
        context = self.rule_context()
        if config.REVALIDATE_ON_SUBMIT:
            return validate_record(self.record, context)
        return validate_section(self.record, self.current_definition.section, context)

    def submit(self) -> SubmissionResult:
        """Gate on the confirmation rule and hand the record to the sink.

        The sink receives a copy of the record exactly as edited. A successful
        submission discards the record and restarts the session at step 1.

        Raises:
            SubmissionNotAllowedError: Not on the review step, or a submission
                is already running.
        """

        if not self.is_last_step:
            raise SubmissionNotAllowedError(f"Submission is only possible on step {LAST_STEP}")
        if self.is_submitting:
            raise SubmissionNotAllowedError("A submission is already in progress")

        result = self._validate_for_submit()
        self._store_result(result)
        if not result.ok:
            logger.info("Submission blocked by validation error(s): %s", ", ".join(result.fields))
            return SubmissionResult(
                ok=False,
                message=_SUBMISSION_BLOCKED_MESSAGE,
                details={"fields": list(result.fields)},
            )

        payload = deepcopy(self.record)
        self._session_state[StateKeys.IS_SUBMITTING] = True
        try:
            outcome = self._sink.submit(payload)
        except SubmissionError as error:
            logger.warning("Submission rejected by sink: %s", error)
            outcome = SubmissionResult(ok=False, message=str(error) or type(error).__name__)
        except Exception as error:  # sink failures are reported, the record is kept
            logger.warning("Submission sink failed", exc_info=error)
            outcome = SubmissionResult(ok=False, message=str(error) or type(error).__name__)
        finally:
            self._session_state[StateKeys.IS_SUBMITTING] = False

        if outcome.ok:
            logger.info("Onboarding record submitted (reference=%s)", outcome.reference or "-")
            reset_state(self._session_state, reference=self._reference)
            self._last_result = ValidationResult()
            set_wizard_step(self.current_definition.key)
        self._session_state[StateKeys.LAST_SUBMISSION] = outcome.model_dump()
        return outcome

    def pop_last_submission(self) -> SubmissionResult | None:
        """Return the outcome of the latest submit once, then forget it."""

        raw = self._session_state.get(StateKeys.LAST_SUBMISSION)
        self._session_state[StateKeys.LAST_SUBMISSION] = None
        if not isinstance(raw, Mapping):
            return None
        return SubmissionResult.model_validate(raw)

    def restart(self) -> None:
        """Discard the record and start over at step 1."""

        reset_state(self._session_state, reference=self._reference)
        self._last_result = ValidationResult()
        set_wizard_step(self.current_definition.key)


def pending_error_messages(
    errors: Mapping[str, list[LocalizedText]], field_path: str, lang: str = "en"
) -> list[str]:
    """Return the translated pending messages for ``field_path``."""

    index = 0 if lang.lower().startswith("de") else 1
    return [message[index] for message in errors.get(field_path, [])]


__all__ = [
    "OnboardingController",
    "pending_error_messages",
]
