# app.py: Employee onboarding wizard (Streamlit entrypoint)
from __future__ import annotations

from datetime import date, time
from pathlib import Path
import sys
from typing import Any

import streamlit as st

APP_ROOT = Path(__file__).resolve().parent
if str(APP_ROOT) not in sys.path:
    sys.path.insert(0, str(APP_ROOT))

import config  # noqa: E402
from constants.keys import FieldPaths, experience_path  # noqa: E402
from core.dates import minutes_since_midnight, parse_date  # noqa: E402
from utils.errors import display_error, display_field_errors  # noqa: E402
from utils.i18n import (  # noqa: E402
    SUBMISSION_FAILED,
    SUBMISSION_SUCCESS,
    UNSAVED_CHANGES_WARNING,
    current_lang,
    tr,
    tr_pair,
)
from utils.logging_context import configure_logging  # noqa: E402
from wizard import OnboardingController  # noqa: E402
from wizard.step_registry import WIZARD_STEPS, progress_label  # noqa: E402
from wizard.summary import build_review_summary  # noqa: E402

configure_logging(level=config.LOG_LEVEL)

st.set_page_config(page_title="Employee Onboarding", page_icon="🧭", layout="centered")

controller = OnboardingController()
lang = current_lang()


def _edit(path: str, widget_key: str, transform: Any = None) -> None:
    value = st.session_state.get(widget_key)
    controller.update_field(path, transform(value) if transform else value)


def _edit_picture(widget_key: str) -> None:
    controller.set_profile_picture(st.session_state.get(widget_key))


def _field_errors(path: str) -> None:
    display_field_errors(path, controller.pending_errors, lang=lang)


def _text(path: str, label: tuple[str, str], **kwargs: Any) -> None:
    key = f"ui.{path}"
    st.text_input(
        tr_pair(label, lang),
        value=controller.get_value(path) or "",
        key=key,
        on_change=_edit,
        args=(path, key),
        **kwargs,
    )
    _field_errors(path)


def _date(path: str, label: tuple[str, str], **kwargs: Any) -> None:
    key = f"ui.{path}"
    st.date_input(
        tr_pair(label, lang),
        value=parse_date(controller.get_value(path)),
        key=key,
        on_change=_edit,
        args=(path, key, lambda value: value.isoformat() if isinstance(value, date) else None),
        **kwargs,
    )
    _field_errors(path)


def _select(path: str, label: tuple[str, str], options: list[str], format_func: Any = str) -> None:
    key = f"ui.{path}"
    current = controller.get_value(path)
    st.selectbox(
        tr_pair(label, lang),
        options=options,
        index=options.index(current) if current in options else None,
        format_func=format_func,
        key=key,
        on_change=_edit,
        args=(path, key),
    )
    _field_errors(path)


def _render_personal_info() -> None:
    _text(FieldPaths.FULL_NAME, ("Vollständiger Name", "Full Name"))
    _text(FieldPaths.EMAIL, ("E-Mail", "Email"))
    _text(FieldPaths.PHONE_NUMBER, ("Telefonnummer", "Phone Number"), placeholder="+1-123-456-7890")
    _date(FieldPaths.DATE_OF_BIRTH, ("Geburtsdatum", "Date of Birth"), min_value=date(1900, 1, 1))
    picture_key = f"ui.{FieldPaths.PROFILE_PICTURE}"
    st.file_uploader(
        tr("Profilbild", "Profile Picture"),
        type=["jpg", "jpeg", "png"],
        key=picture_key,
        on_change=_edit_picture,
        args=(picture_key,),
    )
    _field_errors(FieldPaths.PROFILE_PICTURE)


def _render_job_details() -> None:
    reference = controller.reference
    view = controller.visibility()
    _select(FieldPaths.DEPARTMENT, ("Abteilung", "Department"), list(reference.departments))
    _text(FieldPaths.POSITION_TITLE, ("Position", "Position Title"))
    _date(FieldPaths.START_DATE, ("Startdatum", "Start Date"))
    _select(FieldPaths.JOB_TYPE, ("Anstellungsart", "Job Type"), list(reference.job_types))
    key = f"ui.{FieldPaths.SALARY}"
    st.number_input(
        tr("Vergütung", "Salary / Hourly Rate"),
        value=controller.get_value(FieldPaths.SALARY),
        min_value=0,
        key=key,
        on_change=_edit,
        args=(FieldPaths.SALARY, key),
    )
    _field_errors(FieldPaths.SALARY)
    managers = {manager.id: manager.display_name for manager in view.manager_options}
    _select(FieldPaths.MANAGER, ("Vorgesetzte:r", "Manager"), list(managers), format_func=managers.get)


def _stored_time(path: str) -> time | None:
    minutes = minutes_since_midnight(controller.get_value(path))
    return None if minutes is None else time(minutes // 60, minutes % 60)


def _render_skills() -> None:
    view = controller.visibility()
    key = f"ui.{FieldPaths.PRIMARY_SKILLS}"
    selected = [skill for skill in controller.get_value(FieldPaths.PRIMARY_SKILLS) or [] if skill in view.skill_options]
    st.multiselect(
        tr("Kernkompetenzen", "Primary Skills"),
        options=list(view.skill_options),
        default=selected,
        key=key,
        on_change=_edit,
        args=(FieldPaths.PRIMARY_SKILLS, key, list),
    )
    _field_errors(FieldPaths.PRIMARY_SKILLS)
    for skill in controller.get_value(FieldPaths.PRIMARY_SKILLS) or []:
        path = experience_path(skill)
        skill_key = f"ui.{path}"
        st.number_input(
            tr(f"Erfahrung in {skill} (Jahre)", f"{skill} experience (years)"),
            min_value=0,
            max_value=50,
            value=controller.get_value(path) or 0,
            key=skill_key,
            on_change=_edit,
            args=(path, skill_key),
        )
        _field_errors(path)
    for path, label in (
        (FieldPaths.PREFERRED_HOURS_START, ("Arbeitsbeginn", "Start Time")),
        (FieldPaths.PREFERRED_HOURS_END, ("Arbeitsende", "End Time")),
    ):
        time_key = f"ui.{path}"
        st.time_input(
            tr_pair(label, lang),
            value=_stored_time(path),
            key=time_key,
            on_change=_edit,
            args=(path, time_key, lambda value: value.strftime("%H:%M") if isinstance(value, time) else None),
        )
        _field_errors(path)
    remote_key = f"ui.{FieldPaths.REMOTE_WORK_PREFERENCE}"
    st.slider(
        tr("Remote-Anteil (%)", "Remote Work Preference (%)"),
        min_value=0,
        max_value=100,
        value=controller.get_value(FieldPaths.REMOTE_WORK_PREFERENCE) or 0,
        key=remote_key,
        on_change=_edit,
        args=(FieldPaths.REMOTE_WORK_PREFERENCE, remote_key),
    )
    if controller.visibility().manager_approval:
        approval_key = f"ui.{FieldPaths.MANAGER_APPROVAL}"
        st.checkbox(
            tr("Freigabe der Führungskraft liegt vor", "Manager approval obtained"),
            value=controller.get_value(FieldPaths.MANAGER_APPROVAL) is True,
            key=approval_key,
            on_change=_edit,
            args=(FieldPaths.MANAGER_APPROVAL, approval_key),
        )
        _field_errors(FieldPaths.MANAGER_APPROVAL)
    notes_key = f"ui.{FieldPaths.EXTRA_NOTES}"
    st.text_area(
        tr("Weitere Hinweise", "Additional Notes"),
        value=controller.get_value(FieldPaths.EXTRA_NOTES) or "",
        max_chars=500,
        key=notes_key,
        on_change=_edit,
        args=(FieldPaths.EXTRA_NOTES, notes_key),
    )
    _field_errors(FieldPaths.EXTRA_NOTES)


def _render_emergency_contact() -> None:
    _text(FieldPaths.CONTACT_NAME, ("Name", "Contact Name"))
    _select(FieldPaths.RELATIONSHIP, ("Beziehung", "Relationship"), list(controller.reference.relationships))
    _text(FieldPaths.CONTACT_PHONE, ("Telefonnummer", "Phone Number"), placeholder="+1-123-456-7890")
    if controller.visibility().guardian_fields:
        st.subheader(tr("Erziehungsberechtigte Person (unter 21)", "Guardian Information (Under 21)"))
        _text(FieldPaths.GUARDIAN_NAME, ("Name", "Guardian Name"))
        _text(FieldPaths.GUARDIAN_PHONE, ("Telefonnummer", "Guardian Phone"), placeholder="+1-123-456-7890")


def _render_review() -> None:
    for section in build_review_summary(controller.record, controller.reference, lang=lang):
        st.subheader(section.title)
        for item in section.items:
            st.markdown(f"**{item.label}:** {item.value}")
    key = f"ui.{FieldPaths.CONFIRMATION}"
    st.checkbox(
        tr("Ich bestätige, dass alle Angaben korrekt sind", "I confirm all information is correct"),
        value=controller.get_value(FieldPaths.CONFIRMATION) is True,
        key=key,
        on_change=_edit,
        args=(FieldPaths.CONFIRMATION, key),
    )
    _field_errors(FieldPaths.CONFIRMATION)


_RENDERERS = {
    1: _render_personal_info,
    2: _render_job_details,
    3: _render_skills,
    4: _render_emergency_contact,
    5: _render_review,
}

st.title(tr("Mitarbeiter-Onboarding", "Employee Onboarding"))
st.progress(controller.current_step / len(WIZARD_STEPS), text=progress_label(controller.current_step, lang))

last_submission = controller.pop_last_submission()
if last_submission is not None and last_submission.ok:
    st.success(tr_pair(SUBMISSION_SUCCESS, lang))
if controller.is_dirty:
    st.caption(tr_pair(UNSAVED_CHANGES_WARNING, lang))

_RENDERERS[controller.current_step]()

previous_col, next_col = st.columns(2)
with previous_col:
    if st.button(tr("Zurück", "Previous"), disabled=controller.is_first_step):
        controller.prev()
        st.rerun()
with next_col:
    if controller.is_last_step:
        if st.button(tr("Absenden", "Submit"), type="primary", disabled=controller.is_submitting):
            outcome = controller.submit()
            if not outcome.ok:
                display_error(SUBMISSION_FAILED, outcome.message, lang=lang)
            else:
                st.rerun()
    elif st.button(tr("Weiter", "Next"), type="primary"):
        controller.next()
        st.rerun()
