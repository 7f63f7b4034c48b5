"""Review-step summary of the onboarding record."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from typing import Any

from constants.keys import FieldPaths
from constants.reference import CONTRACT_JOB_TYPE
from core.dates import parse_date
from core.rules import REMOTE_APPROVAL_THRESHOLD, LocalizedText
from core.validators import get_path_value, is_blank, is_number
from models.onboarding import ReferenceData
from utils.i18n import NOT_PROVIDED, tr_pair


@dataclass(frozen=True)
class SummaryItem:
    label: str
    value: str


@dataclass(frozen=True)
class SummarySection:
    title: str
    items: list[SummaryItem] = field(default_factory=list)

    def value_for(self, label: str) -> str | None:
        for item in self.items:
            if item.label == label:
                return item.value
        return None


def _number_text(value: float | int) -> str:
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)


def format_salary(job_type: str | None, salary: Any) -> str:
    """Return ``$N/hour`` for contract rates and ``$N,NNN/year`` otherwise."""

    if job_type == CONTRACT_JOB_TYPE:
        return f"${_number_text(salary)}/hour"
    if isinstance(salary, float) and salary.is_integer():
        salary = int(salary)
    return f"${salary:,}/year"


def _ordinal(day: int) -> str:
    if 11 <= day % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


def format_long_date(value: date, lang: str = "en") -> str:
    """Return ``October 17th, 2026`` (``17.10.2026`` in German)."""

    if lang.lower().startswith("de"):
        return value.strftime("%d.%m.%Y")
    return f"{value:%B} {_ordinal(value.day)}, {value.year}"


def manager_display_name(manager_id: Any, reference: ReferenceData) -> str:
    manager = reference.find_manager(manager_id if isinstance(manager_id, str) else None)
    return manager.display_name if manager is not None else str(manager_id)


def _years_text(years: Any, lang: str) -> str:
    text = _number_text(years) if is_number(years) else str(years)
    if lang.lower().startswith("de"):
        return f"{text} Jahr" if years == 1 else f"{text} Jahre"
    return f"{text} year" if years == 1 else f"{text} years"


def build_review_summary(
    record: Mapping[str, Any],
    reference: ReferenceData,
    *,
    lang: str = "en",
) -> list[SummarySection]:
    """Return display-ready sections for the review step.

    Missing values read "Not provided"; manager approval is only listed when
    the remote preference requires it and guardian details only when a
    guardian name was entered.
    """

    not_provided = tr_pair(NOT_PROVIDED, lang)

    def label(pair: LocalizedText) -> str:
        return tr_pair(pair, lang)

    def text(path: str) -> str:
        value = get_path_value(record, path)
        return not_provided if is_blank(value) else str(value)

    def date_text(path: str) -> str:
        parsed = parse_date(get_path_value(record, path))
        return not_provided if parsed is None else format_long_date(parsed, lang)

    personal = SummarySection(label(("Persönliche Angaben", "Personal Information")))
    personal.items.extend(
        [
            SummaryItem(label(("Vollständiger Name", "Full Name")), text(FieldPaths.FULL_NAME)),
            SummaryItem(label(("E-Mail", "Email")), text(FieldPaths.EMAIL)),
            SummaryItem(label(("Telefonnummer", "Phone Number")), text(FieldPaths.PHONE_NUMBER)),
            SummaryItem(label(("Geburtsdatum", "Date of Birth")), date_text(FieldPaths.DATE_OF_BIRTH)),
        ]
    )
    picture = get_path_value(record, FieldPaths.PROFILE_PICTURE)
    if isinstance(picture, Mapping) and picture.get("name"):
        personal.items.append(SummaryItem(label(("Profilbild", "Profile Picture")), str(picture["name"])))

    job_type = get_path_value(record, FieldPaths.JOB_TYPE)
    salary = get_path_value(record, FieldPaths.SALARY)
    manager_id = get_path_value(record, FieldPaths.MANAGER)
    salary_label = ("Stundensatz", "Hourly Rate") if job_type == CONTRACT_JOB_TYPE else ("Jahresgehalt", "Annual Salary")
    job = SummarySection(label(("Stellendetails", "Job Details")))
    job.items.extend(
        [
            SummaryItem(label(("Abteilung", "Department")), text(FieldPaths.DEPARTMENT)),
            SummaryItem(label(("Position", "Position Title")), text(FieldPaths.POSITION_TITLE)),
            SummaryItem(label(("Startdatum", "Start Date")), date_text(FieldPaths.START_DATE)),
            SummaryItem(label(("Anstellungsart", "Job Type")), text(FieldPaths.JOB_TYPE)),
            SummaryItem(
                label(salary_label),
                format_salary(job_type, salary) if is_number(salary) and salary else not_provided,
            ),
            SummaryItem(
                label(("Vorgesetzte:r", "Manager")),
                manager_display_name(manager_id, reference) if not is_blank(manager_id) else not_provided,
            ),
        ]
    )

    skills = SummarySection(label(("Skills & Präferenzen", "Skills & Preferences")))
    primary = get_path_value(record, FieldPaths.PRIMARY_SKILLS) or []
    experience = get_path_value(record, FieldPaths.EXPERIENCE)
    experience = experience if isinstance(experience, Mapping) else {}
    for skill in primary:
        years = experience.get(skill)
        skills.items.append(SummaryItem(str(skill), _years_text(years, lang) if years else ""))
    start = get_path_value(record, FieldPaths.PREFERRED_HOURS_START)
    end = get_path_value(record, FieldPaths.PREFERRED_HOURS_END)
    skills.items.append(
        SummaryItem(
            label(("Bevorzugte Arbeitszeit", "Preferred Working Hours")),
            f"{start} - {end}" if start and end else not_provided,
        )
    )
    remote = get_path_value(record, FieldPaths.REMOTE_WORK_PREFERENCE)
    skills.items.append(
        SummaryItem(
            label(("Remote-Anteil", "Remote Work Preference")),
            f"{_number_text(remote)}%" if is_number(remote) else not_provided,
        )
    )
    if is_number(remote) and remote > REMOTE_APPROVAL_THRESHOLD:
        approved = get_path_value(record, FieldPaths.MANAGER_APPROVAL) is True
        skills.items.append(
            SummaryItem(
                label(("Freigabe der Führungskraft", "Manager Approval")),
                label(("Freigegeben", "Approved")) if approved else label(("Nicht freigegeben", "Not Approved")),
            )
        )
    notes = get_path_value(record, FieldPaths.EXTRA_NOTES)
    if not is_blank(notes):
        skills.items.append(SummaryItem(label(("Weitere Hinweise", "Additional Notes")), str(notes)))

    contact = SummarySection(label(("Notfallkontakt", "Emergency Contact")))
    contact.items.extend(
        [
            SummaryItem(label(("Name", "Contact Name")), text(FieldPaths.CONTACT_NAME)),
            SummaryItem(label(("Beziehung", "Relationship")), text(FieldPaths.RELATIONSHIP)),
            SummaryItem(label(("Telefonnummer", "Phone Number")), text(FieldPaths.CONTACT_PHONE)),
        ]
    )
    if not is_blank(get_path_value(record, FieldPaths.GUARDIAN_NAME)):
        contact.items.extend(
            [
                SummaryItem(label(("Erziehungsberechtigte:r", "Guardian Name")), text(FieldPaths.GUARDIAN_NAME)),
                SummaryItem(
                    label(("Telefon Erziehungsberechtigte:r", "Guardian Phone")),
                    text(FieldPaths.GUARDIAN_PHONE),
                ),
            ]
        )

    return [personal, job, skills, contact]


__all__ = [
    "SummaryItem",
    "SummarySection",
    "build_review_summary",
    "format_long_date",
    "format_salary",
    "manager_display_name",
]
