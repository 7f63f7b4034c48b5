"""Named business rules for the onboarding record.

Every rule is a small predicate over a section payload (or, for the guardian
rule, over the whole record) that yields :class:`FieldError` entries instead of
raising. Section validators collect the yielded errors into a
:class:`ValidationResult`; an empty result means the section passes.

Date-dependent rules read ``RuleContext.today`` rather than the wall clock so
callers decide which calendar day the record is evaluated against.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from datetime import date, timedelta
from enum import StrEnum
from typing import Any, Final

from constants.keys import FieldPaths, experience_path
from constants.reference import CONTRACT_JOB_TYPE, WEEKEND_RESTRICTED_DEPARTMENTS
from core.dates import age_from_value, age_in_years, minutes_since_midnight, parse_date
from core.validators import (
    get_path_value,
    is_blank,
    is_integer,
    is_number,
    is_valid_email,
    is_valid_phone,
)
from models.onboarding import ReferenceData

LocalizedText = tuple[str, str]

MIN_NAME_TOKENS: Final[int] = 2
MIN_AGE: Final[int] = 18
GUARDIAN_AGE_THRESHOLD: Final[int] = 21
MAX_PICTURE_BYTES: Final[int] = 2 * 1024 * 1024
ALLOWED_PICTURE_TYPES: Final[frozenset[str]] = frozenset({"image/jpeg", "image/png"})
MIN_POSITION_TITLE_LENGTH: Final[int] = 3
START_DATE_WINDOW_DAYS: Final[int] = 90
# ``date.weekday()``: Monday is 0, so Friday is 4 and Saturday is 5.
RESTRICTED_START_WEEKDAYS: Final[frozenset[int]] = frozenset({4, 5})
CONTRACT_RATE_RANGE: Final[tuple[int, int]] = (50, 150)
SALARY_RANGE: Final[tuple[int, int]] = (30_000, 200_000)
MIN_PRIMARY_SKILLS: Final[int] = 3
EXPERIENCE_RANGE: Final[tuple[int, int]] = (0, 50)
REMOTE_PREFERENCE_RANGE: Final[tuple[int, int]] = (0, 100)
REMOTE_APPROVAL_THRESHOLD: Final[int] = 50
MAX_NOTES_LENGTH: Final[int] = 500

_FULL_NAME_REQUIRED: Final[LocalizedText] = ("Bitte vollständigen Namen eintragen.", "Full name is required")
_FULL_NAME_TOKENS: Final[LocalizedText] = (
    "Der vollständige Name muss mindestens 2 Wörter enthalten.",
    "Full name must contain at least 2 words",
)
_EMAIL_REQUIRED: Final[LocalizedText] = ("Bitte E-Mail-Adresse eintragen.", "Email is required")
_EMAIL_INVALID: Final[LocalizedText] = ("Ungültige E-Mail-Adresse.", "Invalid email address")
_PHONE_REQUIRED: Final[LocalizedText] = ("Bitte Telefonnummer eintragen.", "Phone number is required")
_PHONE_FORMAT: Final[LocalizedText] = (
    "Telefonnummer muss dem Format +1-123-456-7890 entsprechen.",
    "Phone number must be in format +1-123-456-7890",
)
_DOB_REQUIRED: Final[LocalizedText] = ("Bitte Geburtsdatum eintragen.", "Date of birth is required")
_DOB_INVALID: Final[LocalizedText] = ("Ungültiges Geburtsdatum.", "Enter a valid date of birth")
_DOB_MIN_AGE: Final[LocalizedText] = ("Mindestalter 18 Jahre.", "Must be at least 18 years old")
_PICTURE_INVALID: Final[LocalizedText] = ("Ungültige Bilddatei.", "Invalid profile picture")
_PICTURE_TOO_LARGE: Final[LocalizedText] = (
    "Die Datei muss kleiner als 2 MB sein.",
    "File size must be less than 2MB",
)
_PICTURE_TYPE: Final[LocalizedText] = (
    "Nur JPG- und PNG-Dateien sind erlaubt.",
    "Only JPG and PNG files are allowed",
)

_DEPARTMENT_REQUIRED: Final[LocalizedText] = ("Bitte Abteilung auswählen.", "Department is required")
_DEPARTMENT_INVALID: Final[LocalizedText] = ("Ungültige Abteilung.", "Invalid department")
_TITLE_TOO_SHORT: Final[LocalizedText] = (
    "Die Positionsbezeichnung muss mindestens 3 Zeichen lang sein.",
    "Position title must be at least 3 characters",
)
_START_DATE_REQUIRED: Final[LocalizedText] = ("Bitte Startdatum eintragen.", "Start date is required")
_START_DATE_INVALID: Final[LocalizedText] = ("Ungültiges Startdatum.", "Enter a valid start date")
_START_DATE_PAST: Final[LocalizedText] = (
    "Das Startdatum darf nicht in der Vergangenheit liegen.",
    "Start date cannot be in the past",
)
_START_DATE_TOO_FAR: Final[LocalizedText] = (
    "Das Startdatum darf höchstens 90 Tage in der Zukunft liegen.",
    "Start date cannot be more than 90 days in the future",
)
_START_DATE_WEEKEND: Final[LocalizedText] = (
    "Für HR und Finance darf das Startdatum nicht auf ein Wochenende fallen.",
    "Start date cannot be on a weekend for HR and Finance departments",
)
_JOB_TYPE_INVALID: Final[LocalizedText] = ("Ungültige Anstellungsart.", "Invalid job type")
_SALARY_REQUIRED: Final[LocalizedText] = ("Bitte Gehalt eintragen.", "Salary is required")
_SALARY_POSITIVE: Final[LocalizedText] = (
    "Das Gehalt muss größer als null sein.",
    "Salary must be greater than zero",
)
_SALARY_RANGE: Final[LocalizedText] = (
    "Das Jahresgehalt ({job_type}) muss zwischen 30.000 $ und 200.000 $ liegen.",
    "{job_type} salary must be between $30,000 and $200,000",
)
_CONTRACT_RATE_RANGE: Final[LocalizedText] = (
    "Der Stundensatz muss zwischen 50 $ und 150 $ liegen.",
    "Contract hourly rate must be between $50 and $150",
)
_MANAGER_REQUIRED: Final[LocalizedText] = ("Bitte Vorgesetzte:n auswählen.", "Manager is required")
_MANAGER_UNKNOWN: Final[LocalizedText] = (
    "Bitte eine Führungskraft aus der Liste wählen.",
    "Select a manager from the directory",
)
_MANAGER_DEPARTMENT: Final[LocalizedText] = (
    "Die Führungskraft muss zur gewählten Abteilung gehören.",
    "Manager must belong to the selected department",
)

_SKILLS_MINIMUM: Final[LocalizedText] = (
    "Bitte mindestens 3 Kernkompetenzen auswählen.",
    "Select at least 3 primary skills",
)
_EXPERIENCE_INVALID: Final[LocalizedText] = (
    "Bitte Erfahrungsjahre als Zuordnung Skill → Jahre angeben.",
    "Experience must map skills to years",
)
_EXPERIENCE_RANGE: Final[LocalizedText] = (
    "Erfahrung muss zwischen 0 und 50 Jahren liegen.",
    "Experience must be between 0 and 50 years",
)
_EXPERIENCE_UNSELECTED: Final[LocalizedText] = (
    "Erfahrung kann nur für ausgewählte Skills angegeben werden.",
    "Experience can only be recorded for selected skills",
)
_START_TIME_REQUIRED: Final[LocalizedText] = ("Bitte Startzeit eintragen.", "Start time is required")
_END_TIME_REQUIRED: Final[LocalizedText] = ("Bitte Endzeit eintragen.", "End time is required")
_TIME_FORMAT: Final[LocalizedText] = ("Bitte Uhrzeit als HH:MM angeben.", "Enter a time as HH:MM")
_END_BEFORE_START: Final[LocalizedText] = (
    "Die Endzeit muss nach der Startzeit liegen.",
    "End time must be after start time",
)
_REMOTE_RANGE: Final[LocalizedText] = (
    "Remote-Anteil muss eine ganze Zahl zwischen 0 und 100 sein.",
    "Remote work preference must be a whole percentage between 0 and 100",
)
_APPROVAL_REQUIRED: Final[LocalizedText] = (
    "Für mehr als 50 % Remote-Arbeit ist eine Freigabe der Führungskraft nötig.",
    "Manager approval is required for remote work preference above 50%",
)
_NOTES_TOO_LONG: Final[LocalizedText] = (
    "Notizen dürfen 500 Zeichen nicht überschreiten.",
    "Notes cannot exceed 500 characters",
)

_CONTACT_NAME_REQUIRED: Final[LocalizedText] = ("Bitte Kontaktnamen eintragen.", "Contact name is required")
_RELATIONSHIP_REQUIRED: Final[LocalizedText] = ("Bitte Beziehung auswählen.", "Relationship is required")
_RELATIONSHIP_INVALID: Final[LocalizedText] = (
    "Bitte eine Beziehung aus der Liste wählen.",
    "Select a relationship from the list",
)
_GUARDIAN_NAME_REQUIRED: Final[LocalizedText] = (
    "Für Personen unter 21 ist der Name einer erziehungsberechtigten Person nötig.",
    "Guardian name is required for users under 21",
)
_GUARDIAN_PHONE_REQUIRED: Final[LocalizedText] = (
    "Für Personen unter 21 ist die Telefonnummer einer erziehungsberechtigten Person nötig.",
    "Guardian phone is required for users under 21",
)
_GUARDIAN_PHONE_FORMAT: Final[LocalizedText] = (
    "Telefonnummer der erziehungsberechtigten Person muss dem Format +1-123-456-7890 entsprechen.",
    "Guardian phone must be in format +1-123-456-7890",
)

_CONFIRMATION_REQUIRED: Final[LocalizedText] = (
    "Bitte bestätige, dass alle Angaben korrekt sind.",
    "You must confirm that all information is correct",
)


class ErrorKind(StrEnum):
    """Classify a validation failure by the data it had to look at."""

    FORMAT = "format"
    CROSS_FIELD = "cross_field"
    CROSS_SECTION = "cross_section"
    TERMINAL = "terminal"


@dataclass(frozen=True, slots=True)
class FieldError:
    """A single validation failure attached to a dotted field path."""

    field: str
    message: LocalizedText
    kind: ErrorKind = ErrorKind.FORMAT

    def text(self, lang: str = "en") -> str:
        """Return the message in ``lang`` (``"de"`` or ``"en"``)."""

        return self.message[0] if lang.lower().startswith("de") else self.message[1]


@dataclass(frozen=True)
class ValidationResult:
    """Ordered collection of failures produced by one validation pass."""

    errors: tuple[FieldError, ...] = ()

    @classmethod
    def from_errors(cls, errors: Iterable[FieldError]) -> "ValidationResult":
        return cls(tuple(errors))

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def fields(self) -> tuple[str, ...]:
        """Return the failing field paths in first-seen order."""

        return tuple(dict.fromkeys(error.field for error in self.errors))

    def messages_for(self, field_path: str, lang: str = "en") -> list[str]:
        return [error.text(lang) for error in self.errors if error.field == field_path]

    def by_field(self) -> dict[str, list[LocalizedText]]:
        grouped: dict[str, list[LocalizedText]] = {}
        for error in self.errors:
            grouped.setdefault(error.field, []).append(error.message)
        return grouped

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        return ValidationResult(self.errors + other.errors)


@dataclass(frozen=True)
class RuleContext:
    """Inputs every rule may depend on besides the record itself."""

    today: date
    reference: ReferenceData = field(default_factory=ReferenceData)


PayloadRule = Callable[[Mapping[str, Any], RuleContext], Iterable[FieldError]]


def _collect(rules: Iterable[PayloadRule], payload: Mapping[str, Any] | None, context: RuleContext) -> ValidationResult:
    section: Mapping[str, Any] = payload if isinstance(payload, Mapping) else {}
    errors: list[FieldError] = []
    for rule in rules:
        errors.extend(rule(section, context))
    return ValidationResult(tuple(errors))


# --- Personal info -----------------------------------------------------------


def check_full_name(payload: Mapping[str, Any], _context: RuleContext) -> Iterator[FieldError]:
    value = payload.get("full_name")
    if is_blank(value) or not isinstance(value, str):
        yield FieldError(FieldPaths.FULL_NAME, _FULL_NAME_REQUIRED)
        return
    if len(value.split()) < MIN_NAME_TOKENS:
        yield FieldError(FieldPaths.FULL_NAME, _FULL_NAME_TOKENS)


def check_email(payload: Mapping[str, Any], _context: RuleContext) -> Iterator[FieldError]:
    value = payload.get("email")
    if is_blank(value):
        yield FieldError(FieldPaths.EMAIL, _EMAIL_REQUIRED)
    elif not is_valid_email(value):
        yield FieldError(FieldPaths.EMAIL, _EMAIL_INVALID)


def check_personal_phone(payload: Mapping[str, Any], _context: RuleContext) -> Iterator[FieldError]:
    value = payload.get("phone_number")
    if is_blank(value):
        yield FieldError(FieldPaths.PHONE_NUMBER, _PHONE_REQUIRED)
    elif not is_valid_phone(value):
        yield FieldError(FieldPaths.PHONE_NUMBER, _PHONE_FORMAT)


def check_minimum_age(payload: Mapping[str, Any], context: RuleContext) -> Iterator[FieldError]:
    """Date of birth must put the person at 18 or older on ``context.today``."""

    value = payload.get("date_of_birth")
    if is_blank(value):
        yield FieldError(FieldPaths.DATE_OF_BIRTH, _DOB_REQUIRED)
        return
    birth_date = parse_date(value)
    if birth_date is None:
        yield FieldError(FieldPaths.DATE_OF_BIRTH, _DOB_INVALID)
        return
    if age_in_years(birth_date, context.today) < MIN_AGE:
        yield FieldError(FieldPaths.DATE_OF_BIRTH, _DOB_MIN_AGE)


def check_profile_picture(payload: Mapping[str, Any], _context: RuleContext) -> Iterator[FieldError]:
    picture = payload.get("profile_picture")
    if picture is None:
        return
    if not isinstance(picture, Mapping):
        yield FieldError(FieldPaths.PROFILE_PICTURE, _PICTURE_INVALID)
        return
    size = picture.get("size")
    if not is_number(size) or size > MAX_PICTURE_BYTES:
        yield FieldError(FieldPaths.PROFILE_PICTURE, _PICTURE_TOO_LARGE)
    content_type = picture.get("content_type")
    if content_type not in ALLOWED_PICTURE_TYPES:
        yield FieldError(FieldPaths.PROFILE_PICTURE, _PICTURE_TYPE)


PERSONAL_INFO_RULES: Final[tuple[PayloadRule, ...]] = (
    check_full_name,
    check_email,
    check_personal_phone,
    check_minimum_age,
    check_profile_picture,
)


def validate_personal_info(payload: Mapping[str, Any] | None, context: RuleContext) -> ValidationResult:
    return _collect(PERSONAL_INFO_RULES, payload, context)


# --- Job details -------------------------------------------------------------


def check_department(payload: Mapping[str, Any], context: RuleContext) -> Iterator[FieldError]:
    value = payload.get("department")
    if is_blank(value):
        yield FieldError(FieldPaths.DEPARTMENT, _DEPARTMENT_REQUIRED)
    elif value not in context.reference.departments:
        yield FieldError(FieldPaths.DEPARTMENT, _DEPARTMENT_INVALID)


def check_position_title(payload: Mapping[str, Any], _context: RuleContext) -> Iterator[FieldError]:
    value = payload.get("position_title")
    if not isinstance(value, str) or len(value.strip()) < MIN_POSITION_TITLE_LENGTH:
        yield FieldError(FieldPaths.POSITION_TITLE, _TITLE_TOO_SHORT)


def check_start_date_window(payload: Mapping[str, Any], context: RuleContext) -> Iterator[FieldError]:
    """Start date lies within ``[today, today + 90 days]``, both ends inclusive."""

    value = payload.get("start_date")
    if is_blank(value):
        yield FieldError(FieldPaths.START_DATE, _START_DATE_REQUIRED)
        return
    start = parse_date(value)
    if start is None:
        yield FieldError(FieldPaths.START_DATE, _START_DATE_INVALID)
        return
    if start < context.today:
        yield FieldError(FieldPaths.START_DATE, _START_DATE_PAST)
    elif start > context.today + timedelta(days=START_DATE_WINDOW_DAYS):
        yield FieldError(FieldPaths.START_DATE, _START_DATE_TOO_FAR)


def check_department_weekend_start(payload: Mapping[str, Any], _context: RuleContext) -> Iterator[FieldError]:
    """HR and Finance hires cannot start on a Friday or Saturday."""

    if payload.get("department") not in WEEKEND_RESTRICTED_DEPARTMENTS:
        return
    start = parse_date(payload.get("start_date"))
    if start is not None and start.weekday() in RESTRICTED_START_WEEKDAYS:
        yield FieldError(FieldPaths.START_DATE, _START_DATE_WEEKEND, ErrorKind.CROSS_FIELD)


def check_job_type(payload: Mapping[str, Any], context: RuleContext) -> Iterator[FieldError]:
    if payload.get("job_type") not in context.reference.job_types:
        yield FieldError(FieldPaths.JOB_TYPE, _JOB_TYPE_INVALID)


def check_salary_band(payload: Mapping[str, Any], context: RuleContext) -> Iterator[FieldError]:
    """Contract rates and salaried pay each have their own allowed band."""

    salary = payload.get("salary")
    if not is_number(salary):
        yield FieldError(FieldPaths.SALARY, _SALARY_REQUIRED)
        return
    job_type = payload.get("job_type")
    if job_type not in context.reference.job_types:
        if salary <= 0:
            yield FieldError(FieldPaths.SALARY, _SALARY_POSITIVE)
        return
    if job_type == CONTRACT_JOB_TYPE:
        low, high = CONTRACT_RATE_RANGE
        message = _CONTRACT_RATE_RANGE
    else:
        low, high = SALARY_RANGE
        message = (
            _SALARY_RANGE[0].format(job_type=job_type),
            _SALARY_RANGE[1].format(job_type=job_type),
        )
    if not low <= salary <= high:
        yield FieldError(FieldPaths.SALARY, message, ErrorKind.CROSS_FIELD)


def check_manager(payload: Mapping[str, Any], context: RuleContext) -> Iterator[FieldError]:
    """Manager must exist in the directory and belong to the chosen department."""

    manager_id = payload.get("manager")
    if is_blank(manager_id):
        yield FieldError(FieldPaths.MANAGER, _MANAGER_REQUIRED)
        return
    manager = context.reference.find_manager(manager_id if isinstance(manager_id, str) else None)
    if manager is None:
        yield FieldError(FieldPaths.MANAGER, _MANAGER_UNKNOWN)
        return
    department = payload.get("department")
    if department in context.reference.departments and manager.department != department:
        yield FieldError(FieldPaths.MANAGER, _MANAGER_DEPARTMENT, ErrorKind.CROSS_FIELD)


JOB_DETAILS_RULES: Final[tuple[PayloadRule, ...]] = (
    check_department,
    check_position_title,
    check_start_date_window,
    check_department_weekend_start,
    check_job_type,
    check_salary_band,
    check_manager,
)


def validate_job_details(payload: Mapping[str, Any] | None, context: RuleContext) -> ValidationResult:
    return _collect(JOB_DETAILS_RULES, payload, context)


# --- Skills --------------------------------------------------------------------


def selected_skills(payload: Mapping[str, Any]) -> list[str]:
    """Return the distinct, non-blank primary skills in selection order."""

    raw = payload.get("primary_skills")
    if not isinstance(raw, (list, tuple, set)):
        return []
    return list(dict.fromkeys(item.strip() for item in raw if isinstance(item, str) and item.strip()))


def check_primary_skills(payload: Mapping[str, Any], _context: RuleContext) -> Iterator[FieldError]:
    if len(selected_skills(payload)) < MIN_PRIMARY_SKILLS:
        yield FieldError(FieldPaths.PRIMARY_SKILLS, _SKILLS_MINIMUM)


def check_experience(payload: Mapping[str, Any], _context: RuleContext) -> Iterator[FieldError]:
    """Experience years stay in range and only cover selected skills."""

    experience = payload.get("experience")
    if experience is None:
        return
    if not isinstance(experience, Mapping):
        yield FieldError(FieldPaths.EXPERIENCE, _EXPERIENCE_INVALID)
        return
    chosen = set(selected_skills(payload))
    low, high = EXPERIENCE_RANGE
    for skill, years in experience.items():
        path = experience_path(str(skill))
        if not is_number(years) or not low <= years <= high:
            yield FieldError(path, _EXPERIENCE_RANGE)
        if skill not in chosen:
            yield FieldError(path, _EXPERIENCE_UNSELECTED, ErrorKind.CROSS_FIELD)


def check_preferred_hours(payload: Mapping[str, Any], _context: RuleContext) -> Iterator[FieldError]:
    """End of the preferred hours must be strictly later than the start."""

    hours = payload.get("preferred_hours")
    hours = hours if isinstance(hours, Mapping) else {}
    start_raw = hours.get("start")
    end_raw = hours.get("end")
    start = end = None
    if is_blank(start_raw):
        yield FieldError(FieldPaths.PREFERRED_HOURS_START, _START_TIME_REQUIRED)
    else:
        start = minutes_since_midnight(start_raw)
        if start is None:
            yield FieldError(FieldPaths.PREFERRED_HOURS_START, _TIME_FORMAT)
    if is_blank(end_raw):
        yield FieldError(FieldPaths.PREFERRED_HOURS_END, _END_TIME_REQUIRED)
    else:
        end = minutes_since_midnight(end_raw)
        if end is None:
            yield FieldError(FieldPaths.PREFERRED_HOURS_END, _TIME_FORMAT)
    if start is not None and end is not None and end <= start:
        yield FieldError(FieldPaths.PREFERRED_HOURS_END, _END_BEFORE_START, ErrorKind.CROSS_FIELD)


def check_remote_preference(payload: Mapping[str, Any], _context: RuleContext) -> Iterator[FieldError]:
    value = payload.get("remote_work_preference")
    low, high = REMOTE_PREFERENCE_RANGE
    if not is_integer(value) or not low <= value <= high:
        yield FieldError(FieldPaths.REMOTE_WORK_PREFERENCE, _REMOTE_RANGE)


def check_remote_approval(payload: Mapping[str, Any], _context: RuleContext) -> Iterator[FieldError]:
    """Remote preference above 50% needs explicit manager approval."""

    preference = payload.get("remote_work_preference")
    if not is_number(preference) or preference <= REMOTE_APPROVAL_THRESHOLD:
        return
    if payload.get("manager_approval") is not True:
        yield FieldError(FieldPaths.MANAGER_APPROVAL, _APPROVAL_REQUIRED, ErrorKind.CROSS_FIELD)


def check_extra_notes(payload: Mapping[str, Any], _context: RuleContext) -> Iterator[FieldError]:
    notes = payload.get("extra_notes")
    if notes is None:
        return
    if not isinstance(notes, str) or len(notes) > MAX_NOTES_LENGTH:
        yield FieldError(FieldPaths.EXTRA_NOTES, _NOTES_TOO_LONG)


SKILLS_RULES: Final[tuple[PayloadRule, ...]] = (
    check_primary_skills,
    check_experience,
    check_preferred_hours,
    check_remote_preference,
    check_remote_approval,
    check_extra_notes,
)


def validate_skills(payload: Mapping[str, Any] | None, context: RuleContext) -> ValidationResult:
    return _collect(SKILLS_RULES, payload, context)


# --- Emergency contact ---------------------------------------------------------


def check_contact_name(payload: Mapping[str, Any], _context: RuleContext) -> Iterator[FieldError]:
    if is_blank(payload.get("contact_name")):
        yield FieldError(FieldPaths.CONTACT_NAME, _CONTACT_NAME_REQUIRED)


def check_relationship(payload: Mapping[str, Any], context: RuleContext) -> Iterator[FieldError]:
    value = payload.get("relationship")
    if is_blank(value):
        yield FieldError(FieldPaths.RELATIONSHIP, _RELATIONSHIP_REQUIRED)
    elif context.reference.relationships and value not in context.reference.relationships:
        yield FieldError(FieldPaths.RELATIONSHIP, _RELATIONSHIP_INVALID)


def check_contact_phone(payload: Mapping[str, Any], _context: RuleContext) -> Iterator[FieldError]:
    value = payload.get("phone_number")
    if is_blank(value):
        yield FieldError(FieldPaths.CONTACT_PHONE, _PHONE_REQUIRED)
    elif not is_valid_phone(value):
        yield FieldError(FieldPaths.CONTACT_PHONE, _PHONE_FORMAT)


EMERGENCY_CONTACT_RULES: Final[tuple[PayloadRule, ...]] = (
    check_contact_name,
    check_relationship,
    check_contact_phone,
)


def validate_emergency_contact(payload: Mapping[str, Any] | None, context: RuleContext) -> ValidationResult:
    """Validate the contact itself; guardian fields are handled by the record rule."""

    return _collect(EMERGENCY_CONTACT_RULES, payload, context)


def guardian_required(record: Mapping[str, Any], today: date) -> bool:
    """Return ``True`` when the date of birth marks the person as under 21.

    A missing or unparseable date of birth never requires a guardian.
    """

    age = age_from_value(get_path_value(record, FieldPaths.DATE_OF_BIRTH), today)
    return age is not None and age < GUARDIAN_AGE_THRESHOLD


def check_guardian_for_minor(record: Mapping[str, Any], context: RuleContext) -> Iterator[FieldError]:
    """Under-21s need a guardian; name and phone are reported independently."""

    if not guardian_required(record, context.today):
        return
    guardian_name = get_path_value(record, FieldPaths.GUARDIAN_NAME)
    if not isinstance(guardian_name, str) or not guardian_name.strip():
        yield FieldError(FieldPaths.GUARDIAN_NAME, _GUARDIAN_NAME_REQUIRED, ErrorKind.CROSS_SECTION)
    guardian_phone = get_path_value(record, FieldPaths.GUARDIAN_PHONE)
    if is_blank(guardian_phone):
        yield FieldError(FieldPaths.GUARDIAN_PHONE, _GUARDIAN_PHONE_REQUIRED, ErrorKind.CROSS_SECTION)
    elif not is_valid_phone(guardian_phone):
        yield FieldError(FieldPaths.GUARDIAN_PHONE, _GUARDIAN_PHONE_FORMAT, ErrorKind.CROSS_SECTION)


def validate_guardian_for_minor(record: Mapping[str, Any] | None, context: RuleContext) -> ValidationResult:
    return ValidationResult.from_errors(check_guardian_for_minor(record or {}, context))


# --- Review --------------------------------------------------------------------


def check_confirmation(payload: Mapping[str, Any], _context: RuleContext) -> Iterator[FieldError]:
    if payload.get("confirmation") is not True:
        yield FieldError(FieldPaths.CONFIRMATION, _CONFIRMATION_REQUIRED, ErrorKind.TERMINAL)


REVIEW_RULES: Final[tuple[PayloadRule, ...]] = (check_confirmation,)


def validate_review(payload: Mapping[str, Any] | None, context: RuleContext) -> ValidationResult:
    return _collect(REVIEW_RULES, payload, context)


__all__ = [
    "ErrorKind",
    "FieldError",
    "LocalizedText",
    "PayloadRule",
    "RuleContext",
    "ValidationResult",
    "guardian_required",
    "selected_skills",
    "validate_emergency_contact",
    "validate_guardian_for_minor",
    "validate_job_details",
    "validate_personal_info",
    "validate_review",
    "validate_skills",
]
