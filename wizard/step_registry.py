"""Registry for onboarding wizard steps, labels, and canonical order."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from constants.keys import FieldPaths, Sections
from utils.i18n import STEP_PROGRESS_TEMPLATE, LocalizedText, tr_pair


@dataclass(frozen=True)
class StepDefinition:
    """Metadata for an individual wizard step."""

    number: int
    key: str
    section: str
    label: LocalizedText
    summary_fields: tuple[str, ...] = ()

    def label_for(self, lang: str) -> str:
        """Return the localised label for the step."""

        return self.label[0] if lang.lower().startswith("de") else self.label[1]


WIZARD_STEPS: Final[tuple[StepDefinition, ...]] = (
    StepDefinition(
        number=1,
        key="personal_info",
        section=Sections.PERSONAL_INFO,
        label=("Persönliche Angaben", "Personal Information"),
        summary_fields=(
            FieldPaths.FULL_NAME,
            FieldPaths.EMAIL,
            FieldPaths.PHONE_NUMBER,
            FieldPaths.DATE_OF_BIRTH,
            FieldPaths.PROFILE_PICTURE,
        ),
    ),
    StepDefinition(
        number=2,
        key="job_details",
        section=Sections.JOB_DETAILS,
        label=("Stellendetails", "Job Details"),
        summary_fields=(
            FieldPaths.DEPARTMENT,
            FieldPaths.POSITION_TITLE,
            FieldPaths.START_DATE,
            FieldPaths.JOB_TYPE,
            FieldPaths.SALARY,
            FieldPaths.MANAGER,
        ),
    ),
    StepDefinition(
        number=3,
        key="skills",
        section=Sections.SKILLS,
        label=("Skills & Präferenzen", "Skills & Preferences"),
        summary_fields=(
            FieldPaths.PRIMARY_SKILLS,
            FieldPaths.EXPERIENCE,
            FieldPaths.PREFERRED_HOURS,
            FieldPaths.REMOTE_WORK_PREFERENCE,
            FieldPaths.MANAGER_APPROVAL,
            FieldPaths.EXTRA_NOTES,
        ),
    ),
    StepDefinition(
        number=4,
        key="emergency_contact",
        section=Sections.EMERGENCY_CONTACT,
        label=("Notfallkontakt", "Emergency Contact"),
        summary_fields=(
            FieldPaths.CONTACT_NAME,
            FieldPaths.RELATIONSHIP,
            FieldPaths.CONTACT_PHONE,
            FieldPaths.GUARDIAN_NAME,
            FieldPaths.GUARDIAN_PHONE,
        ),
    ),
    StepDefinition(
        number=5,
        key="review",
        section=Sections.REVIEW,
        label=("Prüfen & Absenden", "Review & Submit"),
        summary_fields=(FieldPaths.CONFIRMATION,),
    ),
)

FIRST_STEP: Final[int] = WIZARD_STEPS[0].number
LAST_STEP: Final[int] = WIZARD_STEPS[-1].number

_STEPS_BY_NUMBER: Final[dict[int, StepDefinition]] = {step.number: step for step in WIZARD_STEPS}


def get_step(number: int) -> StepDefinition:
    """Return the step definition for ``number``.

    Raises:
        KeyError: ``number`` is not a registered step.
    """

    return _STEPS_BY_NUMBER[number]


def is_step(number: object) -> bool:
    return isinstance(number, int) and not isinstance(number, bool) and number in _STEPS_BY_NUMBER


def progress_label(number: int, lang: str | None = None) -> str:
    """Return ``"Step N of 5: <label>"`` for the given step."""

    step = get_step(number)
    return tr_pair(
        STEP_PROGRESS_TEMPLATE,
        lang,
        step=step.number,
        total=len(WIZARD_STEPS),
        label=step.label_for(lang or "en") if lang else tr_pair(step.label),
    )


__all__ = [
    "FIRST_STEP",
    "LAST_STEP",
    "StepDefinition",
    "WIZARD_STEPS",
    "get_step",
    "is_step",
    "progress_label",
]
