"""Composition of the onboarding rules per record section."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Final

from constants.keys import Sections
from core.rules import (
    RuleContext,
    ValidationResult,
    validate_emergency_contact,
    validate_guardian_for_minor,
    validate_job_details,
    validate_personal_info,
    validate_review,
    validate_skills,
)

SectionValidator = Callable[[Mapping[str, Any] | None, RuleContext], ValidationResult]
RecordValidator = Callable[[Mapping[str, Any] | None, RuleContext], ValidationResult]


@dataclass(frozen=True)
class SectionSchema:
    """Rules evaluated when a section is validated.

    ``validator`` only sees the section payload; ``record_validators`` see the
    whole record and carry the rules that read other sections.
    """

    section: str
    validator: SectionValidator
    record_validators: tuple[RecordValidator, ...] = ()

    def validate(self, record: Mapping[str, Any], context: RuleContext) -> ValidationResult:
        payload = record.get(self.section)
        result = self.validator(payload if isinstance(payload, Mapping) else None, context)
        for record_validator in self.record_validators:
            result = result.merge(record_validator(record, context))
        return result


SECTION_SCHEMAS: Final[dict[str, SectionSchema]] = {
    Sections.PERSONAL_INFO: SectionSchema(Sections.PERSONAL_INFO, validate_personal_info),
    Sections.JOB_DETAILS: SectionSchema(Sections.JOB_DETAILS, validate_job_details),
    Sections.SKILLS: SectionSchema(Sections.SKILLS, validate_skills),
    Sections.EMERGENCY_CONTACT: SectionSchema(
        Sections.EMERGENCY_CONTACT,
        validate_emergency_contact,
        record_validators=(validate_guardian_for_minor,),
    ),
    Sections.REVIEW: SectionSchema(Sections.REVIEW, validate_review),
}


def validate_section(record: Mapping[str, Any], section: str, context: RuleContext) -> ValidationResult:
    """Run every rule scoped to ``section`` (including its cross-section rules)."""

    try:
        schema = SECTION_SCHEMAS[section]
    except KeyError as error:
        raise ValueError(f"Unknown onboarding section: {section!r}") from error
    return schema.validate(record, context)


def validate_record(
    record: Mapping[str, Any],
    context: RuleContext,
    *,
    sections: Sequence[str] = Sections.ORDER,
) -> ValidationResult:
    """Validate ``sections`` of ``record`` in order and merge their failures."""

    result = ValidationResult()
    for section in sections:
        result = result.merge(validate_section(record, section, context))
    return result


__all__ = [
    "SECTION_SCHEMAS",
    "SectionSchema",
    "validate_record",
    "validate_section",
]
