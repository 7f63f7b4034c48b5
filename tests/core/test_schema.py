"""Section composition and whole-record validation."""

from __future__ import annotations

from typing import Any

import pytest

from constants.keys import FieldPaths, Sections
from core.rules import RuleContext
from core.schema import SECTION_SCHEMAS, validate_record, validate_section


def test_every_section_has_a_schema() -> None:
    assert tuple(SECTION_SCHEMAS) == Sections.ORDER


def test_valid_record_passes_every_section(valid_record: dict[str, Any], rule_context: RuleContext) -> None:
    assert validate_record(valid_record, rule_context).ok


def test_section_validation_only_reports_its_own_fields(
    valid_record: dict[str, Any], rule_context: RuleContext
) -> None:
    valid_record["personal_info"]["email"] = "broken"
    valid_record["job_details"]["salary"] = 10

    result = validate_section(valid_record, Sections.JOB_DETAILS, rule_context)

    assert result.fields == (FieldPaths.SALARY,)


def test_emergency_contact_section_includes_guardian_rule(
    valid_record: dict[str, Any], rule_context: RuleContext
) -> None:
    valid_record["personal_info"]["date_of_birth"] = "2006-01-01"
    valid_record["emergency_contact"]["contact_name"] = ""

    result = validate_section(valid_record, Sections.EMERGENCY_CONTACT, rule_context)

    assert result.fields == (
        FieldPaths.CONTACT_NAME,
        FieldPaths.GUARDIAN_NAME,
        FieldPaths.GUARDIAN_PHONE,
    )


def test_missing_section_is_validated_as_empty(valid_record: dict[str, Any], rule_context: RuleContext) -> None:
    del valid_record["review"]

    result = validate_section(valid_record, Sections.REVIEW, rule_context)

    assert result.fields == (FieldPaths.CONFIRMATION,)


def test_unknown_section_is_rejected(valid_record: dict[str, Any], rule_context: RuleContext) -> None:
    with pytest.raises(ValueError, match="benefits"):
        validate_section(valid_record, "benefits", rule_context)


def test_record_errors_follow_section_order(valid_record: dict[str, Any], rule_context: RuleContext) -> None:
    valid_record["review"]["confirmation"] = False
    valid_record["skills"]["remote_work_preference"] = 75
    valid_record["personal_info"]["full_name"] = "Jane"

    result = validate_record(valid_record, rule_context)

    assert result.fields == (
        FieldPaths.FULL_NAME,
        FieldPaths.MANAGER_APPROVAL,
        FieldPaths.CONFIRMATION,
    )


def test_record_validation_can_be_limited_to_sections(
    valid_record: dict[str, Any], rule_context: RuleContext
) -> None:
    valid_record["review"]["confirmation"] = False

    result = validate_record(valid_record, rule_context, sections=(Sections.PERSONAL_INFO, Sections.SKILLS))

    assert result.ok
