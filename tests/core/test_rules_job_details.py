"""Rules for the job details section."""

from __future__ import annotations

from typing import Any

import pytest

from constants.keys import FieldPaths
from core.rules import ErrorKind, RuleContext, validate_job_details

_MANAGER_FOR = {"HR": "hr-1", "Finance": "fin-1"}


def _payload(valid_record: dict[str, Any], **changes: Any) -> dict[str, Any]:
    payload = dict(valid_record["job_details"])
    payload.update(changes)
    return payload


def test_valid_job_details_pass(valid_record: dict[str, Any], rule_context: RuleContext) -> None:
    assert validate_job_details(valid_record["job_details"], rule_context).ok


def test_department_must_come_from_reference_data(valid_record: dict[str, Any], rule_context: RuleContext) -> None:
    result = validate_job_details(_payload(valid_record, department="Legal"), rule_context)

    assert result.messages_for(FieldPaths.DEPARTMENT) == ["Invalid department"]


@pytest.mark.parametrize("title", ["QA", "  QA  ", "", None])
def test_position_title_needs_three_characters(
    valid_record: dict[str, Any], rule_context: RuleContext, title: str | None
) -> None:
    result = validate_job_details(_payload(valid_record, position_title=title), rule_context)

    assert result.fields == (FieldPaths.POSITION_TITLE,)


@pytest.mark.parametrize("start", ["2026-10-12", "2027-01-10"])
def test_start_date_window_is_inclusive(valid_record: dict[str, Any], rule_context: RuleContext, start: str) -> None:
    result = validate_job_details(_payload(valid_record, start_date=start), rule_context)

    assert result.ok


def test_start_date_in_the_past_fails(valid_record: dict[str, Any], rule_context: RuleContext) -> None:
    result = validate_job_details(_payload(valid_record, start_date="2026-10-11"), rule_context)

    assert result.messages_for(FieldPaths.START_DATE) == ["Start date cannot be in the past"]


def test_start_date_beyond_ninety_days_fails(valid_record: dict[str, Any], rule_context: RuleContext) -> None:
    result = validate_job_details(_payload(valid_record, start_date="2027-01-11"), rule_context)

    assert result.messages_for(FieldPaths.START_DATE) == ["Start date cannot be more than 90 days in the future"]


@pytest.mark.parametrize("department", ["HR", "Finance"])
@pytest.mark.parametrize("start", ["2026-10-16", "2026-10-17"])
def test_hr_and_finance_cannot_start_on_their_weekend(
    valid_record: dict[str, Any], rule_context: RuleContext, department: str, start: str
) -> None:
    payload = _payload(valid_record, department=department, start_date=start, manager=_MANAGER_FOR[department])

    result = validate_job_details(payload, rule_context)

    assert result.messages_for(FieldPaths.START_DATE) == [
        "Start date cannot be on a weekend for HR and Finance departments"
    ]
    assert result.errors[0].kind is ErrorKind.CROSS_FIELD


def test_hr_may_start_on_sunday(valid_record: dict[str, Any], rule_context: RuleContext) -> None:
    result = validate_job_details(
        _payload(valid_record, department="HR", start_date="2026-10-18", manager="hr-1"), rule_context
    )

    assert result.ok


def test_engineering_may_start_on_saturday(valid_record: dict[str, Any], rule_context: RuleContext) -> None:
    result = validate_job_details(_payload(valid_record, start_date="2026-10-17"), rule_context)

    assert result.ok


def test_job_type_must_be_known(valid_record: dict[str, Any], rule_context: RuleContext) -> None:
    result = validate_job_details(_payload(valid_record, job_type="Internship", salary=10), rule_context)

    assert result.fields == (FieldPaths.JOB_TYPE,)


@pytest.mark.parametrize(
    ("job_type", "salary", "ok"),
    [
        ("Contract", 50, True),
        ("Contract", 150, True),
        ("Contract", 49, False),
        ("Contract", 151, False),
        ("Full-time", 30_000, True),
        ("Full-time", 200_000, True),
        ("Full-time", 29_999, False),
        ("Full-time", 200_001, False),
        ("Part-time", 45_000.5, True),
        ("Part-time", 150, False),
    ],
)
def test_salary_band_depends_on_job_type(
    valid_record: dict[str, Any], rule_context: RuleContext, job_type: str, salary: float, ok: bool
) -> None:
    result = validate_job_details(_payload(valid_record, job_type=job_type, salary=salary), rule_context)

    assert result.ok is ok
    if not ok:
        assert result.fields == (FieldPaths.SALARY,)


def test_salary_messages_name_the_band(valid_record: dict[str, Any], rule_context: RuleContext) -> None:
    contract = validate_job_details(_payload(valid_record, job_type="Contract", salary=151), rule_context)
    salaried = validate_job_details(_payload(valid_record, salary=200_001), rule_context)

    assert contract.messages_for(FieldPaths.SALARY) == ["Contract hourly rate must be between $50 and $150"]
    assert salaried.messages_for(FieldPaths.SALARY) == ["Full-time salary must be between $30,000 and $200,000"]


@pytest.mark.parametrize("salary", [None, "95000", True])
def test_salary_must_be_a_number(valid_record: dict[str, Any], rule_context: RuleContext, salary: object) -> None:
    result = validate_job_details(_payload(valid_record, salary=salary), rule_context)

    assert result.messages_for(FieldPaths.SALARY) == ["Salary is required"]


def test_manager_is_required(valid_record: dict[str, Any], rule_context: RuleContext) -> None:
    result = validate_job_details(_payload(valid_record, manager=""), rule_context)

    assert result.messages_for(FieldPaths.MANAGER) == ["Manager is required"]


def test_part_time_salary_message_names_part_time(valid_record: dict[str, Any], rule_context: RuleContext) -> None:
    result = validate_job_details(_payload(valid_record, job_type="Part-time", salary=150), rule_context)

    assert result.messages_for(FieldPaths.SALARY) == ["Part-time salary must be between $30,000 and $200,000"]


def test_manager_must_exist_in_directory(valid_record: dict[str, Any], rule_context: RuleContext) -> None:
    result = validate_job_details(_payload(valid_record, manager="zz-9"), rule_context)

    assert result.messages_for(FieldPaths.MANAGER) == ["Select a manager from the directory"]


def test_manager_must_belong_to_department(valid_record: dict[str, Any], rule_context: RuleContext) -> None:
    result = validate_job_details(_payload(valid_record, manager="hr-1"), rule_context)

    assert result.messages_for(FieldPaths.MANAGER) == ["Manager must belong to the selected department"]
    assert result.errors[0].kind is ErrorKind.CROSS_FIELD
