from __future__ import annotations

from datetime import date
from typing import Any

import pytest

from models.onboarding import ReferenceData
from state.ensure_state import default_record
from wizard.summary import build_review_summary, format_long_date, format_salary


@pytest.mark.parametrize(
    ("job_type", "salary", "expected"),
    [
        ("Contract", 75, "$75/hour"),
        ("Contract", 75.5, "$75.5/hour"),
        ("Full-time", 95000, "$95,000/year"),
        ("Part-time", 45000.0, "$45,000/year"),
    ],
)
def test_format_salary(job_type: str, salary: float, expected: str) -> None:
    assert format_salary(job_type, salary) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (date(2026, 10, 19), "October 19th, 2026"),
        (date(2026, 11, 1), "November 1st, 2026"),
        (date(2026, 11, 2), "November 2nd, 2026"),
        (date(2026, 11, 3), "November 3rd, 2026"),
        (date(2026, 11, 11), "November 11th, 2026"),
        (date(2026, 11, 22), "November 22nd, 2026"),
    ],
)
def test_format_long_date(value: date, expected: str) -> None:
    assert format_long_date(value) == expected


def test_format_long_date_german() -> None:
    assert format_long_date(date(2026, 10, 19), lang="de") == "19.10.2026"


def test_summary_lists_the_record(valid_record: dict[str, Any], reference: ReferenceData) -> None:
    personal, job, skills, contact = build_review_summary(valid_record, reference)

    assert personal.title == "Personal Information"
    assert personal.value_for("Full Name") == "Jane Doe"
    assert personal.value_for("Date of Birth") == "May 20th, 1990"
    assert job.value_for("Start Date") == "October 19th, 2026"
    assert job.value_for("Annual Salary") == "$95,000/year"
    assert job.value_for("Manager") == "Alice Johnson (Engineering)"
    assert skills.value_for("Python") == "5 years"
    assert skills.value_for("Testing") == ""
    assert skills.value_for("Preferred Working Hours") == "09:00 - 17:00"
    assert skills.value_for("Remote Work Preference") == "40%"
    assert skills.value_for("Manager Approval") is None
    assert skills.value_for("Additional Notes") == "Prefers morning stand-ups."
    assert contact.value_for("Relationship") == "Spouse"
    assert contact.value_for("Guardian Name") is None


def test_summary_shows_contract_rate_and_approval(valid_record: dict[str, Any], reference: ReferenceData) -> None:
    valid_record["job_details"].update(job_type="Contract", salary=75)
    valid_record["skills"].update(remote_work_preference=80, manager_approval=True)

    _, job, skills, _ = build_review_summary(valid_record, reference)

    assert job.value_for("Hourly Rate") == "$75/hour"
    assert skills.value_for("Manager Approval") == "Approved"


def test_summary_shows_guardian_when_named(valid_record: dict[str, Any], reference: ReferenceData) -> None:
    valid_record["emergency_contact"].update(guardian_name="Mary Doe", guardian_phone="+1-555-000-1111")

    contact = build_review_summary(valid_record, reference)[3]

    assert contact.value_for("Guardian Name") == "Mary Doe"
    assert contact.value_for("Guardian Phone") == "+1-555-000-1111"


def test_summary_of_empty_record_reads_not_provided(reference: ReferenceData) -> None:
    personal, job, skills, contact = build_review_summary(default_record(reference), reference)

    assert personal.value_for("Email") == "Not provided"
    assert job.value_for("Annual Salary") == "Not provided"
    assert job.value_for("Manager") == "Not provided"
    assert skills.value_for("Preferred Working Hours") == "Not provided"
    assert skills.value_for("Remote Work Preference") == "0%"
    assert contact.value_for("Contact Name") == "Not provided"


def test_summary_in_german(valid_record: dict[str, Any], reference: ReferenceData) -> None:
    personal, job, skills, _ = build_review_summary(valid_record, reference, lang="de")

    assert personal.title == "Persönliche Angaben"
    assert job.value_for("Startdatum") == "19.10.2026"
    assert skills.value_for("Python") == "5 Jahre"
