"""Pydantic models for onboarding reference data and submission outcomes."""

from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from constants.reference import (
    DEPARTMENTS,
    JOB_TYPES,
    MANAGERS,
    RELATIONSHIPS,
    SKILLS_BY_DEPARTMENT,
)


class Manager(BaseModel):
    """Entry of the manager directory."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    name: str
    department: str

    @property
    def display_name(self) -> str:
        return f"{self.name} ({self.department})"


class ReferenceData(BaseModel):
    """Read-only catalogs the onboarding rules and views depend on."""

    model_config = ConfigDict(extra="forbid")

    departments: List[str] = Field(default_factory=lambda: list(DEPARTMENTS))
    job_types: List[str] = Field(default_factory=lambda: list(JOB_TYPES))
    relationships: List[str] = Field(default_factory=lambda: list(RELATIONSHIPS))
    skills_by_department: dict[str, List[str]] = Field(
        default_factory=lambda: {key: list(values) for key, values in SKILLS_BY_DEPARTMENT.items()}
    )
    managers: List[Manager] = Field(default_factory=lambda: [Manager(**entry) for entry in MANAGERS])

    @field_validator("departments", "job_types", "relationships", mode="before")
    @classmethod
    def _strip_entries(cls, value: object) -> object:
        """Drop blank entries and surrounding whitespace from enum lists."""

        if not isinstance(value, list):
            return value
        cleaned = [item.strip() for item in value if isinstance(item, str) and item.strip()]
        return list(dict.fromkeys(cleaned))

    @model_validator(mode="after")
    def _check_job_types(self) -> "ReferenceData":
        if not self.job_types:
            raise ValueError("job_types must contain at least one entry")
        return self

    @property
    def default_job_type(self) -> str:
        return self.job_types[0]

    def skills_for(self, department: str | None) -> list[str]:
        """Return the ordered skill catalog for ``department``."""

        if not department:
            return []
        return list(self.skills_by_department.get(department, []))

    def managers_for(self, department: str | None) -> list[Manager]:
        """Return managers of ``department`` or the full directory when unset."""

        if not department:
            return list(self.managers)
        return [manager for manager in self.managers if manager.department == department]

    def find_manager(self, manager_id: str | None) -> Manager | None:
        if not manager_id:
            return None
        for manager in self.managers:
            if manager.id == manager_id:
                return manager
        return None


class SubmissionResult(BaseModel):
    """Outcome reported by a submission sink."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    ok: bool
    message: str = ""
    reference: str | None = None
    details: dict[str, Any] = Field(default_factory=dict)


__all__ = ["Manager", "ReferenceData", "SubmissionResult"]
