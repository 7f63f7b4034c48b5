"""Derived field visibility and the prune-on-hide policy.

Some fields only matter while other live values allow them: guardian contact
while the person is under 21, manager approval while the remote preference is
above 50%, skills and managers of the selected department. The helpers here
compute that view from the same predicates the rules use and reset values
whose field has become hidden, so a hidden field never keeps a stale value.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass
from datetime import date
from typing import Any

from constants.keys import FieldPaths, Sections, experience_path
from core.rules import REMOTE_APPROVAL_THRESHOLD, guardian_required, selected_skills
from core.validators import get_path_value, is_number
from models.onboarding import Manager, ReferenceData
from state.ensure_state import default_value, remove_path_value, set_path_value

logger = logging.getLogger(__name__)

GUARDIAN_FIELDS: tuple[str, ...] = (FieldPaths.GUARDIAN_NAME, FieldPaths.GUARDIAN_PHONE)


@dataclass(frozen=True)
class FieldVisibility:
    """Which conditional fields a renderer should show, plus option lists."""

    guardian_fields: bool
    manager_approval: bool
    manager_options: tuple[Manager, ...]
    skill_options: tuple[str, ...]

    def is_visible(self, path: str) -> bool:
        if path in GUARDIAN_FIELDS:
            return self.guardian_fields
        if path == FieldPaths.MANAGER_APPROVAL:
            return self.manager_approval
        return True


def approval_required(record: Mapping[str, Any]) -> bool:
    preference = get_path_value(record, FieldPaths.REMOTE_WORK_PREFERENCE)
    return is_number(preference) and preference > REMOTE_APPROVAL_THRESHOLD


def compute_visibility(record: Mapping[str, Any], today: date, reference: ReferenceData) -> FieldVisibility:
    """Return the conditional-field view for ``record`` on ``today``."""

    department = get_path_value(record, FieldPaths.DEPARTMENT)
    department = department if isinstance(department, str) else None
    return FieldVisibility(
        guardian_fields=guardian_required(record, today),
        manager_approval=approval_required(record),
        manager_options=tuple(reference.managers_for(department)),
        skill_options=tuple(reference.skills_for(department)),
    )


def _reset(record: MutableMapping[str, Any], path: str, reference: ReferenceData, pruned: list[str]) -> None:
    default = default_value(path, reference)
    if get_path_value(record, path) != default:
        set_path_value(record, path, default)
        pruned.append(path)


def _prune_department_dependants(record: MutableMapping[str, Any], reference: ReferenceData, pruned: list[str]) -> None:
    department = get_path_value(record, FieldPaths.DEPARTMENT)
    if not isinstance(department, str) or not department:
        return
    skills_payload = record.get(Sections.SKILLS)
    if isinstance(skills_payload, MutableMapping):
        catalog = set(reference.skills_for(department))
        chosen = selected_skills(skills_payload)
        kept = [skill for skill in chosen if skill in catalog]
        if kept != skills_payload.get("primary_skills"):
            if len(kept) != len(chosen):
                pruned.append(FieldPaths.PRIMARY_SKILLS)
            set_path_value(record, FieldPaths.PRIMARY_SKILLS, kept)
        experience = skills_payload.get("experience")
        if isinstance(experience, MutableMapping):
            for skill in [key for key in experience if key not in kept]:
                path = experience_path(str(skill))
                remove_path_value(record, path)
                pruned.append(path)
    manager = reference.find_manager(get_path_value(record, FieldPaths.MANAGER))
    if manager is not None and manager.department != department:
        set_path_value(record, FieldPaths.MANAGER, None)
        pruned.append(FieldPaths.MANAGER)


def prune_hidden_fields(record: MutableMapping[str, Any], today: date, reference: ReferenceData) -> list[str]:
    """Reset values of fields hidden by the current record and return their paths."""

    pruned: list[str] = []
    visibility = compute_visibility(record, today, reference)
    if not visibility.guardian_fields:
        for path in GUARDIAN_FIELDS:
            _reset(record, path, reference, pruned)
    if not visibility.manager_approval:
        _reset(record, FieldPaths.MANAGER_APPROVAL, reference, pruned)
    _prune_department_dependants(record, reference, pruned)
    if pruned:
        logger.debug("Pruned hidden onboarding fields: %s", ", ".join(pruned))
    return pruned


__all__ = [
    "FieldVisibility",
    "GUARDIAN_FIELDS",
    "approval_required",
    "compute_visibility",
    "prune_hidden_fields",
]
