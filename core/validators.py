"""Helper predicates shared across the onboarding rule set."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, Final

from pydantic import EmailStr, ValidationError
from pydantic.type_adapter import TypeAdapter

from constants.keys import split_field_path

PHONE_PATTERN: Final[re.Pattern[str]] = re.compile(r"^\+\d{1,3}-\d{3}-\d{3}-\d{4}$")

_EMAIL_ADAPTER: Final[TypeAdapter[EmailStr]] = TypeAdapter(EmailStr)


def get_path_value(payload: Any, dotted_path: str) -> Any:
    """Return the value for ``dotted_path`` in ``payload`` when present."""

    if not dotted_path:
        return payload

    target: Any = payload
    for part in split_field_path(dotted_path):
        if isinstance(target, Mapping):
            target = target.get(part)
            continue
        return None
    return target


def is_blank(value: Any) -> bool:
    """Return ``True`` when ``value`` should be treated as missing."""

    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, set, dict)):
        return len(value) == 0
    return False


def is_valid_phone(value: Any) -> bool:
    """Return ``True`` when ``value`` matches ``+<cc>-<3>-<3>-<4>``."""

    return isinstance(value, str) and PHONE_PATTERN.match(value) is not None


def is_valid_email(value: Any) -> bool:
    """Return ``True`` when ``value`` is a syntactically valid email address."""

    if not isinstance(value, str) or not value.strip():
        return False
    try:
        _EMAIL_ADAPTER.validate_python(value.strip())
    except (ValidationError, TypeError):
        return False
    return True


def is_number(value: Any) -> bool:
    """Return ``True`` for real numbers, excluding booleans."""

    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_integer(value: Any) -> bool:
    """Return ``True`` for integral numbers, excluding booleans."""

    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()


__all__ = [
    "PHONE_PATTERN",
    "get_path_value",
    "is_blank",
    "is_integer",
    "is_number",
    "is_valid_email",
    "is_valid_phone",
]
