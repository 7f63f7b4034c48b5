"""Date and time-of-day helpers shared by the onboarding rules."""

from __future__ import annotations

import re
from datetime import date, datetime, time
from typing import Any

_TIME_OF_DAY_RE = re.compile(r"^(?P<hour>\d{1,2}):(?P<minute>\d{2})$")


def parse_date(value: Any) -> date | None:
    """Return ``value`` as a ``date``, parsing ISO strings when possible."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        candidate = value.strip()
        if not candidate:
            return None
        try:
            return date.fromisoformat(candidate[:10])
        except ValueError:
            return None
    return None


def age_in_years(birth_date: date, today: date) -> int:
    """Return the completed years between ``birth_date`` and ``today``.

    The year difference is decremented when the birthday has not occurred yet
    in ``today``'s year. Every age-dependent rule uses this helper so the
    minimum-age and guardian checks never disagree on the same day.
    """

    age = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age


def age_from_value(value: Any, today: date) -> int | None:
    """Return the age for a raw date-of-birth value or ``None`` when unparseable."""

    birth_date = parse_date(value)
    if birth_date is None:
        return None
    return age_in_years(birth_date, today)


def minutes_since_midnight(value: Any) -> int | None:
    """Convert an ``HH:MM`` string (or ``time``) into minutes since midnight."""

    if isinstance(value, time):
        return value.hour * 60 + value.minute
    if not isinstance(value, str):
        return None
    match = _TIME_OF_DAY_RE.match(value.strip())
    if not match:
        return None
    hour = int(match.group("hour"))
    minute = int(match.group("minute"))
    if hour > 23 or minute > 59:
        return None
    return hour * 60 + minute


__all__ = [
    "age_from_value",
    "age_in_years",
    "minutes_since_midnight",
    "parse_date",
]
