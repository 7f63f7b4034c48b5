"""Logging helpers that tag every record with the wizard session and step."""

from __future__ import annotations

import contextvars
import logging
from contextlib import contextmanager
from typing import Iterator

LOG_FORMAT = "%(asctime)s %(levelname)s [session=%(session_id)s step=%(wizard_step)s] %(name)s: %(message)s"
_UNSET = "-"

_session_id: contextvars.ContextVar[str] = contextvars.ContextVar("onboarding_session_id", default=_UNSET)
_wizard_step: contextvars.ContextVar[str] = contextvars.ContextVar("onboarding_wizard_step", default=_UNSET)
_base_factory = logging.getLogRecordFactory()
_factory_installed = False


def _tag(record: logging.LogRecord) -> logging.LogRecord:
    record.session_id = _session_id.get()
    record.wizard_step = _wizard_step.get()
    return record


class _WizardContextFilter(logging.Filter):
    """Attach session and step to records logged on the root logger."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401 - logging protocol
        _tag(record)
        return True


def _as_context_value(value: object | None) -> str:
    text = "" if value is None else str(value).strip()
    return text or _UNSET


def configure_logging(*, level: int | str = logging.INFO, fmt: str = LOG_FORMAT) -> None:
    """Install the context-aware format on the root logger (idempotent)."""

    global _factory_installed
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=fmt)
    else:
        root.setLevel(level)
    for handler in root.handlers:
        if handler.formatter is None:
            handler.setFormatter(logging.Formatter(fmt))
    if not any(isinstance(existing, _WizardContextFilter) for existing in root.filters):
        root.addFilter(_WizardContextFilter())
    if not _factory_installed:

        def _factory(*args: object, **kwargs: object) -> logging.LogRecord:
            return _tag(_base_factory(*args, **kwargs))

        logging.setLogRecordFactory(_factory)
        _factory_installed = True


def set_session_id(session_id: str | None) -> None:
    _session_id.set(_as_context_value(session_id))


def set_wizard_step(step: object | None) -> None:
    """Bind the active step key (e.g. ``"job_details"``) to later records."""

    _wizard_step.set(_as_context_value(step))


def current_context() -> dict[str, str]:
    return {"session_id": _session_id.get(), "wizard_step": _wizard_step.get()}


@contextmanager
def log_context(*, session_id: str | None = None, wizard_step: object | None = None) -> Iterator[None]:
    """Temporarily bind ``session_id`` and/or ``wizard_step``."""

    resets: list[tuple[contextvars.ContextVar[str], contextvars.Token[str]]] = []
    if session_id is not None:
        resets.append((_session_id, _session_id.set(_as_context_value(session_id))))
    if wizard_step is not None:
        resets.append((_wizard_step, _wizard_step.set(_as_context_value(wizard_step))))
    try:
        yield
    finally:
        for var, token in reversed(resets):
            var.reset(token)


__all__ = [
    "LOG_FORMAT",
    "configure_logging",
    "current_context",
    "log_context",
    "set_session_id",
    "set_wizard_step",
]
