"""Utility helpers for rendering error messages in Streamlit."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

import streamlit as st

from utils.i18n import tr

LocalizedMessage = str | tuple[str, str]


def resolve_message(message: LocalizedMessage, *, lang: str | None = None) -> str:
    """Return the localized string for ``message``.

    Args:
        message: Either a plain string or a ``(de, en)`` tuple.
        lang: Optional language override.
    """

    if isinstance(message, tuple):
        de, en = message
        return tr(de, en, lang=lang)
    return message


def display_error(msg: LocalizedMessage, detail: str | None = None, *, lang: str | None = None) -> None:
    """Render a user-facing error with optional technical details."""

    st.error(resolve_message(msg, lang=lang))
    if detail:
        st.caption(detail)


def display_field_errors(
    field_path: str,
    errors: Mapping[str, Sequence[LocalizedMessage]],
    *,
    lang: str | None = None,
) -> None:
    """Render every pending message attached to ``field_path``."""

    for message in errors.get(field_path, ()):
        st.error(resolve_message(message, lang=lang))
