"""Streamlit rendering for :class:`app.note_dialog.NoteDialog`."""
from __future__ import annotations

from typing import Any

import streamlit as st

from app.note_dialog import NoteDialog

_NOTE_KEY = "messcut_note_text"


def _safe_rerun() -> None:
    rerun_fn = getattr(st, "rerun", None) or getattr(st, "experimental_rerun", None)
    if rerun_fn:
        rerun_fn()


def _render_body(dialog: NoteDialog, container: Any, *, key: str) -> None:
    container.caption("Add an optional note for this day.")
    note = container.text_area(
        "Note",
        value=dialog.note,
        key=f"{key}__{_NOTE_KEY}_{dialog.current_date}",
        placeholder="e.g. eating out",
    )
    cols = container.columns(3 if dialog.shows_unmark else 2)
    saved = cols[0].button("Save", key=f"{key}__save", type="primary", use_container_width=True)
    cancelled = cols[1].button("Cancel", key=f"{key}__cancel", use_container_width=True)
    unmarked = False
    if dialog.shows_unmark:
        unmarked = cols[2].button("Unmark", key=f"{key}__unmark", use_container_width=True)

    if saved:
        dialog.save(note)
    elif unmarked:
        dialog.unmark()
    elif cancelled:
        dialog.cancel()
    else:
        return
    _safe_rerun()


def render_note_dialog(dialog: NoteDialog, *, key: str = "messcut_dialog") -> bool:
    """Show ``dialog`` as a modal when ``st.dialog`` exists, otherwise inline.

    Returns True when a modal was opened.
    """
    if not dialog.is_open:
        return False

    if hasattr(st, "dialog"):
        @st.dialog(dialog.title)
        def _dialog_content() -> None:
            _render_body(dialog, st, key=key)

        _dialog_content()
        return True

    with st.container(border=True):
        st.markdown(f"#### {dialog.title}")
        _render_body(dialog, st, key=key)
    return False


__all__ = ["render_note_dialog"]
