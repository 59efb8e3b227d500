# app/calendar_page.py
# Streamlit mess cut calendar – marks kept in a key-value storage document

from __future__ import annotations

from datetime import date
from typing import Any, List

import streamlit as st

from app.calendar_view import CalendarView, DayCell
from app.config import MessCutConfigError, Settings, load_settings
from app.export_page import show_export_section
from app.kv_storage import BrowserStorage, KeyValueStorage, create_storage
from app.mess_cut_store import MessCutStore
from app.messcut_app import MessCutApp
from app.ui.note_dialog_widget import render_note_dialog

APP_STATE_KEY = "messcut_app"
STORAGE_STATE_KEY = "messcut_storage"
DIALOG_REQUEST_KEY = "messcut_dialog_requested"


# ---- Session wiring ----
def _session_storage(settings: Settings) -> KeyValueStorage:
    storage = st.session_state.get(STORAGE_STATE_KEY)
    if storage is None:
        storage = create_storage(settings.storage)
        st.session_state[STORAGE_STATE_KEY] = storage
    return storage


def get_app() -> MessCutApp | None:
    """Return the session's coordinator, building it on first use.

    Returns None while the browser backend is still waiting for the stored
    document.
    """
    app = st.session_state.get(APP_STATE_KEY)
    if app is not None:
        return app

    try:
        settings = load_settings()
    except MessCutConfigError as exc:
        st.error(str(exc))
        st.stop()
        raise

    storage = _session_storage(settings)
    if isinstance(storage, BrowserStorage) and storage.get_item(settings.storage_key) is None:
        return None

    app = MessCutApp(MessCutStore(storage, key=settings.storage_key))
    st.session_state[APP_STATE_KEY] = app
    return app


def _flush_storage() -> None:
    storage = st.session_state.get(STORAGE_STATE_KEY)
    if isinstance(storage, BrowserStorage):
        storage.flush()


# ---- Callbacks ----
def _on_day_click(app: MessCutApp, when: date) -> None:
    app.calendar.click(when)
    st.session_state[DIALOG_REQUEST_KEY] = True


def _on_prev(app: MessCutApp) -> None:
    app.previous_month()


def _on_next(app: MessCutApp) -> None:
    app.next_month()


# ---- UI sections ----
def _cell_label(cell: DayCell) -> str:
    label = str(cell.date.day)
    if cell.is_marked:
        label = f"✂️ {label}"
    if cell.is_today:
        label = f"**{label}**"
    return label


def _cell_help(app: MessCutApp, cell: DayCell) -> str | None:
    if not cell.is_marked:
        return None
    entry = app.store.get(cell.date)
    return (entry.note if entry else "") or "Marked"


def render_calendar_grid(app: MessCutApp, container: Any = None) -> List[DayCell]:
    """Draw weekday headers plus the 6x7 day buttons for the displayed month."""
    target = container if container is not None else st
    cells = app.cells or app.refresh_calendar()

    header_cols = target.columns(7)
    for col, name in zip(header_cols, CalendarView.headers):
        col.markdown(f"<div class='day-header'>{name}</div>", unsafe_allow_html=True)

    for week in range(6):
        cols = target.columns(7)
        for col, cell in zip(cols, cells[week * 7 : week * 7 + 7]):
            col.button(
                _cell_label(cell),
                key=f"messcut_day_{cell.date.isoformat()}",
                help=_cell_help(app, cell),
                type="primary" if cell.is_marked else "secondary",
                use_container_width=True,
                on_click=_on_day_click,
                args=(app, cell.date),
            )
    return cells


def _render_header(app: MessCutApp) -> None:
    st.title("✂️ Mess Cut")
    st.caption(app.current_month_label)

    prev_col, title_col, next_col = st.columns([1, 4, 1])
    prev_col.button("‹", key="messcut_prev", on_click=_on_prev, args=(app,), use_container_width=True)
    title_col.markdown(
        f"<h3 style='text-align:center;margin:0'>{app.calendar_title}</h3>",
        unsafe_allow_html=True,
    )
    next_col.button("›", key="messcut_next", on_click=_on_next, args=(app,), use_container_width=True)


def _render_stats(app: MessCutApp) -> None:
    st.metric("Mess cuts this month", app.stats.get("count", 0))


def show_calendar_page() -> None:
    app = get_app()
    if app is None:
        st.caption("Loading saved mess cuts…")
        return

    requested = st.session_state.pop(DIALOG_REQUEST_KEY, False)
    if hasattr(st, "dialog") and app.dialog.is_open and not requested:
        # modal was dismissed client-side (escape / overlay click)
        app.dialog.cancel()

    _render_header(app)
    render_calendar_grid(app)
    _render_stats(app)
    show_export_section(app.store)
    render_note_dialog(app.dialog)
    _flush_storage()


__all__ = ["get_app", "render_calendar_grid", "show_calendar_page"]
