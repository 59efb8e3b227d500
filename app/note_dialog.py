"""State of the mark/edit note dialog.

The dialog is either closed, open for a new mark, or open for editing an
existing one (the only state offering "Unmark"). Saving emits the trimmed note
to save listeners, unmarking emits the date to unmark listeners; both close the
dialog afterwards. Actions on a closed dialog do nothing.
"""
from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Callable, List, Optional

from app.date_utils import format_dialog_date
from app.mess_cut_store import Mark

SaveListener = Callable[[date, str], None]
UnmarkListener = Callable[[date], None]


class DialogState(str, Enum):
    CLOSED = "closed"
    OPEN_NEW = "open-for-new"
    OPEN_EDIT = "open-for-edit"


class NoteDialog:
    def __init__(self) -> None:
        self.state = DialogState.CLOSED
        self.current_date: Optional[date] = None
        self.title = ""
        self.note = ""
        self._save_listeners: List[SaveListener] = []
        self._unmark_listeners: List[UnmarkListener] = []

    @property
    def is_open(self) -> bool:
        return self.state is not DialogState.CLOSED

    @property
    def shows_unmark(self) -> bool:
        return self.state is DialogState.OPEN_EDIT

    def add_save_listener(self, listener: SaveListener) -> None:
        self._save_listeners.append(listener)

    def add_unmark_listener(self, listener: UnmarkListener) -> None:
        self._unmark_listeners.append(listener)

    def open(self, when: date, existing: Optional[Mark] = None) -> None:
        self.current_date = when
        label = format_dialog_date(when)
        if existing is not None:
            self.state = DialogState.OPEN_EDIT
            self.title = f"Edit Mess Cut - {label}"
            self.note = existing.note or ""
        else:
            self.state = DialogState.OPEN_NEW
            self.title = f"Mark Mess Cut - {label}"
            self.note = ""

    def close(self) -> None:
        self.state = DialogState.CLOSED
        self.current_date = None
        self.title = ""
        self.note = ""

    # cancel button, escape key and overlay click all land here
    cancel = close

    def save(self, text: str) -> None:
        when = self.current_date
        if not self.is_open or when is None:
            return
        note = (text or "").strip()
        for listener in list(self._save_listeners):
            listener(when, note)
        self.close()

    def unmark(self) -> None:
        when = self.current_date
        if self.state is not DialogState.OPEN_EDIT or when is None:
            return
        for listener in list(self._unmark_listeners):
            listener(when)
        self.close()


__all__ = ["DialogState", "NoteDialog"]
