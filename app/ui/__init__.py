"""Public exports for the :mod:`app.ui` package."""

from __future__ import annotations

from .note_dialog_widget import render_note_dialog

__all__ = ["render_note_dialog"]
