# app_paths.py: data directory for the file-backed storage
from __future__ import annotations

import os
from pathlib import Path

APP_NAME = "MessCut"


def data_dir() -> Path:
    """Return (and create) the directory holding the local storage file."""

    override = os.getenv("MESSCUT_APPDATA")
    if override:
        base = Path(override)
    elif os.name == "nt" and os.getenv("APPDATA"):
        base = Path(os.environ["APPDATA"]) / APP_NAME
    else:
        base = Path.home() / ".messcut"
    base.mkdir(parents=True, exist_ok=True)
    return base


__all__ = ["APP_NAME", "data_dir"]
