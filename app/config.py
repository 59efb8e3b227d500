"""Runtime settings for MessCut.

Values are read from Streamlit secrets first::

    [messcut]
    storage = "browser"
    storage_key = "messcut_data"

and fall back to the ``MESSCUT_STORAGE``, ``MESSCUT_STORAGE_KEY`` and
``MESSCUT_BASE_URL`` environment variables.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

try:
    import streamlit as st
except Exception:  # pragma: no cover - allow headless usage (tests / CLI)
    st = None

STORAGE_KEY = "messcut_data"
STORAGE_BACKENDS = ("file", "browser", "memory")
DEFAULT_BASE_URL = "http://localhost:8501"

_ENV_NAMES = {
    "storage": "MESSCUT_STORAGE",
    "storage_key": "MESSCUT_STORAGE_KEY",
    "base_url": "MESSCUT_BASE_URL",
}


class MessCutConfigError(RuntimeError):
    """Raised when the configured settings cannot be used."""


@dataclass(frozen=True)
class Settings:
    storage: str = "file"
    storage_key: str = STORAGE_KEY
    base_url: str = DEFAULT_BASE_URL


def _read_secrets() -> Dict[str, Any]:
    if st is None:
        return {}
    try:
        section = st.secrets["messcut"]
    except Exception:
        return {}
    return dict(section)


def _pick(secrets: Dict[str, Any], name: str) -> Optional[str]:
    value = secrets.get(name) or os.getenv(_ENV_NAMES[name])
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def load_settings() -> Settings:
    """Resolve settings from secrets, then environment, then defaults."""

    secrets = _read_secrets()
    storage = (_pick(secrets, "storage") or "file").lower()
    if storage not in STORAGE_BACKENDS:
        raise MessCutConfigError(
            f"Unknown storage backend {storage!r}. "
            f"Set MESSCUT_STORAGE to one of: {', '.join(STORAGE_BACKENDS)}."
        )
    return Settings(
        storage=storage,
        storage_key=_pick(secrets, "storage_key") or STORAGE_KEY,
        base_url=(_pick(secrets, "base_url") or DEFAULT_BASE_URL).rstrip("/"),
    )


__all__ = [
    "STORAGE_KEY",
    "STORAGE_BACKENDS",
    "DEFAULT_BASE_URL",
    "MessCutConfigError",
    "Settings",
    "load_settings",
]
