"""Key-value storage backends used by :class:`app.mess_cut_store.MessCutStore`.

Every backend mirrors the browser ``localStorage`` surface: string keys mapped
to string values through ``get_item`` / ``set_item`` / ``remove_item``.
Backends raise on I/O failures; swallowing them is the store's decision.
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Dict, List, Optional, Protocol, Tuple

from streamlit_js_eval import streamlit_js_eval

from app import app_paths


class KeyValueStorage(Protocol):
    def get_item(self, key: str) -> Optional[str]: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...


class MemoryStorage:
    """Process-local storage, used for tests and throwaway sessions."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value

    def remove_item(self, key: str) -> None:
        self.items.pop(key, None)


class FileStorage:
    """One file per key under the MessCut data directory."""

    def __init__(self, base_dir: Path | None = None):
        self.base_dir = Path(base_dir) if base_dir else app_paths.data_dir()
        self.base_dir.mkdir(parents=True, exist_ok=True)

    def path_for(self, key: str) -> Path:
        return self.base_dir / f"{key}.json"

    def get_item(self, key: str) -> Optional[str]:
        fp = self.path_for(key)
        if not fp.exists():
            return None
        return fp.read_text(encoding="utf-8")

    def set_item(self, key: str, value: str) -> None:
        fp = self.path_for(key)
        tmp = fp.with_name(fp.name + ".tmp")
        tmp.write_text(value, encoding="utf-8")
        os.replace(tmp, fp)

    def remove_item(self, key: str) -> None:
        self.path_for(key).unlink(missing_ok=True)


class BrowserStorage:
    """``window.localStorage`` of the visitor's browser via streamlit-js-eval.

    Reads are answered by the component on a later script run: ``get_item``
    returns ``None`` until the value has arrived and ``""`` for a missing key.
    Writes are queued and sent to the browser by :meth:`flush`, which the page
    calls once per run after its widgets are laid out.
    """

    def __init__(self) -> None:
        self._values: Dict[str, str] = {}
        self._pending: List[Tuple[str, str]] = []
        self._writes = 0

    def get_item(self, key: str) -> Optional[str]:
        if key in self._values:
            return self._values[key]
        data = streamlit_js_eval(
            js_expressions=f"window.localStorage.getItem({json.dumps(key)}) || ''",
            want_output=True,
            key="ls_get_" + key,
        )
        if not isinstance(data, str):
            return None
        self._values[key] = data
        return data

    def set_item(self, key: str, value: str) -> None:
        self._values[key] = value
        self._pending.append(
            (key, f"window.localStorage.setItem({json.dumps(key)}, {json.dumps(value)})")
        )

    def remove_item(self, key: str) -> None:
        self._values[key] = ""
        self._pending.append((key, f"window.localStorage.removeItem({json.dumps(key)})"))

    def flush(self) -> int:
        """Render one JS call per queued write. Returns the number sent."""

        sent = 0
        while self._pending:
            key, expression = self._pending.pop(0)
            self._writes += 1
            streamlit_js_eval(js_expressions=expression, want_output=False, key=f"ls_set_{key}_{self._writes}")
            sent += 1
        return sent


def create_storage(backend: str, base_dir: Path | None = None) -> KeyValueStorage:
    """Build the backend named by the ``storage`` setting."""

    if backend == "browser":
        return BrowserStorage()
    if backend == "memory":
        return MemoryStorage()
    if backend == "file":
        return FileStorage(base_dir)
    raise ValueError(f"Unknown storage backend: {backend}")


__all__ = [
    "KeyValueStorage",
    "MemoryStorage",
    "FileStorage",
    "BrowserStorage",
    "create_storage",
]
