"""Install and activate the offline asset cache against a running app.

Kept outside the Streamlit runtime. The base URL comes from ``--base-url`` or
``MESSCUT_BASE_URL``.
"""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

import httpx

from app.config import load_settings
from app.offline_cache import DEFAULT_MANIFEST, CacheManifestWorker


def warm(base_url: str, transport: Optional[httpx.BaseTransport] = None) -> CacheManifestWorker:
    """Run install + activate and return the worker for inspection."""
    client = httpx.Client(base_url=base_url, timeout=httpx.Timeout(10.0, connect=5.0), transport=transport)
    worker = CacheManifestWorker(client, DEFAULT_MANIFEST)
    worker.install()
    worker.activate()
    return worker


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Pre-fetch Mess Cut static assets")
    parser.add_argument("--base-url", default=None, help="Root URL of the running app")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    base_url = args.base_url or load_settings().base_url
    worker = warm(base_url)
    try:
        cached = worker.caches.open(worker.manifest.name)
        print(f"Cached {len(cached)}/{len(worker.manifest.urls)} assets in {worker.manifest.name}")
    finally:
        worker.client.close()
    return 0 if len(cached) == len(worker.manifest.urls) else 1


if __name__ == "__main__":  # pragma: no cover - CLI entry
    raise SystemExit(main())
