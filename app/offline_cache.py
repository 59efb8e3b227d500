"""Versioned offline cache of the app's static assets.

Python counterpart of a cache-first service worker: ``install`` pre-fetches the
manifest into a named cache, ``activate`` drops every other cache, ``fetch``
answers from the cache and falls back to the network without storing the
result.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

import httpx

CACHE_NAME = "messcut-cache-v1"
ASSET_URLS: Tuple[str, ...] = (
    "/",
    "/app/static/manifest.json",
    "/app/static/icon.svg",
)


def _log(msg: str) -> None:
    print(f"[MessCut] {msg}")


@dataclass(frozen=True)
class CacheManifest:
    name: str
    urls: Tuple[str, ...]


DEFAULT_MANIFEST = CacheManifest(name=CACHE_NAME, urls=ASSET_URLS)


@dataclass(frozen=True)
class CachedResponse:
    url: str
    status_code: int
    headers: Dict[str, str] = field(default_factory=dict)
    content: bytes = b""
    from_cache: bool = False

    @classmethod
    def from_httpx(cls, response: httpx.Response, *, from_cache: bool = False) -> "CachedResponse":
        return cls(
            url=str(response.request.url),
            status_code=response.status_code,
            headers=dict(response.headers),
            content=response.content,
            from_cache=from_cache,
        )


class CacheStorage:
    """Named caches mapping absolute URLs to stored responses."""

    def __init__(self) -> None:
        self._caches: Dict[str, Dict[str, CachedResponse]] = {}

    def open(self, name: str) -> Dict[str, CachedResponse]:
        return self._caches.setdefault(name, {})

    def keys(self) -> List[str]:
        return list(self._caches)

    def delete(self, name: str) -> bool:
        return self._caches.pop(name, None) is not None

    def match(self, url: str) -> Optional[CachedResponse]:
        for cache in self._caches.values():
            hit = cache.get(url)
            if hit is not None:
                return hit
        return None


class CacheManifestWorker:
    def __init__(
        self,
        client: httpx.Client,
        manifest: CacheManifest = DEFAULT_MANIFEST,
        caches: Optional[CacheStorage] = None,
    ):
        self.client = client
        self.manifest = manifest
        self.caches = caches if caches is not None else CacheStorage()
        self.skip_waiting = False
        self.clients_claimed = False

    def _absolute(self, url: str) -> str:
        return str(self.client.base_url.join(url))

    def _add_all(self, cache: Dict[str, CachedResponse], urls: Iterable[str]) -> None:
        fetched: Dict[str, CachedResponse] = {}
        for url in urls:
            response = self.client.get(url)
            response.raise_for_status()
            fetched[self._absolute(url)] = CachedResponse.from_httpx(response, from_cache=True)
        cache.update(fetched)

    def install(self) -> bool:
        """Pre-fetch the manifest. A failed asset leaves the cache unchanged."""

        cache = self.caches.open(self.manifest.name)
        ok = True
        try:
            self._add_all(cache, self.manifest.urls)
        except httpx.HTTPError as exc:
            _log(f"Cache install failed for {self.manifest.name}: {exc}")
            ok = False
        self.skip_waiting = True
        return ok

    def activate(self) -> List[str]:
        """Delete caches from older manifests and claim open clients."""

        removed = [name for name in self.caches.keys() if name != self.manifest.name]
        for name in removed:
            self.caches.delete(name)
        self.clients_claimed = True
        return removed

    def fetch(self, url: str) -> CachedResponse:
        hit = self.caches.match(self._absolute(url))
        if hit is not None:
            return hit
        return CachedResponse.from_httpx(self.client.get(url))


__all__ = [
    "CACHE_NAME",
    "ASSET_URLS",
    "CacheManifest",
    "DEFAULT_MANIFEST",
    "CachedResponse",
    "CacheStorage",
    "CacheManifestWorker",
]
