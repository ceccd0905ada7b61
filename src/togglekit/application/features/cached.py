"""Application features – CachedFeatureStore (cache-aside over immutable snapshots)."""
from __future__ import annotations

import asyncio
import time
from typing import Callable

from togglekit.application.features.feature import Feature
from togglekit.application.features.store import FeatureStore
from togglekit.kernel.errors import require
from togglekit.observability.logging import get_logger

_log = get_logger(__name__)

_Key = tuple[str, str | None]


class CachedFeatureStore(FeatureStore):
    """Wrap another :class:`FeatureStore` and cache resolved features for *ttl_seconds*.

    Cached entries are whole :class:`Feature` snapshots (frozen dataclasses),
    so concurrent readers always observe a complete configuration. Only one
    coroutine per key reloads from the inner store; the others wait on its
    lock and reuse the fresh entry. A key's lock lives only while a load for
    it is in flight. Not-found results are never cached.
    """

    def __init__(
        self,
        inner: FeatureStore,
        ttl_seconds: float = 30.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._inner = require(inner, "inner")
        self._ttl = ttl_seconds
        self._clock = clock
        self._entries: dict[_Key, tuple[float, Feature]] = {}
        self._locks: dict[_Key, asyncio.Lock] = {}
        self._waiters: dict[_Key, int] = {}

    def _fresh(self, key: _Key) -> Feature | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        expires_at, feature = entry
        if self._clock() >= expires_at:
            del self._entries[key]
            return None
        return feature

    async def find_feature(self, name: str, product: str | None = None) -> Feature:
        key: _Key = (name, product)
        cached = self._fresh(key)
        if cached is not None:
            return cached

        lock = self._locks.get(key)
        if lock is None:
            lock = self._locks[key] = asyncio.Lock()
        self._waiters[key] = self._waiters.get(key, 0) + 1
        try:
            async with lock:
                cached = self._fresh(key)
                if cached is not None:
                    return cached
                feature = await self._inner.find_feature(name, product)
                self._entries[key] = (self._clock() + self._ttl, feature)
                _log.debug("feature_store.cache.loaded", feature=name, product=product)
                return feature
        finally:
            self._release(key, lock)

    def _release(self, key: _Key, lock: asyncio.Lock) -> None:
        remaining = self._waiters.pop(key, 1) - 1
        if remaining:
            self._waiters[key] = remaining
        elif self._locks.get(key) is lock:
            del self._locks[key]

    def invalidate(self, name: str, product: str | None = None) -> None:
        self._entries.pop((name, product), None)

    def clear(self) -> None:
        self._entries.clear()


__all__ = ["CachedFeatureStore"]
