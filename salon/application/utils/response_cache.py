from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, Awaitable, Callable

from salon.domain.entities.cache_entry import CacheEntry


Fetcher = Callable[[], Awaitable[Any]]
Listener = Callable[[CacheEntry], None]


class ResponseCache:
    """
    Process-local store of fetch results keyed by resource name.

    - At most one fetch per key is in flight; concurrent callers share it.
    - A failed fetch sets error=True and keeps the previous data.
    - Entries older than ttl_seconds are refetched on the next request.
    - Nothing is retried automatically and nothing is persisted.

    Must be used from inside a running asyncio event loop.
    """

    def __init__(self, ttl_seconds: float = 300.0, clock: Callable[[], float] = time.monotonic) -> None:
        self._ttl = ttl_seconds
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._inflight: dict[str, asyncio.Task[None]] = {}
        self._generations: dict[str, int] = {}
        self._listeners: dict[str, list[Listener]] = {}
        self._logger = logging.getLogger(__name__)

    def peek(self, key: str) -> CacheEntry:
        return self._entries.get(key) or CacheEntry(key=key)

    def is_loading(self, key: str) -> bool:
        return key in self._inflight

    def is_stale(self, entry: CacheEntry) -> bool:
        if entry.fetched_at is None:
            return True
        return self._clock() - entry.fetched_at >= self._ttl

    def get_or_fetch(self, key: str, fetcher: Fetcher) -> CacheEntry:
        """
        Non-blocking read: returns the current snapshot and starts a fetch when
        the entry is missing, stale or failed. While loading, the snapshot
        carries loading=True plus any previously cached data.
        """
        if self._needs_fetch(key):
            self._start(key, fetcher)
        return self.peek(key)

    async def load(self, key: str, fetcher: Fetcher) -> CacheEntry:
        """Same policy as get_or_fetch, but waits for the outstanding fetch to settle."""
        task = self._inflight.get(key)
        if task is None and self._needs_fetch(key):
            task = self._start(key, fetcher)
        if task is not None:
            await asyncio.shield(task)
        return self.peek(key)

    def invalidate(self, key: str) -> None:
        """Drop an entry; a fetch already in flight for it will not write back."""
        self._generations[key] = self._generations.get(key, 0) + 1
        self._inflight.pop(key, None)
        if self._entries.pop(key, None) is not None:
            self._logger.debug("Cache invalidated", extra={"key": key})

    def clear(self) -> None:
        for key in list(self._entries) + list(self._inflight):
            self.invalidate(key)

    def subscribe(self, key: str, listener: Listener) -> Callable[[], None]:
        """Call listener on every state change of key. Returns an unsubscribe function."""
        self._listeners.setdefault(key, []).append(listener)

        def unsubscribe() -> None:
            listeners = self._listeners.get(key, [])
            if listener in listeners:
                listeners.remove(listener)

        return unsubscribe

    def _needs_fetch(self, key: str) -> bool:
        if key in self._inflight:
            return False
        entry = self._entries.get(key)
        if entry is None:
            return True
        return entry.error or not entry.has_data or self.is_stale(entry)

    def _start(self, key: str, fetcher: Fetcher) -> asyncio.Task[None]:
        previous = self.peek(key)
        self._set(CacheEntry(key=key, data=previous.data, loading=True, error=False, fetched_at=previous.fetched_at))
        generation = self._generations.get(key, 0)
        task = asyncio.get_running_loop().create_task(self._run(key, fetcher, generation))
        self._inflight[key] = task
        self._logger.debug("Cache fetch started", extra={"key": key})
        return task

    async def _run(self, key: str, fetcher: Fetcher, generation: int) -> None:
        try:
            data = await fetcher()
        except Exception as e:
            if self._is_current(key, generation):
                previous = self.peek(key)
                self._set(
                    CacheEntry(key=key, data=previous.data, loading=False, error=True, fetched_at=previous.fetched_at)
                )
            self._logger.warning("Cache fetch failed", extra={"key": key, "error": str(e)})
        else:
            if self._is_current(key, generation):
                self._set(CacheEntry(key=key, data=data, loading=False, error=False, fetched_at=self._clock()))
            else:
                self._logger.debug("Discarding result of invalidated fetch", extra={"key": key})
        finally:
            if self._is_current(key, generation):
                self._inflight.pop(key, None)
                entry = self._entries.get(key)
                if entry is not None and entry.loading:
                    # Fetch task was cancelled before it settled.
                    self._set(CacheEntry(key=key, data=entry.data, loading=False, error=True, fetched_at=entry.fetched_at))

    def _is_current(self, key: str, generation: int) -> bool:
        return self._generations.get(key, 0) == generation

    def _set(self, entry: CacheEntry) -> None:
        self._entries[entry.key] = entry
        for listener in list(self._listeners.get(entry.key, [])):
            try:
                listener(entry)
            except Exception:
                self._logger.exception("Cache listener failed", extra={"key": entry.key})
