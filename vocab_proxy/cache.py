from __future__ import annotations

import time
from typing import Callable


class VocabCache:
    """Generated word lists, keyed by requested count.

    Owned by whoever serves requests; entries older than ``ttl_seconds``
    read as missing. ``ttl_seconds=0`` keeps entries until ``invalidate()``.
    """

    def __init__(self, ttl_seconds: float = 3600, clock: Callable[[], float] = time.monotonic):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[int, tuple[float, list[str]]] = {}

    def get(self, key: int) -> list[str] | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        stored_at, words = entry
        if self.ttl_seconds and self._clock() - stored_at > self.ttl_seconds:
            del self._entries[key]
            return None
        return list(words)

    def put(self, key: int, words: list[str]) -> None:
        self._entries[key] = (self._clock(), list(words))

    def invalidate(self) -> int:
        n = len(self._entries)
        self._entries.clear()
        return n

    def __len__(self) -> int:
        return len(self._entries)
