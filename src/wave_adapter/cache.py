"""Bounded in-memory response cache with per-entry TTL.

One instance is created per process (in the API lifespan) and injected into
every component that caches Accounting Service responses. All operations are
synchronous and never suspend, so concurrent asyncio requests can share an
instance without a lock. Population is not coalesced: two requests that miss
the same key will both fetch, and the last ``set`` wins.
"""

import time
from collections import OrderedDict
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import structlog

logger = structlog.get_logger()


@dataclass(frozen=True)
class CacheEntry:
    """A cached value and the clock reading at which it expires."""

    value: Any
    expires_at: float


class ExpiringCache:
    """LRU cache whose entries also expire after a TTL.

    Recency order is last-touch order: both ``get`` hits and ``set`` move a
    key to the freshest end. When ``set`` pushes the size above
    ``max_entries`` the stalest entry is evicted, expired or not. Expired
    entries are only discovered (and dropped) on ``get``.

    Example:
        ```python
        cache = ExpiringCache(max_entries=200)
        cache.set("businesses", businesses, ttl=900)
        cache.get("businesses")  # -> businesses, until 900s have passed
        ```
    """

    def __init__(
        self,
        max_entries: int = 200,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the cache.

        Args:
            max_entries: Maximum number of entries kept (at least 1).
            clock: Returns the current time in seconds. Defaults to a monotonic clock.
        """
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self._entries: OrderedDict[str, CacheEntry] = OrderedDict()
        self._max_entries = max_entries
        self._clock = clock

    def get(self, key: str) -> Any | None:
        """Return the live value for ``key`` or None.

        A hit marks the key as most recently used.
        """
        entry = self._entries.get(key)
        if entry is None:
            return None

        if self._clock() >= entry.expires_at:
            del self._entries[key]
            logger.debug("cache_entry_expired", key=key)
            return None

        self._entries.move_to_end(key)
        return entry.value

    def set(self, key: str, value: Any, ttl: float) -> None:
        """Insert or replace ``key`` so that it expires ``ttl`` seconds from now."""
        self._entries[key] = CacheEntry(value=value, expires_at=self._clock() + ttl)
        self._entries.move_to_end(key)

        if len(self._entries) > self._max_entries:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug("cache_entry_evicted", key=evicted)

    def clear(self) -> None:
        """Drop every entry."""
        self._entries.clear()

    @property
    def max_entries(self) -> int:
        return self._max_entries

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        # Presence only; does not touch recency or check expiry.
        return key in self._entries
