"""In-process read-through cache with per-entry TTL.

Used for catalog lookups, which are read by every product form and
change only through catalog administration.
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any

import structlog

logger = structlog.get_logger()


@dataclass
class CacheEntry:
    """A cached value.

    Attributes:
        value: The cached value.
        expires_at: When the entry stops being served.
    """

    value: Any
    expires_at: datetime


class TTLCache:
    """Read-through cache keyed by string.

    Example usage:
        cache = TTLCache(ttl_seconds=60)
        snapshot = await cache.get_or_load("catalog", repository.load_snapshot)
    """

    def __init__(self, ttl_seconds: int = 60) -> None:
        """Initialize cache.

        Args:
            ttl_seconds: Default time-to-live. 0 disables caching.
        """
        self._entries: dict[str, CacheEntry] = {}
        self.ttl_seconds = ttl_seconds

    def get(self, key: str) -> Any | None:
        """Get a cached value.

        Args:
            key: Cache key.

        Returns:
            Cached value if present and not expired.
        """
        entry = self._entries.get(key)
        if entry is None:
            return None

        if datetime.now(timezone.utc) >= entry.expires_at:
            del self._entries[key]
            return None

        return entry.value

    def set(self, key: str, value: Any, ttl_seconds: int | None = None) -> None:
        """Store a value.

        Args:
            key: Cache key.
            value: Value to cache.
            ttl_seconds: Override of the default TTL.
        """
        ttl = self.ttl_seconds if ttl_seconds is None else ttl_seconds
        if ttl <= 0:
            return
        self._entries[key] = CacheEntry(
            value=value,
            expires_at=datetime.now(timezone.utc) + timedelta(seconds=ttl),
        )

    async def get_or_load(
        self,
        key: str,
        loader: Callable[[], Awaitable[Any]],
        ttl_seconds: int | None = None,
    ) -> Any:
        """Return the cached value or load, cache and return it.

        Args:
            key: Cache key.
            loader: Coroutine function producing the value on a miss.
            ttl_seconds: Override of the default TTL.

        Returns:
            The cached or freshly loaded value.
        """
        cached = self.get(key)
        if cached is not None:
            return cached

        value = await loader()
        self.set(key, value, ttl_seconds)
        logger.debug("Cache miss loaded", key=key)
        return value

    def invalidate(self, key: str) -> None:
        """Drop one entry."""
        self._entries.pop(key, None)

    def clear(self) -> None:
        """Drop all entries."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
