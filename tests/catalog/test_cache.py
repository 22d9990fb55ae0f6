"""Tests for the TTL read-through cache."""

from datetime import datetime, timedelta, timezone

import pytest

from storeadmin.infrastructure.cache import TTLCache


class TestTTLCache:
    """Tests for TTLCache."""

    def test_get_returns_stored_value(self) -> None:
        """Should serve a value until it expires."""
        cache = TTLCache(ttl_seconds=60)
        cache.set("catalog", {"a": 1})
        assert cache.get("catalog") == {"a": 1}
        assert len(cache) == 1

    def test_expired_entry_is_dropped(self) -> None:
        """Should not serve an entry past its expiry."""
        cache = TTLCache(ttl_seconds=60)
        cache.set("catalog", "value")
        cache._entries["catalog"].expires_at = datetime.now(timezone.utc) - timedelta(seconds=1)

        assert cache.get("catalog") is None
        assert len(cache) == 0

    def test_zero_ttl_disables_caching(self) -> None:
        """Should not store anything when the TTL is 0."""
        cache = TTLCache(ttl_seconds=0)
        cache.set("catalog", "value")
        assert cache.get("catalog") is None

    def test_invalidate_and_clear(self) -> None:
        """Should drop one entry or all of them."""
        cache = TTLCache()
        cache.set("a", 1)
        cache.set("b", 2)

        cache.invalidate("a")
        assert cache.get("a") is None
        assert cache.get("b") == 2

        cache.clear()
        assert len(cache) == 0

    @pytest.mark.asyncio
    async def test_get_or_load_calls_loader_once(self) -> None:
        """Should load on a miss and serve the cached value afterwards."""
        cache = TTLCache(ttl_seconds=60)
        calls = []

        async def loader() -> str:
            calls.append(1)
            return "snapshot"

        assert await cache.get_or_load("catalog", loader) == "snapshot"
        assert await cache.get_or_load("catalog", loader) == "snapshot"
        assert len(calls) == 1
