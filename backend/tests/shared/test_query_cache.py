"""
Tests for QueryCache.

Time is driven by a fake clock; coroutines run with asyncio.run.
"""

import asyncio

from xcstats.shared.cache import QueryCache


def make_counter():
    """Coroutine factory that counts its calls and returns a new list each time."""
    calls = {"count": 0}

    async def compute():
        calls["count"] += 1
        return [calls["count"]]

    return compute, calls


class TestQueryCache:
    """Tests for TTL behaviour."""

    def test_hit_within_ttl(self, fake_clock):
        cache = QueryCache(ttl_seconds=30, clock=fake_clock)
        compute, calls = make_counter()

        async def run():
            first = await cache.get_or_compute("available-years", compute)
            fake_clock.advance(29.9)
            second = await cache.get_or_compute("available-years", compute)
            return first, second

        first, second = asyncio.run(run())

        assert first is second
        assert calls["count"] == 1

    def test_recompute_after_expiry(self, fake_clock):
        cache = QueryCache(ttl_seconds=30, clock=fake_clock)
        compute, calls = make_counter()

        async def run():
            first = await cache.get_or_compute("available-years", compute)
            fake_clock.advance(30)
            second = await cache.get_or_compute("available-years", compute)
            return first, second

        first, second = asyncio.run(run())

        assert first == [1]
        assert second == [2]
        assert calls["count"] == 2

    def test_expiry_restarts_from_new_store(self, fake_clock):
        cache = QueryCache(ttl_seconds=30, clock=fake_clock)
        compute, calls = make_counter()

        async def run():
            await cache.get_or_compute("k", compute)
            fake_clock.advance(31)
            await cache.get_or_compute("k", compute)
            fake_clock.advance(20)
            return await cache.get_or_compute("k", compute)

        assert asyncio.run(run()) == [2]
        assert calls["count"] == 2

    def test_keys_are_independent(self, fake_clock):
        cache = QueryCache(ttl_seconds=30, clock=fake_clock)
        compute, calls = make_counter()

        async def run():
            a = await cache.get_or_compute(("top-seven", 2024), compute)
            b = await cache.get_or_compute(("top-seven", 2025), compute)
            c = await cache.get_or_compute(("top-seven", 2024), compute)
            return a, b, c

        a, b, c = asyncio.run(run())

        assert a is c
        assert a != b
        assert calls["count"] == 2

    def test_get_returns_none_when_missing_or_expired(self, fake_clock):
        cache = QueryCache(ttl_seconds=5, clock=fake_clock)

        asyncio.run(cache.set("k", "v"))
        assert cache.get("k").value == "v"
        assert cache.get("other") is None

        fake_clock.advance(5)
        assert cache.get("k") is None

    def test_clear(self, fake_clock):
        cache = QueryCache(ttl_seconds=30, clock=fake_clock)
        compute, calls = make_counter()

        async def run():
            await cache.get_or_compute("k", compute)
            assert len(cache) == 1
            cache.clear()
            assert len(cache) == 0
            return await cache.get_or_compute("k", compute)

        assert asyncio.run(run()) == [2]
        assert calls["count"] == 2

    def test_failed_compute_is_not_cached(self, fake_clock):
        cache = QueryCache(ttl_seconds=30, clock=fake_clock)
        attempts = {"count": 0}

        async def flaky():
            attempts["count"] += 1
            if attempts["count"] == 1:
                raise RuntimeError("boom")
            return "ok"

        async def run():
            try:
                await cache.get_or_compute("k", flaky)
            except RuntimeError:
                pass
            return await cache.get_or_compute("k", flaky)

        assert asyncio.run(run()) == "ok"
        assert attempts["count"] == 2

    def test_expired_entries_dropped_on_write(self, fake_clock):
        cache = QueryCache(ttl_seconds=30, clock=fake_clock)
        compute, _ = make_counter()

        async def run():
            for i in range(200):
                await cache.get_or_compute(("search", f"q{i}"), compute)
                await cache.get_or_compute(("runner-summary", f"nobody{i}"), compute)
                fake_clock.advance(60)

        asyncio.run(run())

        assert len(cache) <= 2

    def test_live_entries_survive_pruning(self, fake_clock):
        cache = QueryCache(ttl_seconds=30, clock=fake_clock)

        async def run():
            await cache.set("old", 1)
            fake_clock.advance(20)
            await cache.set("recent", 2)
            fake_clock.advance(15)
            await cache.set("new", 3)

        asyncio.run(run())

        assert len(cache) == 2
        assert cache.get("old") is None
        assert cache.get("recent").value == 2
        assert cache.get("new").value == 3

    def test_expired_get_removes_entry(self, fake_clock):
        cache = QueryCache(ttl_seconds=5, clock=fake_clock)

        asyncio.run(cache.set("k", "v"))
        fake_clock.advance(5)

        assert cache.get("k") is None
        assert len(cache) == 0
