"""
Unit tests for the wholesale TTL index cache.
"""

import threading

from nostromo_toolkit.utils.cache import DEFAULT_TTL, IndexCache


class TestIndexCache:
    """Tests for IndexCache."""

    def test_defaults(self):
        cache = IndexCache()
        assert cache.ttl == DEFAULT_TTL == 60.0
        assert cache.timestamp == 0.0
        assert len(cache) == 0

    def test_set_and_get(self):
        cache = IndexCache()
        cache.set(3, 11)
        assert cache.get(3) == 11
        assert 3 in cache
        assert cache.get(4) is None
        assert list(cache) == [3]

    def test_get_ignores_age(self):
        cache = IndexCache(ttl=1)
        cache.expire_if_stale(100.0)
        cache.set(1, 2)
        # Only expire_if_stale applies the TTL
        assert cache.get(1) == 2

    def test_expire_if_stale_clears_everything(self):
        cache = IndexCache(ttl=60)
        assert cache.expire_if_stale(1000.0) is True
        assert cache.timestamp == 1000.0

        cache.set(1, 10)
        cache.set(2, 20)
        assert cache.expire_if_stale(1060.0) is False
        assert len(cache) == 2

        assert cache.expire_if_stale(1060.5) is True
        assert len(cache) == 0
        assert cache.timestamp == 1060.5

    def test_clear_zeroes_timestamp(self):
        cache = IndexCache()
        cache.expire_if_stale(500.0)
        cache.set(1, 1)

        cache.clear()

        assert len(cache) == 0
        assert cache.timestamp == 0.0

    def test_stats(self):
        cache = IndexCache(ttl=60)
        cache.expire_if_stale(1000.0)
        cache.set(5, 0)

        stats = cache.stats(1030.0)

        assert stats["entries"] == 1
        assert stats["timestamp"] == 1000.0
        assert stats["age"] == 30.0
        assert stats["is_stale"] is False
        assert cache.stats(1100.0)["is_stale"] is True

    def test_instances_do_not_share_state(self):
        first = IndexCache()
        second = IndexCache()
        first.set(1, 1)
        assert second.get(1) is None

    def test_concurrent_writers(self):
        cache = IndexCache()

        def writer(offset):
            for i in range(200):
                cache.set(offset + i, i)

        threads = [
            threading.Thread(target=writer, args=(n * 1000,)) for n in range(4)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(cache) == 800
