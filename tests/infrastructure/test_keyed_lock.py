"""Tests for the per-key lock registry."""

from mediacache.infrastructure.caching.keyed_lock import KeyedLockRegistry


class TestKeyedLockRegistry:
    def test_same_lock_for_same_key(self):
        registry = KeyedLockRegistry()
        lock = registry.get("a")

        with lock:
            assert registry.get("a") is lock
        assert registry.get("a") is lock

    def test_distinct_locks_per_key(self):
        registry = KeyedLockRegistry()
        assert registry.get("a") is not registry.get("b")

    def test_snapshot_sorted_by_key(self):
        registry = KeyedLockRegistry()
        for key in ("c", "", "a"):
            registry.get(key)

        assert [key for key, _ in registry.snapshot()] == ["", "a", "c"]
