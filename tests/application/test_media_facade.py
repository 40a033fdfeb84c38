"""Tests for the media facade."""

from unittest.mock import patch

from mediacache.application.media.dto import CacheStats
from mediacache.application.media.proxy import ResourceProxy
from mediacache.domain.media.value_objects import ProxyState


class TestMediaFacadeViews:
    """Test single and batch views."""

    def test_view_one(self, facade, cache):
        assert facade.view_one("img.png", "alice") == ProxyState.RESOLVED
        assert cache.size() == 1

    def test_every_view_uses_a_fresh_proxy(self, facade, output):
        with patch(
            "mediacache.application.media.facade.ResourceProxy", wraps=ResourceProxy
        ) as proxy_class:
            facade.view_one("img.png", "alice")
            facade.view_one("img.png", "alice")

        assert proxy_class.call_count == 2
        assert len(output.matching("requests 'img.png'")) == 2

    def test_view_batch_end_to_end(self, facade, cache, output):
        outcomes = facade.view_batch(["a", "a", "private_b"], "carol")

        assert outcomes == [ProxyState.RESOLVED, ProxyState.RESOLVED, ProxyState.DENIED]
        assert cache.size() == 1
        assert cache.construction_count("a") == 1
        assert len(output.matching("Displaying 'a' to user 'carol'")) == 2
        assert output.matching("[ResourceCache] served from cache: a")
        assert output.matching("ACCESS DENIED for user 'carol' to 'private_b'")
        assert output.lines[0] == "[MediaFacade] Viewing batch for user: carol"

    def test_view_batch_same_identity_for_duplicates(self, facade, cache):
        facade.view_batch(["a"], "carol")
        first = cache.get_or_build("a")
        facade.view_batch(["a"], "carol")
        assert cache.get_or_build("a") is first

    def test_view_batch_preserves_order(self, facade, output):
        facade.view_batch(["c", "b", "a"], "dave")
        requested = [line for line in output.lines if "requests" in line]
        assert requested == [
            "[ResourceProxy] user='dave' requests 'c'",
            "[ResourceProxy] user='dave' requests 'b'",
            "[ResourceProxy] user='dave' requests 'a'",
        ]

    def test_empty_batch(self, facade, cache):
        assert facade.view_batch([], "alice") == []
        assert cache.size() == 0

    def test_empty_key_is_viewed_like_any_other(self, facade, cache, output):
        states = facade.view_batch(["a", "", "b"], "alice")

        assert states == [ProxyState.RESOLVED] * 3
        assert cache.keys() == {"a", "", "b"}
        assert "[ResourceProxy] user='alice' requests ''" in output.lines


class TestMediaFacadeCaches:
    """Test preload, stats and invalidation."""

    def test_preload_warms_only_intrinsic_store(self, facade, store, cache):
        facade.preload(["y"])

        assert "y" in store.keys()
        assert not cache.contains("y")
        assert cache.size() == 0

        facade.view_one("y", "alice")
        assert cache.contains("y")
        assert store.construction_count("y") == 1

    def test_preload_bypasses_access_gate(self, facade, store, output):
        facade.preload(["private_z"])

        assert store.contains("private_z")
        assert not output.matching("ACCESS DENIED")
        assert output.lines[0] == "[MediaFacade] Preloading: ['private_z']"

    def test_preload_accepts_any_iterable(self, facade, store):
        facade.preload(key for key in ["a", "b"])
        assert store.keys() == {"a", "b"}

    def test_stats(self, facade):
        facade.view_batch(["a", "b"], "alice")
        facade.preload(["c"])

        stats = facade.stats()

        assert isinstance(stats, CacheStats)
        assert stats.intrinsic_count == 3
        assert stats.resource_count == 2
        assert stats.keys == {"a", "b", "c"}
        assert stats.to_dict() == {
            "intrinsic_count": 3,
            "resource_count": 2,
            "keys": ["a", "b", "c"],
        }

    def test_show_stats(self, facade, output):
        facade.view_one("a", "alice")
        output.clear()

        facade.show_stats()

        assert output.lines == [
            "[MediaFacade] Stats:",
            " - Intrinsic pool size: 1",
            " - Resource cache size: 1",
            " - Intrinsic keys: ['a']",
        ]

    def test_invalidate_clears_only_resource_cache(self, facade, store, cache, output):
        facade.view_batch(["a", "b"], "alice")
        intrinsic_before = store.size()

        facade.invalidate()

        assert cache.size() == 0
        assert store.size() == intrinsic_before
        assert output.lines[-1] == "[MediaFacade] resource cache cleared."

    def test_view_after_invalidate_rebuilds_from_pool(self, facade, store, cache):
        facade.view_one("a", "alice")
        facade.invalidate()
        facade.view_one("a", "alice")

        assert cache.construction_count("a") == 2
        assert store.construction_count("a") == 1
