"""Batch-oriented entry point to the media caches."""
from typing import List, Sequence

from mediacache.application.media.dto import CacheStats
from mediacache.application.media.proxy import ResourceProxy
from mediacache.domain.base.ports import OutputPort
from mediacache.domain.media.value_objects import ProxyState
from mediacache.infrastructure.auth.access_gate import AccessGate
from mediacache.infrastructure.caching.intrinsic_store import IntrinsicDataStore
from mediacache.infrastructure.caching.resource_cache import ResourceCache
from mediacache.infrastructure.logging.logger import get_logger


class MediaFacade:
    """
    Simplified interface over the proxy, the resource cache and the
    intrinsic data store.

    ``preload`` warms only the intrinsic tier and skips the access gate;
    whoever exposes it is responsible for restricting who may call it.
    ``invalidate`` empties only the resource tier.
    """

    def __init__(
        self,
        store: IntrinsicDataStore,
        cache: ResourceCache,
        gate: AccessGate,
        output: OutputPort,
    ):
        self._store = store
        self._cache = cache
        self._gate = gate
        self._output = output
        self._logger = get_logger(__name__)

    def _new_proxy(self) -> ResourceProxy:
        return ResourceProxy(self._cache, self._gate, self._output)

    def view_one(self, key: str, principal: str) -> ProxyState:
        """View a single key through a fresh proxy."""
        return self._new_proxy().display(key, principal)

    def view_batch(self, keys: Sequence[str], principal: str) -> List[ProxyState]:
        """View keys in order; each one is logged and authorized separately."""
        self._output.write(f"[MediaFacade] Viewing batch for user: {principal}")
        outcomes = [self.view_one(key, principal) for key in keys]
        self._logger.debug(
            "Batch viewed",
            principal=principal,
            requested=len(outcomes),
            denied=outcomes.count(ProxyState.DENIED),
        )
        return outcomes

    def preload(self, keys: Sequence[str]) -> None:
        """Warm the intrinsic store for ``keys``."""
        keys = list(keys)
        self._output.write(f"[MediaFacade] Preloading: {keys}")
        for key in keys:
            self._store.get_or_create(key)

    def stats(self) -> CacheStats:
        return CacheStats(
            intrinsic_count=self._store.size(),
            resource_count=self._cache.size(),
            keys=self._store.keys(),
        )

    def show_stats(self) -> CacheStats:
        """Write the current statistics to the output sink and return them."""
        stats = self.stats()
        self._output.write("[MediaFacade] Stats:")
        self._output.write(f" - Intrinsic pool size: {stats.intrinsic_count}")
        self._output.write(f" - Resource cache size: {stats.resource_count}")
        self._output.write(f" - Intrinsic keys: {sorted(stats.keys)}")
        return stats

    def invalidate(self) -> None:
        """Empty the resource cache. The intrinsic store is kept."""
        self._cache.clear()
        self._output.write("[MediaFacade] resource cache cleared.")
