"""Lazily built cache of real resources."""
import threading
from collections import Counter
from contextlib import ExitStack
from typing import Dict, FrozenSet, Optional

from mediacache.domain.base.ports import OutputPort
from mediacache.domain.media.resource import RealResource
from mediacache.domain.media.value_objects import ResourceKey
from mediacache.infrastructure.caching.intrinsic_store import IntrinsicDataStore
from mediacache.infrastructure.caching.keyed_lock import KeyedLockRegistry
from mediacache.infrastructure.logging.logger import get_logger


class ResourceCache:
    """
    Cache of real resources built on top of the intrinsic data store.

    A resource is built at most once per key until ``clear`` empties the
    cache. ``clear`` never touches the intrinsic store, so rebuilding a
    resource after a clear reuses the payload that is already pooled.
    """

    def __init__(self, store: IntrinsicDataStore, output: Optional[OutputPort] = None):
        self._store = store
        self._output = output
        self._resources: Dict[str, RealResource] = {}
        self._construction_counts: Counter = Counter()
        self._lock = threading.Lock()
        self._key_locks = KeyedLockRegistry()
        self._logger = get_logger(__name__)

    @property
    def store(self) -> IntrinsicDataStore:
        return self._store

    def get_or_build(self, key: str) -> RealResource:
        """
        Get the resource for ``key``, building it on first request.

        Raises:
            ValidationError: If the key is not a string
            RetrievalError: If the intrinsic payload cannot be constructed.
                Nothing is cached in that case.
        """
        key = ResourceKey(key).value

        resource = self._resources.get(key)
        if resource is not None:
            self._cache_hit(key)
            return resource

        with self._key_locks.get(key):
            resource = self._resources.get(key)
            if resource is not None:
                self._cache_hit(key)
                return resource

            payload = self._store.get_or_create(key)
            resource = RealResource(payload)
            with self._lock:
                self._resources[key] = resource
                self._construction_counts[key] += 1

            self._logger.debug("Resource built", key=key)
            if self._output is not None:
                self._output.write(f"[RealResource] instantiated for: {key}")
            return resource

    def _cache_hit(self, key: str) -> None:
        self._logger.debug("Resource cache hit", key=key)
        if self._output is not None:
            self._output.write(f"[ResourceCache] served from cache: {key}")

    def clear(self) -> None:
        """Empty the cache once no tracked key is under construction."""
        with ExitStack() as stack:
            for _, key_lock in self._key_locks.snapshot():
                stack.enter_context(key_lock)
            with self._lock:
                cleared = len(self._resources)
                self._resources.clear()
        self._logger.info("Resource cache cleared", cleared=cleared)

    def contains(self, key: str) -> bool:
        return key in self._resources

    def size(self) -> int:
        """Number of cached resources."""
        with self._lock:
            return len(self._resources)

    def keys(self) -> FrozenSet[str]:
        with self._lock:
            return frozenset(self._resources)

    def construction_count(self, key: Optional[str] = None) -> int:
        """Number of resources built, in total or for one key."""
        with self._lock:
            if key is None:
                return sum(self._construction_counts.values())
            return self._construction_counts[key]
