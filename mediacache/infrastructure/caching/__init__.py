"""Two-tier caching: shared intrinsic payloads and lazily built resources."""

from .intrinsic_store import IntrinsicDataStore
from .keyed_lock import KeyedLockRegistry
from .resource_cache import ResourceCache

__all__ = ["IntrinsicDataStore", "KeyedLockRegistry", "ResourceCache"]
