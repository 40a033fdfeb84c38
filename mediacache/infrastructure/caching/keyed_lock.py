"""Per-key lock registry."""

import threading
from typing import Dict, List, Tuple


class KeyedLockRegistry:
    """Hands out one lock per key so unrelated keys never contend.

    Locks are never removed. The registry holds one lock per key ever requested,
    which is the same key set as the intrinsic pool, and that pool is never
    evicted either. Dropping a lock while a thread still waits on it would let a
    later caller create a second lock for the same key and build concurrently.
    """

    def __init__(self):
        self._locks: Dict[str, threading.Lock] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> threading.Lock:
        """Get the lock for ``key``, creating it on first use."""
        with self._lock:
            lock = self._locks.get(key)
            if lock is None:
                lock = threading.Lock()
                self._locks[key] = lock
            return lock

    def snapshot(self) -> List[Tuple[str, threading.Lock]]:
        """All known locks sorted by key, the order they must be acquired in."""
        with self._lock:
            return sorted(self._locks.items(), key=lambda item: item[0])
