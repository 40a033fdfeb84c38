"""Shared pool of intrinsic payloads."""
import threading
import time
from collections import Counter
from typing import Callable, Dict, FrozenSet, Optional

from mediacache.domain.base.ports import OutputPort
from mediacache.domain.core.exceptions import RetrievalError
from mediacache.domain.media.value_objects import (
    IntrinsicPayload,
    ResourceKey,
    synthesize_payload,
)
from mediacache.infrastructure.caching.keyed_lock import KeyedLockRegistry
from mediacache.infrastructure.logging.logger import get_logger

PayloadFactory = Callable[[str], IntrinsicPayload]


class IntrinsicDataStore:
    """
    Pool of intrinsic payloads keyed by resource name.

    Features:
    - Each payload is constructed at most once and kept for the store's lifetime
    - First-time construction is serialized per key; lookups of known keys
      take no lock
    - Failed constructions are not cached, so a later call retries
    - There is no clear operation
    """

    def __init__(
        self,
        payload_factory: Optional[PayloadFactory] = None,
        output: Optional[OutputPort] = None,
        construction_delay_ms: int = 0,
    ):
        """
        Initialize the intrinsic data store.

        Args:
            payload_factory: Builds the payload for a key. Defaults to the
                deterministic synthesizer.
            output: Sink for construction notices
            construction_delay_ms: Simulated construction cost
        """
        self._payload_factory = payload_factory or synthesize_payload
        self._output = output
        self._construction_delay = construction_delay_ms / 1000.0
        self._payloads: Dict[str, IntrinsicPayload] = {}
        self._construction_counts: Counter = Counter()
        self._lock = threading.Lock()
        self._key_locks = KeyedLockRegistry()
        self._logger = get_logger(__name__)

    def get_or_create(self, key: str) -> IntrinsicPayload:
        """
        Get the payload for ``key``, constructing it on first request.

        Raises:
            ValidationError: If the key is not a string
            RetrievalError: If the payload factory fails
        """
        key = ResourceKey(key).value

        payload = self._payloads.get(key)
        if payload is not None:
            return payload

        with self._key_locks.get(key):
            payload = self._payloads.get(key)
            if payload is not None:
                return payload

            payload = self._construct(key)
            with self._lock:
                self._payloads[key] = payload
                self._construction_counts[key] += 1

            self._logger.debug("Intrinsic payload created", key=key)
            if self._output is not None:
                self._output.write(f"[IntrinsicDataStore] created intrinsic data for: {key}")
            return payload

    def _construct(self, key: str) -> IntrinsicPayload:
        if self._construction_delay:
            time.sleep(self._construction_delay)
        try:
            payload = self._payload_factory(key)
        except RetrievalError:
            self._logger.warning("Intrinsic payload construction failed", key=key)
            raise
        except Exception as e:
            self._logger.warning("Intrinsic payload construction failed", key=key, error=str(e))
            raise RetrievalError(key, str(e), cause=e) from e

        if not isinstance(payload, IntrinsicPayload) or payload.key != key:
            raise RetrievalError(key, f"payload factory returned {payload!r}")
        return payload

    def contains(self, key: str) -> bool:
        return key in self._payloads

    def size(self) -> int:
        """Number of distinct keys materialized so far."""
        with self._lock:
            return len(self._payloads)

    def keys(self) -> FrozenSet[str]:
        """Snapshot of materialized keys."""
        with self._lock:
            return frozenset(self._payloads)

    def construction_count(self, key: Optional[str] = None) -> int:
        """Number of construction events, in total or for one key."""
        with self._lock:
            if key is None:
                return sum(self._construction_counts.values())
            return self._construction_counts[key]
