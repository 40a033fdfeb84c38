"""Per-access proxy combining logging, authorization and lazy resolution."""
from typing import Optional

from mediacache.domain.base.ports import OutputPort
from mediacache.domain.core.exceptions import (
    AccessDeniedError,
    InvalidStateTransitionError,
    RetrievalError,
)
from mediacache.domain.media.resource import RealResource
from mediacache.domain.media.value_objects import ProxyState
from mediacache.infrastructure.auth.access_gate import AccessGate
from mediacache.infrastructure.caching.resource_cache import ResourceCache
from mediacache.infrastructure.logging.logger import get_logger

VALID_TRANSITIONS = {
    ProxyState.UNREQUESTED: {ProxyState.LOGGED},
    ProxyState.LOGGED: {ProxyState.DENIED, ProxyState.AUTHORIZED},
    ProxyState.AUTHORIZED: {ProxyState.RESOLVED},
    ProxyState.DENIED: set(),  # Terminal state
    ProxyState.RESOLVED: set(),  # Terminal state
}


class ResourceProxy:
    """
    Gatekeeper for a single access.

    Every call logs the attempt, asks the access gate and, only when access
    is granted, resolves the resource through the cache. A denied call never
    reaches the cache or the intrinsic store.

    Proxies are cheap and are not shared between threads; the facade creates
    a new one for every access.
    """

    def __init__(self, cache: ResourceCache, gate: AccessGate, output: OutputPort):
        self._cache = cache
        self._gate = gate
        self._output = output
        self._state = ProxyState.UNREQUESTED
        self._resource: Optional[RealResource] = None
        self._logger = get_logger(__name__)

    @property
    def state(self) -> ProxyState:
        return self._state

    @property
    def resource(self) -> Optional[RealResource]:
        """The resolved resource, or None until a call reaches RESOLVED."""
        return self._resource

    def _transition(self, new_state: ProxyState) -> None:
        if new_state not in VALID_TRANSITIONS[self._state]:
            raise InvalidStateTransitionError(self._state.value, new_state.value)
        self._state = new_state

    def _reset(self) -> None:
        self._state = ProxyState.UNREQUESTED
        self._resource = None

    def _authorize(self, key: str, principal: str) -> bool:
        self._reset()
        self._output.write(f"[ResourceProxy] user='{principal}' requests '{key}'")
        self._transition(ProxyState.LOGGED)

        if not self._gate.evaluate(key, principal):
            self._transition(ProxyState.DENIED)
            self._logger.info("Access denied", key=key, principal=principal)
            self._output.write(
                f"[ResourceProxy] ACCESS DENIED for user '{principal}' to '{key}'"
            )
            return False

        self._transition(ProxyState.AUTHORIZED)
        return True

    def _resolve(self, key: str) -> RealResource:
        try:
            resource = self._cache.get_or_build(key)
        except RetrievalError:
            self._output.write(f"[ResourceProxy] retrieval failed for '{key}'")
            raise
        self._resource = resource
        self._transition(ProxyState.RESOLVED)
        return resource

    def display(self, key: str, principal: str) -> ProxyState:
        """
        Log, authorize and render ``key`` for ``principal``.

        A denial is reported through the output sink and the returned state,
        never raised.

        Returns:
            The terminal state of this access (DENIED or RESOLVED)

        Raises:
            RetrievalError: If the resource could not be constructed. The
                proxy stays AUTHORIZED and nothing is cached.
        """
        if not self._authorize(key, principal):
            return self._state

        resource = self._resolve(key)
        self._output.write(resource.render(principal))
        return self._state

    def fetch(self, key: str, principal: str) -> RealResource:
        """
        Authorize and return the resource without rendering it.

        Raises:
            AccessDeniedError: If ``principal`` may not access ``key``
            RetrievalError: If the resource could not be constructed
        """
        if not self._authorize(key, principal):
            raise AccessDeniedError(key, principal)
        return self._resolve(key)
