"""Renderable resources built on top of intrinsic payloads."""
from abc import ABC, abstractmethod

from mediacache.domain.media.value_objects import IntrinsicPayload


class Renderable(ABC):
    """Capability shared by everything that can be shown to a principal."""

    @abstractmethod
    def render(self, principal: str) -> str:
        """Render the resource for ``principal`` and return the notice line."""


class RealResource(Renderable):
    """Fully constructed resource wrapping exactly one intrinsic payload."""

    __slots__ = ("_payload",)

    def __init__(self, payload: IntrinsicPayload):
        self._payload = payload

    @property
    def key(self) -> str:
        return self._payload.key

    @property
    def payload(self) -> IntrinsicPayload:
        return self._payload

    def render(self, principal: str) -> str:
        return (
            f"Displaying '{self._payload.key}' to user '{principal}' "
            f"(data id: {self._payload.data_id})"
        )

    def __repr__(self) -> str:
        return f"RealResource(key={self._payload.key!r})"
