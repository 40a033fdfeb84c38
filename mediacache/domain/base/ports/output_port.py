"""Output port for human-readable notices."""

from abc import ABC, abstractmethod


class OutputPort(ABC):
    """Port receiving the user-visible access, render and statistics lines."""

    @abstractmethod
    def write(self, line: str) -> None:
        """Emit a single line."""
