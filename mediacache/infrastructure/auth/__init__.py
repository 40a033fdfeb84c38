"""Access policy."""

from .access_gate import AccessGate

__all__ = ["AccessGate"]
