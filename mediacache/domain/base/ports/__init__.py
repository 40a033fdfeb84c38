"""Domain ports for infrastructure concerns."""

from .output_port import OutputPort

__all__ = ["OutputPort"]
