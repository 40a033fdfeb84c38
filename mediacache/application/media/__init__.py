"""Media application services."""

from .dto import CacheStats
from .facade import MediaFacade
from .proxy import ResourceProxy

__all__ = ["CacheStats", "MediaFacade", "ResourceProxy"]
