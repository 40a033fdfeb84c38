"""Media Cache - Root Package.

Lazy-loading, access-controlled, two-tier caching layer for media-like
resources.

Key Components:
    - domain: Value objects, the renderable resource and the exception taxonomy
    - infrastructure: Intrinsic data store, resource cache, access gate,
      output sinks and logging
    - application: Per-call resource proxy and the batch-oriented media facade
    - config: Pydantic configuration schemas and the configuration manager
    - cli: Command-line driver

Architecture:
    Both stores are constructed explicitly by the bootstrap (or a test) and
    handed to their dependents by constructor injection. The intrinsic store
    is never cleared; only the resource cache can be invalidated.
"""

from ._version import __version__

__author__ = "Media Cache Maintainers"
__package_name__ = "mediacache"

__all__ = ["__version__"]
