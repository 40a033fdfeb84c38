import pytest

from mediacache.application.media.facade import MediaFacade
from mediacache.application.media.proxy import ResourceProxy
from mediacache.infrastructure.auth.access_gate import AccessGate
from mediacache.infrastructure.caching.intrinsic_store import IntrinsicDataStore
from mediacache.infrastructure.caching.resource_cache import ResourceCache
from mediacache.infrastructure.output.sinks import MemoryOutputSink


@pytest.fixture
def output():
    """In-memory sink capturing every notice."""
    return MemoryOutputSink()


@pytest.fixture
def store(output):
    return IntrinsicDataStore(output=output)


@pytest.fixture
def cache(store, output):
    return ResourceCache(store, output=output)


@pytest.fixture
def gate():
    return AccessGate()


@pytest.fixture
def proxy(cache, gate, output):
    return ResourceProxy(cache, gate, output)


@pytest.fixture
def facade(store, cache, gate, output):
    return MediaFacade(store, cache, gate, output)
