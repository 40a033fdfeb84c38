"""Application bootstrap - explicit construction and wiring of components."""

from __future__ import annotations

from functools import partial
from typing import Optional

from mediacache.application.media.facade import MediaFacade
from mediacache.config import AppConfig, ConfigurationManager, OutputConfig, OutputSinkType
from mediacache.domain.base.ports import OutputPort
from mediacache.domain.media.value_objects import synthesize_payload
from mediacache.infrastructure.auth.access_gate import AccessGate
from mediacache.infrastructure.caching.intrinsic_store import IntrinsicDataStore
from mediacache.infrastructure.caching.resource_cache import ResourceCache
from mediacache.infrastructure.logging.logger import (
    configure_structlog,
    get_logger,
    setup_logging,
)
from mediacache.infrastructure.output.sinks import ConsoleOutputSink, LoggingOutputSink


def create_output_sink(config: OutputConfig) -> OutputPort:
    """Build the output sink named by ``config``."""
    if config.sink == OutputSinkType.LOGGING:
        return LoggingOutputSink(logger_name=config.logger_name)
    return ConsoleOutputSink()


class Application:
    """
    Owns one intrinsic store, one resource cache, one access gate and the
    facade over them.

    Components are built lazily on first access and handed to their
    dependents through their constructors; nothing is kept at module level.
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        config_path: Optional[str] = None,
        output: Optional[OutputPort] = None,
        configure_logging: bool = False,
    ) -> None:
        self.config_path = config_path
        self._config = config
        self._output = output
        self._configure_logging = configure_logging
        self._store: Optional[IntrinsicDataStore] = None
        self._cache: Optional[ResourceCache] = None
        self._gate: Optional[AccessGate] = None
        self._facade: Optional[MediaFacade] = None
        self._initialized = False
        self.logger = get_logger(__name__)

    def initialize(self) -> "Application":
        """Load configuration, set up logging and build every component."""
        if self._initialized:
            return self

        if self._config is None:
            self._config = ConfigurationManager(self.config_path).app_config
        if self._configure_logging:
            setup_logging(self._config.logging)
        else:
            configure_structlog()
        if self._output is None:
            self._output = create_output_sink(self._config.output)

        cache_config = self._config.cache
        access_config = self._config.access

        self._store = IntrinsicDataStore(
            payload_factory=partial(
                synthesize_payload, digest_length=cache_config.payload_digest_length
            ),
            output=self._output,
            construction_delay_ms=cache_config.construction_delay_ms,
        )
        self._cache = ResourceCache(self._store, output=self._output)
        self._gate = AccessGate(
            restricted_prefix=access_config.restricted_prefix,
            admin_principal=access_config.admin_principal,
        )
        self._facade = MediaFacade(self._store, self._cache, self._gate, self._output)
        self._initialized = True

        self.logger.debug(
            "Application initialized",
            restricted_prefix=access_config.restricted_prefix,
            construction_delay_ms=cache_config.construction_delay_ms,
        )
        return self

    @property
    def config(self) -> AppConfig:
        return self.initialize()._config

    @property
    def output(self) -> OutputPort:
        return self.initialize()._output

    @property
    def store(self) -> IntrinsicDataStore:
        return self.initialize()._store

    @property
    def cache(self) -> ResourceCache:
        return self.initialize()._cache

    @property
    def gate(self) -> AccessGate:
        return self.initialize()._gate

    @property
    def facade(self) -> MediaFacade:
        return self.initialize()._facade
