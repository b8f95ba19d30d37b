"""
Runtime context.

The context owns everything one hwio runtime needs: the provider store,
the plugin service, the registry and the read-only views over providers
and platforms. It moves through four phases:

    CREATED -> LOADING -> INITIALIZED -> SHUTDOWN

Plugins register providers and platforms while LOADING. The store is
sealed before INITIALIZED, and I/O instances can only be created once
the context is INITIALIZED.
"""

import importlib
import logging
import threading
from enum import Enum
from typing import List, Optional, Type, TypeVar, Union

from hwio.common.descriptor import Descriptor
from hwio.core.config import Config
from hwio.exceptions import InitializeError
from hwio.io.base import IO
from hwio.io.config import IOConfig
from hwio.platform.base import Platform
from hwio.platform.platforms import Platforms
from hwio.plugin.base import Plugin
from hwio.plugin.service import PluginService
from hwio.plugin.store import ProviderStore
from hwio.provider.base import Provider
from hwio.provider.providers import Providers
from hwio.registry.registry import Registry

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=IO)


class ContextState(Enum):
    """Lifecycle phase of a context."""
    CREATED = "created"
    LOADING = "loading"
    INITIALIZED = "initialized"
    SHUTDOWN = "shutdown"


def load_plugin(path: str) -> Plugin:
    """
    Import and instantiate a plugin named as "package.module:ClassName".

    Raises:
        InitializeError: If the module or class cannot be loaded.
    """
    module_name, sep, class_name = path.partition(":")
    if not sep or not module_name or not class_name:
        raise InitializeError(f"Invalid plugin path '{path}', expected 'package.module:ClassName'")

    try:
        module = importlib.import_module(module_name)
        plugin = getattr(module, class_name)()
    except Exception as e:
        raise InitializeError(f"Failed to load plugin '{path}': {e}", e) from e

    if not isinstance(plugin, Plugin):
        raise InitializeError(f"'{path}' is not a Plugin ({type(plugin).__name__})")
    return plugin


class Context:
    """
    One hwio runtime.

    Usage:
        context = Context().add_plugin(MockPlugin()).initialize()
        led = context.create(DigitalOutputConfig(id="led", address=17))
        ...
        context.shutdown()
    """

    def __init__(self, config: Optional[Config] = None):
        self._config = config or Config()
        self._state = ContextState.CREATED
        self._lock = threading.RLock()

        self._store = ProviderStore()
        self._service = PluginService(self, self._store)
        self._providers = Providers(self._store)
        self._platforms = Platforms(self._store, self)
        self._registry = Registry(self)

        self._plugins: List[Plugin] = []
        self._platform: Optional[Platform] = None
        self._platform_selected = False

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def config(self) -> Config:
        return self._config

    @property
    def state(self) -> ContextState:
        return self._state

    @property
    def is_initialized(self) -> bool:
        return self._state == ContextState.INITIALIZED

    @property
    def registry(self) -> Registry:
        return self._registry

    @property
    def providers(self) -> Providers:
        return self._providers

    @property
    def platforms(self) -> Platforms:
        return self._platforms

    @property
    def plugin_service(self) -> PluginService:
        return self._service

    @property
    def plugins(self) -> List[Plugin]:
        return list(self._plugins)

    @property
    def platform(self) -> Optional[Platform]:
        """The default platform, selected once after initialization."""
        with self._lock:
            if not self._platform_selected and self._store.sealed:
                self._platform = self._platforms.default()
                self._platform_selected = True
                if self._platform is not None:
                    logger.info(f"Using platform '{self._platform.id}'")
                else:
                    logger.warning("No enabled platform found")
            return self._platform

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def add_plugin(self, plugin: Plugin) -> "Context":
        """
        Add a plugin to load during initialize.

        Raises:
            InitializeError: If the context has already started loading.
        """
        with self._lock:
            if self._state != ContextState.CREATED:
                raise InitializeError(f"Cannot add plugin '{plugin.name}': context is {self._state.value}")
            self._plugins.append(plugin)
        return self

    def initialize(self) -> "Context":
        """
        Load plugins, seal the provider store and initialize platforms and providers.

        Returns:
            self

        Raises:
            InitializeError: If a plugin, platform or provider fails to load.
        """
        with self._lock:
            if self._state != ContextState.CREATED:
                raise InitializeError(f"Cannot initialize: context is {self._state.value}")
            self._state = ContextState.LOADING

            started: List[Union[Platform, Provider]] = []
            try:
                for path in self._config.plugins:
                    self._plugins.append(load_plugin(path))

                for plugin in self._plugins:
                    logger.debug(f"Loading plugin '{plugin.name}'")
                    try:
                        plugin.initialize(self._service)
                    except Exception as e:
                        raise InitializeError(f"Plugin '{plugin.name}' failed to load: {e}", e) from e

                self._store.seal()

                for item in list(self._store.platforms.values()) + list(self._store.providers.values()):
                    try:
                        item.initialize(self)
                    except Exception as e:
                        raise InitializeError(f"Failed to initialize {item!r}: {e}", e) from e
                    started.append(item)
            except Exception:
                self._state = ContextState.SHUTDOWN
                for item in reversed(started):
                    self._shutdown_quietly(item)
                raise

            self._state = ContextState.INITIALIZED

        logger.info(
            f"Context initialized with {len(self._plugins)} plugins, "
            f"{len(self._providers)} providers, {len(self._platforms)} platforms"
        )
        return self

    def shutdown(self) -> "Context":
        """
        Destroy all I/O instances and shut down providers, platforms and plugins.

        Errors are logged and do not interrupt the shutdown. Calling this
        more than once is harmless.
        """
        with self._lock:
            if self._state == ContextState.SHUTDOWN:
                return self
            was_initialized = self._state == ContextState.INITIALIZED
            self._state = ContextState.SHUTDOWN

        if was_initialized:
            destroyed = self._registry.destroy_all()
            logger.debug(f"Destroyed {destroyed} I/O instances")

            for provider in self._store.providers.values():
                self._shutdown_quietly(provider)
            for platform in self._store.platforms.values():
                self._shutdown_quietly(platform)

        for plugin in self._plugins:
            try:
                plugin.shutdown(self)
            except Exception as e:
                logger.error(f"Plugin '{plugin.name}' failed to shut down: {e}")

        logger.info("Context shut down")
        return self

    def _shutdown_quietly(self, item: Union[Platform, Provider]) -> None:
        try:
            item.shutdown(self)
        except Exception as e:
            logger.error(f"Failed to shut down {item!r}: {e}")

    def __enter__(self) -> "Context":
        if self._state == ContextState.CREATED:
            self.initialize()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.shutdown()

    # ------------------------------------------------------------------
    # I/O
    # ------------------------------------------------------------------

    def create(
        self,
        config: IOConfig,
        io_class: Optional[Type[T]] = None,
        provider: Optional[Union[Provider, str]] = None,
    ) -> T:
        """Create an I/O instance through the registry."""
        return self._registry.create(config, io_class, provider)

    def describe(self) -> Descriptor:
        descriptor = Descriptor(
            category="CONTEXT",
            name="Runtime Context",
            type=type(self).__name__,
            description=self._state.value,
        )
        descriptor.add(self._providers.describe())
        descriptor.add(self._platforms.describe())
        descriptor.add(self._registry.describe())
        return descriptor
