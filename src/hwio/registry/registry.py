"""
I/O instance registry.

The registry maps instance ids to live I/O objects. It resolves the
provider for a config, has the provider build the instance, initializes
it and publishes it. Destruction runs the reverse path.

One lock guards the instance map together with the set of ids that are
being created or destroyed. Provider and device calls run outside the
lock, so a slow device never blocks lookups of other ids, while an id
in transition still cannot be claimed twice.
"""

import logging
import threading
from typing import TYPE_CHECKING, Dict, Optional, Set, Type, TypeVar, Union

from hwio.common.descriptor import Descriptor
from hwio.exceptions import (
    IOAlreadyExistsError,
    IONotFoundError,
    NotInitializedError,
    ProviderError,
    RegistryError,
    ShutdownError,
)
from hwio.io.base import IO
from hwio.io.config import IOConfig
from hwio.provider.base import Provider

if TYPE_CHECKING:
    from hwio.core.context import Context

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=IO)


class Registry:
    """Thread-safe store of live I/O instances keyed by id."""

    def __init__(self, context: "Context"):
        self._context = context
        self._instances: Dict[str, IO] = {}
        self._pending: Set[str] = set()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._instances)

    def __contains__(self, io_id: str) -> bool:
        return self.exists(io_id)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def exists(self, io_id: str, io_class: Optional[Type[IO]] = None) -> bool:
        """
        Check whether an instance is registered.

        Args:
            io_id: Instance id.
            io_class: If given, the instance must also be of this type.
        """
        with self._lock:
            instance = self._instances.get(io_id)
        if instance is None:
            return False
        return io_class is None or isinstance(instance, io_class)

    def get(self, io_id: str, io_class: Optional[Type[T]] = None) -> T:
        """
        Get a registered instance.

        Raises:
            IONotFoundError: If no instance has this id.
            RegistryError: If the instance is not of ``io_class``.
        """
        with self._lock:
            instance = self._instances.get(io_id)
        if instance is None:
            raise IONotFoundError(io_id)
        if io_class is not None and not isinstance(instance, io_class):
            raise RegistryError(
                f"I/O instance '{io_id}' is a {type(instance).__name__}, not a {io_class.__name__}"
            )
        return instance

    def all(self) -> Dict[str, IO]:
        """Get a snapshot of all instances keyed by id."""
        with self._lock:
            return dict(self._instances)

    # ------------------------------------------------------------------
    # Create / destroy
    # ------------------------------------------------------------------

    def create(
        self,
        config: IOConfig,
        io_class: Optional[Type[T]] = None,
        provider: Optional[Union[Provider, str]] = None,
    ) -> T:
        """
        Create, initialize and register an I/O instance.

        Args:
            config: Instance configuration; its id becomes the registry key.
            io_class: Expected instance type, checked against the provider's result.
            provider: Provider object or id. When omitted, the provider is
                resolved from the config hint, the registered providers and
                the configured or platform defaults.

        Returns:
            The initialized instance.

        Raises:
            NotInitializedError: If the context has not finished loading, or
                shut down while the instance was being created.
            IOAlreadyExistsError: If the id is registered or in transition.
            ProviderNotFoundError: If a named provider is not registered.
            ProviderError: If the provider cannot build the instance.
            RegistryError: If no provider can be resolved or the type is wrong.
            InitializeError: If the instance fails to initialize.
        """
        if not self._context.is_initialized:
            raise NotInitializedError(
                f"Cannot create I/O instance '{config.id}': context is {self._context.state.value}"
            )

        resolved = self._resolve_provider(config, provider)
        if not resolved.supports(config):
            raise ProviderError(
                f"Provider '{resolved.id}' does not support {type(config).__name__} for '{config.id}'"
            )

        io_id = config.id
        with self._lock:
            if io_id in self._instances or io_id in self._pending:
                raise IOAlreadyExistsError(io_id)
            self._pending.add(io_id)

        try:
            try:
                instance = resolved.create(config)
            except ProviderError:
                raise
            except Exception as e:
                raise ProviderError(f"Provider '{resolved.id}' failed to create '{io_id}': {e}") from e

            if io_class is not None and not isinstance(instance, io_class):
                raise RegistryError(
                    f"Provider '{resolved.id}' built a {type(instance).__name__} for '{io_id}', "
                    f"expected {io_class.__name__}"
                )

            instance.initialize(self._context)

            # the context may have started shutting down while the device was opening
            with self._lock:
                published = self._context.is_initialized
                if published:
                    self._instances[io_id] = instance
                    self._pending.discard(io_id)
            if not published:
                self._discard(instance)
                raise NotInitializedError(
                    f"Cannot register I/O instance '{io_id}': context is {self._context.state.value}"
                )
        except BaseException:
            with self._lock:
                self._pending.discard(io_id)
            raise

        logger.info(f"Created {instance.category} '{io_id}' with provider '{resolved.id}'")
        return instance

    def _discard(self, instance: IO) -> None:
        """Shut down an instance that was never published."""
        try:
            instance.shutdown(self._context)
        except ShutdownError as e:
            logger.error(f"Failed to shut down unregistered '{instance.id}': {e}")
        logger.warning(f"Discarded {instance.category} '{instance.id}' created during context shutdown")

    def destroy(self, io_id: str) -> IO:
        """
        Shut down and remove an instance.

        Returns:
            The removed instance.

        Raises:
            IONotFoundError: If no instance has this id.
            ShutdownError: If the instance fails to shut down; it is removed anyway.
        """
        with self._lock:
            instance = self._instances.pop(io_id, None)
            if instance is None:
                raise IONotFoundError(io_id)
            self._pending.add(io_id)

        try:
            instance.shutdown(self._context)
        finally:
            with self._lock:
                self._pending.discard(io_id)

        logger.info(f"Destroyed {instance.category} '{io_id}'")
        return instance

    def destroy_all(self) -> int:
        """
        Destroy every registered instance.

        Shutdown failures are logged and do not stop the remaining
        instances from being destroyed.

        Returns:
            Number of instances removed.
        """
        count = 0
        for io_id in list(self.all()):
            try:
                self.destroy(io_id)
                count += 1
            except IONotFoundError:
                # destroyed concurrently
                continue
            except ShutdownError as e:
                logger.error(f"Failed to shut down '{io_id}': {e}")
                count += 1
        return count

    # ------------------------------------------------------------------
    # Provider resolution
    # ------------------------------------------------------------------

    def _resolve_provider(self, config: IOConfig, provider: Optional[Union[Provider, str]]) -> Provider:
        if isinstance(provider, Provider):
            return provider
        if provider is not None:
            return self._context.providers.get(provider)
        if config.provider:
            return self._context.providers.get(config.provider)

        candidates = [p for p in self._context.providers.all().values() if p.supports(config)]
        if len(candidates) == 1:
            return candidates[0]

        io_type = config.io_type
        if not candidates:
            raise RegistryError(
                f"No provider supports {type(config).__name__} for '{config.id}'"
            )

        configured = self._context.config.default_providers.get(io_type.value) if io_type else None
        if configured:
            logger.debug(f"Using configured default provider '{configured}' for '{config.id}'")
            return self._context.providers.get(configured)

        platform = self._context.platform
        if platform is not None and io_type is not None:
            platform_default = platform.default_providers().get(io_type)
            if platform_default:
                logger.debug(
                    f"Using platform '{platform.id}' default provider '{platform_default}' for '{config.id}'"
                )
                return self._context.providers.get(platform_default)

        ids = ", ".join(p.id for p in candidates)
        raise RegistryError(
            f"Cannot choose a provider for '{config.id}' among: {ids}; "
            f"name one explicitly or set a default"
        )

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def describe(self) -> Descriptor:
        try:
            instances = self.all()
        except Exception as e:
            logger.error(f"Failed to enumerate registry: {e}")
            instances = {}

        descriptor = Descriptor(
            category="REGISTRY",
            name="I/O Registered Instances",
            quantity=len(instances),
            type=type(self).__name__,
        )
        for instance in instances.values():
            descriptor.add(instance.describe())
        return descriptor
