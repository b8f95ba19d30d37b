"""
Read-only view over the registered providers.
"""

from typing import TYPE_CHECKING, Dict, List

from hwio.common.descriptor import Descriptor
from hwio.exceptions import ProviderNotFoundError
from hwio.io.iotype import IOType
from hwio.provider.base import Provider

if TYPE_CHECKING:
    from hwio.plugin.store import ProviderStore


class Providers:
    """Lookup of providers held by a ProviderStore."""

    def __init__(self, store: "ProviderStore"):
        self._store = store

    def all(self) -> Dict[str, Provider]:
        """Get all providers keyed by id."""
        return dict(self._store.providers)

    def exists(self, provider_id: str) -> bool:
        return provider_id in self._store.providers

    def get(self, provider_id: str) -> Provider:
        """
        Get a provider by id.

        Raises:
            ProviderNotFoundError: If no provider has that id.
        """
        provider = self._store.providers.get(provider_id)
        if provider is None:
            raise ProviderNotFoundError(provider_id)
        return provider

    def of_type(self, io_type: IOType) -> List[Provider]:
        """Get providers of one I/O category, in registration order."""
        return [p for p in self._store.providers.values() if p.io_type == io_type]

    def __len__(self) -> int:
        return len(self._store.providers)

    def describe(self) -> Descriptor:
        providers = self._store.providers
        descriptor = Descriptor(
            category="PROVIDERS",
            name="I/O Providers",
            quantity=len(providers),
            type=type(self).__name__,
        )
        for provider in providers.values():
            descriptor.add(provider.describe())
        return descriptor
