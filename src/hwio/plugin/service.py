"""
Registration service handed to plugins while they load.
"""

from typing import TYPE_CHECKING, Optional, Union

from hwio.platform.base import Platform
from hwio.plugin.store import ProviderStore
from hwio.provider.base import Provider

if TYPE_CHECKING:
    from hwio.core.context import Context


class PluginService:
    """Registers providers and platforms into the store on behalf of plugins."""

    def __init__(self, context: "Context", store: ProviderStore):
        self._context = context
        self._store = store

    @property
    def context(self) -> "Context":
        return self._context

    def register(self, *items: Optional[Union[Provider, Platform]]) -> "PluginService":
        """
        Register providers and/or platforms.

        ``None`` entries are skipped.

        Raises:
            TypeError: If an item is neither a Provider nor a Platform.
            ProviderError: On an id conflict or after the load phase.
        """
        for item in items:
            if item is None:
                continue
            if isinstance(item, Provider):
                self._store.add_provider(item)
            elif isinstance(item, Platform):
                self._store.add_platform(item)
            else:
                raise TypeError(f"Cannot register {type(item).__name__}: expected Provider or Platform")
        return self

    def register_providers(self, *providers: Optional[Provider]) -> "PluginService":
        for provider in providers:
            self._store.add_provider(provider)
        return self

    def register_platforms(self, *platforms: Optional[Platform]) -> "PluginService":
        for platform in platforms:
            self._store.add_platform(platform)
        return self
