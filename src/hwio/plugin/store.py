"""
Provider and platform store.

The store is filled while plugins load and sealed when the context
finishes initializing. After the seal it is read-only, so lookups take
no lock.
"""

import logging
import threading
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from hwio.exceptions import ProviderError
from hwio.platform.base import Platform
from hwio.provider.base import Provider

logger = logging.getLogger(__name__)


class ProviderStore:
    """
    Registered providers and platforms, each unique by id.

    Re-registering the same object is ignored. Registering a different
    object under an id already in use raises ProviderError.
    """

    def __init__(self):
        self._providers: Dict[str, Provider] = {}
        self._platforms: Dict[str, Platform] = {}
        self._lock = threading.Lock()
        self._sealed = False

    @property
    def providers(self) -> Mapping[str, Provider]:
        return MappingProxyType(self._providers)

    @property
    def platforms(self) -> Mapping[str, Platform]:
        return MappingProxyType(self._platforms)

    @property
    def sealed(self) -> bool:
        return self._sealed

    def seal(self) -> None:
        """End the load phase; further registration is rejected."""
        with self._lock:
            self._sealed = True
        logger.debug(
            f"Provider store sealed ({len(self._providers)} providers, {len(self._platforms)} platforms)"
        )

    def add_provider(self, provider: Optional[Provider]) -> bool:
        """
        Add a provider.

        Returns:
            True if added, False if it was None or already registered.

        Raises:
            ProviderError: If the store is sealed or the id is taken by another provider.
        """
        if provider is None:
            return False
        return self._add(self._providers, provider, "provider")

    def add_platform(self, platform: Optional[Platform]) -> bool:
        """Add a platform. Same rules as ``add_provider``."""
        if platform is None:
            return False
        return self._add(self._platforms, platform, "platform")

    def _add(self, target: Dict, item, kind: str) -> bool:
        with self._lock:
            if self._sealed:
                raise ProviderError(f"Cannot register {kind} '{item.id}': store is sealed")

            existing = target.get(item.id)
            if existing is item:
                logger.debug(f"Ignoring duplicate registration of {kind} '{item.id}'")
                return False
            if existing is not None:
                raise ProviderError(
                    f"Cannot register {kind} '{item.id}' ({type(item).__name__}): "
                    f"id already used by {type(existing).__name__}"
                )

            target[item.id] = item

        logger.debug(f"Registered {kind} '{item.id}' ({type(item).__name__})")
        return True
