"""
Read-only view over the registered platforms.
"""

import logging
from typing import TYPE_CHECKING, Dict, Optional

from hwio.common.descriptor import Descriptor
from hwio.platform.base import Platform

if TYPE_CHECKING:
    from hwio.core.context import Context
    from hwio.plugin.store import ProviderStore

logger = logging.getLogger(__name__)


class Platforms:
    """Lookup of platforms held by a ProviderStore."""

    def __init__(self, store: "ProviderStore", context: "Context"):
        self._store = store
        self._context = context

    def all(self) -> Dict[str, Platform]:
        """Get all platforms keyed by id."""
        return dict(self._store.platforms)

    def exists(self, platform_id: str) -> bool:
        return platform_id in self._store.platforms

    def get(self, platform_id: str) -> Optional[Platform]:
        return self._store.platforms.get(platform_id)

    def default(self) -> Optional[Platform]:
        """
        Select the platform to use for provider defaults.

        A platform id set in configuration wins; otherwise the enabled
        platform with the highest priority is chosen.

        Returns:
            The selected platform, or None if no platform is enabled.
        """
        configured = self._context.config.default_platform
        if configured and configured != "auto":
            platform = self.get(configured)
            if platform is not None:
                return platform
            logger.warning(f"Configured platform '{configured}' is not registered, auto-selecting")

        candidates = []
        for platform in self._store.platforms.values():
            try:
                if platform.enabled(self._context):
                    candidates.append(platform)
            except Exception as e:
                logger.error(f"Failed to probe platform '{platform.id}': {e}")

        if not candidates:
            return None
        return max(candidates, key=lambda p: p.priority)

    def __len__(self) -> int:
        return len(self._store.platforms)

    def describe(self) -> Descriptor:
        platforms = self._store.platforms
        descriptor = Descriptor(
            category="PLATFORMS",
            name="Hardware Platforms",
            quantity=len(platforms),
            type=type(self).__name__,
        )
        for platform in platforms.values():
            descriptor.add(platform.describe())
        return descriptor
