"""
Abstract base class for plugins.

A plugin bundles providers and platforms for one access path and
registers them through the PluginService while the context loads.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hwio.core.context import Context
    from hwio.plugin.service import PluginService


class Plugin(ABC):
    """Base class for all plugins."""

    @property
    def name(self) -> str:
        return type(self).__name__

    @abstractmethod
    def initialize(self, service: "PluginService") -> None:
        """Register this plugin's providers and platforms."""
        pass

    def shutdown(self, context: "Context") -> None:
        """Release plugin-wide resources."""
