"""
Plugin loading: the store, the registration service and the plugin ABC.
"""

from hwio.plugin.base import Plugin
from hwio.plugin.service import PluginService
from hwio.plugin.store import ProviderStore

__all__ = [
    "Plugin",
    "PluginService",
    "ProviderStore",
]
