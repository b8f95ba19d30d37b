"""
Core runtime: configuration and the context.
"""

from hwio.core.config import Config, LoggingConfig, get_config_path, load_config
from hwio.core.context import Context, ContextState, load_plugin

__all__ = [
    "Config",
    "LoggingConfig",
    "load_config",
    "get_config_path",
    "Context",
    "ContextState",
    "load_plugin",
]
