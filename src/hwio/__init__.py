"""
hwio - Hardware I/O registry for Raspberry Pi and Linux boards

A process-wide registry that creates, tracks and tears down typed I/O
instances (digital outputs, digital inputs, I2C devices), each backed by
a provider chosen at runtime from the loaded plugins.

Supports:
- RPi.GPIO digital I/O on Raspberry Pi
- smbus2 I2C on Linux
- A simulation plugin for development and tests
"""

__version__ = "0.1.0"
__author__ = "hwio Team"

import threading
from typing import Iterable, Optional

from hwio.core.config import Config, load_config
from hwio.core.context import Context, ContextState
from hwio.exceptions import (
    DeviceIOError,
    HwioError,
    InitializeError,
    IOAlreadyExistsError,
    IONotFoundError,
    NotInitializedError,
    ProviderError,
    ProviderNotFoundError,
    RegistryError,
    ShutdownError,
)
from hwio.plugin.base import Plugin

_context_instance: Optional[Context] = None
_context_lock = threading.Lock()


def initialize(config_path: Optional[str] = None, plugins: Optional[Iterable[Plugin]] = None) -> Context:
    """
    Create and initialize the process-wide context.

    Args:
        config_path: Path to config file. If None, searches default locations.
        plugins: Plugins to load in addition to those named in the config.

    Returns:
        The initialized context. If one is already running it is returned as is.
    """
    global _context_instance
    with _context_lock:
        if _context_instance is not None and _context_instance.is_initialized:
            return _context_instance

        context = Context(load_config(config_path))
        for plugin in plugins or []:
            context.add_plugin(plugin)
        context.initialize()
        _context_instance = context
        return context


def context() -> Context:
    """
    Get the process-wide context.

    Raises:
        NotInitializedError: If initialize() has not been called.
    """
    instance = _context_instance
    if instance is None or not instance.is_initialized:
        raise NotInitializedError("hwio is not initialized, call hwio.initialize() first")
    return instance


def terminate() -> None:
    """Shut down the process-wide context, if any."""
    global _context_instance
    with _context_lock:
        instance = _context_instance
        _context_instance = None
    if instance is not None:
        instance.shutdown()


__all__ = [
    "Config",
    "Context",
    "ContextState",
    "Plugin",
    "initialize",
    "context",
    "terminate",
    "HwioError",
    "RegistryError",
    "IOAlreadyExistsError",
    "IONotFoundError",
    "ProviderNotFoundError",
    "ProviderError",
    "NotInitializedError",
    "InitializeError",
    "ShutdownError",
    "DeviceIOError",
    "__version__",
]
