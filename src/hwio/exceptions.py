"""
Exception hierarchy for hwio.

Every error raised by the framework derives from HwioError. The
``caller_error`` flag separates mistakes made by the calling code
(unknown ids, duplicate ids, calls made too early) from failures of the
environment (providers, devices) that may be worth retrying.
"""

from typing import Optional


class HwioError(Exception):
    """Base class for all hwio errors."""

    caller_error: bool = False


class RegistryError(HwioError):
    """Registry lookup, creation or destruction failed."""

    caller_error = True


class IOAlreadyExistsError(RegistryError):
    """An I/O instance with the requested id already exists."""

    def __init__(self, io_id: str):
        super().__init__(f"I/O instance '{io_id}' already exists in the registry")
        self.io_id = io_id


class IONotFoundError(RegistryError):
    """No I/O instance is registered under the requested id."""

    def __init__(self, io_id: str):
        super().__init__(f"I/O instance '{io_id}' not found in the registry")
        self.io_id = io_id


class ProviderNotFoundError(RegistryError):
    """No provider is registered under the requested id."""

    def __init__(self, provider_id: str):
        super().__init__(f"Provider '{provider_id}' not found")
        self.provider_id = provider_id


class ProviderError(HwioError):
    """A provider failed to build or operate an I/O instance."""


class NotInitializedError(HwioError):
    """The context has not completed its load phase."""

    caller_error = True


class LifecycleError(HwioError):
    """Base class for failures during initialize or shutdown."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class InitializeError(LifecycleError):
    """An I/O instance, provider or plugin failed to initialize."""


class ShutdownError(LifecycleError):
    """An I/O instance, provider or plugin failed to shut down."""


class DeviceIOError(HwioError):
    """A state read or write against the device failed."""
