"""
Base class for all I/O instances.

An I/O instance is one addressable device endpoint built by a provider
and tracked by the registry. This module holds the lifecycle shared by
every category: identity, configuration, provider reference and the
initialize/shutdown bookkeeping.
"""

import logging
from abc import ABC
from typing import TYPE_CHECKING, Generic, Optional, TypeVar

from hwio.common.descriptor import Descriptor
from hwio.io.config import IOConfig

if TYPE_CHECKING:
    from hwio.core.context import Context
    from hwio.provider.base import Provider

logger = logging.getLogger(__name__)

C = TypeVar("C", bound=IOConfig)


class IO(ABC, Generic[C]):
    """
    Runtime object returned by the registry.

    Subclasses hook device setup and release through ``_open`` and
    ``_close``; ``initialize`` and ``shutdown`` fix the ordering around
    those hooks.
    """

    category: str = "IO"

    def __init__(self, provider: "Provider", config: C):
        self._provider = provider
        self._config = config
        self._context: Optional["Context"] = None
        self._initialized = False
        self._shutdown = False

    @property
    def id(self) -> str:
        return self._config.id

    @property
    def name(self) -> str:
        return self._config.display_name

    @property
    def description(self) -> str:
        return self._config.description

    @property
    def config(self) -> C:
        return self._config

    @property
    def provider(self) -> "Provider":
        return self._provider

    @property
    def context(self) -> Optional["Context"]:
        return self._context

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    @property
    def is_shutdown(self) -> bool:
        return self._shutdown

    def initialize(self, context: "Context") -> "IO":
        """Bind the instance to its context."""
        self._context = context
        self._initialized = True
        logger.debug(f"Initialized {self.category} '{self.id}' ({type(self).__name__})")
        return self

    def shutdown(self, context: "Context") -> "IO":
        """Release the instance; it must not be used afterwards."""
        self._shutdown = True
        logger.debug(f"Shut down {self.category} '{self.id}'")
        return self

    def _open(self) -> None:
        """Acquire device resources. Called during initialize."""

    def _close(self) -> None:
        """Release device resources. Called during shutdown."""

    def _close_quietly(self) -> None:
        """Release device resources after a failure; secondary errors are only logged."""
        try:
            self._close()
        except Exception as e:
            logger.error(f"Failed to release {self.category} '{self.id}' after error: {e}")

    def describe(self) -> Descriptor:
        return Descriptor(
            category=self.category,
            name=self.name,
            id=self.id,
            type=type(self).__name__,
            description=self.description,
        )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id!r} provider={self._provider.id!r}>"
