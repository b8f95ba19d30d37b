"""
Abstract base class for I/O providers.

A provider knows how to construct and operate one category of I/O
(digital output, digital input, I2C, ...) through one access path
(RPi.GPIO, smbus2, simulation, ...). Providers are registered by
plugins and consulted by the registry.
"""

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar, Optional, Type

from hwio.common.descriptor import Descriptor
from hwio.io.base import IO
from hwio.io.config import IOConfig
from hwio.io.iotype import IOType

if TYPE_CHECKING:
    from hwio.core.context import Context

logger = logging.getLogger(__name__)


class Provider(ABC):
    """
    Base class for all providers.

    Subclasses set ``ID``/``NAME`` defaults plus the ``io_type`` and
    ``config_type`` they handle, and implement ``create``.
    """

    ID: ClassVar[str] = ""
    NAME: ClassVar[str] = ""

    io_type: ClassVar[Optional[IOType]] = None
    config_type: ClassVar[Type[IOConfig]] = IOConfig

    def __init__(self, id: Optional[str] = None, name: Optional[str] = None):
        self._id = id or self.ID
        if not self._id:
            raise ValueError(f"{type(self).__name__} requires an id")
        self._name = name or self.NAME or self._id
        self._context: Optional["Context"] = None

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def context(self) -> Optional["Context"]:
        return self._context

    def supports(self, config: IOConfig) -> bool:
        """Check whether this provider can build an instance for ``config``."""
        return (
            self.io_type is not None
            and getattr(config, "io_type", None) == self.io_type
            and isinstance(config, self.config_type)
        )

    @abstractmethod
    def create(self, config: IOConfig) -> IO:
        """
        Build an uninitialized I/O instance.

        Args:
            config: Configuration of the instance.

        Returns:
            The new instance; the registry initializes it.
        """
        pass

    def initialize(self, context: "Context") -> "Provider":
        """Called once when the owning context initializes."""
        self._context = context
        return self

    def shutdown(self, context: "Context") -> "Provider":
        """Called once when the owning context shuts down."""
        return self

    def describe(self) -> Descriptor:
        return Descriptor(
            category="PROVIDER",
            name=self.name,
            id=self.id,
            type=type(self).__name__,
            description=self.io_type.value if self.io_type else "",
        )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id!r}>"
