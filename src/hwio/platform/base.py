"""
Abstract base class for hardware platforms.

A platform describes a board (a Raspberry Pi, a simulated bench, ...)
and names which provider to prefer for each I/O category when more
than one provider could serve a request.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar, Dict, Optional

from hwio.common.descriptor import Descriptor
from hwio.io.iotype import IOType

if TYPE_CHECKING:
    from hwio.core.context import Context


class Platform(ABC):
    """Base class for all platforms."""

    ID: ClassVar[str] = ""
    NAME: ClassVar[str] = ""
    PRIORITY: ClassVar[int] = 0

    def __init__(self, id: Optional[str] = None, name: Optional[str] = None, priority: Optional[int] = None):
        self._id = id or self.ID
        if not self._id:
            raise ValueError(f"{type(self).__name__} requires an id")
        self._name = name or self.NAME or self._id
        self._priority = self.PRIORITY if priority is None else priority
        self._context: Optional["Context"] = None

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def priority(self) -> int:
        return self._priority

    @abstractmethod
    def enabled(self, context: "Context") -> bool:
        """Check whether this platform matches the running hardware."""
        pass

    def default_providers(self) -> Dict[IOType, str]:
        """Provider id to prefer per I/O category on this platform."""
        return {}

    def initialize(self, context: "Context") -> "Platform":
        self._context = context
        return self

    def shutdown(self, context: "Context") -> "Platform":
        return self

    def describe(self) -> Descriptor:
        descriptor = Descriptor(
            category="PLATFORM",
            name=self.name,
            id=self.id,
            type=type(self).__name__,
            description=f"priority={self.priority}",
        )
        for io_type, provider_id in self.default_providers().items():
            descriptor.add(Descriptor(category="DEFAULT", name=io_type.value, id=provider_id))
        return descriptor

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id!r} priority={self.priority}>"
