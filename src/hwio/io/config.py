"""
Immutable configuration objects for I/O instances.

A config is supplied by the caller of ``Registry.create`` and is never
mutated by the registry or by the instance built from it.
"""

from dataclasses import dataclass
from typing import ClassVar, Optional

from hwio.io.iotype import IOType


@dataclass(frozen=True)
class IOConfig:
    """Configuration common to every I/O instance."""
    id: str
    name: str = ""
    description: str = ""
    provider: Optional[str] = None  # provider id hint used during resolution

    io_type: ClassVar[Optional[IOType]] = None

    def __post_init__(self):
        if not isinstance(self.id, str) or not self.id.strip():
            raise ValueError("I/O config requires a non-empty id")

    @property
    def display_name(self) -> str:
        return self.name or self.id


@dataclass(frozen=True)
class AddressConfig(IOConfig):
    """Configuration for I/O bound to a numeric address (e.g. a BCM pin)."""
    address: int = -1

    def __post_init__(self):
        super().__post_init__()
        if not isinstance(self.address, int) or self.address < 0:
            raise ValueError(f"I/O config '{self.id}' requires a non-negative address")
