"""
I/O providers.

Each provider implements the Provider interface for one I/O category
and one access path.
"""

from hwio.io.iotype import IOType
from hwio.provider.base import Provider
from hwio.provider.providers import Providers

__all__ = [
    "IOType",
    "Provider",
    "Providers",
]
