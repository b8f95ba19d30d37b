"""
I/O instances and their configuration.

Category packages (``hwio.io.digital``, ``hwio.io.i2c``) build on the
base types exported here.
"""

from hwio.io.base import IO
from hwio.io.config import AddressConfig, IOConfig
from hwio.io.iotype import IOType
from hwio.io.listeners import ListenerSet, ListenerToken

__all__ = [
    "IO",
    "IOConfig",
    "AddressConfig",
    "IOType",
    "ListenerSet",
    "ListenerToken",
]
