"""
In-memory simulation plugin for development and tests.
"""

from hwio.plugins.mock.digital import (
    MockDigitalInput,
    MockDigitalInputProvider,
    MockDigitalOutput,
    MockDigitalOutputProvider,
)
from hwio.plugins.mock.i2c import MockI2C, MockI2CProvider
from hwio.plugins.mock.platform import MockPlatform
from hwio.plugins.mock.plugin import MockPlugin

__all__ = [
    "MockPlugin",
    "MockPlatform",
    "MockDigitalOutput",
    "MockDigitalOutputProvider",
    "MockDigitalInput",
    "MockDigitalInputProvider",
    "MockI2C",
    "MockI2CProvider",
]
