"""
Simulation platform.
"""

from typing import Dict

from hwio.io.iotype import IOType
from hwio.platform.base import Platform
from hwio.plugins.mock.digital import MockDigitalInputProvider, MockDigitalOutputProvider
from hwio.plugins.mock.i2c import MockI2CProvider


class MockPlatform(Platform):
    """Always enabled, lowest priority: used when no real board is detected."""

    ID = "mock-platform"
    NAME = "Mock Platform"
    PRIORITY = 0

    def enabled(self, context) -> bool:
        return True

    def default_providers(self) -> Dict[IOType, str]:
        return {
            IOType.DIGITAL_OUTPUT: MockDigitalOutputProvider.ID,
            IOType.DIGITAL_INPUT: MockDigitalInputProvider.ID,
            IOType.I2C: MockI2CProvider.ID,
        }
