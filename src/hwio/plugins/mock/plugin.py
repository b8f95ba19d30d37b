"""
Mock plugin registration.
"""

from hwio.plugin.base import Plugin
from hwio.plugin.service import PluginService
from hwio.plugins.mock.digital import MockDigitalInputProvider, MockDigitalOutputProvider
from hwio.plugins.mock.i2c import MockI2CProvider
from hwio.plugins.mock.platform import MockPlatform


class MockPlugin(Plugin):
    """Registers the simulated providers and the mock platform."""

    def initialize(self, service: PluginService) -> None:
        service.register(
            MockDigitalOutputProvider(),
            MockDigitalInputProvider(),
            MockI2CProvider(),
            MockPlatform(),
        )
