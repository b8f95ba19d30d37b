"""
RPi.GPIO plugin: digital I/O on Raspberry Pi.
"""

from hwio.plugin.base import Plugin
from hwio.plugin.service import PluginService
from hwio.plugins.rpigpio.digital import (
    RPiGPIODigitalInput,
    RPiGPIODigitalInputProvider,
    RPiGPIODigitalOutput,
    RPiGPIODigitalOutputProvider,
    import_gpio,
)
from hwio.plugins.rpigpio.platform import RaspberryPiPlatform


class RPiGPIOPlugin(Plugin):
    """Registers the RPi.GPIO providers and the Raspberry Pi platform."""

    def initialize(self, service: PluginService) -> None:
        service.register(
            RPiGPIODigitalOutputProvider(),
            RPiGPIODigitalInputProvider(),
            RaspberryPiPlatform(),
        )


__all__ = [
    "RPiGPIOPlugin",
    "RaspberryPiPlatform",
    "RPiGPIODigitalOutput",
    "RPiGPIODigitalOutputProvider",
    "RPiGPIODigitalInput",
    "RPiGPIODigitalInputProvider",
    "import_gpio",
]
