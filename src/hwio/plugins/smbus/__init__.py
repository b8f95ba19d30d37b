"""
smbus2 plugin: I2C on Linux.
"""

from hwio.plugin.base import Plugin
from hwio.plugin.service import PluginService
from hwio.plugins.smbus.i2c import SMBusI2C, SMBusI2CProvider, import_smbus


class SMBusPlugin(Plugin):
    """Registers the smbus2 I2C provider."""

    def initialize(self, service: PluginService) -> None:
        service.register(SMBusI2CProvider())


__all__ = [
    "SMBusPlugin",
    "SMBusI2C",
    "SMBusI2CProvider",
    "import_smbus",
]
