"""
Raspberry Pi platform.
"""

import logging
from typing import Dict

from hwio.io.iotype import IOType
from hwio.platform.base import Platform
from hwio.platform.detector import PlatformDetector
from hwio.plugins.rpigpio.digital import RPiGPIODigitalInputProvider, RPiGPIODigitalOutputProvider

logger = logging.getLogger(__name__)


class RaspberryPiPlatform(Platform):
    """Enabled on Raspberry Pi boards; prefers RPi.GPIO and smbus2."""

    ID = "raspberrypi"
    NAME = "Raspberry Pi Platform"
    PRIORITY = 100

    def enabled(self, context) -> bool:
        info = PlatformDetector.detect()
        if info.is_raspberry_pi:
            logger.debug(f"Detected {info.model or info.device.value}")
        return info.is_raspberry_pi

    def default_providers(self) -> Dict[IOType, str]:
        return {
            IOType.DIGITAL_OUTPUT: RPiGPIODigitalOutputProvider.ID,
            IOType.DIGITAL_INPUT: RPiGPIODigitalInputProvider.ID,
            IOType.I2C: "smbus-i2c",
        }
