"""
I2C bus devices.
"""

from hwio.io.i2c.config import I2CConfig
from hwio.io.i2c.i2c import I2C, I2CProvider

__all__ = [
    "I2C",
    "I2CConfig",
    "I2CProvider",
]
