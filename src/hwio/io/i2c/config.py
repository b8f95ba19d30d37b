"""
I2C device configuration.
"""

from dataclasses import dataclass
from typing import ClassVar

from hwio.io.config import IOConfig
from hwio.io.iotype import IOType

# Valid 7-bit addresses (0x00-0x02 and 0x78-0x7F are reserved)
MIN_DEVICE_ADDRESS = 0x03
MAX_DEVICE_ADDRESS = 0x77


@dataclass(frozen=True)
class I2CConfig(IOConfig):
    """Configuration of one device on an I2C bus."""
    bus: int = 1
    device: int = 0

    io_type: ClassVar[IOType] = IOType.I2C

    def __post_init__(self):
        super().__post_init__()
        if self.bus < 0:
            raise ValueError(f"I2C config '{self.id}' bus must not be negative")
        if not MIN_DEVICE_ADDRESS <= self.device <= MAX_DEVICE_ADDRESS:
            raise ValueError(
                f"I2C config '{self.id}' device address 0x{self.device:02x} "
                f"outside 0x{MIN_DEVICE_ADDRESS:02x}-0x{MAX_DEVICE_ADDRESS:02x}"
            )
