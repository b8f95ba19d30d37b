"""
Simulated I2C devices backed by an in-memory register file.
"""

import logging
import threading
from typing import Dict, Optional, Tuple

from hwio.exceptions import DeviceIOError
from hwio.io.i2c.config import I2CConfig
from hwio.io.i2c.i2c import I2C, I2CProvider

logger = logging.getLogger(__name__)

REGISTER_COUNT = 256


class MockI2C(I2C):
    """
    I2C device with 256 byte-wide registers.

    ``write_byte`` sets the register pointer and ``read_byte`` reads at the
    pointer and advances it, like a typical EEPROM-style device.
    """

    def __init__(self, provider: "MockI2CProvider", config: I2CConfig, registers: bytearray):
        super().__init__(provider, config)
        self._registers = registers
        self._pointer = 0
        self._lock = threading.Lock()
        self.fail_io = False

    @property
    def registers(self) -> bytearray:
        return self._registers

    def _check(self) -> None:
        if self.fail_io:
            raise DeviceIOError(f"Simulated I2C failure on '{self.id}'")

    def _check_register(self, register: int, length: int = 1) -> None:
        self._check_byte(register, "register")
        if register + length > REGISTER_COUNT:
            raise ValueError(f"I2C access of {length} bytes at 0x{register:02x} overruns the register file")

    def read_byte(self) -> int:
        self._check()
        with self._lock:
            value = self._registers[self._pointer]
            self._pointer = (self._pointer + 1) % REGISTER_COUNT
            return value

    def write_byte(self, value: int) -> None:
        self._check()
        with self._lock:
            self._pointer = self._check_byte(value)

    def read_register(self, register: int) -> int:
        self._check()
        self._check_register(register)
        return self._registers[register]

    def write_register(self, register: int, value: int) -> None:
        self._check()
        self._check_register(register)
        self._registers[register] = self._check_byte(value)
        logger.debug(f"Mock: i2c {self.bus}/0x{self.device:02x} reg 0x{register:02x} = 0x{value:02x}")

    def read_block(self, register: int, length: int) -> bytes:
        self._check()
        self._check_register(register, length)
        return bytes(self._registers[register:register + length])

    def write_block(self, register: int, data: bytes) -> None:
        self._check()
        self._check_register(register, len(data))
        self._registers[register:register + len(data)] = bytes(data)


class MockI2CProvider(I2CProvider):
    """Provides MockI2C devices; register contents survive destroy/create."""

    ID = "mock-i2c"
    NAME = "Mock I2C Provider"

    def __init__(self, id: Optional[str] = None, name: Optional[str] = None):
        super().__init__(id, name)
        self._devices: Dict[Tuple[int, int], bytearray] = {}

    def registers(self, bus: int, device: int) -> bytearray:
        """Get the register file for a bus/device address."""
        return self._devices.setdefault((bus, device), bytearray(REGISTER_COUNT))

    def create(self, config: I2CConfig) -> MockI2C:
        return MockI2C(self, config, self.registers(config.bus, config.device))
