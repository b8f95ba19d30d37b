"""
I2C on Linux through smbus2.

One SMBus handle is opened per I2C instance and closed on shutdown.
Bus errors surface from smbus2 as OSError and are raised as
DeviceIOError.
"""

import logging
from typing import Any, Optional

from hwio.exceptions import DeviceIOError, ProviderError
from hwio.io.i2c.config import I2CConfig
from hwio.io.i2c.i2c import I2C, I2CProvider

logger = logging.getLogger(__name__)


def import_smbus() -> Any:
    """
    Import smbus2.

    Raises:
        ProviderError: If smbus2 is not installed.
    """
    try:
        import smbus2
    except ImportError as e:
        raise ProviderError(f"smbus2 not available: {e}") from e
    return smbus2


class SMBusI2C(I2C):
    """I2C device on a Linux /dev/i2c-N bus."""

    def __init__(self, provider: "SMBusI2CProvider", config: I2CConfig, smbus: Any):
        super().__init__(provider, config)
        self._smbus = smbus
        self._bus: Optional[Any] = None

    def _open(self) -> None:
        try:
            self._bus = self._smbus.SMBus(self.bus)
        except OSError as e:
            raise DeviceIOError(f"Failed to open I2C bus {self.bus}: {e}") from e
        logger.debug(f"Opened I2C bus {self.bus} for device 0x{self.device:02x}")

    def _close(self) -> None:
        if self._bus is None:
            return
        try:
            self._bus.close()
        except OSError as e:
            raise DeviceIOError(f"Failed to close I2C bus {self.bus}: {e}") from e
        finally:
            self._bus = None

    def _handle(self) -> Any:
        if self._bus is None:
            raise DeviceIOError(f"I2C device '{self.id}' is not open")
        return self._bus

    def read_byte(self) -> int:
        try:
            return self._handle().read_byte(self.device)
        except OSError as e:
            raise DeviceIOError(f"I2C read from 0x{self.device:02x} failed: {e}") from e

    def write_byte(self, value: int) -> None:
        self._check_byte(value)
        try:
            self._handle().write_byte(self.device, value)
        except OSError as e:
            raise DeviceIOError(f"I2C write to 0x{self.device:02x} failed: {e}") from e

    def read_register(self, register: int) -> int:
        self._check_byte(register, "register")
        try:
            return self._handle().read_byte_data(self.device, register)
        except OSError as e:
            raise DeviceIOError(
                f"I2C read of register 0x{register:02x} on 0x{self.device:02x} failed: {e}"
            ) from e

    def write_register(self, register: int, value: int) -> None:
        self._check_byte(register, "register")
        self._check_byte(value)
        try:
            self._handle().write_byte_data(self.device, register, value)
        except OSError as e:
            raise DeviceIOError(
                f"I2C write of register 0x{register:02x} on 0x{self.device:02x} failed: {e}"
            ) from e

    def read_block(self, register: int, length: int) -> bytes:
        self._check_byte(register, "register")
        try:
            return bytes(self._handle().read_i2c_block_data(self.device, register, length))
        except OSError as e:
            raise DeviceIOError(f"I2C block read on 0x{self.device:02x} failed: {e}") from e

    def write_block(self, register: int, data: bytes) -> None:
        self._check_byte(register, "register")
        try:
            self._handle().write_i2c_block_data(self.device, register, list(data))
        except OSError as e:
            raise DeviceIOError(f"I2C block write on 0x{self.device:02x} failed: {e}") from e


class SMBusI2CProvider(I2CProvider):
    ID = "smbus-i2c"
    NAME = "smbus2 I2C Provider"

    def create(self, config: I2CConfig) -> SMBusI2C:
        return SMBusI2C(self, config, import_smbus())
