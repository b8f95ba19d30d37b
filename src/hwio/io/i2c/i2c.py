"""
I2C device endpoint.
"""

import logging
from abc import abstractmethod
from typing import TYPE_CHECKING, ClassVar, Type

from hwio.common.descriptor import Descriptor
from hwio.exceptions import DeviceIOError, InitializeError, ShutdownError
from hwio.io.base import IO
from hwio.io.i2c.config import I2CConfig
from hwio.io.iotype import IOType
from hwio.provider.base import Provider

if TYPE_CHECKING:
    from hwio.core.context import Context

logger = logging.getLogger(__name__)


class I2C(IO[I2CConfig]):
    """One device on an I2C bus. Register values are single bytes."""

    category = "I2C"

    @property
    def bus(self) -> int:
        return self._config.bus

    @property
    def device(self) -> int:
        return self._config.device

    @abstractmethod
    def read_byte(self) -> int:
        pass

    @abstractmethod
    def write_byte(self, value: int) -> None:
        pass

    @abstractmethod
    def read_register(self, register: int) -> int:
        pass

    @abstractmethod
    def write_register(self, register: int, value: int) -> None:
        pass

    @abstractmethod
    def read_block(self, register: int, length: int) -> bytes:
        pass

    @abstractmethod
    def write_block(self, register: int, data: bytes) -> None:
        pass

    @staticmethod
    def _check_byte(value: int, what: str = "value") -> int:
        if not 0 <= value <= 0xFF:
            raise ValueError(f"I2C {what} {value} is not a byte")
        return value

    def initialize(self, context: "Context") -> "I2C":
        super().initialize(context)
        try:
            self._open()
        except DeviceIOError as e:
            self._close_quietly()
            raise InitializeError(f"Failed to open I2C device '{self.id}': {e}", e) from e
        return self

    def shutdown(self, context: "Context") -> "I2C":
        try:
            self._close()
        except DeviceIOError as e:
            raise ShutdownError(f"Failed to close I2C device '{self.id}': {e}", e) from e
        finally:
            super().shutdown(context)
        return self

    def describe(self) -> Descriptor:
        descriptor = super().describe()
        details = f"bus={self.bus}, device=0x{self.device:02x}"
        descriptor.description = f"{descriptor.description}; {details}" if descriptor.description else details
        return descriptor


class I2CProvider(Provider):
    """Provider of I2C devices."""

    io_type: ClassVar[IOType] = IOType.I2C
    config_type: ClassVar[Type[I2CConfig]] = I2CConfig

    @abstractmethod
    def create(self, config: I2CConfig) -> I2C:
        pass
