"""
Provider base classes for digital I/O.
"""

from abc import abstractmethod
from typing import ClassVar, Type

from hwio.io.digital.config import DigitalInputConfig, DigitalOutputConfig
from hwio.io.digital.input import DigitalInput
from hwio.io.digital.output import DigitalOutput
from hwio.io.iotype import IOType
from hwio.provider.base import Provider


class DigitalOutputProvider(Provider):
    """Provider of digital outputs."""

    io_type: ClassVar[IOType] = IOType.DIGITAL_OUTPUT
    config_type: ClassVar[Type[DigitalOutputConfig]] = DigitalOutputConfig

    @abstractmethod
    def create(self, config: DigitalOutputConfig) -> DigitalOutput:
        pass


class DigitalInputProvider(Provider):
    """Provider of digital inputs."""

    io_type: ClassVar[IOType] = IOType.DIGITAL_INPUT
    config_type: ClassVar[Type[DigitalInputConfig]] = DigitalInputConfig

    @abstractmethod
    def create(self, config: DigitalInputConfig) -> DigitalInput:
        pass
