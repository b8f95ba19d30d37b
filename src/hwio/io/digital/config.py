"""
Configuration for digital inputs and outputs.
"""

from dataclasses import dataclass
from typing import ClassVar, Optional

from hwio.io.config import AddressConfig
from hwio.io.digital.state import DigitalState, PullResistance
from hwio.io.iotype import IOType


@dataclass(frozen=True)
class DigitalOutputConfig(AddressConfig):
    """Digital output configuration."""
    initial_state: Optional[DigitalState] = None
    shutdown_state: Optional[DigitalState] = None
    on_state: DigitalState = DigitalState.HIGH

    io_type: ClassVar[IOType] = IOType.DIGITAL_OUTPUT

    def __post_init__(self):
        super().__post_init__()
        if self.on_state is DigitalState.UNKNOWN:
            raise ValueError(f"Digital output '{self.id}' on_state must be HIGH or LOW")

    @property
    def off_state(self) -> DigitalState:
        return self.on_state.inverse()


@dataclass(frozen=True)
class DigitalInputConfig(AddressConfig):
    """Digital input configuration."""
    pull: PullResistance = PullResistance.OFF
    debounce_us: int = 0

    io_type: ClassVar[IOType] = IOType.DIGITAL_INPUT

    def __post_init__(self):
        super().__post_init__()
        if self.debounce_us < 0:
            raise ValueError(f"Digital input '{self.id}' debounce must not be negative")
