"""
Digital I/O: outputs, inputs, states and events.
"""

from hwio.io.digital.config import DigitalInputConfig, DigitalOutputConfig
from hwio.io.digital.events import DigitalStateChangeEvent
from hwio.io.digital.input import DigitalInput
from hwio.io.digital.output import DigitalOutput
from hwio.io.digital.provider import DigitalInputProvider, DigitalOutputProvider
from hwio.io.digital.state import DigitalState, PullResistance

__all__ = [
    "DigitalState",
    "PullResistance",
    "DigitalStateChangeEvent",
    "DigitalOutputConfig",
    "DigitalInputConfig",
    "DigitalOutput",
    "DigitalInput",
    "DigitalOutputProvider",
    "DigitalInputProvider",
]
