"""
Digital levels and pull resistor settings.
"""

from enum import Enum
from typing import Union


class DigitalState(Enum):
    """Logical level of a digital I/O endpoint."""
    HIGH = 1
    LOW = 0
    UNKNOWN = -1

    def inverse(self) -> "DigitalState":
        """Return the opposite level (UNKNOWN stays UNKNOWN)."""
        if self is DigitalState.HIGH:
            return DigitalState.LOW
        if self is DigitalState.LOW:
            return DigitalState.HIGH
        return DigitalState.UNKNOWN

    @property
    def is_high(self) -> bool:
        return self is DigitalState.HIGH

    @property
    def is_low(self) -> bool:
        return self is DigitalState.LOW

    @classmethod
    def from_value(cls, value: Union[int, bool, str, "DigitalState", None]) -> "DigitalState":
        """
        Map a raw level to a DigitalState.

        Accepts 0/1, booleans, and the names "high"/"low" in any case.
        Anything else maps to UNKNOWN.
        """
        if isinstance(value, DigitalState):
            return value
        if isinstance(value, str):
            return cls.__members__.get(value.strip().upper(), cls.UNKNOWN)
        if value is True or value == 1:
            return cls.HIGH
        if value is False or value == 0:
            return cls.LOW
        return cls.UNKNOWN


class PullResistance(Enum):
    """Pull-up/down resistor settings."""
    OFF = "off"
    PULL_UP = "up"
    PULL_DOWN = "down"
