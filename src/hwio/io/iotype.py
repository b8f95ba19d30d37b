"""
I/O categories.
"""

from enum import Enum


class IOType(Enum):
    """Categories of I/O a provider can create."""
    DIGITAL_OUTPUT = "digital_output"
    DIGITAL_INPUT = "digital_input"
    I2C = "i2c"

    @classmethod
    def parse(cls, value: str) -> "IOType":
        """Look up a category by value or name (case-insensitive)."""
        normalized = value.strip().lower().replace("-", "_")
        for member in cls:
            if member.value == normalized:
                return member
        raise ValueError(f"Unknown I/O type: {value}")
