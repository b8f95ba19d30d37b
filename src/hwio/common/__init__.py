"""
Shared helpers used across hwio.
"""

from hwio.common.descriptor import Descriptor
from hwio.common.timeunit import TimeUnit, to_millis

__all__ = [
    "Descriptor",
    "TimeUnit",
    "to_millis",
]
