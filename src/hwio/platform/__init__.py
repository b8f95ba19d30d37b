"""
Hardware platforms and board detection.
"""

from hwio.platform.base import Platform
from hwio.platform.detector import (
    Architecture,
    DeviceType,
    PlatformDetector,
    PlatformInfo,
    get_platform_info,
)
from hwio.platform.platforms import Platforms

__all__ = [
    "Platform",
    "Platforms",
    "Architecture",
    "DeviceType",
    "PlatformDetector",
    "PlatformInfo",
    "get_platform_info",
]
