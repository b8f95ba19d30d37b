"""
Board detection.

Detects the hardware hwio is running on so platforms can decide whether
they apply.
"""

import os
import platform
from dataclasses import dataclass
from enum import Enum
from typing import Optional

MODEL_PATH = "/proc/device-tree/model"


class DeviceType(Enum):
    """Supported board types."""
    RASPBERRY_PI_5 = "rpi5"
    RASPBERRY_PI_4 = "rpi4"
    RASPBERRY_PI_3 = "rpi3"
    RASPBERRY_PI_ZERO = "rpi0"
    PC = "pc"
    UNKNOWN = "unknown"


class Architecture(Enum):
    """CPU architectures."""
    ARM64 = "aarch64"
    AMD64 = "x86_64"
    ARM32 = "armv7l"
    UNKNOWN = "unknown"


@dataclass
class PlatformInfo:
    """Information about the current board."""
    device: DeviceType = DeviceType.UNKNOWN
    arch: Architecture = Architecture.UNKNOWN
    model: str = ""
    has_gpio: bool = False
    has_i2c: bool = False

    @property
    def is_raspberry_pi(self) -> bool:
        return self.device in (
            DeviceType.RASPBERRY_PI_5,
            DeviceType.RASPBERRY_PI_4,
            DeviceType.RASPBERRY_PI_3,
            DeviceType.RASPBERRY_PI_ZERO,
        )


class PlatformDetector:
    """Detects and caches board information."""

    _cached_info: Optional[PlatformInfo] = None

    @classmethod
    def detect(cls, force_refresh: bool = False) -> PlatformInfo:
        """
        Detect the current board.

        Args:
            force_refresh: If True, bypass cache and re-detect.

        Returns:
            PlatformInfo with detected capabilities.
        """
        if cls._cached_info is not None and not force_refresh:
            return cls._cached_info

        info = PlatformInfo()
        info.arch = cls._detect_architecture()
        info.model = cls._read_model()
        info.device = cls._detect_device(info.model)
        info.has_gpio = cls._detect_gpio()
        info.has_i2c = cls._detect_i2c()

        cls._cached_info = info
        return info

    @staticmethod
    def _detect_architecture() -> Architecture:
        """Detect CPU architecture."""
        machine = platform.machine().lower()
        if machine in ("aarch64", "arm64"):
            return Architecture.ARM64
        elif machine in ("x86_64", "amd64"):
            return Architecture.AMD64
        elif machine.startswith("armv7"):
            return Architecture.ARM32
        return Architecture.UNKNOWN

    @staticmethod
    def _read_model() -> str:
        """Read the device tree model string, empty if unavailable."""
        if not os.path.exists(MODEL_PATH):
            return ""
        try:
            with open(MODEL_PATH, "rb") as f:
                return f.read().decode("utf-8", errors="ignore").strip("\x00").strip()
        except OSError:
            return ""

    @staticmethod
    def _detect_device(model: str) -> DeviceType:
        """Map a model string to a board type."""
        if "Raspberry Pi 5" in model:
            return DeviceType.RASPBERRY_PI_5
        elif "Raspberry Pi 4" in model:
            return DeviceType.RASPBERRY_PI_4
        elif "Raspberry Pi 3" in model:
            return DeviceType.RASPBERRY_PI_3
        elif "Raspberry Pi Zero" in model:
            return DeviceType.RASPBERRY_PI_ZERO

        if platform.machine() in ("x86_64", "amd64"):
            return DeviceType.PC

        return DeviceType.UNKNOWN

    @staticmethod
    def _detect_gpio() -> bool:
        """Check if GPIO is available."""
        return os.path.exists("/sys/class/gpio") or os.path.exists("/dev/gpiochip0")

    @staticmethod
    def _detect_i2c() -> bool:
        """Check if an I2C bus device node exists."""
        return any(os.path.exists(f"/dev/i2c-{bus}") for bus in range(0, 3))


def get_platform_info() -> PlatformInfo:
    """Convenience function to get board information."""
    return PlatformDetector.detect()
