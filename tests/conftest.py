"""
Pytest configuration and shared fixtures for hwio tests.
"""

import os
import sys
import tempfile
from pathlib import Path
from typing import Generator
from unittest.mock import MagicMock, patch

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from hwio.core.context import Context  # noqa: E402
from hwio.platform.detector import PlatformDetector  # noqa: E402
from hwio.plugins.mock import MockPlugin  # noqa: E402


# ============================================================================
# Temporary Directory Fixtures
# ============================================================================

@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_config_file(temp_dir: Path) -> Path:
    """Create a temporary config file."""
    config_path = temp_dir / "config.yaml"
    config_path.write_text("""
version: 1
plugins:
  - hwio.plugins.mock:MockPlugin
default_platform: mock-platform
default_providers:
  digital_output: mock-digital-output
logging:
  level: DEBUG
""")
    return config_path


# ============================================================================
# Context Fixtures
# ============================================================================

@pytest.fixture
def context() -> Generator[Context, None, None]:
    """Initialized context with only the mock plugin loaded."""
    ctx = Context().add_plugin(MockPlugin()).initialize()
    yield ctx
    ctx.shutdown()


# ============================================================================
# Mock Hardware Fixtures
# ============================================================================

@pytest.fixture
def mock_gpio():
    """Mock RPi.GPIO for testing on non-Pi systems."""
    gpio = MagicMock()
    rpi = MagicMock()
    rpi.GPIO = gpio
    with patch.dict(sys.modules, {'RPi': rpi, 'RPi.GPIO': gpio}):
        yield gpio


@pytest.fixture
def mock_smbus2():
    """Mock smbus2 for testing without an I2C bus."""
    smbus2 = MagicMock()
    with patch.dict(sys.modules, {'smbus2': smbus2}):
        yield smbus2


@pytest.fixture(autouse=True)
def reset_platform_detector():
    """Clear cached board detection between tests."""
    PlatformDetector._cached_info = None
    yield
    PlatformDetector._cached_info = None


# ============================================================================
# Clean Environment Fixture
# ============================================================================

@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Ensure clean environment for each test."""
    # Remove any hwio-specific env vars that might interfere
    for key in list(os.environ.keys()):
        if key.startswith("HWIO_"):
            monkeypatch.delenv(key, raising=False)
