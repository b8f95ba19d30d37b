"""
Tests for the mock plugin.
"""

from hwio.io.iotype import IOType
from hwio.plugin.service import PluginService
from hwio.plugin.store import ProviderStore
from hwio.core.context import Context
from hwio.plugins.mock import MockPlatform, MockPlugin


class TestMockPlugin:
    """Tests for MockPlugin registration."""

    def test_registers_providers_and_platform(self):
        """Test all mock providers and the platform are registered."""
        store = ProviderStore()
        MockPlugin().initialize(PluginService(Context(), store))
        assert list(store.providers) == ["mock-digital-output", "mock-digital-input", "mock-i2c"]
        assert list(store.platforms) == ["mock-platform"]

    def test_name(self):
        """Test plugin name defaults to the class name."""
        assert MockPlugin().name == "MockPlugin"


class TestMockPlatform:
    """Tests for MockPlatform."""

    def test_always_enabled(self):
        """Test the mock platform is always enabled at the lowest priority."""
        platform = MockPlatform()
        assert platform.enabled(None) is True
        assert platform.priority == 0

    def test_default_providers(self):
        """Test the mock platform prefers the mock providers."""
        defaults = MockPlatform().default_providers()
        assert defaults[IOType.DIGITAL_OUTPUT] == "mock-digital-output"
        assert defaults[IOType.DIGITAL_INPUT] == "mock-digital-input"
        assert defaults[IOType.I2C] == "mock-i2c"
