"""
Tests for providers and the providers view.
"""

import pytest

from hwio.exceptions import ProviderNotFoundError, RegistryError
from hwio.io.config import IOConfig
from hwio.io.digital.config import DigitalInputConfig, DigitalOutputConfig
from hwio.io.i2c.config import I2CConfig
from hwio.io.iotype import IOType
from hwio.plugins.mock import MockDigitalOutputProvider


class TestProvider:
    """Tests for Provider base behaviour."""

    def test_class_defaults(self):
        """Test id and name default to the class attributes."""
        provider = MockDigitalOutputProvider()
        assert provider.id == "mock-digital-output"
        assert provider.name == "Mock Digital Output Provider"
        assert provider.io_type == IOType.DIGITAL_OUTPUT

    def test_overrides(self):
        """Test id and name can be overridden."""
        provider = MockDigitalOutputProvider(id="bench", name="Bench outputs")
        assert provider.id == "bench"
        assert provider.name == "Bench outputs"

    def test_supports(self):
        """Test supports matches on I/O type and config class."""
        provider = MockDigitalOutputProvider()
        assert provider.supports(DigitalOutputConfig(id="led", address=1))
        assert not provider.supports(DigitalInputConfig(id="btn", address=1))
        assert not provider.supports(I2CConfig(id="i2c", device=0x20))
        assert not provider.supports(IOConfig(id="plain"))

    def test_describe(self):
        """Test provider descriptor."""
        descriptor = MockDigitalOutputProvider().describe()
        assert descriptor.category == "PROVIDER"
        assert descriptor.id == "mock-digital-output"
        assert descriptor.description == "digital_output"


class TestProvidersView:
    """Tests for the Providers view on an initialized context."""

    def test_all(self, context):
        """Test all mock providers are listed."""
        assert set(context.providers.all()) == {
            "mock-digital-output",
            "mock-digital-input",
            "mock-i2c",
        }
        assert len(context.providers) == 3

    def test_get_and_exists(self, context):
        """Test lookup by id."""
        assert context.providers.exists("mock-i2c")
        assert context.providers.get("mock-i2c").io_type == IOType.I2C

    def test_get_unknown(self, context):
        """Test unknown ids raise a registry error."""
        assert not context.providers.exists("nope")
        with pytest.raises(ProviderNotFoundError) as excinfo:
            context.providers.get("nope")
        assert isinstance(excinfo.value, RegistryError)
        assert excinfo.value.provider_id == "nope"

    def test_of_type(self, context):
        """Test filtering by I/O type."""
        providers = context.providers.of_type(IOType.DIGITAL_INPUT)
        assert [p.id for p in providers] == ["mock-digital-input"]

    def test_providers_initialized_with_context(self, context):
        """Test providers are bound to the context after initialize."""
        for provider in context.providers.all().values():
            assert provider.context is context

    def test_describe(self, context):
        """Test providers descriptor."""
        descriptor = context.providers.describe()
        assert descriptor.category == "PROVIDERS"
        assert descriptor.quantity == 3
        assert descriptor.size == 3
