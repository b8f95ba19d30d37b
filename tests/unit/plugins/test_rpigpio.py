"""
Tests for the RPi.GPIO plugin with a mocked RPi.GPIO module.
"""

import sys
from unittest.mock import patch

import pytest

from hwio.core.config import Config
from hwio.core.context import Context
from hwio.exceptions import InitializeError, ProviderError
from hwio.io.digital.config import DigitalInputConfig, DigitalOutputConfig
from hwio.io.digital.state import DigitalState, PullResistance
from hwio.plugins.rpigpio import (
    RPiGPIODigitalInput,
    RPiGPIODigitalOutput,
    RPiGPIOPlugin,
    import_gpio,
)


@pytest.fixture
def gpio_context(mock_gpio):
    """Context with only the RPi.GPIO plugin, on a mocked RPi.GPIO."""
    config = Config(default_platform="raspberrypi")
    ctx = Context(config).add_plugin(RPiGPIOPlugin()).initialize()
    yield ctx
    ctx.shutdown()


class TestImportGPIO:
    """Tests for import_gpio."""

    def test_sets_bcm_mode(self, mock_gpio):
        """Test BCM numbering is selected."""
        gpio = import_gpio()
        assert gpio is mock_gpio
        mock_gpio.setmode.assert_called_once_with(mock_gpio.BCM)
        mock_gpio.setwarnings.assert_called_once_with(False)

    def test_missing_module(self):
        """Test a missing RPi.GPIO raises ProviderError."""
        with patch.dict(sys.modules, {"RPi": None, "RPi.GPIO": None}):
            with pytest.raises(ProviderError):
                import_gpio()


class TestRPiGPIODigitalOutput:
    """Tests for RPi.GPIO digital outputs."""

    def test_create_sets_up_pin(self, gpio_context, mock_gpio):
        """Test the pin is configured as an output and driven to its initial state."""
        led = gpio_context.create(DigitalOutputConfig(
            id="led", address=17, initial_state=DigitalState.HIGH,
        ))
        assert isinstance(led, RPiGPIODigitalOutput)
        mock_gpio.setup.assert_called_with(17, mock_gpio.OUT)
        mock_gpio.output.assert_called_with(17, mock_gpio.HIGH)

    def test_write_levels(self, gpio_context, mock_gpio):
        """Test levels map to GPIO.HIGH/GPIO.LOW."""
        led = gpio_context.create(DigitalOutputConfig(id="led", address=17))
        led.low()
        mock_gpio.output.assert_called_with(17, mock_gpio.LOW)
        led.toggle()
        mock_gpio.output.assert_called_with(17, mock_gpio.HIGH)

    def test_destroy_cleans_up_pin(self, gpio_context, mock_gpio):
        """Test destroy applies the shutdown state and releases the pin."""
        gpio_context.create(DigitalOutputConfig(id="led", address=17, shutdown_state=DigitalState.LOW))
        gpio_context.registry.destroy("led")
        mock_gpio.output.assert_called_with(17, mock_gpio.LOW)
        mock_gpio.cleanup.assert_called_with(17)

    def test_setup_failure(self, gpio_context, mock_gpio):
        """Test a GPIO error during setup fails the create."""
        mock_gpio.setup.side_effect = RuntimeError("pin busy")
        with pytest.raises(InitializeError):
            gpio_context.create(DigitalOutputConfig(id="led", address=17))
        assert not gpio_context.registry.exists("led")

    def test_initial_write_failure_releases_pin(self, gpio_context, mock_gpio):
        """Test a failed initial write cleans the pin up before raising."""
        mock_gpio.output.side_effect = RuntimeError("write failed")
        with pytest.raises(InitializeError):
            gpio_context.create(DigitalOutputConfig(id="led", address=17, initial_state=DigitalState.HIGH))
        mock_gpio.cleanup.assert_called_once_with(17)
        assert not gpio_context.registry.exists("led")


class TestRPiGPIODigitalInput:
    """Tests for RPi.GPIO digital inputs."""

    def test_create_sets_up_pin(self, gpio_context, mock_gpio):
        """Test the pin is configured with pull and edge detection."""
        mock_gpio.input.return_value = 1
        button = gpio_context.create(DigitalInputConfig(
            id="button", address=4, pull=PullResistance.PULL_UP, debounce_us=5000,
        ))
        assert isinstance(button, RPiGPIODigitalInput)
        mock_gpio.setup.assert_called_with(4, mock_gpio.IN, pull_up_down=mock_gpio.PUD_UP)

        args, kwargs = mock_gpio.add_event_detect.call_args
        assert args == (4, mock_gpio.BOTH)
        assert kwargs["bouncetime"] == 5
        assert button.state is DigitalState.HIGH

    def test_edge_callback_dispatches(self, gpio_context, mock_gpio):
        """Test edges reported by RPi.GPIO reach listeners."""
        mock_gpio.input.return_value = 0
        button = gpio_context.create(DigitalInputConfig(id="button", address=4))
        callback = mock_gpio.add_event_detect.call_args[1]["callback"]

        seen = []
        button.add_listener(lambda e: seen.append(e.state))

        mock_gpio.input.return_value = 1
        callback(4)
        callback(4)
        mock_gpio.input.return_value = 0
        callback(4)

        assert seen == [DigitalState.HIGH, DigitalState.LOW]

    def test_destroy_removes_edge_detection(self, gpio_context, mock_gpio):
        """Test destroy stops edge detection and releases the pin."""
        mock_gpio.input.return_value = 0
        gpio_context.create(DigitalInputConfig(id="button", address=4))
        gpio_context.registry.destroy("button")
        mock_gpio.remove_event_detect.assert_called_once_with(4)
        mock_gpio.cleanup.assert_called_with(4)

    def test_read_failure_disarms_edge_detection(self, gpio_context, mock_gpio):
        """Test a failed first read after arming edge detection releases the pin."""
        mock_gpio.input.side_effect = RuntimeError("read failed")
        with pytest.raises(InitializeError):
            gpio_context.create(DigitalInputConfig(id="button", address=4))
        mock_gpio.add_event_detect.assert_called_once()
        mock_gpio.remove_event_detect.assert_called_once_with(4)
        mock_gpio.cleanup.assert_called_once_with(4)
        assert not gpio_context.registry.exists("button")


class TestRPiGPIOWithoutLibrary:
    """Tests for the plugin on machines without RPi.GPIO."""

    def test_plugin_loads_but_create_fails(self, caplog):
        """Test the providers register and creation raises ProviderError."""
        with patch.dict(sys.modules, {"RPi": None, "RPi.GPIO": None}):
            ctx = Context().add_plugin(RPiGPIOPlugin()).initialize()
            assert ctx.providers.exists("rpigpio-digital-output")
            with pytest.raises(ProviderError):
                ctx.create(DigitalOutputConfig(id="led", address=17))
            ctx.shutdown()
        assert "RPi.GPIO not available" in caplog.text
