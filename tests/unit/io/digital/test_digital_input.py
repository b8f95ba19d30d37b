"""
Tests for hwio.io.digital.input module.
"""

import pytest

from hwio.io.digital.config import DigitalInputConfig
from hwio.io.digital.input import DigitalInput
from hwio.io.digital.state import DigitalState, PullResistance


@pytest.fixture
def button(context):
    """Registered mock digital input on pin 4."""
    return context.create(DigitalInputConfig(id="button", address=4), DigitalInput)


class TestDigitalInput:
    """Tests for DigitalInput."""

    def test_initial_state_unknown(self, button):
        """Test a floating input reads UNKNOWN."""
        assert button.state is DigitalState.UNKNOWN

    def test_pull_up_reads_high(self, context):
        """Test the mock honours the pull resistor as resting level."""
        pin = context.create(
            DigitalInputConfig(id="pulled", address=5, pull=PullResistance.PULL_UP), DigitalInput
        )
        assert pin.is_high()
        assert pin.pull is PullResistance.PULL_UP

    def test_changes_dispatched(self, button):
        """Test listeners see each change once."""
        seen = []
        button.add_listener(lambda e: seen.append(e.state))

        button.mock_state(DigitalState.HIGH)
        button.mock_state(DigitalState.HIGH)
        button.mock_state(0)

        assert seen == [DigitalState.HIGH, DigitalState.LOW]
        assert button.is_low()

    def test_event_source(self, button):
        """Test events reference the input."""
        seen = []
        button.add_listener(seen.append)
        button.mock_state(True)
        assert seen[0].source is button

    def test_read_failure_returns_unknown(self, button, caplog):
        """Test a failed read is logged and reported as UNKNOWN."""
        button.mock_state(DigitalState.HIGH)
        button.fail_reads = True
        assert button.state is DigitalState.UNKNOWN
        assert "Failed to read" in caplog.text

    def test_listeners_cleared_on_destroy(self, context, button):
        """Test shutdown drops listeners."""
        button.add_listener(lambda e: None)
        context.registry.destroy("button")
        assert button.listener_count == 0
        assert button.is_shutdown

    def test_read_hook_required(self, context):
        """Test an input without a device hook cannot be built."""
        provider = context.providers.get("mock-digital-input")
        with pytest.raises(TypeError):
            DigitalInput(provider, DigitalInputConfig(id="bare", address=1))

    def test_describe(self, button):
        """Test descriptor contents."""
        descriptor = button.describe()
        assert descriptor.category == "DIGITAL_INPUT"
        assert "address=4" in descriptor.description
        assert "pull=OFF" in descriptor.description
