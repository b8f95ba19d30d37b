"""
Tests for hwio.io.digital.output state machine.
"""

import threading

import pytest

from hwio.exceptions import InitializeError, ShutdownError, DeviceIOError
from hwio.io.digital.config import DigitalOutputConfig
from hwio.io.digital.events import DigitalStateChangeEvent
from hwio.io.digital.output import DigitalOutput
from hwio.io.digital.state import DigitalState

H = DigitalState.HIGH
L = DigitalState.LOW


@pytest.fixture
def output(context):
    """Registered mock digital output on pin 17."""
    return context.create(DigitalOutputConfig(id="led", address=17), DigitalOutput)


@pytest.fixture
def events(output):
    """States seen by a listener on the output."""
    seen = []
    output.add_listener(lambda event: seen.append(event.state))
    return seen


class TestDigitalOutputState:
    """Tests for set_state and friends."""

    def test_starts_unknown(self, output):
        """Test a fresh output without initial state is UNKNOWN."""
        assert output.state is DigitalState.UNKNOWN
        assert not output.is_high()
        assert not output.is_low()

    def test_high_low(self, output, events):
        """Test high/low transitions fire one event each."""
        output.high()
        assert output.is_high()
        output.low()
        assert output.is_low()
        assert events == [H, L]

    def test_same_state_fires_no_event(self, output, events):
        """Test repeated writes of the same level do not notify."""
        output.high()
        output.high()
        output.set_state(True)
        assert events == [H]
        # the device is still written every time
        assert output.writes == [H, H, H]

    def test_unknown_rejected(self, output, events):
        """Test driving to UNKNOWN is rejected without side effects."""
        with pytest.raises(ValueError):
            output.set_state(DigitalState.UNKNOWN)
        assert output.writes == []
        assert events == []

    def test_toggle(self, output, events):
        """Test toggle inverts the current level."""
        output.low()
        output.toggle()
        output.toggle()
        assert events == [L, H, L]

    def test_on_off_default(self, output):
        """Test on/off map to HIGH/LOW by default."""
        output.on()
        assert output.is_high()
        output.off()
        assert output.is_low()

    def test_on_off_active_low(self, context):
        """Test on/off follow an inverted on_state."""
        relay = context.create(
            DigitalOutputConfig(id="relay", address=5, on_state=DigitalState.LOW), DigitalOutput
        )
        relay.on()
        assert relay.is_low()
        relay.off()
        assert relay.is_high()

    def test_event_carries_source(self, output):
        """Test events reference the output that changed."""
        seen = []
        output.add_listener(seen.append)
        output.high()
        assert isinstance(seen[0], DigitalStateChangeEvent)
        assert seen[0].source is output
        assert seen[0].state is H

    def test_remove_listener(self, output):
        """Test a removed listener stops receiving events."""
        seen = []
        token = output.add_listener(seen.append)
        assert output.listener_count == 1
        assert output.remove_listener(token) is True
        output.high()
        assert seen == []

    def test_listener_failure_does_not_break_transition(self, output, events):
        """Test a raising listener does not stop the transition or other listeners."""
        output.add_listener(lambda e: 1 / 0)
        later = []
        output.add_listener(lambda e: later.append(e.state))
        output.high()
        assert output.is_high()
        assert events == [H]
        assert later == [H]

    def test_write_failure_keeps_state(self, output, events):
        """Test a device failure propagates and the state is unchanged."""
        output.low()
        output.fail_writes = True
        with pytest.raises(DeviceIOError):
            output.high()
        assert output.is_low()
        assert events == [L]

    def test_describe(self, output):
        """Test descriptor contents."""
        output.high()
        descriptor = output.describe()
        assert descriptor.category == "DIGITAL_OUTPUT"
        assert descriptor.id == "led"
        assert "address=17" in descriptor.description
        assert "state=HIGH" in descriptor.description


class TestDigitalOutputLifecycle:
    """Tests for initialize/shutdown."""

    def test_initial_state_applied(self, context):
        """Test the initial state is written during create."""
        led = context.create(
            DigitalOutputConfig(id="led", address=17, initial_state=H), DigitalOutput
        )
        assert led.is_initialized
        assert led.opened
        assert led.is_high()
        assert led.writes == [H]

    def test_shutdown_state_applied_on_destroy(self, context):
        """Test destroy drives the shutdown state and closes the device."""
        led = context.create(
            DigitalOutputConfig(id="led", address=17, initial_state=H, shutdown_state=L), DigitalOutput
        )
        seen = []
        led.add_listener(seen.append)

        context.registry.destroy("led")

        assert led.is_low()
        assert led.is_shutdown
        assert not led.opened
        assert led.listener_count == 0
        assert [e.state for e in seen] == [L]

    def test_shutdown_failure_wrapped(self, context):
        """Test a device failure during shutdown raises ShutdownError."""
        led = context.create(
            DigitalOutputConfig(id="led", address=17, shutdown_state=L), DigitalOutput
        )
        led.fail_writes = True
        with pytest.raises(ShutdownError) as excinfo:
            led.shutdown(context)
        assert isinstance(excinfo.value.cause, DeviceIOError)
        # the pin is still released
        assert led.is_shutdown
        assert not led.opened
        assert led.listener_count == 0

    def test_initialize_failure_wrapped(self, context):
        """Test a device failure while applying the initial state raises InitializeError."""
        provider = context.providers.get("mock-digital-output")
        led = provider.create(DigitalOutputConfig(id="led", address=17, initial_state=H))
        led.fail_writes = True
        with pytest.raises(InitializeError):
            led.initialize(context)
        assert not led.opened

    def test_write_hook_required(self, context):
        """Test an output without a device hook cannot be built."""
        provider = context.providers.get("mock-digital-output")
        with pytest.raises(TypeError):
            DigitalOutput(provider, DigitalOutputConfig(id="bare", address=1))


class TestDigitalOutputConcurrency:
    """Tests for concurrent transitions."""

    def test_concurrent_toggles_are_not_lost(self, output, events):
        """Test every toggle from many threads produces exactly one event."""
        output.low()
        threads = [
            threading.Thread(target=lambda: [output.toggle() for _ in range(50)])
            for _ in range(4)
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        # initial low + 200 toggles, each a change
        assert len(events) == 201
        assert output.is_low()
        # consecutive events always alternate
        assert all(a is not b for a, b in zip(events, events[1:]))
