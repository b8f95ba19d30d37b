"""
Simulated digital I/O.

Outputs keep an in-memory record of every level written to them;
inputs are driven by the test or application through ``mock_state``.
Nothing touches real hardware.
"""

import logging
from typing import List, Union

from hwio.exceptions import DeviceIOError
from hwio.io.digital.config import DigitalInputConfig, DigitalOutputConfig
from hwio.io.digital.input import DigitalInput
from hwio.io.digital.output import DigitalOutput
from hwio.io.digital.provider import DigitalInputProvider, DigitalOutputProvider
from hwio.io.digital.state import DigitalState, PullResistance

logger = logging.getLogger(__name__)


class MockDigitalOutput(DigitalOutput):
    """Digital output that stores writes in memory."""

    def __init__(self, provider: "MockDigitalOutputProvider", config: DigitalOutputConfig):
        super().__init__(provider, config)
        self.writes: List[DigitalState] = []
        self.fail_writes = False
        self.opened = False

    def _open(self) -> None:
        self.opened = True

    def _close(self) -> None:
        self.opened = False

    def _write_state(self, state: DigitalState) -> None:
        if self.fail_writes:
            raise DeviceIOError(f"Simulated write failure on '{self.id}'")
        self.writes.append(state)
        logger.debug(f"Mock: write pin {self.address} = {state.value}")


class MockDigitalInput(DigitalInput):
    """Digital input whose level is set with ``mock_state``."""

    def __init__(self, provider: "MockDigitalInputProvider", config: DigitalInputConfig):
        super().__init__(provider, config)
        if config.pull is PullResistance.PULL_UP:
            self._level = DigitalState.HIGH
        elif config.pull is PullResistance.PULL_DOWN:
            self._level = DigitalState.LOW
        else:
            self._level = DigitalState.UNKNOWN
        self.fail_reads = False

    def _read_state(self) -> DigitalState:
        if self.fail_reads:
            raise DeviceIOError(f"Simulated read failure on '{self.id}'")
        return self._level

    def mock_state(self, state: Union[DigitalState, int, bool]) -> "MockDigitalInput":
        """Simulate the pin being driven to ``state``."""
        self._level = DigitalState.from_value(state)
        logger.debug(f"Mock: input pin {self.address} = {self._level.name}")
        self._notify(self._level)
        return self


class MockDigitalOutputProvider(DigitalOutputProvider):
    ID = "mock-digital-output"
    NAME = "Mock Digital Output Provider"

    def create(self, config: DigitalOutputConfig) -> MockDigitalOutput:
        return MockDigitalOutput(self, config)


class MockDigitalInputProvider(DigitalInputProvider):
    ID = "mock-digital-input"
    NAME = "Mock Digital Input Provider"

    def create(self, config: DigitalInputConfig) -> MockDigitalInput:
        return MockDigitalInput(self, config)
