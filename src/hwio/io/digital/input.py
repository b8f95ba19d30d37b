"""
Digital input endpoint.
"""

import logging
import threading
from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Union

from hwio.common.descriptor import Descriptor
from hwio.exceptions import DeviceIOError, InitializeError, ShutdownError
from hwio.io.base import IO
from hwio.io.digital.config import DigitalInputConfig
from hwio.io.digital.events import DigitalStateChangeEvent
from hwio.io.digital.state import DigitalState, PullResistance
from hwio.io.listeners import ListenerSet, ListenerToken

if TYPE_CHECKING:
    from hwio.core.context import Context
    from hwio.provider.base import Provider

logger = logging.getLogger(__name__)


class DigitalInput(IO[DigitalInputConfig]):
    """
    Digital input endpoint.

    Providers implement ``_read_state`` and call ``_notify`` whenever the
    backend reports a level change (edge callback, polling, simulation).
    """

    category = "DIGITAL_INPUT"

    def __init__(self, provider: "Provider", config: DigitalInputConfig):
        super().__init__(provider, config)
        self._last_state = DigitalState.UNKNOWN
        self._lock = threading.RLock()
        self._listeners = ListenerSet(config.id)

    @property
    def address(self) -> int:
        return self._config.address

    @property
    def pull(self) -> PullResistance:
        return self._config.pull

    @abstractmethod
    def _read_state(self) -> DigitalState:
        """Read the current level from the device. Raise DeviceIOError on failure."""

    @property
    def state(self) -> DigitalState:
        """Current level read from the device, UNKNOWN if the read fails."""
        try:
            return self._read_state()
        except DeviceIOError as e:
            logger.error(f"Failed to read digital input '{self.id}': {e}")
            return DigitalState.UNKNOWN

    def is_high(self) -> bool:
        return self.state is DigitalState.HIGH

    def is_low(self) -> bool:
        return self.state is DigitalState.LOW

    def _notify(self, state: Union[DigitalState, int, bool]) -> None:
        """Record a level reported by the backend and dispatch on change."""
        new_state = DigitalState.from_value(state)
        with self._lock:
            if new_state is self._last_state:
                return
            self._last_state = new_state
            logger.debug(f"Digital input '{self.id}' -> {new_state.name}")
            self._listeners.dispatch(DigitalStateChangeEvent(self, new_state))

    def add_listener(self, listener: Callable[[DigitalStateChangeEvent], Any]) -> ListenerToken:
        """Register a state change listener (runs on the backend's thread)."""
        return self._listeners.add(listener)

    def remove_listener(self, token: ListenerToken) -> bool:
        return self._listeners.remove(token)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def initialize(self, context: "Context") -> "DigitalInput":
        super().initialize(context)
        try:
            self._open()
        except DeviceIOError as e:
            self._close_quietly()
            raise InitializeError(f"Failed to initialize digital input '{self.id}': {e}", e) from e
        return self

    def shutdown(self, context: "Context") -> "DigitalInput":
        try:
            self._close()
        except DeviceIOError as e:
            raise ShutdownError(f"Failed to shut down digital input '{self.id}': {e}", e) from e
        finally:
            self._listeners.clear()
            super().shutdown(context)
        return self

    def describe(self) -> Descriptor:
        descriptor = super().describe()
        details = f"address={self.address}, pull={self.pull.name}"
        descriptor.description = f"{descriptor.description}; {details}" if descriptor.description else details
        return descriptor
