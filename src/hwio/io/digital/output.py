"""
Digital output state machine.

A DigitalOutput starts in UNKNOWN, is driven to HIGH/LOW by its
configured initial state or by the caller, and is driven to its
configured shutdown state when destroyed. Every transition that changes
the level is reported to listeners as a DigitalStateChangeEvent, in the
order the transitions happened.

Timed operations:

* ``pulse`` sets a level, blocks for an interval, then restores the
  inverse level.
* ``blink`` toggles the pin ``duration`` times, holding each level for
  ``delay``. ``duration`` counts transitions, not on/off cycles: with a
  delay of 1 s and a duration of 10 starting from HIGH the pin goes
  1-0-1-0-1-0-1-0-1-0, so an attached LED lights up 5 times, not 10::

      HIGH +-----+     +-----+     +-----+
           |     |     |     |     |     |
      LOW  +     +-----+     +-----+     +-----
           ^                                  ^
      start                                stop
            \\___/ \\___/
            delay  delay

  An odd duration therefore leaves the pin at the opposite level from
  where it started.

Both operations block the calling thread; ``pulse_async`` and
``blink_async`` run the same sequence as an asyncio task instead.
"""

import asyncio
import inspect
import logging
import threading
import time
from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Optional, Union

from hwio.common.descriptor import Descriptor
from hwio.common.timeunit import TimeUnit, to_millis
from hwio.exceptions import DeviceIOError, InitializeError, ShutdownError
from hwio.io.base import IO
from hwio.io.digital.config import DigitalOutputConfig
from hwio.io.digital.events import DigitalStateChangeEvent
from hwio.io.digital.state import DigitalState
from hwio.io.listeners import ListenerSet, ListenerToken

if TYPE_CHECKING:
    from hwio.core.context import Context
    from hwio.provider.base import Provider

logger = logging.getLogger(__name__)

Callback = Callable[[], Any]
StateListener = Callable[[DigitalStateChangeEvent], Any]


class DigitalOutput(IO[DigitalOutputConfig]):
    """
    Digital output endpoint.

    Providers subclass this and implement ``_write_state`` to drive the
    physical (or simulated) pin.
    """

    category = "DIGITAL_OUTPUT"

    def __init__(self, provider: "Provider", config: DigitalOutputConfig):
        super().__init__(provider, config)
        self._state = DigitalState.UNKNOWN
        self._lock = threading.RLock()
        self._listeners = ListenerSet(config.id)

    @property
    def address(self) -> int:
        return self._config.address

    @property
    def state(self) -> DigitalState:
        return self._state

    def is_high(self) -> bool:
        return self._state is DigitalState.HIGH

    def is_low(self) -> bool:
        return self._state is DigitalState.LOW

    # -------------------------------
    # Device hook
    # -------------------------------

    @abstractmethod
    def _write_state(self, state: DigitalState) -> None:
        """Drive the device to ``state``. Raise DeviceIOError on failure."""

    # -------------------------------
    # Lifecycle
    # -------------------------------

    def initialize(self, context: "Context") -> "DigitalOutput":
        super().initialize(context)
        try:
            self._open()
            initial = self._config.initial_state
            if initial is not None and initial is not DigitalState.UNKNOWN:
                self.set_state(initial)
        except DeviceIOError as e:
            self._close_quietly()
            raise InitializeError(f"Failed to initialize digital output '{self.id}': {e}", e) from e
        return self

    def shutdown(self, context: "Context") -> "DigitalOutput":
        """Apply the shutdown state, then release the pin even if that write failed."""
        shutdown_state = self._config.shutdown_state
        try:
            if shutdown_state is not None and shutdown_state is not DigitalState.UNKNOWN:
                self.set_state(shutdown_state)
        except DeviceIOError as e:
            self._close_quietly()
            raise ShutdownError(f"Failed to shut down digital output '{self.id}': {e}", e) from e
        else:
            try:
                self._close()
            except DeviceIOError as e:
                raise ShutdownError(f"Failed to shut down digital output '{self.id}': {e}", e) from e
        finally:
            self._listeners.clear()
            super().shutdown(context)
        return self

    # -------------------------------
    # State machine
    # -------------------------------

    def set_state(self, state: Union[DigitalState, bool, int]) -> "DigitalOutput":
        """
        Drive the output to a new level.

        The device is always written; listeners are only notified when
        the level actually changes.

        Args:
            state: HIGH or LOW (booleans and 0/1 are accepted)

        Raises:
            ValueError: If the state resolves to UNKNOWN.
            DeviceIOError: If the device write fails.
        """
        new_state = DigitalState.from_value(state)
        if new_state is DigitalState.UNKNOWN:
            raise ValueError(f"Cannot drive digital output '{self.id}' to UNKNOWN")

        with self._lock:
            self._write_state(new_state)
            if new_state is self._state:
                return self
            self._state = new_state
            logger.debug(f"Digital output '{self.id}' -> {new_state.name}")
            self._listeners.dispatch(DigitalStateChangeEvent(self, new_state))
        return self

    def high(self) -> "DigitalOutput":
        return self.set_state(DigitalState.HIGH)

    def low(self) -> "DigitalOutput":
        return self.set_state(DigitalState.LOW)

    def on(self) -> "DigitalOutput":
        """Drive the output to its configured ON state (HIGH by default)."""
        return self.set_state(self._config.on_state)

    def off(self) -> "DigitalOutput":
        """Drive the output to the inverse of its ON state (LOW by default)."""
        return self.set_state(self._config.off_state)

    def toggle(self) -> "DigitalOutput":
        with self._lock:
            return self.set_state(self._state.inverse())

    # -------------------------------
    # Listeners
    # -------------------------------

    def add_listener(self, listener: StateListener) -> ListenerToken:
        """
        Register a state change listener.

        Listeners run synchronously on the thread performing the
        transition; keep them short.
        """
        return self._listeners.add(listener)

    def remove_listener(self, token: ListenerToken) -> bool:
        return self._listeners.remove(token)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    # -------------------------------
    # Timed operations
    # -------------------------------

    @staticmethod
    def _check_level(state: DigitalState) -> DigitalState:
        state = DigitalState.from_value(state)
        if state is DigitalState.UNKNOWN:
            raise ValueError("Timed operations require a HIGH or LOW state")
        return state

    def _pulse_millis(self, interval: int, unit: TimeUnit) -> int:
        if interval <= 0:
            raise ValueError("A time interval of zero or less is not supported.")
        return to_millis(interval, unit)

    def _blink_millis(self, delay: int, duration: int, unit: TimeUnit) -> int:
        if delay <= 0:
            raise ValueError("A delay of zero or less is not supported.")
        if duration <= 0:
            raise ValueError("A duration of zero or less is not supported.")
        return to_millis(delay, unit)

    def _invoke_callback(self, callback: Optional[Callback]) -> None:
        if callback is None:
            return
        try:
            callback()
        except Exception:
            logger.exception(f"Callback for digital output '{self.id}' failed")

    async def _invoke_callback_async(self, callback: Optional[Callback]) -> None:
        if callback is None:
            return
        try:
            result = callback()
            if inspect.isawaitable(result):
                await result
        except Exception:
            logger.exception(f"Callback for digital output '{self.id}' failed")

    def pulse(
        self,
        interval: int,
        unit: TimeUnit = TimeUnit.MILLISECONDS,
        state: DigitalState = DigitalState.HIGH,
        callback: Optional[Callback] = None,
    ) -> "DigitalOutput":
        """
        Set ``state``, block for ``interval``, then set the inverse state.

        Args:
            interval: Pulse length in ``unit``; must be positive
            unit: MILLISECONDS, SECONDS, MINUTES or HOURS
            state: Level held for the pulse
            callback: Called once the pulse has ended; failures are logged

        Raises:
            ValueError: On a non-positive interval, unsupported unit or UNKNOWN state.
            DeviceIOError: If a device write fails.
        """
        millis = self._pulse_millis(interval, unit)
        state = self._check_level(state)

        self.set_state(state)
        time.sleep(millis / 1000.0)
        self.set_state(state.inverse())

        self._invoke_callback(callback)
        return self

    def blink(
        self,
        delay: int,
        duration: int,
        unit: TimeUnit = TimeUnit.MILLISECONDS,
        state: DigitalState = DigitalState.HIGH,
        callback: Optional[Callback] = None,
    ) -> "DigitalOutput":
        """
        Toggle the output ``duration`` times, holding each level for ``delay``.

        The first transition is to ``state``. See the module docstring for
        why ``duration`` is a toggle count rather than a blink count.

        Raises:
            ValueError: On non-positive delay/duration, unsupported unit or UNKNOWN state.
            DeviceIOError: If a device write fails; remaining toggles are abandoned.
        """
        millis = self._blink_millis(delay, duration, unit)
        state = self._check_level(state)
        seconds = millis / 1000.0

        self.set_state(state)
        for _ in range(duration - 1):
            time.sleep(seconds)
            self.toggle()
        time.sleep(seconds)

        self._invoke_callback(callback)
        return self

    def pulse_async(
        self,
        interval: int,
        unit: TimeUnit = TimeUnit.MILLISECONDS,
        state: DigitalState = DigitalState.HIGH,
        callback: Optional[Callback] = None,
    ) -> "asyncio.Task":
        """
        Run ``pulse`` as a task on the running event loop.

        Arguments are validated before the task is scheduled. Cancelling
        the task leaves the pin at its last-set level and skips the
        callback.

        Raises:
            ValueError: On invalid arguments.
            RuntimeError: If no event loop is running.
        """
        millis = self._pulse_millis(interval, unit)
        state = self._check_level(state)
        loop = asyncio.get_running_loop()
        return loop.create_task(self._pulse_steps(millis, state, callback), name=f"pulse:{self.id}")

    def blink_async(
        self,
        delay: int,
        duration: int,
        unit: TimeUnit = TimeUnit.MILLISECONDS,
        state: DigitalState = DigitalState.HIGH,
        callback: Optional[Callback] = None,
    ) -> "asyncio.Task":
        """Run ``blink`` as a task on the running event loop. See ``pulse_async``."""
        millis = self._blink_millis(delay, duration, unit)
        state = self._check_level(state)
        loop = asyncio.get_running_loop()
        return loop.create_task(
            self._blink_steps(millis, duration, state, callback), name=f"blink:{self.id}"
        )

    async def _pulse_steps(self, millis: int, state: DigitalState, callback: Optional[Callback]) -> "DigitalOutput":
        self.set_state(state)
        await asyncio.sleep(millis / 1000.0)
        self.set_state(state.inverse())
        await self._invoke_callback_async(callback)
        return self

    async def _blink_steps(
        self, millis: int, duration: int, state: DigitalState, callback: Optional[Callback]
    ) -> "DigitalOutput":
        seconds = millis / 1000.0
        self.set_state(state)
        for _ in range(duration - 1):
            await asyncio.sleep(seconds)
            self.toggle()
        await asyncio.sleep(seconds)
        await self._invoke_callback_async(callback)
        return self

    def describe(self) -> Descriptor:
        descriptor = super().describe()
        details = f"address={self.address}, state={self._state.name}"
        descriptor.description = f"{descriptor.description}; {details}" if descriptor.description else details
        return descriptor
