"""
Digital I/O on Raspberry Pi through RPi.GPIO.

Pins are addressed by BCM number. RPi.GPIO is imported when the first
provider initializes, so the plugin can be loaded on machines without
it; creating an instance there raises ProviderError.
"""

import logging
from typing import TYPE_CHECKING, Any, Optional

from hwio.exceptions import DeviceIOError, ProviderError
from hwio.io.digital.config import DigitalInputConfig, DigitalOutputConfig
from hwio.io.digital.input import DigitalInput
from hwio.io.digital.output import DigitalOutput
from hwio.io.digital.provider import DigitalInputProvider, DigitalOutputProvider
from hwio.io.digital.state import DigitalState, PullResistance

if TYPE_CHECKING:
    from hwio.core.context import Context

logger = logging.getLogger(__name__)


def import_gpio() -> Any:
    """
    Import RPi.GPIO and switch it to BCM numbering.

    Raises:
        ProviderError: If RPi.GPIO cannot be imported on this machine.
    """
    try:
        import RPi.GPIO as GPIO
    except (ImportError, RuntimeError) as e:
        # RPi.GPIO raises RuntimeError when imported off a Pi
        raise ProviderError(f"RPi.GPIO not available: {e}") from e

    GPIO.setmode(GPIO.BCM)
    GPIO.setwarnings(False)
    return GPIO


class RPiGPIODigitalOutput(DigitalOutput):
    """Digital output on a BCM pin."""

    def __init__(self, provider: "RPiGPIODigitalOutputProvider", config: DigitalOutputConfig, gpio: Any):
        super().__init__(provider, config)
        self._gpio = gpio

    def _open(self) -> None:
        try:
            self._gpio.setup(self.address, self._gpio.OUT)
        except (RuntimeError, ValueError) as e:
            raise DeviceIOError(f"Failed to set up pin {self.address} as output: {e}") from e

    def _close(self) -> None:
        try:
            self._gpio.cleanup(self.address)
        except (RuntimeError, ValueError) as e:
            raise DeviceIOError(f"Failed to release pin {self.address}: {e}") from e

    def _write_state(self, state: DigitalState) -> None:
        level = self._gpio.HIGH if state is DigitalState.HIGH else self._gpio.LOW
        try:
            self._gpio.output(self.address, level)
        except (RuntimeError, ValueError) as e:
            raise DeviceIOError(f"Failed to write pin {self.address}: {e}") from e


class RPiGPIODigitalInput(DigitalInput):
    """Digital input on a BCM pin with edge detection on both edges."""

    def __init__(self, provider: "RPiGPIODigitalInputProvider", config: DigitalInputConfig, gpio: Any):
        super().__init__(provider, config)
        self._gpio = gpio

    def _pull_mode(self) -> Any:
        pull_map = {
            PullResistance.OFF: self._gpio.PUD_OFF,
            PullResistance.PULL_UP: self._gpio.PUD_UP,
            PullResistance.PULL_DOWN: self._gpio.PUD_DOWN,
        }
        return pull_map.get(self.pull, self._gpio.PUD_OFF)

    def _open(self) -> None:
        try:
            self._gpio.setup(self.address, self._gpio.IN, pull_up_down=self._pull_mode())

            kwargs = {}
            if self._config.debounce_us > 0:
                # RPi.GPIO debounces in whole milliseconds
                kwargs["bouncetime"] = max(1, self._config.debounce_us // 1000)
            self._gpio.add_event_detect(self.address, self._gpio.BOTH, callback=self._on_edge, **kwargs)
        except (RuntimeError, ValueError) as e:
            raise DeviceIOError(f"Failed to set up pin {self.address} as input: {e}") from e

        self._notify(self._read_state())

    def _close(self) -> None:
        try:
            self._gpio.remove_event_detect(self.address)
            self._gpio.cleanup(self.address)
        except (RuntimeError, ValueError) as e:
            raise DeviceIOError(f"Failed to release pin {self.address}: {e}") from e

    def _read_state(self) -> DigitalState:
        try:
            return DigitalState.from_value(int(self._gpio.input(self.address)))
        except (RuntimeError, ValueError) as e:
            raise DeviceIOError(f"Failed to read pin {self.address}: {e}") from e

    def _on_edge(self, channel: int) -> None:
        try:
            self._notify(self._read_state())
        except DeviceIOError as e:
            logger.error(f"Edge on pin {channel} could not be read: {e}")


class _GPIOProviderMixin:
    """Loads RPi.GPIO once per provider."""

    _gpio: Optional[Any] = None

    def _load_gpio(self) -> None:
        try:
            self._gpio = import_gpio()
        except ProviderError as e:
            logger.warning(f"{e}; provider '{self.id}' cannot create instances")

    def _require_gpio(self) -> Any:
        if self._gpio is None:
            self._gpio = import_gpio()
        return self._gpio


class RPiGPIODigitalOutputProvider(_GPIOProviderMixin, DigitalOutputProvider):
    ID = "rpigpio-digital-output"
    NAME = "RPi.GPIO Digital Output Provider"

    def initialize(self, context: "Context") -> "RPiGPIODigitalOutputProvider":
        super().initialize(context)
        self._load_gpio()
        return self

    def create(self, config: DigitalOutputConfig) -> RPiGPIODigitalOutput:
        return RPiGPIODigitalOutput(self, config, self._require_gpio())


class RPiGPIODigitalInputProvider(_GPIOProviderMixin, DigitalInputProvider):
    ID = "rpigpio-digital-input"
    NAME = "RPi.GPIO Digital Input Provider"

    def initialize(self, context: "Context") -> "RPiGPIODigitalInputProvider":
        super().initialize(context)
        self._load_gpio()
        return self

    def create(self, config: DigitalInputConfig) -> RPiGPIODigitalInput:
        return RPiGPIODigitalInput(self, config, self._require_gpio())
