"""
Digital state change events.
"""

from dataclasses import dataclass
from typing import Any

from hwio.io.digital.state import DigitalState


@dataclass(frozen=True)
class DigitalStateChangeEvent:
    """A digital endpoint moved to a new state. Fire-and-forget."""
    source: Any
    state: DigitalState

    def __str__(self) -> str:
        source_id = getattr(self.source, "id", self.source)
        return f"DigitalStateChangeEvent(source={source_id}, state={self.state.name})"
