"""
Ordered listener collections owned by I/O instances.
"""

import itertools
import logging
import threading
from dataclasses import dataclass
from typing import Any, Callable, List, Tuple

logger = logging.getLogger(__name__)

_token_ids = itertools.count(1)


@dataclass(frozen=True)
class ListenerToken:
    """Handle returned on registration, used to deregister a listener."""
    id: int
    owner: str


class ListenerSet:
    """
    Listeners attached to one I/O instance.

    Listeners are invoked in registration order, synchronously, on the
    thread that dispatches the event. A listener that raises is logged
    and skipped; remaining listeners still run. No timeout is applied,
    so a slow listener delays the operation that triggered it.
    """

    def __init__(self, owner: str):
        self._owner = owner
        self._lock = threading.Lock()
        self._listeners: List[Tuple[ListenerToken, Callable[[Any], Any]]] = []

    def add(self, listener: Callable[[Any], Any]) -> ListenerToken:
        """Register a listener and return its token."""
        if not callable(listener):
            raise TypeError("listener must be callable")
        token = ListenerToken(id=next(_token_ids), owner=self._owner)
        with self._lock:
            self._listeners.append((token, listener))
        return token

    def remove(self, token: ListenerToken) -> bool:
        """Deregister a listener. Returns False if the token is unknown."""
        with self._lock:
            for index, (existing, _) in enumerate(self._listeners):
                if existing == token:
                    del self._listeners[index]
                    return True
        return False

    def clear(self) -> None:
        with self._lock:
            self._listeners.clear()

    def dispatch(self, event: Any) -> None:
        """Deliver an event to every registered listener."""
        with self._lock:
            snapshot = list(self._listeners)

        for token, listener in snapshot:
            try:
                listener(event)
            except Exception:
                logger.exception(f"Listener {token.id} on '{self._owner}' failed")

    def __len__(self) -> int:
        with self._lock:
            return len(self._listeners)
