"""
Tests for hwio.io.listeners module.
"""

import logging

import pytest

from hwio.io.listeners import ListenerSet, ListenerToken


class TestListenerSet:
    """Tests for ListenerSet."""

    def test_dispatch_in_registration_order(self):
        """Test listeners run in the order they were added."""
        calls = []
        listeners = ListenerSet("pin")
        listeners.add(lambda e: calls.append(("first", e)))
        listeners.add(lambda e: calls.append(("second", e)))

        listeners.dispatch("event")

        assert calls == [("first", "event"), ("second", "event")]

    def test_tokens_are_unique(self):
        """Test every registration gets its own token."""
        listeners = ListenerSet("pin")
        a = listeners.add(lambda e: None)
        b = listeners.add(lambda e: None)
        assert isinstance(a, ListenerToken)
        assert a != b
        assert a.owner == "pin"

    def test_remove(self):
        """Test a removed listener is no longer called."""
        calls = []
        listeners = ListenerSet("pin")
        token = listeners.add(calls.append)

        assert listeners.remove(token) is True
        assert listeners.remove(token) is False
        listeners.dispatch("event")
        assert calls == []
        assert len(listeners) == 0

    def test_failing_listener_is_isolated(self, caplog):
        """Test a raising listener is logged and later listeners still run."""
        calls = []

        def broken(event):
            raise RuntimeError("boom")

        listeners = ListenerSet("pin")
        listeners.add(broken)
        listeners.add(calls.append)

        with caplog.at_level(logging.ERROR, logger="hwio.io.listeners"):
            listeners.dispatch("event")

        assert calls == ["event"]
        assert "boom" in caplog.text

    def test_clear(self):
        """Test clear removes all listeners."""
        listeners = ListenerSet("pin")
        listeners.add(lambda e: None)
        listeners.add(lambda e: None)
        listeners.clear()
        assert len(listeners) == 0

    def test_rejects_non_callable(self):
        """Test non-callables are rejected."""
        with pytest.raises(TypeError):
            ListenerSet("pin").add("not callable")
