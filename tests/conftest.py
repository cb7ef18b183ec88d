from collections import defaultdict
from types import SimpleNamespace

import pytest


class EventEmitter:
    """Minimal emitter-style source.

    ``emit("error", err)`` with no error listener raises ``err``, the
    usual contract of emitters that reserve the ``"error"`` channel.
    """

    def __init__(self):
        self._listeners = defaultdict(list)

    def add_listener(self, channel, listener):
        self._listeners[channel].append(listener)

    def on(self, channel, listener):
        self.add_listener(channel, listener)

    def remove_listener(self, channel, listener):
        listeners = self._listeners.get(channel)
        if listeners and listener in listeners:
            listeners.remove(listener)

    def listeners(self, channel):
        return list(self._listeners.get(channel, []))

    def listener_count(self, channel):
        return len(self._listeners.get(channel, []))

    def emit(self, channel, *args):
        listeners = self.listeners(channel)
        if channel == "error" and not listeners:
            error = args[0] if args else RuntimeError("Unhandled error.")
            raise error
        for listener in listeners:
            listener(*args)
        return bool(listeners)


class OnOnlyEmitter:
    """Emitter exposing ``on`` but no ``add_listener``."""

    def __init__(self):
        self._listeners = defaultdict(list)

    def on(self, channel, listener):
        self._listeners[channel].append(listener)

    def remove_listener(self, channel, listener):
        self._listeners[channel].remove(listener)

    def listener_count(self, channel):
        return len(self._listeners[channel])

    def emit(self, channel, *args):
        for listener in list(self._listeners[channel]):
            listener(*args)


class EventTarget:
    """Minimal target-style source; listeners receive one event object."""

    def __init__(self):
        self._listeners = defaultdict(list)

    def add_event_listener(self, event_type, listener):
        if listener not in self._listeners[event_type]:
            self._listeners[event_type].append(listener)

    def remove_event_listener(self, event_type, listener):
        listeners = self._listeners.get(event_type)
        if listeners and listener in listeners:
            listeners.remove(listener)

    def listener_count(self, event_type):
        return len(self._listeners.get(event_type, []))

    def dispatch_event(self, event):
        for listener in list(self._listeners.get(event.type, [])):
            listener(event)
        return True


def _build_event(event_type, **attrs):
    return SimpleNamespace(type=event_type, **attrs)


@pytest.fixture
def emitter():
    return EventEmitter()


@pytest.fixture
def on_only_emitter():
    return OnOnlyEmitter()


@pytest.fixture
def target():
    return EventTarget()


@pytest.fixture
def make_event():
    return _build_event
