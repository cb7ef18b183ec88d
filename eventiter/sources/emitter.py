"""Emitter-style source capability.

Drives objects shaped like a classic event emitter: listeners are added
with ``add_listener(channel, fn)`` (or ``on(channel, fn)``), removed
with ``remove_listener(channel, fn)``, and called with the positional
arguments passed to ``emit``.  The registration call's return value is
ignored.  Such emitters usually reserve the ``"error"`` channel; the
adapter subscribes to it with the same primitive as any other channel.
"""

from typing import Any, Hashable, List

from .base import Listener, SourceCapability


class EmitterCapability(SourceCapability):
    """Capability for ``add_listener``/``remove_listener`` sources."""

    name = "emitter"

    def supports(self, source: Any) -> bool:
        if not callable(getattr(source, "remove_listener", None)):
            return False
        return callable(getattr(source, "add_listener", None)) or callable(
            getattr(source, "on", None)
        )

    def subscribe(self, source: Any, channel: Hashable, listener: Listener) -> None:
        add = getattr(source, "add_listener", None)
        if not callable(add):
            add = source.on
        add(channel, listener)

    def unsubscribe(self, source: Any, channel: Hashable, listener: Listener) -> None:
        source.remove_listener(channel, listener)

    def extract_args(self, *args: Any) -> List[Any]:
        return list(args)


__all__ = ["EmitterCapability"]
