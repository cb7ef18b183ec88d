"""Target-style source capability.

Drives objects shaped like a DOM event target: listeners are added with
``add_event_listener(type, fn)`` and removed with
``remove_event_listener(type, fn)``, and each listener call receives a
single dispatched event object.  Every channel, ``"error"`` included, is
an ordinary event type here.
"""

from typing import Any, Hashable, List

from .base import Listener, SourceCapability


class TargetCapability(SourceCapability):
    """Capability for ``add_event_listener``/``remove_event_listener`` sources."""

    name = "target"

    def supports(self, source: Any) -> bool:
        return callable(getattr(source, "add_event_listener", None)) and callable(
            getattr(source, "remove_event_listener", None)
        )

    def subscribe(self, source: Any, channel: Hashable, listener: Listener) -> None:
        source.add_event_listener(channel, listener)

    def unsubscribe(self, source: Any, channel: Hashable, listener: Listener) -> None:
        source.remove_event_listener(channel, listener)

    def extract_args(self, *args: Any) -> List[Any]:
        # The dispatched event is the whole payload; wrapping it keeps
        # ``[event]`` unpacking the same for both source shapes.
        event = args[0] if args else None
        return [event]

    def extract_error(self, *args: Any) -> Any:
        """Return the exception carried by an error event.

        Error events carry the exception on an ``error`` attribute; an
        event that is itself an exception is returned unchanged.
        """
        event = args[0] if args else None
        if isinstance(event, BaseException):
            return event
        error = getattr(event, "error", None)
        return error if error is not None else event


__all__ = ["TargetCapability"]
