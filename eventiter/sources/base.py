"""Abstract interface for event source capabilities.

This module defines the :class:`SourceCapability` abstract base class
used by the adapter to talk to an event source.  A capability knows how
to register and remove a listener on one shape of source and how to turn
the arguments a listener receives into a payload list.  The adapter's
queue logic never looks at the source directly, so supporting a new
shape means adding a capability rather than touching the adapter.

See the ``eventiter/sources`` subpackage for the concrete variants.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Hashable, List

Listener = Callable[..., Any]


class SourceCapability(ABC):
    """Abstract base class for source capabilities."""

    #: Short registry name, e.g. ``"emitter"``.
    name: str = ""

    @abstractmethod
    def supports(self, source: Any) -> bool:
        """Return True if this capability can drive *source*."""
        raise NotImplementedError

    @abstractmethod
    def subscribe(self, source: Any, channel: Hashable, listener: Listener) -> None:
        """Register *listener* for firings of *channel* on *source*."""
        raise NotImplementedError

    @abstractmethod
    def unsubscribe(self, source: Any, channel: Hashable, listener: Listener) -> None:
        """Remove a listener previously added with :meth:`subscribe`."""
        raise NotImplementedError

    @abstractmethod
    def extract_args(self, *args: Any) -> List[Any]:
        """Convert the arguments of one listener call into a payload.

        Parameters
        ----------
        *args : Any
            Whatever the source passed to the listener.

        Returns
        -------
        list
            The ordered payload delivered to the consumer.
        """
        raise NotImplementedError

    def extract_error(self, *args: Any) -> Any:
        """Return the error value from one error-channel listener call."""
        return args[0] if args else None

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


__all__ = ["Listener", "SourceCapability"]
