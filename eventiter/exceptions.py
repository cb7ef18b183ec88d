"""Exceptions raised by eventiter.

Errors coming from an adapted source (its error channel) or handed to
:meth:`EventIterator.abort` are never wrapped; consumers receive the
original exception object.  The classes below cover the failures the
package raises on its own.
"""

from typing import Any


class EventIterError(Exception):
    """Base exception for all eventiter errors."""


class InvalidArgTypeError(EventIterError, TypeError):
    """Raised when an argument has the wrong type or is missing.

    The message names the offending parameter and the received value,
    e.g. ``The "error" argument must be an instance of BaseException.
    Received None``.
    """

    def __init__(self, name: str, expected: str, received: Any) -> None:
        self.name = name
        self.expected = expected
        self.received = received
        message = (
            f'The "{name}" argument must be {expected}. '
            f"Received {_describe(received)}"
        )
        super().__init__(message)


class UnsupportedSourceError(InvalidArgTypeError):
    """Raised when no source capability can drive the given object."""

    def __init__(
        self,
        received: Any,
        expected: str = "an emitter-style or target-style event source",
        name: str = "source",
    ) -> None:
        super().__init__(name, expected, received)


class SourceError(EventIterError):
    """Raised to consumers when a source reports an error that is not an exception.

    The reported value is kept on :attr:`value`.  Exception instances
    fired on the error channel are delivered as-is and never wrapped.
    """

    def __init__(self, value: Any, channel: Any = "error") -> None:
        self.value = value
        self.channel = channel
        super().__init__(f"Source fired {channel!r} with a non-exception value: {value!r}")


def _describe(value: Any) -> str:
    if value is None:
        return "None"
    if isinstance(value, (str, int, float, bool)):
        return f"type {type(value).__name__} ({value!r})"
    return f"an instance of {type(value).__name__}"


__all__ = ["EventIterError", "InvalidArgTypeError", "UnsupportedSourceError", "SourceError"]
