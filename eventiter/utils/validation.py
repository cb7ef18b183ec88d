"""
Validation helpers.

Light-weight runtime checks for the public entry points.  Failures
raise :class:`~eventiter.exceptions.InvalidArgTypeError` so callers see
the parameter name and the value that was rejected.
"""

from typing import Any

from ..exceptions import InvalidArgTypeError


def validate_error(value: Any, name: str = "error") -> BaseException:
    """Return *value* if it is an exception instance, otherwise raise."""
    if not isinstance(value, BaseException):
        raise InvalidArgTypeError(name, "an instance of BaseException", value)
    return value


def validate_channel(value: Any, name: str = "channel") -> Any:
    """Reject a missing channel name.

    Channels are opaque identifiers matched by equality, so any hashable
    value other than ``None`` is accepted.
    """
    if value is None:
        raise InvalidArgTypeError(name, "a hashable channel identifier", value)
    try:
        hash(value)
    except TypeError:
        raise InvalidArgTypeError(name, "a hashable channel identifier", value) from None
    return value


__all__ = ["validate_error", "validate_channel"]
