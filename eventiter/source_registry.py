"""Source capability registry.

Helpers to inspect and select the capability used to drive an event
source:

* :func:`list_capabilities` – return the registered capability names.
* :func:`get_capability` – instantiate a capability by name.
* :func:`detect_capability` – pick a capability from the shape of a
  source object.
* :func:`resolve_capability` – honour an explicit choice, otherwise
  detect.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Union

from .exceptions import UnsupportedSourceError
from .sources import DEFAULT_CAPABILITIES, SourceCapability

logger = logging.getLogger(__name__)


def list_capabilities() -> List[str]:
    """Return the list of registered capability names."""
    return list(DEFAULT_CAPABILITIES.keys())


def get_capability(name: str) -> SourceCapability:
    """Instantiate and return the capability registered as *name*.

    Raises
    ------
    UnsupportedSourceError
        If *name* is not registered.
    """
    cls = DEFAULT_CAPABILITIES.get(name)
    if cls is None:
        raise UnsupportedSourceError(
            name,
            expected=f"one of the registered capabilities {list_capabilities()}",
            name="capability",
        )
    return cls()


def detect_capability(source: Any) -> Optional[SourceCapability]:
    """Return the first registered capability that supports *source*.

    Returns ``None`` when the object matches no known shape.
    """
    for name, cls in DEFAULT_CAPABILITIES.items():
        capability = cls()
        if capability.supports(source):
            logger.debug("Detected %s capability for %s", name, type(source).__name__)
            return capability
    return None


def resolve_capability(
    source: Any, capability: Union[str, SourceCapability, None] = None
) -> SourceCapability:
    """Return the capability used to adapt *source*.

    Parameters
    ----------
    source : Any
        The event source.
    capability : str or SourceCapability, optional
        A registered name or a ready instance.  When omitted the shape of
        *source* decides.

    Raises
    ------
    UnsupportedSourceError
        If no capability can drive *source*.
    """
    if isinstance(capability, SourceCapability):
        resolved: Optional[SourceCapability] = capability
    elif capability is not None:
        resolved = get_capability(capability)
    else:
        resolved = detect_capability(source)
    if resolved is None or not resolved.supports(source):
        raise UnsupportedSourceError(source)
    return resolved


__all__ = [
    "list_capabilities",
    "get_capability",
    "detect_capability",
    "resolve_capability",
]
