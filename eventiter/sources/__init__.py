"""Source capability registry.

This subpackage contains one module per supported source shape.  The
``DEFAULT_CAPABILITIES`` mapping associates short names (e.g.
``"emitter"``) with the corresponding capability class.  External
consumers should use :mod:`eventiter.source_registry` rather than
importing classes directly from this module.

Adding a new source shape means creating a module in this directory
that defines a class derived from
:class:`eventiter.sources.base.SourceCapability` and registering it
here.
"""

from .base import Listener, SourceCapability
from .emitter import EmitterCapability
from .target import TargetCapability


# Map short capability names to their classes.  Detection walks this
# mapping in order, so the more specific shape comes first.
DEFAULT_CAPABILITIES = {
    "target": TargetCapability,
    "emitter": EmitterCapability,
}

__all__ = [
    "DEFAULT_CAPABILITIES",
    "Listener",
    "SourceCapability",
    "EmitterCapability",
    "TargetCapability",
]
