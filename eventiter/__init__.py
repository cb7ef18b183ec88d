from .iterator import EventIterator, adapt, on
from .models import AdapterState, IterResult
from .exceptions import (
    EventIterError,
    InvalidArgTypeError,
    SourceError,
    UnsupportedSourceError,
)
from .sources import EmitterCapability, SourceCapability, TargetCapability
from .source_registry import get_capability, list_capabilities
from .env_config import configure_logging

__all__ = [
    "adapt",
    "on",
    "EventIterator",
    "AdapterState",
    "IterResult",
    "EventIterError",
    "InvalidArgTypeError",
    "SourceError",
    "UnsupportedSourceError",
    "SourceCapability",
    "EmitterCapability",
    "TargetCapability",
    "get_capability",
    "list_capabilities",
    "configure_logging",
]
