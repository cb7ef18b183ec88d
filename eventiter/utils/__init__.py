"""
Utility subpackage for eventiter.

Holds the argument validation helpers shared by the adapter and the
source registry.
"""

from .validation import validate_channel, validate_error

__all__ = ["validate_channel", "validate_error"]
