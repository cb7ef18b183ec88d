"""Result and state types.

:class:`IterResult` is the ``{value, done}`` pair every pull resolves
to.  A delivered payload always carries ``done=False``; a completion
carries ``value=None`` and ``done=True``.  :class:`AdapterState` tracks
the adapter lifecycle.
"""

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, model_validator


class AdapterState(str, Enum):
    """Lifecycle of an :class:`~eventiter.iterator.EventIterator`."""

    ACTIVE = "active"
    ERRORED = "errored"
    DONE = "done"

    @property
    def terminal(self) -> bool:
        return self is not AdapterState.ACTIVE


class IterResult(BaseModel):
    """One resolution of :meth:`EventIterator.advance`."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    value: Optional[List[Any]] = None
    done: bool = False

    @model_validator(mode="after")
    def check_shape(self) -> "IterResult":
        if self.done and self.value is not None:
            raise ValueError("a completed result must not carry a value")
        if not self.done and self.value is None:
            raise ValueError("a pending result must carry a value")
        return self

    @classmethod
    def of(cls, payload: List[Any]) -> "IterResult":
        """Wrap a delivered payload."""
        return cls(value=payload, done=False)

    @classmethod
    def completion(cls) -> "IterResult":
        """Return the end-of-sequence result."""
        return cls(value=None, done=True)


__all__ = ["AdapterState", "IterResult"]
