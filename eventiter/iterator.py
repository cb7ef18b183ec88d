"""Event-to-iterator adapter.

This module exposes :func:`adapt` (also available as :func:`on`), which
subscribes to one channel of an event source and returns an
:class:`EventIterator`: an async iterator yielding the argument list of
every firing of that channel, in firing order.

Two FIFO queues sit between the source and the consumer.  Payloads that
arrive while nobody is waiting are buffered; pulls issued while nothing
is buffered wait as futures.  At most one of the two queues holds items
at any time.  A firing of the error channel (or :meth:`EventIterator.abort`)
fails the oldest waiting pull, or the next pull if none is waiting, and
every later pull then resolves as completion.

Example usage:

>>> async with adapt(emitter, "tick") as ticks:
...     async for (n,) in ticks:
...         if n >= 3:
...             break

Leaving the ``async with`` block (normally, on ``break`` or because of
an exception) releases both listeners.
"""

from __future__ import annotations

import asyncio
import logging
from collections import deque
from typing import Any, Deque, Hashable, List, Optional, Union

from .env_config import get_error_channel
from .exceptions import InvalidArgTypeError, SourceError
from .models import AdapterState, IterResult
from .source_registry import resolve_capability
from .sources import SourceCapability
from .utils.validation import validate_channel, validate_error

logger = logging.getLogger(__name__)


class EventIterator:
    """Async iterator over the firings of one channel of an event source.

    Parameters
    ----------
    source : Any
        An emitter-style or target-style event source.
    channel : Hashable
        Channel whose firings are collected.
    error_channel : Hashable, optional
        Channel treated as fatal.  Defaults to
        :func:`~eventiter.env_config.get_error_channel`.
    capability : str or SourceCapability, optional
        Forces a capability instead of detecting one from *source*.

    Notes
    -----
    All state changes happen synchronously inside the callback that
    triggers them (a firing, :meth:`advance`, :meth:`terminate` or
    :meth:`abort`), so the adapter must be used from the thread running
    its event loop.
    """

    def __init__(
        self,
        source: Any,
        channel: Hashable,
        *,
        error_channel: Optional[Hashable] = None,
        capability: Union[str, SourceCapability, None] = None,
    ) -> None:
        self._channel = validate_channel(channel)
        if error_channel is None:
            error_channel = get_error_channel()
        self._error_channel = validate_channel(error_channel, "error_channel")
        self._source = source
        self._capability = resolve_capability(source, capability)

        self._payloads: Deque[List[Any]] = deque()
        self._pending: Deque[asyncio.Future] = deque()
        self._state = AdapterState.ACTIVE
        self._error: Optional[BaseException] = None

        # Bound once so removal sees the same callables that were added.
        self._event_listener = self._on_event
        self._error_listener = self._on_error
        self._subscribe()

    @property
    def source(self) -> Any:
        return self._source

    @property
    def channel(self) -> Hashable:
        return self._channel

    @property
    def error_channel(self) -> Hashable:
        return self._error_channel

    @property
    def capability(self) -> SourceCapability:
        return self._capability

    @property
    def state(self) -> AdapterState:
        return self._state

    @property
    def buffered(self) -> int:
        """Number of payloads waiting for a pull."""
        return len(self._payloads)

    @property
    def pending(self) -> int:
        """Number of pulls waiting for a payload."""
        return sum(1 for fut in self._pending if not fut.done())

    def __repr__(self) -> str:
        return (
            f"<EventIterator channel={self._channel!r} state={self._state.value} "
            f"buffered={self.buffered} pending={self.pending}>"
        )

    def _subscribe(self) -> None:
        self._capability.subscribe(self._source, self._channel, self._event_listener)
        try:
            self._capability.subscribe(self._source, self._error_channel, self._error_listener)
        except BaseException:
            self._capability.unsubscribe(self._source, self._channel, self._event_listener)
            raise
        logger.debug(
            "Subscribed to %r and %r using %s",
            self._channel,
            self._error_channel,
            self._capability.name,
        )

    def _unsubscribe(self) -> None:
        try:
            self._capability.unsubscribe(self._source, self._channel, self._event_listener)
        finally:
            self._capability.unsubscribe(self._source, self._error_channel, self._error_listener)
        logger.debug("Released listeners on %r and %r", self._channel, self._error_channel)

    def _on_event(self, *args: Any) -> None:
        if self._state.terminal:
            return
        payload = self._capability.extract_args(*args)
        waiter = self._next_waiter()
        if waiter is None:
            self._payloads.append(payload)
        else:
            waiter.set_result(IterResult.of(payload))

    def _on_error(self, *args: Any) -> None:
        error = self._capability.extract_error(*args)
        if not isinstance(error, BaseException):
            error = SourceError(error, self._error_channel)
        self._fail(error)

    def _next_waiter(self) -> Optional[asyncio.Future]:
        # Pulls cancelled by their consumer are dropped here so they never
        # take an arrival away from a later pull.
        while self._pending:
            waiter = self._pending.popleft()
            if not waiter.done():
                return waiter
        return None

    def _finish_waiters(self) -> None:
        while self._pending:
            waiter = self._pending.popleft()
            if not waiter.done():
                waiter.set_result(IterResult.completion())

    def _discard_waiter(self, future: asyncio.Future) -> None:
        if future.cancelled():
            try:
                self._pending.remove(future)
            except ValueError:
                pass

    def _fail(self, error: BaseException) -> None:
        if self._state.terminal:
            return
        self._state = AdapterState.ERRORED
        try:
            self._unsubscribe()
        finally:
            # Waiters settle even when the source refuses the removal.
            waiter = self._next_waiter()
            if waiter is None:
                logger.debug("Holding %r for the next pull", error)
                self._error = error
            else:
                waiter.set_exception(error)
                self._finish_waiters()

    def advance(self) -> asyncio.Future:
        """Request the next payload.

        Returns a future resolving to an :class:`IterResult`.  Futures are
        settled in the order they were requested.  Must be called while
        an event loop is running.
        """
        future = asyncio.get_running_loop().create_future()
        if self._payloads:
            future.set_result(IterResult.of(self._payloads.popleft()))
        elif self._error is not None:
            error, self._error = self._error, None
            future.set_exception(error)
        elif self._state.terminal:
            future.set_result(IterResult.completion())
        else:
            self._pending.append(future)
            future.add_done_callback(self._discard_waiter)
        return future

    def terminate(self) -> IterResult:
        """Stop listening and end the sequence.

        Pending pulls resolve as completion, buffered payloads and an
        undelivered error are dropped.  Calling it again is a no-op.
        """
        try:
            if not self._state.terminal:
                self._unsubscribe()
        finally:
            self._state = AdapterState.DONE
            self._payloads.clear()
            self._error = None
            self._finish_waiters()
        return IterResult.completion()

    def abort(self, error: Optional[BaseException] = None) -> None:
        """Fail the sequence with *error* as if the source reported it.

        Raises
        ------
        InvalidArgTypeError
            If *error* is missing or not an exception instance.  The
            adapter is left untouched in that case.
        """
        validate_error(error)
        logger.debug("Aborting iteration over %r: %r", self._channel, error)
        self._fail(error)

    def __aiter__(self) -> "EventIterator":
        return self

    async def __anext__(self) -> List[Any]:
        result = await self.advance()
        if result.done:
            raise StopAsyncIteration
        return result.value

    async def asend(self, value: Any = None) -> List[Any]:
        if value is not None:
            raise InvalidArgTypeError("value", "None", value)
        return await self.__anext__()

    async def athrow(self, error: BaseException) -> List[Any]:
        self.abort(error)
        return await self.__anext__()

    async def aclose(self) -> None:
        self.terminate()

    async def __aenter__(self) -> "EventIterator":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> bool:
        self.terminate()
        return False


def adapt(
    source: Any,
    channel: Hashable,
    *,
    error_channel: Optional[Hashable] = None,
    capability: Union[str, SourceCapability, None] = None,
) -> EventIterator:
    """Return an :class:`EventIterator` over *channel* of *source*.

    Both listeners are registered before this function returns, so
    firings that happen before the first pull are buffered.
    """
    return EventIterator(source, channel, error_channel=error_channel, capability=capability)


on = adapt


__all__ = ["EventIterator", "adapt", "on"]
