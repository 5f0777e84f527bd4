"""Deferred result with progress, success and failure channels.

Subscribers register plain callables. Progress may fire any number of times
while the result is pending; afterwards exactly one of success (``done``) or
failure (``fail``) fires. Callbacks run synchronously inside the call that
publishes the event, so a result that settles during ``load_map`` is already
settled when the caller receives it. Late ``done``/``fail`` subscribers are
called immediately with the settled payload; progress is not replayed.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Generator
from typing import Any

from map_source.domain.errors import AsyncResultRejected

Callback = Callable[..., Any]

PENDING = "pending"
RESOLVED = "resolved"
REJECTED = "rejected"


class AsyncResult:
    def __init__(self) -> None:
        self._state = PENDING
        self._payload: tuple[Any, ...] = ()
        self._progress_callbacks: list[Callback] = []
        self._done_callbacks: list[Callback] = []
        self._fail_callbacks: list[Callback] = []

    @classmethod
    def resolved(cls, *args: Any) -> AsyncResult:
        return cls().resolve(*args)

    @classmethod
    def rejected(cls, *args: Any) -> AsyncResult:
        return cls().reject(*args)

    @property
    def state(self) -> str:
        return self._state

    @property
    def pending(self) -> bool:
        return self._state == PENDING

    # ----- observation -----

    def progress(self, callback: Callback) -> AsyncResult:
        if self.pending:
            self._progress_callbacks.append(callback)
        return self

    def done(self, callback: Callback) -> AsyncResult:
        if self._state == RESOLVED:
            callback(*self._payload)
        elif self.pending:
            self._done_callbacks.append(callback)
        return self

    def fail(self, callback: Callback) -> AsyncResult:
        if self._state == REJECTED:
            callback(*self._payload)
        elif self.pending:
            self._fail_callbacks.append(callback)
        return self

    # ----- publishing -----

    def notify(self, *args: Any) -> AsyncResult:
        if self.pending:
            for callback in list(self._progress_callbacks):
                callback(*args)
        return self

    def resolve(self, *args: Any) -> AsyncResult:
        return self._settle(RESOLVED, args, self._done_callbacks)

    def reject(self, *args: Any) -> AsyncResult:
        return self._settle(REJECTED, args, self._fail_callbacks)

    def _settle(self, state: str, payload: tuple[Any, ...], callbacks: list[Callback]) -> AsyncResult:
        if not self.pending:
            return self
        self._state = state
        self._payload = payload
        self._progress_callbacks = []
        self._done_callbacks = []
        self._fail_callbacks = []
        for callback in callbacks:
            callback(*payload)
        return self

    # ----- asyncio bridge -----

    def as_future(self, loop: asyncio.AbstractEventLoop | None = None) -> asyncio.Future:
        """Expose the result as an asyncio future.

        A single success value is unwrapped, several values become a tuple.
        Failure raises AsyncResultRejected carrying the rejection payload.
        """
        loop = loop or asyncio.get_running_loop()
        future = loop.create_future()

        def _resolve(*args: Any) -> None:
            if future.done():
                return
            if not args:
                future.set_result(None)
            elif len(args) == 1:
                future.set_result(args[0])
            else:
                future.set_result(args)

        def _reject(*args: Any) -> None:
            if not future.done():
                future.set_exception(AsyncResultRejected(*args))

        self.done(_resolve).fail(_reject)
        return future

    def __await__(self) -> Generator[Any, None, Any]:
        return self.as_future().__await__()
