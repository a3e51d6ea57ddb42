"""Cancellable handle for one in-flight request.

Lifecycle:
  PENDING -> COMPLETED  (outcome delivered, completion handler invoked once)
  PENDING -> CANCELLED  (cancel() won; the completion handler never runs)

Concurrency:
  - The state transition is the single-assignment token that decides between
    cancel() and delivery; it is taken under a threading.Lock so cancel() may be
    called from any thread.
  - Aborting the underlying task is advisory. On the task's own loop it is
    cancelled directly; from other threads it is scheduled via call_soon_threadsafe.
    Network I/O already in progress may still finish.
"""
from __future__ import annotations

import asyncio
import threading
from typing import Any, Callable

from loguru import logger

from gql_transport.app.constants import DispatchState
from gql_transport.app.core import SERVICE_NAME


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).debug("")


def _running_loop() -> asyncio.AbstractEventLoop | None:
    try:
        return asyncio.get_running_loop()
    except RuntimeError:
        return None


class DispatchHandle:
    """Cancellable implementation returned by HTTPNetworkTransport.send()."""

    def __init__(self, request_id: str) -> None:
        self._request_id = request_id
        self._state = DispatchState.PENDING
        self._lock = threading.Lock()
        self._task: asyncio.Task[None] | None = None

    @property
    def request_id(self) -> str:
        return self._request_id

    @property
    def state(self) -> DispatchState:
        return self._state

    @property
    def cancelled(self) -> bool:
        return self._state == DispatchState.CANCELLED

    @property
    def done(self) -> bool:
        return self._state != DispatchState.PENDING

    def attach(self, task: asyncio.Task[None]) -> None:
        self._task = task
        task.add_done_callback(self._release_task)

    def cancel(self) -> None:
        with self._lock:
            if self._state != DispatchState.PENDING:
                return
            self._state = DispatchState.CANCELLED
            task = self._task

        _log("request_cancelled", request_id=self._request_id)
        if task is None or task.done():
            return
        loop = task.get_loop()
        if _running_loop() is loop:
            task.cancel()
        else:
            loop.call_soon_threadsafe(task.cancel)

    def deliver(self, complete: Callable[[], None]) -> bool:
        """Run `complete` if and only if this handle is still pending. Returns whether it ran."""
        with self._lock:
            if self._state != DispatchState.PENDING:
                _log("completion_suppressed", request_id=self._request_id, state=self._state.value)
                return False
            self._state = DispatchState.COMPLETED

        complete()
        return True

    def _release_task(self, task: asyncio.Task[None]) -> None:
        self._task = None
