"""Owned, cancellable debounce timer.

At most one callback is pending at any time; scheduling a new one always
cancels the previous. The scheduler is anything exposing asyncio's
``call_later(delay, callback)`` returning a handle with ``cancel()``; by
default the running event loop is used.
"""

import asyncio
from collections.abc import Callable
from typing import Protocol


class Cancellable(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def call_later(self, delay: float, callback: Callable[[], None]) -> Cancellable: ...


class DebounceTimer:
    def __init__(self, delay: float, scheduler: Scheduler | None = None):
        self.delay = delay
        self._scheduler = scheduler
        self._handle: Cancellable | None = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def schedule(self, callback: Callable[[], None]) -> None:
        """Cancel whatever is pending and schedule callback after the delay."""
        self.cancel()
        scheduler = self._scheduler or asyncio.get_running_loop()
        self._handle = scheduler.call_later(self.delay, lambda: self._fire(callback))

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self, callback: Callable[[], None]) -> None:
        self._handle = None
        callback()
