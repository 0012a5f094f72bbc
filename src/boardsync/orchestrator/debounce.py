"""Keyed debouncing of callbacks on the running event loop."""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Hashable
from typing import Generic, TypeVar

K = TypeVar("K", bound=Hashable)


class Debouncer(Generic[K]):
    """Delays a callback per key, restarting the delay on every new schedule.

    Several schedules for the same key within the delay fire the latest
    callback once.
    """

    def __init__(self, delay: float) -> None:
        self.delay = delay
        self._handles: dict[K, asyncio.TimerHandle] = {}

    def schedule(self, key: K, callback: Callable[[], object]) -> bool:
        """Schedule `callback` to run after the delay.

        Must be called from within the running event loop.

        Returns:
            True if an earlier pending schedule for the key was replaced.
        """
        loop = asyncio.get_running_loop()
        replaced = self.cancel(key)
        self._handles[key] = loop.call_later(self.delay, self._fire, key, callback)
        return replaced

    def cancel(self, key: K) -> bool:
        """Drop the pending schedule for a key, if any."""
        handle = self._handles.pop(key, None)
        if handle is None:
            return False
        handle.cancel()
        return True

    def cancel_all(self) -> None:
        for key in list(self._handles):
            self.cancel(key)

    def pending(self) -> list[K]:
        """Keys with a callback waiting to fire."""
        return list(self._handles)

    def _fire(self, key: K, callback: Callable[[], object]) -> None:
        self._handles.pop(key, None)
        callback()
