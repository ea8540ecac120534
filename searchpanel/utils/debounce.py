"""Async debounce helper used by the search coordinator."""

from __future__ import annotations

import asyncio
from typing import Callable


class Debouncer:
    """Coalesces rapid-fire submissions into a single delayed callback."""

    def __init__(self, delay: float) -> None:
        self.delay = delay
        self._task: asyncio.Task[None] | None = None

    @property
    def pending(self) -> bool:
        return self._task is not None and not self._task.done()

    def submit(self, callback: Callable[[], None]) -> None:
        """Restart the quiet period; *callback* runs once it elapses."""

        self.cancel()
        loop = asyncio.get_running_loop()
        self._task = loop.create_task(self._runner(callback))

    def cancel(self) -> None:
        if self._task:
            self._task.cancel()
            self._task = None

    async def _runner(self, callback: Callable[[], None]) -> None:
        try:
            await asyncio.sleep(self.delay)
        except asyncio.CancelledError:
            return
        self._task = None
        callback()


__all__ = ["Debouncer"]
