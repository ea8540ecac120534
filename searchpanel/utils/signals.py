"""Minimal synchronous observer used for change and trigger notifications."""

from __future__ import annotations

from typing import Callable

Listener = Callable[[], None]
Unsubscribe = Callable[[], None]


class Signal:
    def __init__(self) -> None:
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> Unsubscribe:
        """Register *listener*; the returned callable removes it again."""

        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def emit(self) -> None:
        # Listeners may unsubscribe while being notified.
        for listener in list(self._listeners):
            listener()

    def __len__(self) -> int:
        return len(self._listeners)


__all__ = ["Signal", "Listener", "Unsubscribe"]
