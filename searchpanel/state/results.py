"""Result panel state written by the search coordinator."""

from __future__ import annotations

from typing import Sequence

from searchpanel.domain.models import ResultSnapshot
from searchpanel.services.exceptions import FetchFailure
from searchpanel.utils.signals import Signal


class ResultState:
    """Loading flag, last failure and the ordered result rows.

    Presentation code reads the properties or :meth:`snapshot`; only the
    coordinator calls the mutators. ``error`` and a non-empty ``results``
    are never set at the same time.
    """

    def __init__(self) -> None:
        self._loading = False
        self._error: FetchFailure | None = None
        self._results: tuple[str, ...] = ()
        self.changed = Signal()

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def error(self) -> FetchFailure | None:
        return self._error

    @property
    def results(self) -> tuple[str, ...]:
        return self._results

    def clear(self) -> None:
        self._results = ()
        self._error = None
        self.changed.emit()

    def set_loading(self, loading: bool) -> None:
        self._loading = loading
        self.changed.emit()

    def set_results(self, results: Sequence[str]) -> None:
        self._results = tuple(results)
        self._error = None
        self.changed.emit()

    def set_error(self, error: FetchFailure) -> None:
        self._error = error
        self._results = ()
        self.changed.emit()

    def snapshot(self) -> ResultSnapshot:
        return ResultSnapshot(
            loading=self._loading,
            error=self._error.message if self._error else None,
            results=self._results,
        )


__all__ = ["ResultState"]
