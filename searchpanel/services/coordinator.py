"""Debounced, cancellable search pipeline behind the result panel."""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, Sequence

from searchpanel.config import DebounceSettings
from searchpanel.domain.models import SearchRequest, TriggerSource
from searchpanel.domain.outcome import Err, Ok, Outcome
from searchpanel.logging import logger
from searchpanel.services.exceptions import CoordinatorStateError, FetchFailure
from searchpanel.state.inputs import FilterState, InputSearchState
from searchpanel.state.results import ResultState
from searchpanel.utils.debounce import Debouncer
from searchpanel.utils.signals import Signal, Unsubscribe

Fetcher = Callable[[SearchRequest], Awaitable[Sequence[str]]]
Teardown = Callable[[], None]


class SearchCoordinator:
    """Merges refresh, filter and keyword triggers into one search stream.

    Each trigger is dropped while the panel is hidden. Otherwise the result
    state is reset at once and the trigger waits out the debounce window of
    its own source. Once released, the newest search supersedes whatever
    fetch is still running: every release bumps a generation counter and
    outcomes carrying an older generation are ignored. Visibility is checked
    again right before fetching and once more when the outcome arrives.
    """

    def __init__(
        self,
        fetch: Fetcher,
        *,
        filter_state: FilterState | None = None,
        input_state: InputSearchState | None = None,
        result_state: ResultState | None = None,
        debounce: DebounceSettings | None = None,
    ) -> None:
        self._fetch = fetch
        self.filter_state = filter_state or FilterState()
        self.input_state = input_state or InputSearchState()
        self.result_state = result_state or ResultState()
        self._debounce = debounce or DebounceSettings()
        self._refresh = Signal()

        self._debouncers = {
            source: Debouncer(self._debounce.window_for(source)) for source in TriggerSource
        }
        self._subscriptions: list[Unsubscribe] = []
        self._generation = 0
        self._fetch_task: asyncio.Task[None] | None = None
        self._started = False
        self._closed = False

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def pending_sources(self) -> tuple[TriggerSource, ...]:
        """Sources whose debounce window is still running."""

        return tuple(source for source, debouncer in self._debouncers.items() if debouncer.pending)

    @property
    def running(self) -> bool:
        return self._started and not self._closed

    def start(self) -> Teardown:
        """Begin listening to all trigger sources.

        Returns a callable that stops listening, cancels pending timers and
        the in-flight fetch. Result state is left as it is.
        """

        if self._started:
            raise CoordinatorStateError("Search coordinator can only be started once.")
        self._started = True
        self._subscriptions = [
            self._refresh.subscribe(lambda: self._on_trigger(TriggerSource.REFRESH)),
            self.filter_state.search.subscribe(lambda: self._on_trigger(TriggerSource.FILTER)),
            self.input_state.search.subscribe(lambda: self._on_trigger(TriggerSource.INPUT)),
            self.input_state.visibility_changed.subscribe(self._on_visibility_changed),
        ]
        logger.info(
            "search_coordinator_started",
            windows={source.value: debouncer.delay for source, debouncer in self._debouncers.items()},
        )
        return self.teardown

    def teardown(self) -> None:
        if self._closed or not self._started:
            return
        self._closed = True
        for unsubscribe in self._subscriptions:
            unsubscribe()
        self._subscriptions.clear()
        for debouncer in self._debouncers.values():
            debouncer.cancel()
        self._generation += 1
        self._cancel_fetch()
        logger.info("search_coordinator_stopped", generation=self._generation)

    def refresh(self) -> None:
        self._refresh.emit()

    def _on_trigger(self, source: TriggerSource) -> None:
        if not self.input_state.visible:
            logger.debug("search_trigger_dropped", source=source.value)
            return
        self.result_state.clear()
        self.result_state.set_loading(True)
        self._debouncers[source].submit(lambda: self._on_search_ready(source))

    def _on_visibility_changed(self) -> None:
        if not self.input_state.visible and self.result_state.loading:
            self.result_state.set_loading(False)

    def _on_search_ready(self, source: TriggerSource) -> None:
        if self._closed:
            return
        self._generation += 1
        self._cancel_fetch()

        if not self.input_state.visible:
            logger.debug("search_fetch_skipped", source=source.value, generation=self._generation)
            self.result_state.set_loading(False)
            self.result_state.clear()
            return

        request = SearchRequest(
            keyword=self.input_state.keyword,
            checked=self.filter_state.get_value().checked,
        )
        logger.info(
            "search_fetch_started",
            source=source.value,
            generation=self._generation,
            keyword=request.keyword,
            checked=request.checked,
        )
        loop = asyncio.get_running_loop()
        self._fetch_task = loop.create_task(self._run_fetch(self._generation, request))

    async def _run_fetch(self, generation: int, request: SearchRequest) -> None:
        try:
            outcome = await self._materialize(request)
        except asyncio.CancelledError:
            # Superseded or torn down: the coordinator cancelled this task itself.
            if generation != self._generation:
                raise
            outcome = Err(FetchFailure("Search was cancelled."))
        if generation != self._generation:
            logger.debug("search_outcome_discarded", generation=generation, reason="stale")
            return
        self._fetch_task = None
        self._handle_outcome(generation, outcome)

    async def _materialize(self, request: SearchRequest) -> Outcome:
        try:
            results = await self._fetch(request)
        except FetchFailure as exc:
            return Err(exc)
        except Exception as exc:
            return Err(FetchFailure(str(exc) or exc.__class__.__name__))
        return Ok(tuple(results))

    def _handle_outcome(self, generation: int, outcome: Outcome) -> None:
        self.result_state.set_loading(False)
        if not self.input_state.visible:
            logger.debug("search_outcome_discarded", generation=generation, reason="hidden")
            return
        if isinstance(outcome, Err):
            logger.warning("search_fetch_failed", generation=generation, error=outcome.error.message)
            self.result_state.set_error(outcome.error)
        else:
            logger.info("search_outcome_applied", generation=generation, count=len(outcome.results))
            self.result_state.set_results(outcome.results)

    def _cancel_fetch(self) -> None:
        if self._fetch_task is not None:
            self._fetch_task.cancel()
            self._fetch_task = None


__all__ = ["Fetcher", "SearchCoordinator", "Teardown"]
