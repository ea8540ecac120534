"""Shared pytest fixtures for coordinator and state tests."""

from __future__ import annotations

import asyncio

import pytest
import pytest_asyncio

from searchpanel.config import DebounceSettings
from searchpanel.services.coordinator import SearchCoordinator


class ControlledFetcher:
    """Fetch collaborator whose outcomes are released by the test."""

    def __init__(self) -> None:
        self.requests = []
        self.futures: list[asyncio.Future] = []

    async def __call__(self, request):
        future = asyncio.get_running_loop().create_future()
        self.requests.append(request)
        self.futures.append(future)
        return await future

    def resolve(self, index: int, results) -> None:
        future = self.futures[index]
        if not future.done():
            future.set_result(results)

    def fail(self, index: int, exc: Exception) -> None:
        future = self.futures[index]
        if not future.done():
            future.set_exception(exc)


@pytest.fixture
def fast_debounce() -> DebounceSettings:
    return DebounceSettings(refresh_seconds=0.02, filter_seconds=0.02, input_seconds=0.08)


@pytest.fixture
def fetcher() -> ControlledFetcher:
    return ControlledFetcher()


@pytest_asyncio.fixture
async def coordinator(fetcher, fast_debounce):
    instance = SearchCoordinator(fetcher, debounce=fast_debounce)
    teardown = instance.start()
    try:
        yield instance
    finally:
        teardown()
