"""Fetch collaborators consumed by the search coordinator."""

from __future__ import annotations

import asyncio
import random
from typing import Any, Sequence

import httpx

from searchpanel.config import FetchSettings
from searchpanel.domain.models import SearchRequest
from searchpanel.logging import logger
from searchpanel.services.exceptions import FetchFailure


class _BaseSearchService:
    def __init__(self, settings: FetchSettings | None = None) -> None:
        self._settings = settings or FetchSettings()

    async def search(self, request: SearchRequest) -> Sequence[str]:
        raise NotImplementedError

    async def __call__(self, request: SearchRequest) -> Sequence[str]:
        return await self.search(request)


class DemoSearchService(_BaseSearchService):
    """Stand-in backend with random latency and random failures."""

    failure_message = "Some error happend"

    def __init__(
        self,
        settings: FetchSettings | None = None,
        *,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(settings)
        self._rng = rng or random.Random()

    async def search(self, request: SearchRequest) -> Sequence[str]:
        logger.info("demo_fetch", keyword=request.keyword, checked=request.checked)
        if self._rng.random() < self._settings.demo_failure_rate:
            raise FetchFailure(self.failure_message)
        await asyncio.sleep(self._rng.random() * self._settings.demo_max_delay_seconds)
        return [
            f"{request.keyword} - {num}|checked:{'true' if request.checked else 'false'}"
            for num in range(1, self._settings.result_count + 1)
        ]


class SearchService(_BaseSearchService):
    """Queries a remote search endpoint over HTTP."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: FetchSettings | None = None,
    ) -> None:
        super().__init__(settings)
        self._client = http_client

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        api_key = self._settings.api_key
        if api_key is not None:
            headers["Authorization"] = f"Bearer {api_key.get_secret_value()}"
        return headers

    async def search(self, request: SearchRequest) -> Sequence[str]:
        if self._settings.base_url is None:
            raise FetchFailure("Search endpoint is not configured.")

        params = {
            "q": request.keyword,
            "checked": "true" if request.checked else "false",
        }
        try:
            response = await self._client.get(
                str(self._settings.base_url),
                params=params,
                headers=self._headers(),
                timeout=self._settings.request_timeout_seconds,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            detail = exc.response.text[:500] if exc.response is not None else str(exc)
            status_code = exc.response.status_code if exc.response is not None else "unknown"
            raise FetchFailure(f"Search request failed ({status_code}): {detail}") from exc
        except httpx.RequestError as exc:
            raise FetchFailure(f"Search request failed: {exc}") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise FetchFailure("Search endpoint returned invalid JSON.") from exc
        return self._parse_results(payload)

    @staticmethod
    def _parse_results(payload: Any) -> list[str]:
        if isinstance(payload, dict):
            payload = payload.get("results")
        if not isinstance(payload, list):
            raise FetchFailure("Search endpoint returned an unexpected payload.")
        return [str(item) for item in payload]


__all__ = ["DemoSearchService", "SearchService"]
