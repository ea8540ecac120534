"""Application entrypoint: plays a scripted session against the search panel."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Literal, Sequence

import httpx

from searchpanel.config import PanelSettings, get_settings
from searchpanel.logging import configure_logging, logger
from searchpanel.services.coordinator import SearchCoordinator
from searchpanel.services.search import DemoSearchService, SearchService


@dataclass(slots=True)
class ScriptStep:
    action: Literal["input", "submit", "hide", "toggle", "refresh"]
    pause_seconds: float
    value: str = ""


DEMO_SCRIPT: tuple[ScriptStep, ...] = (
    ScriptStep("input", 0.03, "p"),
    ScriptStep("input", 0.03, "py"),
    ScriptStep("input", 0.5, "python"),
    ScriptStep("toggle", 0.5),
    ScriptStep("refresh", 0.02),
    ScriptStep("refresh", 0.5),
    ScriptStep("submit", 0.1),
    ScriptStep("hide", 0.5),
    ScriptStep("input", 0.1, ""),
)


def apply_step(coordinator: SearchCoordinator, step: ScriptStep) -> None:
    if step.action == "input":
        coordinator.input_state.on_input(step.value)
    elif step.action == "submit":
        coordinator.input_state.on_submit()
    elif step.action == "hide":
        coordinator.input_state.on_hide()
    elif step.action == "toggle":
        checked = coordinator.filter_state.get_value().checked
        coordinator.filter_state.set_field("checked", not checked)
    elif step.action == "refresh":
        coordinator.refresh()
    else:
        raise ValueError(f"Unknown script action: {step.action}")


async def run_script(coordinator: SearchCoordinator, script: Sequence[ScriptStep]) -> None:
    for step in script:
        apply_step(coordinator, step)
        await asyncio.sleep(step.pause_seconds)
        snapshot = coordinator.result_state.snapshot()
        logger.info(
            "result_state",
            action=step.action,
            value=step.value,
            visible=coordinator.input_state.visible,
            **snapshot.model_dump(),
        )


async def run_panel(settings: PanelSettings, script: Sequence[ScriptStep] = DEMO_SCRIPT) -> None:
    async with httpx.AsyncClient() as client:
        if settings.fetch.base_url is not None:
            service = SearchService(client, settings=settings.fetch)
        else:
            service = DemoSearchService(settings=settings.fetch)
        coordinator = SearchCoordinator(service, debounce=settings.debounce)
        teardown = coordinator.start()
        try:
            await run_script(coordinator, script)
        finally:
            teardown()


async def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("search_panel_starting", environment=settings.environment)
    await run_panel(settings)


def cli() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    cli()
