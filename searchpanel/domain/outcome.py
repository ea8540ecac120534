"""Fetch outcomes delivered as values instead of raised exceptions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from searchpanel.services.exceptions import FetchFailure


@dataclass(slots=True, frozen=True)
class Ok:
    results: tuple[str, ...]


@dataclass(slots=True, frozen=True)
class Err:
    error: FetchFailure


Outcome = Union[Ok, Err]

__all__ = ["Ok", "Err", "Outcome"]
