"""Pydantic models shared between state holders and the coordinator."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class TriggerSource(str, Enum):
    REFRESH = "refresh"
    FILTER = "filter-change"
    INPUT = "input-change"


class FilterValue(BaseModel):
    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    checked: bool = False


class InputValue(BaseModel):
    model_config = ConfigDict(frozen=True)

    keyword: str = ""
    visible: bool = False


class SearchRequest(BaseModel):
    """Snapshot handed to the fetch collaborator, built fresh per attempt."""

    model_config = ConfigDict(frozen=True)

    keyword: str
    checked: bool


class ResultSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    loading: bool
    error: str | None
    results: tuple[str, ...]


__all__ = [
    "TriggerSource",
    "FilterValue",
    "InputValue",
    "SearchRequest",
    "ResultSnapshot",
]
