"""Runtime configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field, HttpUrl, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from searchpanel.domain.models import TriggerSource


class DebounceSettings(BaseModel):
    """Quiet period per trigger source before a search is released."""

    refresh_seconds: float = Field(default=0.05, ge=0)
    filter_seconds: float = Field(default=0.05, ge=0)
    input_seconds: float = Field(default=0.2, ge=0)

    def window_for(self, source: TriggerSource) -> float:
        if source is TriggerSource.REFRESH:
            return self.refresh_seconds
        if source is TriggerSource.FILTER:
            return self.filter_seconds
        return self.input_seconds


class FetchSettings(BaseModel):
    base_url: HttpUrl | None = Field(
        default=None,
        description="Search endpoint. The demo collaborator is used when unset.",
    )
    api_key: SecretStr | None = None
    request_timeout_seconds: int = Field(default=10, ge=1, le=120)
    demo_failure_rate: float = Field(default=0.2, ge=0, le=1)
    demo_max_delay_seconds: float = Field(default=0.3, ge=0)
    result_count: int = Field(default=5, ge=0, le=100)

    @field_validator("base_url", "api_key", mode="before")
    @classmethod
    def _empty_str_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class PanelSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SEARCHPANEL_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    environment: Literal["dev", "staging", "prod"] = "dev"
    log_level: str = "INFO"

    debounce: DebounceSettings = Field(default_factory=DebounceSettings)
    fetch: FetchSettings = Field(default_factory=FetchSettings)


@lru_cache
def get_settings() -> PanelSettings:
    """Return cached settings instance."""

    return PanelSettings()


__all__ = [
    "DebounceSettings",
    "FetchSettings",
    "PanelSettings",
    "get_settings",
]
