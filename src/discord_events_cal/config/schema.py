from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, HttpUrl, ValidationError, field_validator


class ServiceConfig(BaseModel):
    snapshot_dir: str = "data/snapshots"
    reload_interval_seconds: int = 10

    @field_validator("reload_interval_seconds")
    @classmethod
    def _reload_interval_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("reload_interval_seconds must be >= 1")
        return v


class ExportConfig(BaseModel):
    root_url: HttpUrl
    uid_domain: str = "discord-events.magicalcodewit.ch"
    product_name: str = "Discord Events Export"
    product_version: str = "0.1.0"
    calendar_scale: str | None = "GREGORIAN"
    cdn_base: HttpUrl = Field(default="https://cdn.discordapp.com", validate_default=True)
    service: ServiceConfig = Field(default_factory=ServiceConfig)

    @field_validator("uid_domain", "product_name")
    @classmethod
    def _non_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("value must be non-empty")
        return v

    def calendar_url(self, guild_id: str) -> str:
        return f"{str(self.root_url).rstrip('/')}/guilds/{guild_id}/calendar.ics"


def validate_config(data: dict[str, Any]) -> ExportConfig:
    try:
        return ExportConfig.model_validate(data)
    except ValidationError as exc:
        raise ValueError(f"Invalid export config: {exc}") from exc
