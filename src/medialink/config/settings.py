"""Application settings loaded from environment variables and config files."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, PositiveInt, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from medialink.config import CONFIG_ROOT
from medialink.models.media import ThumbnailQuality


class HostConfig(BaseModel):
    """Base URLs used when building canonical, embed and thumbnail links."""

    video_base_url: str = "https://www.youtube.com"
    thumbnail_base_url: str = "https://img.youtube.com"

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("video_base_url", "thumbnail_base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


def _load_hosts(hosts_path: Path) -> HostConfig:
    if not hosts_path.exists():
        return HostConfig()

    raw_data = yaml.safe_load(hosts_path.read_text(encoding="utf-8")) or {}
    return HostConfig(**raw_data.get("hosts", {}))


class Settings(BaseSettings):
    """Primary settings for link resolution and the medialink CLI."""

    default_thumbnail_quality: ThumbnailQuality = Field(
        default=ThumbnailQuality.MEDIUM, alias="MEDIALINK_DEFAULT_THUMBNAIL_QUALITY"
    )
    fallback_title: str = Field(default="Unknown", min_length=1, alias="MEDIALINK_FALLBACK_TITLE")
    batch_workers: PositiveInt = Field(default=1, alias="MEDIALINK_BATCH_WORKERS")
    log_level: str = Field(default="WARNING", alias="LOG_LEVEL")

    hosts: HostConfig = Field(default_factory=lambda: _load_hosts(CONFIG_ROOT / "hosts.yaml"))

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore", populate_by_name=True
    )

    @field_validator("default_thumbnail_quality", mode="before")
    @classmethod
    def _parse_quality(cls, value: object) -> ThumbnailQuality:
        return ThumbnailQuality.parse(value)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached instance of the application settings."""

    return Settings()


__all__ = ["HostConfig", "Settings", "get_settings"]
