"""Shared base model definitions for medialink value objects."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class MediaLinkBaseModel(BaseModel):
    """Base model for immutable resolution results."""

    model_config = ConfigDict(extra="forbid", frozen=True)


__all__ = ["MediaLinkBaseModel"]
