"""Pydantic models describing resolved media links."""

from medialink.models.media import LinkKind, LinkMatch, LinkShape, MediaReference, ThumbnailQuality

__all__ = ["LinkKind", "LinkMatch", "LinkShape", "MediaReference", "ThumbnailQuality"]
