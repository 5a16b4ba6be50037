"""Pydantic models describing identifiers, thumbnail tiers and resolved references."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple

from pydantic import Field

from medialink.errors import InvalidThumbnailQualityError
from medialink.models.base import MediaLinkBaseModel

_DIMENSIONS = {
    "default": (120, 90),
    "mqdefault": (320, 180),
    "hqdefault": (480, 360),
    "sddefault": (640, 480),
    "maxresdefault": (1280, 720),
}


class LinkKind(str, Enum):
    """Kind of content an extracted identifier addresses."""

    VIDEO = "video"
    PLAYLIST = "playlist"


class LinkShape(str, Enum):
    """URL shapes recognized by the pattern matcher, in precedence order."""

    SHORT = "short"
    STANDARD = "standard"
    PLAYLIST = "playlist"


class ThumbnailQuality(str, Enum):
    """Thumbnail tiers served by the host's static image endpoint.

    Member values are the file-name tokens used in thumbnail URLs. Members are declared
    in order of increasing nominal size; the host does not guarantee every tier exists
    for every video.
    """

    DEFAULT = "default"
    MEDIUM = "mqdefault"
    HIGH = "hqdefault"
    STANDARD = "sddefault"
    MAX_RESOLUTION = "maxresdefault"

    @property
    def dimensions(self) -> Tuple[int, int]:
        """Nominal ``(width, height)`` of the tier in pixels."""

        return _DIMENSIONS[self.value]

    @classmethod
    def parse(cls, value: object) -> "ThumbnailQuality":
        """Coerce a member, token (``mqdefault``) or name (``max-resolution``) to a tier."""

        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            token = value.strip()
            for member in cls:
                if token == member.value:
                    return member
            name = token.upper().replace("-", "_")
            if name in cls.__members__:
                return cls.__members__[name]
        raise InvalidThumbnailQualityError(f"Unknown thumbnail quality: {value!r}")


class LinkMatch(MediaLinkBaseModel):
    """Identifier extracted from a raw link, tagged with the shape that produced it."""

    identifier: str = Field(pattern=r"^[A-Za-z0-9_-]+$")
    kind: LinkKind
    shape: LinkShape


class MediaReference(MediaLinkBaseModel):
    """Playable URL and display title for one raw link.

    Unrecognized links pass through: ``playable_url`` is the raw input and ``identifier``
    and ``kind`` stay unset.
    """

    playable_url: str
    title: str
    identifier: Optional[str] = None
    kind: Optional[LinkKind] = None

    @property
    def recognized(self) -> bool:
        return self.identifier is not None


__all__ = ["LinkKind", "LinkMatch", "LinkShape", "MediaReference", "ThumbnailQuality"]
