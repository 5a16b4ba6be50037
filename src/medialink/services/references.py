"""Build canonical, embed, thumbnail and title strings from extracted identifiers.

Everything here is string templating; nothing checks that the target exists.
"""

from __future__ import annotations

import re
from typing import Optional, Union
from urllib.parse import urlencode

from medialink.config.settings import HostConfig
from medialink.models.media import LinkKind, ThumbnailQuality

DEFAULT_HOSTS = HostConfig()
DEFAULT_FALLBACK_TITLE = "Unknown"

_TRAILING_EXTENSION = re.compile(r"\.[^/.]+\Z")

# Query parameters for the hidden, looping, audio-only background-music player.
AUDIO_PLAYER_PARAMS = {
    "enablejsapi": "1",
    "controls": "0",
    "showinfo": "0",
    "rel": "0",
    "fs": "0",
    "modestbranding": "1",
    "disablekb": "1",
    "iv_load_policy": "3",
    "loop": "1",
}

QualityLike = Union[ThumbnailQuality, str]


def build_playable_url(
    identifier: str, kind: LinkKind = LinkKind.VIDEO, *, hosts: HostConfig = DEFAULT_HOSTS
) -> str:
    """Return the long-form watch URL (or playlist URL) for ``identifier``."""

    if kind == LinkKind.PLAYLIST:
        return f"{hosts.video_base_url}/playlist?list={identifier}"
    return f"{hosts.video_base_url}/watch?v={identifier}"


def build_thumbnail_url(
    identifier: str,
    quality: Optional[QualityLike] = None,
    *,
    hosts: HostConfig = DEFAULT_HOSTS,
) -> str:
    """Return the static thumbnail URL for ``identifier`` at ``quality``.

    ``quality`` defaults to :attr:`ThumbnailQuality.MEDIUM`. Unknown tiers raise
    :class:`~medialink.errors.InvalidThumbnailQualityError`.
    """

    tier = ThumbnailQuality.MEDIUM if quality is None else ThumbnailQuality.parse(quality)
    return f"{hosts.thumbnail_base_url}/vi/{identifier}/{tier.value}.jpg"


def build_embed_url(identifier: str, *, hosts: HostConfig = DEFAULT_HOSTS) -> str:
    return f"{hosts.video_base_url}/embed/{identifier}"


def build_audio_player_url(identifier: str, *, hosts: HostConfig = DEFAULT_HOSTS) -> str:
    """Return an embed URL configured as a looping audio-only player.

    Looping a single video requires listing it as its own playlist.
    """

    params = {**AUDIO_PLAYER_PARAMS, "playlist": identifier}
    return f"{build_embed_url(identifier, hosts=hosts)}?{urlencode(params)}"


def build_title(identifier: str, kind: LinkKind = LinkKind.VIDEO) -> str:
    """Return the placeholder display label for a recognized identifier."""

    if kind == LinkKind.PLAYLIST:
        return f"YouTube Playlist {identifier}"
    return f"YouTube Video {identifier}"


def derive_fallback_title(url: Optional[str], fallback: str = DEFAULT_FALLBACK_TITLE) -> str:
    """Derive a title from the last path segment of an unrecognized link.

    A single trailing ``.ext`` is removed (``track-one.mp3`` -> ``track-one``). Anything
    after the last dot counts as the extension, so ``track.mp3?x=1`` also becomes
    ``track``. Empty results fall back to ``fallback``.
    """

    segment = (url or "").rsplit("/", 1)[-1]
    title = _TRAILING_EXTENSION.sub("", segment, count=1)
    return title or fallback


__all__ = [
    "AUDIO_PLAYER_PARAMS",
    "DEFAULT_FALLBACK_TITLE",
    "DEFAULT_HOSTS",
    "build_audio_player_url",
    "build_embed_url",
    "build_playable_url",
    "build_thumbnail_url",
    "build_title",
    "derive_fallback_title",
]
