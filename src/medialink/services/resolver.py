"""Resolve raw music/video links into playable references, one at a time or in batches."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from functools import lru_cache
from typing import Iterable, List, Optional

from medialink.config.settings import Settings, get_settings
from medialink.models.media import LinkKind, MediaReference, ThumbnailQuality
from medialink.services.references import (
    QualityLike,
    build_audio_player_url,
    build_embed_url,
    build_playable_url,
    build_thumbnail_url,
    build_title,
    derive_fallback_title,
)
from medialink.utils.validation import match_link

logger = logging.getLogger(__name__)


class MediaLinkResolver:
    """Turns user-supplied links into canonical references.

    Every method is a pure function of its arguments and the settings captured at
    construction, so one instance can be shared freely between threads.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings or get_settings()

    @property
    def settings(self) -> Settings:
        return self._settings

    def get_thumbnail(self, url: Optional[str], quality: Optional[QualityLike] = None) -> Optional[str]:
        """Return the thumbnail URL for a recognized link, or ``None`` for anything else.

        ``quality`` is only looked at once the link is recognized. A tier outside
        :class:`ThumbnailQuality` raises :class:`~medialink.errors.InvalidThumbnailQualityError`:
        the image endpoint serves a closed set of file names, so no URL can be built for it.
        """

        match = match_link(url)
        if match is None:
            return None
        tier = self._settings.default_thumbnail_quality if quality is None else ThumbnailQuality.parse(quality)
        return build_thumbnail_url(match.identifier, tier, hosts=self._settings.hosts)

    def to_embed_url(self, url: Optional[str], *, audio_only: bool = False) -> Optional[str]:
        """Convert a video link to its embed form; other input comes back unchanged."""

        match = match_link(url)
        if match is None or match.kind != LinkKind.VIDEO:
            return url
        if audio_only:
            return build_audio_player_url(match.identifier, hosts=self._settings.hosts)
        return build_embed_url(match.identifier, hosts=self._settings.hosts)

    def resolve_one(self, url: Optional[str]) -> MediaReference:
        """Resolve a single link.

        Recognized links collapse to the canonical watch URL with a placeholder title.
        Anything else passes through unchanged with a title taken from its last path
        segment.
        """

        raw = _as_text(url)
        match = match_link(raw)
        if match is None:
            logger.debug("Passing through unrecognized link %r", raw)
            return MediaReference(
                playable_url=raw,
                title=derive_fallback_title(raw, self._settings.fallback_title),
            )

        return MediaReference(
            playable_url=build_playable_url(match.identifier, match.kind, hosts=self._settings.hosts),
            title=build_title(match.identifier, match.kind),
            identifier=match.identifier,
            kind=match.kind,
        )

    def resolve_batch(self, urls: Iterable[Optional[str]]) -> List[MediaReference]:
        """Resolve each link independently, preserving order, length and duplicates."""

        items = list(urls)
        workers = min(self._settings.batch_workers, len(items))
        if workers <= 1:
            references = [self.resolve_one(url) for url in items]
        else:
            with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="medialink") as executor:
                references = list(executor.map(self.resolve_one, items))

        recognized = sum(1 for reference in references if reference.recognized)
        logger.info(
            "Resolved %d links (%d recognized, %d passed through)",
            len(references),
            recognized,
            len(references) - recognized,
        )
        return references


def _as_text(url: object) -> str:
    if url is None:
        return ""
    if isinstance(url, str):
        return url
    logger.warning("Coercing non-string link %r to text", url)
    return str(url)


@lru_cache(maxsize=1)
def get_resolver() -> MediaLinkResolver:
    """Return a cached resolver bound to the application settings."""

    return MediaLinkResolver(get_settings())


def get_thumbnail(url: Optional[str], quality: Optional[QualityLike] = None) -> Optional[str]:
    return get_resolver().get_thumbnail(url, quality)


def to_embed_url(url: Optional[str], *, audio_only: bool = False) -> Optional[str]:
    return get_resolver().to_embed_url(url, audio_only=audio_only)


def resolve_one(url: Optional[str]) -> MediaReference:
    return get_resolver().resolve_one(url)


def resolve_batch(urls: Iterable[Optional[str]]) -> List[MediaReference]:
    return get_resolver().resolve_batch(urls)


__all__ = [
    "MediaLinkResolver",
    "get_resolver",
    "get_thumbnail",
    "resolve_batch",
    "resolve_one",
    "to_embed_url",
]
