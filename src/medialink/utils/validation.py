"""Pattern matching for pasted video-host links.

Links are classified against a fixed, ordered list of URL shapes. The first shape whose
pattern matches wins and later shapes are never tried. Matching is purely structural: an
identifier with the right grammar is accepted whether or not the content exists.
"""

from __future__ import annotations

import logging
import re
from typing import Optional, Tuple

from medialink.errors import InvalidMediaLinkError
from medialink.models.media import LinkKind, LinkMatch, LinkShape

logger = logging.getLogger(__name__)

_VIDEO_ID = r"([A-Za-z0-9_-]{11})"
_HOST_PREFIX = r"^(?:https?://)?(?:www\.)?"

SHORT_PATTERN = re.compile(_HOST_PREFIX + r"youtu\.be/" + _VIDEO_ID + r"(?:[?#].*)?$")
STANDARD_PATTERN = re.compile(
    _HOST_PREFIX
    + r"youtube\.com/(?:watch\?v=|embed/|v/|u/[A-Za-z0-9_]/|shorts/|live/|playlist\?list=)"
    + _VIDEO_ID
    + r"(?:[?&#].*)?$",
)
PLAYLIST_PATTERN = re.compile(
    _HOST_PREFIX + r"youtube\.com/playlist\?list=([A-Za-z0-9_-]+)(?:[?&#].*)?$"
)

# Ordered by precedence.
MATCHERS: Tuple[Tuple[LinkShape, LinkKind, re.Pattern[str]], ...] = (
    (LinkShape.SHORT, LinkKind.VIDEO, SHORT_PATTERN),
    (LinkShape.STANDARD, LinkKind.VIDEO, STANDARD_PATTERN),
    (LinkShape.PLAYLIST, LinkKind.PLAYLIST, PLAYLIST_PATTERN),
)


def match_link(url: Optional[str]) -> Optional[LinkMatch]:
    """Classify ``url`` and return the tagged identifier, or ``None`` when nothing matches."""

    if not url or not isinstance(url, str):
        return None

    for shape, kind, pattern in MATCHERS:
        found = pattern.fullmatch(url)
        if found:
            logger.debug("Matched %s link %r as %s", shape.value, url, found.group(1))
            return LinkMatch(identifier=found.group(1), kind=kind, shape=shape)

    logger.debug("No recognized link shape for %r", url)
    return None


def extract_identifier(url: Optional[str]) -> Optional[str]:
    """Return the video or playlist identifier embedded in ``url``, if any."""

    match = match_link(url)
    return match.identifier if match else None


def is_recognized_link(url: Optional[str]) -> bool:
    """Return True when ``url`` matches one of the recognized link shapes."""

    return match_link(url) is not None


def require_identifier(url: Optional[str]) -> str:
    """Extract an identifier, raising :class:`InvalidMediaLinkError` when there is none."""

    identifier = extract_identifier(url)
    if identifier is None:
        raise InvalidMediaLinkError(f"Not a recognized video link: {url!r}")
    return identifier


__all__ = [
    "MATCHERS",
    "PLAYLIST_PATTERN",
    "SHORT_PATTERN",
    "STANDARD_PATTERN",
    "extract_identifier",
    "is_recognized_link",
    "match_link",
    "require_identifier",
]
