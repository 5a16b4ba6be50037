"""Shared test fixtures for the medialink test suite."""

from __future__ import annotations

import logging
from typing import Iterator

import pytest

from medialink.config.settings import Settings, get_settings
from medialink.models.media import ThumbnailQuality
from medialink.services.resolver import MediaLinkResolver, get_resolver

_ENV_VARS = (
    "MEDIALINK_DEFAULT_THUMBNAIL_QUALITY",
    "MEDIALINK_FALLBACK_TITLE",
    "MEDIALINK_BATCH_WORKERS",
    "LOG_LEVEL",
)

VIDEO_ID = "dQw4w9WgXcQ"
CANONICAL_URL = f"https://www.youtube.com/watch?v={VIDEO_ID}"

# Same video, every shape the matcher accepts.
VIDEO_LINKS = [
    f"https://youtu.be/{VIDEO_ID}",
    f"youtu.be/{VIDEO_ID}?t=42",
    f"https://www.youtube.com/watch?v={VIDEO_ID}",
    f"https://www.youtube.com/watch?v={VIDEO_ID}&feature=share",
    f"http://youtube.com/watch?v={VIDEO_ID}#t=10",
    f"https://www.youtube.com/embed/{VIDEO_ID}",
    f"https://www.youtube.com/embed/{VIDEO_ID}?si=HnsgmGwLNw-2grmR",
    f"https://www.youtube.com/v/{VIDEO_ID}",
    f"https://www.youtube.com/u/1/{VIDEO_ID}",
    f"https://youtube.com/shorts/{VIDEO_ID}",
    f"www.youtube.com/live/{VIDEO_ID}",
]

UNRECOGNIZED_LINKS = [
    "https://example.com/music/track-one.mp3",
    "https://vimeo.com/76979871",
    "https://youtu.be/short",
    f"https://youtu.be/{VIDEO_ID}X",
    f"https://www.youtube.com/watch?v={VIDEO_ID}X",
    f"https://www.youtube.com/watch?list={VIDEO_ID}",
    f"https://m.youtube.com/watch?v={VIDEO_ID}",
    "not a url",
    "   ",
]


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    """Keep ambient env vars, ``.env`` files and cached settings out of every test."""

    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    get_resolver.cache_clear()
    yield
    get_settings.cache_clear()
    get_resolver.cache_clear()

    package_logger = logging.getLogger("medialink")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture()
def settings() -> Settings:
    """Settings built from defaults only."""
    return Settings(_env_file=None)


@pytest.fixture()
def resolver(settings: Settings) -> MediaLinkResolver:
    return MediaLinkResolver(settings)


@pytest.fixture()
def hq_resolver() -> MediaLinkResolver:
    """Resolver whose default thumbnail tier is ``hqdefault``."""
    return MediaLinkResolver(Settings(_env_file=None, default_thumbnail_quality=ThumbnailQuality.HIGH))
