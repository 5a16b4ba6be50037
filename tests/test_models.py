"""Tests for thumbnail tiers and reference models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from medialink.errors import InvalidThumbnailQualityError
from medialink.models.media import LinkKind, LinkMatch, LinkShape, MediaReference, ThumbnailQuality


def test_tiers_are_declared_in_increasing_size() -> None:
    widths = [tier.dimensions[0] for tier in ThumbnailQuality]

    assert widths == sorted(widths)
    assert ThumbnailQuality.MAX_RESOLUTION.dimensions == (1280, 720)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (ThumbnailQuality.HIGH, ThumbnailQuality.HIGH),
        ("sddefault", ThumbnailQuality.STANDARD),
        (" mqdefault ", ThumbnailQuality.MEDIUM),
        ("MAX_RESOLUTION", ThumbnailQuality.MAX_RESOLUTION),
        ("max-resolution", ThumbnailQuality.MAX_RESOLUTION),
        ("default", ThumbnailQuality.DEFAULT),
    ],
)
def test_parse_accepts_tokens_and_names(value: object, expected: ThumbnailQuality) -> None:
    assert ThumbnailQuality.parse(value) is expected


@pytest.mark.parametrize("value", ["", "4k", None, 3])
def test_parse_rejects_unknown_values(value: object) -> None:
    with pytest.raises(InvalidThumbnailQualityError, match="Unknown thumbnail quality"):
        ThumbnailQuality.parse(value)


def test_reference_is_immutable() -> None:
    reference = MediaReference(playable_url="https://example.com/a.mp3", title="a")

    with pytest.raises(ValidationError):
        reference.title = "b"  # type: ignore[misc]


def test_reference_rejects_unknown_fields() -> None:
    with pytest.raises(ValidationError):
        MediaReference(playable_url="", title="Unknown", thumbnail="x")  # type: ignore[call-arg]


def test_link_match_rejects_identifier_outside_charset() -> None:
    with pytest.raises(ValidationError):
        LinkMatch(identifier="not valid!", kind=LinkKind.VIDEO, shape=LinkShape.SHORT)
