"""Custom exceptions for medialink."""


class MediaLinkError(Exception):
    """Base exception for all medialink errors."""


class InvalidMediaLinkError(MediaLinkError, ValueError):
    """Link does not match any recognized video-host shape."""


class InvalidThumbnailQualityError(MediaLinkError, ValueError):
    """Requested thumbnail tier is not one the host serves."""
