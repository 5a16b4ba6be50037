"""Media link resolution for wedding-site music and video fields."""

from medialink.services.resolver import (
    MediaLinkResolver,
    get_thumbnail,
    resolve_batch,
    resolve_one,
    to_embed_url,
)
from medialink.utils.validation import extract_identifier, is_recognized_link, match_link

__version__ = "0.1.0"

__all__ = [
    "MediaLinkResolver",
    "__version__",
    "extract_identifier",
    "get_thumbnail",
    "is_recognized_link",
    "match_link",
    "resolve_batch",
    "resolve_one",
    "to_embed_url",
]
