"""Utility helpers shared across medialink modules."""

from medialink.utils.validation import extract_identifier, is_recognized_link, match_link, require_identifier

__all__ = ["extract_identifier", "is_recognized_link", "match_link", "require_identifier"]
