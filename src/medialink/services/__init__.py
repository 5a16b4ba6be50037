"""Service layer: reference building and link resolution."""

from medialink.services.resolver import MediaLinkResolver, get_resolver

__all__ = ["MediaLinkResolver", "get_resolver"]
