"""
vidembed.providers - Video platform definitions and the provider registry.

Each module in this package defines one platform: its hostnames, its URL
grammar and its embed encoding. The registry module collects them in
match-priority order.

Example:
    >>> from vidembed.providers import PROVIDERS_BY_NAME
    >>> PROVIDERS_BY_NAME["vimeo"].get_embed_url("123456789", {"muted": True})
    'https://player.vimeo.com/video/123456789?muted=1'
"""

from vidembed.providers.base import VideoProvider
from vidembed.providers.capabilities import Capability, ProviderInfo, ProviderTier
from vidembed.providers.registry import (
    PROVIDER_ALIASES,
    PROVIDERS,
    PROVIDERS_BY_NAME,
    REGISTRY,
    ProviderRegistry,
    get_aliases,
    get_canonical_name,
    get_provider,
    get_provider_info,
    list_all,
    list_by_tier,
)

__all__ = [
    # Base class and metadata
    "VideoProvider",
    "ProviderInfo",
    "ProviderTier",
    "Capability",
    # Registry
    "ProviderRegistry",
    "REGISTRY",
    "PROVIDERS",
    "PROVIDERS_BY_NAME",
    "PROVIDER_ALIASES",
    "get_provider",
    "list_all",
    "list_by_tier",
    "get_provider_info",
    "get_aliases",
    "get_canonical_name",
]
