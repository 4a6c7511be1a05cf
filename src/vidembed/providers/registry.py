"""
vidembed.providers.registry - The process-wide provider registry.

The registry is built once, eagerly, when this module is imported, and is
read-only afterwards. Registration order is match-priority order: the
domain matcher walks ``PROVIDERS`` front to back and the first provider
claiming a host wins, so providers are listed tier by tier (major,
professional, cloud, social, adult).

Functions:
    get_provider: Get a provider instance by name or alias.
    list_all: List all provider names in priority order.
    list_by_tier: List providers of one tier.
    get_provider_info: Get provider metadata as a dict.
    get_aliases: Get the alias mapping.
    get_canonical_name: Resolve an alias to its canonical name.

Example:
    >>> from vidembed.providers.registry import get_provider, list_by_tier
    >>> get_provider("YT").display_name
    'YouTube'
    >>> [p.name for p in list_by_tier("cloud")]
    ['google-drive', 'dropbox']
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from vidembed.exceptions import RegistryError, UnknownProviderError
from vidembed.providers.aws_ivs import AwsIvsProvider
from vidembed.providers.azure_media import AzureMediaProvider
from vidembed.providers.base import VideoProvider
from vidembed.providers.bilibili import BilibiliProvider
from vidembed.providers.bitchute import BitchuteProvider
from vidembed.providers.brightcove import BrightcoveProvider
from vidembed.providers.capabilities import ProviderTier
from vidembed.providers.cloudflare import CloudflareProvider
from vidembed.providers.dailymotion import DailymotionProvider
from vidembed.providers.dropbox import DropboxProvider
from vidembed.providers.facebook import FacebookProvider
from vidembed.providers.google_drive import GoogleDriveProvider
from vidembed.providers.instagram import InstagramProvider
from vidembed.providers.jwplayer import JwplayerProvider
from vidembed.providers.kaltura import KalturaProvider
from vidembed.providers.kick import KickProvider
from vidembed.providers.mux import MuxProvider
from vidembed.providers.niconico import NiconicoProvider
from vidembed.providers.odysee import OdyseeProvider
from vidembed.providers.panopto import PanoptoProvider
from vidembed.providers.pornhub import PornhubProvider
from vidembed.providers.redtube import RedtubeProvider
from vidembed.providers.rumble import RumbleProvider
from vidembed.providers.spankbang import SpankbangProvider
from vidembed.providers.twitch import TwitchProvider
from vidembed.providers.twitter import TwitterProvider
from vidembed.providers.vimeo import VimeoProvider
from vidembed.providers.vk import VkProvider
from vidembed.providers.wistia import WistiaProvider
from vidembed.providers.xhamster import XhamsterProvider
from vidembed.providers.youporn import YoupornProvider
from vidembed.providers.youtube import YoutubeProvider

logger = logging.getLogger(__name__)


# Provider classes in match-priority order
PROVIDER_CLASSES: tuple[type[VideoProvider], ...] = (
    # Tier 1: Major platforms
    YoutubeProvider,
    VimeoProvider,
    DailymotionProvider,
    TwitchProvider,
    KickProvider,
    RumbleProvider,
    OdyseeProvider,
    BitchuteProvider,
    VkProvider,
    BilibiliProvider,
    NiconicoProvider,
    # Tier 2: Professional/Enterprise platforms
    WistiaProvider,
    BrightcoveProvider,
    KalturaProvider,
    PanoptoProvider,
    JwplayerProvider,
    CloudflareProvider,
    MuxProvider,
    AwsIvsProvider,
    AzureMediaProvider,
    # Tier 3: Cloud storage
    GoogleDriveProvider,
    DropboxProvider,
    # Tier 4: Social media
    FacebookProvider,
    InstagramProvider,
    TwitterProvider,
    # Tier 5: Adult content
    PornhubProvider,
    YoupornProvider,
    RedtubeProvider,
    XhamsterProvider,
    SpankbangProvider,
)


# Aliases for convenience - maps alias -> canonical name
PROVIDER_ALIASES: dict[str, str] = {
    "yt": "youtube",
    "youtu.be": "youtube",
    "dai.ly": "dailymotion",
    "vkontakte": "vk",
    "nicovideo": "niconico",
    "nico": "niconico",
    "jw": "jwplayer",
    "jw-player": "jwplayer",
    "cloudflare-stream": "cloudflare",
    "ivs": "aws-ivs",
    "azure": "azure-media",
    "drive": "google-drive",
    "gdrive": "google-drive",
    "fb": "facebook",
    "ig": "instagram",
    "x": "twitter",
}


class ProviderRegistry:
    """Immutable, ordered collection of providers with a name index.

    Args:
        providers: Provider instances in match-priority order.

    Raises:
        RegistryError: If names collide, a provider declares no domains,
            or the tiers are out of priority order.
    """

    def __init__(self, providers: Iterable[VideoProvider]):
        ordered = tuple(providers)
        by_name: dict[str, VideoProvider] = {}
        previous_rank = 0

        for provider in ordered:
            if not provider.name or provider.name != provider.name.lower():
                raise RegistryError(f"Provider name must be a lowercase slug: {provider.name!r}")
            if provider.name in by_name:
                raise RegistryError(f"Duplicate provider name: {provider.name!r}")
            if not provider.domains:
                raise RegistryError(f"Provider {provider.name!r} declares no domains")
            if provider.tier.rank < previous_rank:
                raise RegistryError(
                    f"Provider {provider.name!r} ({provider.tier.value}) is registered "
                    f"after a lower-priority tier"
                )
            previous_rank = provider.tier.rank
            by_name[provider.name] = provider

        self._providers = ordered
        self._by_name = MappingProxyType(by_name)

    @property
    def providers(self) -> tuple[VideoProvider, ...]:
        return self._providers

    @property
    def by_name(self) -> Mapping[str, VideoProvider]:
        return self._by_name

    def __iter__(self):
        return iter(self._providers)

    def __len__(self) -> int:
        return len(self._providers)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name


REGISTRY = ProviderRegistry(cls() for cls in PROVIDER_CLASSES)

# Read-only views for callers that enumerate or look up providers directly
PROVIDERS: tuple[VideoProvider, ...] = REGISTRY.providers
PROVIDERS_BY_NAME: Mapping[str, VideoProvider] = REGISTRY.by_name

logger.debug(f"Registered {len(REGISTRY)} video providers")


def _resolve_name(name: str) -> str:
    """Resolve provider aliases to canonical names.

    Example:
        >>> _resolve_name("X")
        'twitter'
        >>> _resolve_name(" YouTube ")
        'youtube'
    """
    normalized = name.lower().strip()
    return PROVIDER_ALIASES.get(normalized, normalized)


def get_provider(name: str) -> VideoProvider:
    """Get a provider instance by name or alias (case-insensitive).

    Raises:
        UnknownProviderError: If the name matches no provider.
    """
    canonical = _resolve_name(name)
    provider = PROVIDERS_BY_NAME.get(canonical)
    if provider is None:
        raise UnknownProviderError(name, list_all())
    return provider


def list_all() -> list[str]:
    """List all provider names in match-priority order."""
    return [provider.name for provider in PROVIDERS]


def list_by_tier(tier: ProviderTier | str) -> list[VideoProvider]:
    """List providers of one tier, in match-priority order.

    Raises:
        ValueError: If tier is not a valid ProviderTier value.
    """
    tier = ProviderTier(tier)
    return [provider for provider in PROVIDERS if provider.tier is tier]


def get_provider_info(name: str) -> dict:
    """Get provider metadata as a plain dict.

    Example:
        >>> get_provider_info("ig")["display_name"]
        'Instagram'
    """
    return get_provider(name).info.to_dict()


def get_aliases() -> dict[str, str]:
    """Get a copy of the alias mapping (alias -> canonical name)."""
    return PROVIDER_ALIASES.copy()


def get_canonical_name(name: str) -> str:
    """Get the canonical name for a provider.

    Raises:
        UnknownProviderError: If name doesn't map to a known provider.
    """
    return get_provider(name).name


__all__ = [
    "ProviderRegistry",
    "REGISTRY",
    "PROVIDERS",
    "PROVIDERS_BY_NAME",
    "PROVIDER_CLASSES",
    "PROVIDER_ALIASES",
    "get_provider",
    "list_all",
    "list_by_tier",
    "get_provider_info",
    "get_aliases",
    "get_canonical_name",
]
