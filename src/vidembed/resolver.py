"""
Resolution facade: detect, extract, embed.

Every function taking a URL is total: malformed input, unknown hosts and
unparsable links come back as None (or False), never as exceptions.

    detect_provider(url)            -> VideoProvider | None
    extract_video_id(url)           -> Resolution | None
    get_embed_url_from_video_url()  -> str | None
    is_adult_content(url)           -> bool
    probe(url)                      -> Probe

A caller can tell "not a video platform" from "video platform, but not a
playable link" either by combining detect_provider with extract_video_id
or in one call with probe().
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from vidembed.matching import detect_provider
from vidembed.models.embed_options import EmbedOptions
from vidembed.models.resolution import Probe, Resolution, ResolutionStatus
from vidembed.parsing.urls import parse_url
from vidembed.providers.base import VideoProvider
from vidembed.providers.capabilities import ProviderTier
from vidembed.providers.registry import get_provider

logger = logging.getLogger(__name__)

OptionsLike = EmbedOptions | Mapping[str, Any] | None


def extract_video_id(url: str) -> Resolution | None:
    """Extract the provider and video identifier from a URL.

    Example:
        >>> res = extract_video_id("https://www.dailymotion.com/video/x123abc_title")
        >>> res.provider.name, res.video_id
        ('dailymotion', 'x123abc')

    Returns:
        Resolution, or None if no provider matches or the matched
        provider finds no identifier in the URL.
    """
    provider = detect_provider(url)
    if provider is None:
        return None

    video_id = provider.extract_video_id(url)
    if not video_id:
        logger.debug(f"{provider.display_name} URL has no video ID: {url!r}")
        return None
    return Resolution(provider=provider, video_id=video_id)


def get_embed_url(
    provider: VideoProvider | str,
    video_id: str,
    options: OptionsLike = None,
) -> str | None:
    """Build an embed URL from a previously extracted identifier.

    Args:
        provider: Provider instance, or a registry name or alias.
        video_id: Identifier returned by extract_video_id.
        options: EmbedOptions, a mapping of its fields, or None.

    Returns:
        Embed URL, or None if video_id is malformed for the provider.

    Raises:
        UnknownProviderError: If provider is a name that is not registered.
    """
    if isinstance(provider, str):
        provider = get_provider(provider)
    return provider.get_embed_url(video_id, options)


def get_embed_url_from_video_url(url: str, options: OptionsLike = None) -> str | None:
    """Resolve a video URL straight to an embed URL.

    Example:
        >>> get_embed_url_from_video_url("https://vimeo.com/123456789", {"autoplay": True})
        'https://player.vimeo.com/video/123456789?autoplay=1'
    """
    resolution = extract_video_id(url)
    if resolution is None:
        return None
    return resolution.embed_url(options)


def is_adult_content(url: str) -> bool:
    """Check whether a URL belongs to an adult-tier provider.

    Only the tier is consulted, never the specific provider. Unknown and
    malformed URLs are not adult content.
    """
    provider = detect_provider(url)
    return provider is not None and provider.tier is ProviderTier.ADULT


def probe(url: str) -> Probe:
    """Resolve a URL and report how far resolution got.

    Example:
        >>> probe("https://www.youtube.com/").status
        <ResolutionStatus.NO_VIDEO_ID: 'no_video_id'>
        >>> probe("not-a-url").status
        <ResolutionStatus.NOT_A_URL: 'not_a_url'>
    """
    if parse_url(url) is None:
        return Probe(url=url, status=ResolutionStatus.NOT_A_URL)

    provider = detect_provider(url)
    if provider is None:
        return Probe(url=url, status=ResolutionStatus.UNKNOWN_HOST)

    video_id = provider.extract_video_id(url)
    if not video_id:
        return Probe(url=url, status=ResolutionStatus.NO_VIDEO_ID, provider=provider)
    return Probe(url=url, status=ResolutionStatus.OK, provider=provider, video_id=video_id)
