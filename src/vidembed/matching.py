"""
Domain matching: map a URL's hostname to a registered provider.

The hostname is lower-cased and one leading ``www.`` is removed. A
provider matches when the host equals one of its declared domains or is a
subdomain of one (``player.vimeo.com`` matches ``vimeo.com``). Providers
are tried in registry order and the first match wins.
"""

from __future__ import annotations

import logging

from vidembed.parsing.urls import host_of, normalize_host, parse_url
from vidembed.providers.base import VideoProvider
from vidembed.providers.registry import REGISTRY, ProviderRegistry

logger = logging.getLogger(__name__)


def match_host(host: str, registry: ProviderRegistry | None = None) -> VideoProvider | None:
    """Find the first provider claiming a hostname.

    Args:
        host: Hostname, with or without ``www.``; case-insensitive.
        registry: Registry to search. Defaults to the global registry.

    Returns:
        The matching provider, or None.
    """
    if registry is None:
        registry = REGISTRY
    host = normalize_host(host)
    for provider in registry:
        if provider.claims_host(host):
            return provider
    return None


def detect_provider(url: str, registry: ProviderRegistry | None = None) -> VideoProvider | None:
    """Detect which provider handles a URL.

    Never raises: non-strings, strings without a scheme or hostname, and
    URLs the standard library cannot split all return None.

    Args:
        url: Arbitrary input, usually a user-supplied video link.
        registry: Registry to search. Defaults to the global registry.

    Returns:
        The matching provider, or None if the input is not a URL or no
        provider claims its host.
    """
    parsed = parse_url(url)
    if parsed is None:
        logger.debug(f"Not a URL: {url!r}")
        return None

    provider = match_host(host_of(parsed), registry)
    if provider is None:
        logger.debug(f"No provider for host {parsed.hostname!r}")
    return provider
