"""
vidembed.providers.capabilities - Tiers, capabilities and provider metadata.

This module defines the coarse tier classification used by downstream
policy (e.g. adult-content gating) and the advisory capability flags each
provider declares.

Classes:
    ProviderTier: Enum of provider tiers, in match-priority order.
    Capability: Enum of provider capabilities (AUTOPLAY, MUTE, etc.).
    ProviderInfo: Immutable metadata about a provider.

Example:
    >>> from vidembed.providers.capabilities import Capability, ProviderInfo, ProviderTier
    >>> info = ProviderInfo(
    ...     name="vimeo",
    ...     display_name="Vimeo",
    ...     tier=ProviderTier.MAJOR,
    ...     domains=("vimeo.com",),
    ...     capabilities=frozenset({Capability.AUTOPLAY, Capability.MUTE}),
    ... )
    >>> info.can(Capability.AUTOPLAY)
    True
    >>> info.can(Capability.LOOP)
    False
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class ProviderTier(str, Enum):
    """Coarse provider classification.

    Declaration order is match-priority order: the registry must list
    providers with non-decreasing tier rank.
    """

    MAJOR = "major"  # Mainstream video platforms
    PROFESSIONAL = "professional"  # Enterprise streaming / video hosting
    CLOUD = "cloud"  # Cloud storage
    SOCIAL = "social"  # Social media
    ADULT = "adult"  # Adult content

    @property
    def rank(self) -> int:
        """Position of this tier in match-priority order (0 is highest)."""
        return list(ProviderTier).index(self)


class Capability(Enum):
    """Capabilities a provider can offer.

    AUTOPLAY and API mirror the advisory ``supports_autoplay`` and
    ``supports_api`` flags. The remaining members describe which
    EmbedOptions fields the provider's embed URL actually encodes.

    Attributes:
        AUTOPLAY: Embed can start playing on load.
        API: Provider exposes a JavaScript player API.
        MUTE: Embed honors ``muted``.
        LOOP: Embed honors ``loop``.
        START_TIME: Embed honors ``start_time``.
        HIDE_CONTROLS: Embed honors ``controls=False``.
    """

    AUTOPLAY = auto()
    API = auto()
    MUTE = auto()
    LOOP = auto()
    START_TIME = auto()
    HIDE_CONTROLS = auto()


@dataclass(frozen=True)
class ProviderInfo:
    """Immutable provider metadata.

    The frozen=True ensures immutability for safe sharing across threads.

    Attributes:
        name: Lowercase slug, unique across the registry (e.g. "youtube").
        display_name: Human-readable label (e.g. "YouTube").
        tier: ProviderTier classification.
        domains: Hostnames the provider claims, in declaration order.
        capabilities: Frozenset of Capability members.
    """

    name: str
    display_name: str
    tier: ProviderTier
    domains: tuple[str, ...]
    capabilities: frozenset[Capability] = frozenset()

    @property
    def supports_autoplay(self) -> bool:
        return Capability.AUTOPLAY in self.capabilities

    @property
    def supports_api(self) -> bool:
        return Capability.API in self.capabilities

    def can(self, capability: Capability) -> bool:
        """Check if provider has a specific capability.

        Example:
            >>> info.can(Capability.AUTOPLAY)
            True
        """
        return capability in self.capabilities

    def can_all(self, *capabilities: Capability) -> bool:
        """Check if provider has ALL specified capabilities."""
        return all(c in self.capabilities for c in capabilities)

    def can_any(self, *capabilities: Capability) -> bool:
        """Check if provider has ANY of specified capabilities."""
        return any(c in self.capabilities for c in capabilities)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "display_name": self.display_name,
            "tier": self.tier.value,
            "domains": list(self.domains),
            "capabilities": sorted(c.name for c in self.capabilities),
        }
