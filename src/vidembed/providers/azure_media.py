"""
Azure Media Services provider.

Streaming endpoints are per-account hosts, so identifiers are
"HOSTNAME:ASSET_ID":
    ACCOUNT.streaming.media.azure.net/ASSET_ID/manifest
        -> "ACCOUNT.streaming.media.azure.net:ASSET_ID"
"""

from __future__ import annotations

from urllib.parse import SplitResult

from vidembed.models.embed_options import EmbedOptions
from vidembed.parsing.urls import is_hostname, path_segments
from vidembed.providers.base import VideoProvider
from vidembed.providers.capabilities import Capability, ProviderInfo, ProviderTier


class AzureMediaProvider(VideoProvider):
    info = ProviderInfo(
        name="azure-media",
        display_name="Azure Media Services",
        tier=ProviderTier.PROFESSIONAL,
        domains=("azure.net", "azureedge.net"),
        capabilities=frozenset({Capability.AUTOPLAY, Capability.API}),
    )

    def _extract(self, parsed: SplitResult, host: str) -> str | None:
        hostname = (parsed.hostname or "").lower()
        if ".streaming.media.azure.net" not in hostname:
            return None
        segments = path_segments(parsed)
        if not segments:
            return None
        return f"{hostname}:{segments[0]}"

    def _build(self, video_id: str, options: EmbedOptions) -> str:
        hostname, _, asset_id = video_id.partition(":")
        if not hostname or not asset_id:
            raise self._invalid(video_id, "expected 'HOSTNAME:ASSET_ID'")
        if not is_hostname(hostname):
            raise self._invalid(video_id, f"invalid hostname {hostname!r}")
        return f"https://{hostname}/{self._segment(asset_id, video_id)}/manifest"
