"""
AWS IVS (Interactive Video Service) provider.

Playback URLs name the channel in the hostname:
    CHANNEL.channel.ivs.aws/stream.m3u8  -> "CHANNEL"
"""

from __future__ import annotations

from urllib.parse import SplitResult

from vidembed.models.embed_options import EmbedOptions
from vidembed.parsing.urls import is_host_label
from vidembed.providers.base import VideoProvider
from vidembed.providers.capabilities import Capability, ProviderInfo, ProviderTier


class AwsIvsProvider(VideoProvider):
    info = ProviderInfo(
        name="aws-ivs",
        display_name="AWS IVS",
        tier=ProviderTier.PROFESSIONAL,
        domains=("ivs.aws", "amazonaws.com"),
        capabilities=frozenset({Capability.AUTOPLAY, Capability.API}),
    )

    def _extract(self, parsed: SplitResult, host: str) -> str | None:
        if ".channel.ivs.aws" not in host:
            return None
        return host.split(".")[0]

    def _build(self, video_id: str, options: EmbedOptions) -> str:
        if not is_host_label(video_id):
            raise self._invalid(video_id, "channel must be a single hostname label")
        # IVS has no hosted iframe player; the HLS stream is the playable URL
        return f"https://{video_id}.channel.ivs.aws/stream.m3u8"
