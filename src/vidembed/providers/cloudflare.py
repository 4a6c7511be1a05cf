"""
Cloudflare Stream provider.

URL grammar:
    iframe.videodelivery.net/VIDEO_UID
    customer-CODE.cloudflarestream.com/VIDEO_UID/iframe
"""

from __future__ import annotations

import re
from urllib.parse import SplitResult

from vidembed.models.embed_options import EmbedOptions
from vidembed.parsing.urls import with_query
from vidembed.providers.base import VideoProvider
from vidembed.providers.capabilities import Capability, ProviderInfo, ProviderTier

_UID_RE = re.compile(r"/([a-zA-Z0-9]+)(?:/|$)")


class CloudflareProvider(VideoProvider):
    info = ProviderInfo(
        name="cloudflare",
        display_name="Cloudflare Stream",
        tier=ProviderTier.PROFESSIONAL,
        domains=("cloudflarestream.com", "videodelivery.net"),
        capabilities=frozenset(
            {Capability.AUTOPLAY, Capability.API, Capability.MUTE, Capability.LOOP}
        ),
    )

    def _extract(self, parsed: SplitResult, host: str) -> str | None:
        if not self.claims_host(host):
            return None
        match = _UID_RE.search(parsed.path)
        return match.group(1) if match else None

    def _build(self, video_id: str, options: EmbedOptions) -> str:
        params: dict[str, str] = {}
        if options.autoplay:
            params["autoplay"] = "true"
        if options.muted:
            params["muted"] = "true"
        if options.loop:
            params["loop"] = "true"
        return with_query(f"https://iframe.videodelivery.net/{self._segment(video_id)}", params)
