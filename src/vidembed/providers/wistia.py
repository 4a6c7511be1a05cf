"""
Wistia provider.

URL grammar:
    ACCOUNT.wistia.com/medias/MEDIA_ID
    wi.st/medias/MEDIA_ID
    fast.wistia.net/embed/iframe/MEDIA_ID
"""

from __future__ import annotations

import re
from urllib.parse import SplitResult

from vidembed.models.embed_options import EmbedOptions
from vidembed.parsing.urls import with_query
from vidembed.providers.base import VideoProvider
from vidembed.providers.capabilities import Capability, ProviderInfo, ProviderTier

_MEDIAS_RE = re.compile(r"/medias/([a-zA-Z0-9]+)")
_IFRAME_RE = re.compile(r"/iframe/([a-zA-Z0-9]+)")


class WistiaProvider(VideoProvider):
    info = ProviderInfo(
        name="wistia",
        display_name="Wistia",
        tier=ProviderTier.PROFESSIONAL,
        domains=("wistia.com", "wi.st", "wistia.net"),
        capabilities=frozenset({Capability.AUTOPLAY, Capability.API, Capability.MUTE}),
    )

    def _extract(self, parsed: SplitResult, host: str) -> str | None:
        match = _MEDIAS_RE.search(parsed.path)
        if match:
            return match.group(1)

        if "wistia" in host:
            match = _IFRAME_RE.search(parsed.path)
            if match:
                return match.group(1)
        return None

    def _build(self, video_id: str, options: EmbedOptions) -> str:
        params: dict[str, str] = {}
        if options.autoplay:
            params["autoPlay"] = "true"
        if options.muted:
            params["muted"] = "true"
        return with_query(f"https://fast.wistia.net/embed/iframe/{self._segment(video_id)}", params)
