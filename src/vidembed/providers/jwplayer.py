"""
JW Player provider.

URL grammar:
    content.jwplatform.com/players/MEDIA_ID-PLAYER_ID.html
"""

from __future__ import annotations

import re
from urllib.parse import SplitResult

from vidembed.models.embed_options import EmbedOptions
from vidembed.providers.base import VideoProvider
from vidembed.providers.capabilities import Capability, ProviderInfo, ProviderTier

_PLAYER_RE = re.compile(r"/players/([a-zA-Z0-9]+-[a-zA-Z0-9]+)\.html")


class JwplayerProvider(VideoProvider):
    info = ProviderInfo(
        name="jwplayer",
        display_name="JW Player",
        tier=ProviderTier.PROFESSIONAL,
        domains=("jwplayer.com", "jwplatform.com", "content.jwplatform.com"),
        capabilities=frozenset({Capability.AUTOPLAY, Capability.API}),
    )

    def _extract(self, parsed: SplitResult, host: str) -> str | None:
        match = _PLAYER_RE.search(parsed.path)
        return match.group(1) if match else None

    def _build(self, video_id: str, options: EmbedOptions) -> str:
        return f"https://content.jwplatform.com/players/{self._segment(video_id)}.html"
