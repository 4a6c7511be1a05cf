"""
Kick provider.

URL grammar:
    kick.com/video/VIDEO_ID
    kick.com/CHANNEL/videos/VIDEO_ID
"""

from __future__ import annotations

import re
from urllib.parse import SplitResult

from vidembed.models.embed_options import EmbedOptions
from vidembed.providers.base import VideoProvider
from vidembed.providers.capabilities import ProviderInfo, ProviderTier

_VIDEO_RE = re.compile(r"/videos?/([a-zA-Z0-9-]+)")


class KickProvider(VideoProvider):
    info = ProviderInfo(
        name="kick",
        display_name="Kick",
        tier=ProviderTier.MAJOR,
        domains=("kick.com",),
    )

    def _extract(self, parsed: SplitResult, host: str) -> str | None:
        if host != "kick.com":
            return None
        match = _VIDEO_RE.search(parsed.path)
        return match.group(1) if match else None

    def _build(self, video_id: str, options: EmbedOptions) -> str:
        return f"https://player.kick.com/video/{self._segment(video_id)}"
