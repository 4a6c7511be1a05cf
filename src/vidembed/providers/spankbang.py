"""
SpankBang provider.

URL grammar:
    spankbang.com/VIDEO_ID/video/title-slug
"""

from __future__ import annotations

import re
from urllib.parse import SplitResult

from vidembed.models.embed_options import EmbedOptions
from vidembed.providers.base import VideoProvider
from vidembed.providers.capabilities import ProviderInfo, ProviderTier

_VIDEO_RE = re.compile(r"/([a-zA-Z0-9]+)/video/")


class SpankbangProvider(VideoProvider):
    info = ProviderInfo(
        name="spankbang",
        display_name="SpankBang",
        tier=ProviderTier.ADULT,
        domains=("spankbang.com",),
    )

    def _extract(self, parsed: SplitResult, host: str) -> str | None:
        if host != "spankbang.com":
            return None
        match = _VIDEO_RE.search(parsed.path)
        return match.group(1) if match else None

    def _build(self, video_id: str, options: EmbedOptions) -> str:
        return f"https://spankbang.com/{self._segment(video_id)}/embed/"
