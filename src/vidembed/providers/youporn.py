"""
YouPorn provider.

URL grammar:
    youporn.com/watch/VIDEO_ID/title-slug/
"""

from __future__ import annotations

import re
from urllib.parse import SplitResult

from vidembed.models.embed_options import EmbedOptions
from vidembed.providers.base import VideoProvider
from vidembed.providers.capabilities import ProviderInfo, ProviderTier

_WATCH_RE = re.compile(r"/watch/(\d+)")


class YoupornProvider(VideoProvider):
    info = ProviderInfo(
        name="youporn",
        display_name="YouPorn",
        tier=ProviderTier.ADULT,
        domains=("youporn.com",),
    )

    def _extract(self, parsed: SplitResult, host: str) -> str | None:
        if host != "youporn.com":
            return None
        match = _WATCH_RE.search(parsed.path)
        return match.group(1) if match else None

    def _build(self, video_id: str, options: EmbedOptions) -> str:
        return f"https://www.youporn.com/embed/{self._segment(video_id)}"
