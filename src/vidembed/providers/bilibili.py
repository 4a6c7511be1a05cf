"""
Bilibili provider.

URL grammar:
    bilibili.com/video/BV1GJ411x7h7
    bilibili.com/video/av170001
"""

from __future__ import annotations

import re
from urllib.parse import SplitResult

from vidembed.models.embed_options import EmbedOptions
from vidembed.parsing.urls import with_query
from vidembed.providers.base import VideoProvider
from vidembed.providers.capabilities import ProviderInfo, ProviderTier

_VIDEO_RE = re.compile(r"/video/((?:BV|av)[a-zA-Z0-9]+)")
_AV_RE = re.compile(r"^av(\d+)$")


class BilibiliProvider(VideoProvider):
    info = ProviderInfo(
        name="bilibili",
        display_name="Bilibili",
        tier=ProviderTier.MAJOR,
        domains=("bilibili.com",),
    )

    def _extract(self, parsed: SplitResult, host: str) -> str | None:
        if host != "bilibili.com":
            return None
        match = _VIDEO_RE.search(parsed.path)
        return match.group(1) if match else None

    def _build(self, video_id: str, options: EmbedOptions) -> str:
        # Legacy av numbers go through aid=, everything else is a BV id
        av_match = _AV_RE.match(video_id)
        if av_match:
            params = {"aid": av_match.group(1)}
        else:
            params = {"bvid": video_id}
        if options.autoplay:
            params["autoplay"] = "1"
        return with_query("https://player.bilibili.com/player.html", params)
