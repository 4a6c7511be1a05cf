"""
xHamster provider.

URL grammar:
    xhamster.com/videos/title-slug-VIDEO_ID
"""

from __future__ import annotations

import re
from urllib.parse import SplitResult

from vidembed.models.embed_options import EmbedOptions
from vidembed.parsing.urls import with_query
from vidembed.providers.base import VideoProvider
from vidembed.providers.capabilities import ProviderInfo, ProviderTier

_VIDEO_RE = re.compile(r"/videos/[^/]+-(\d+)")


class XhamsterProvider(VideoProvider):
    info = ProviderInfo(
        name="xhamster",
        display_name="XHamster",
        tier=ProviderTier.ADULT,
        domains=("xhamster.com",),
    )

    def _extract(self, parsed: SplitResult, host: str) -> str | None:
        if host != "xhamster.com":
            return None
        match = _VIDEO_RE.search(parsed.path)
        return match.group(1) if match else None

    def _build(self, video_id: str, options: EmbedOptions) -> str:
        return with_query("https://xhamster.com/xembed.php", {"video": video_id})
