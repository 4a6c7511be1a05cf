"""
RedTube provider.

URL grammar:
    redtube.com/VIDEO_ID
    redtube.com/?id=VIDEO_ID
"""

from __future__ import annotations

import re
from urllib.parse import SplitResult

from vidembed.models.embed_options import EmbedOptions
from vidembed.parsing.urls import query_param, with_query
from vidembed.providers.base import VideoProvider
from vidembed.providers.capabilities import ProviderInfo, ProviderTier

_PATH_ID_RE = re.compile(r"/(\d+)")


class RedtubeProvider(VideoProvider):
    info = ProviderInfo(
        name="redtube",
        display_name="Redtube",
        tier=ProviderTier.ADULT,
        domains=("redtube.com",),
    )

    def _extract(self, parsed: SplitResult, host: str) -> str | None:
        if host != "redtube.com":
            return None
        video_id = query_param(parsed, "id")
        if video_id:
            return video_id
        match = _PATH_ID_RE.search(parsed.path)
        return match.group(1) if match else None

    def _build(self, video_id: str, options: EmbedOptions) -> str:
        return with_query("https://embed.redtube.com/", {"id": video_id})
