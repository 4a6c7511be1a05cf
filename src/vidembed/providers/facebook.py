"""
Facebook Video provider.

URL grammar:
    fb.watch/SHORT_ID
    facebook.com/watch?v=VIDEO_ID
    facebook.com/PAGE/videos/VIDEO_ID
"""

from __future__ import annotations

import re
from urllib.parse import SplitResult, quote

from vidembed.models.embed_options import EmbedOptions
from vidembed.parsing.urls import host_matches, path_segments, query_param, with_query
from vidembed.providers.base import VideoProvider
from vidembed.providers.capabilities import ProviderInfo, ProviderTier

_VIDEOS_RE = re.compile(r"/videos/(\d+)")


class FacebookProvider(VideoProvider):
    info = ProviderInfo(
        name="facebook",
        display_name="Facebook Video",
        tier=ProviderTier.SOCIAL,
        domains=("facebook.com", "fb.watch"),
    )

    def _extract(self, parsed: SplitResult, host: str) -> str | None:
        if host == "fb.watch":
            segments = path_segments(parsed)
            return segments[0] if segments else None

        if not host_matches(host, "facebook.com"):
            return None
        video_id = query_param(parsed, "v")
        if video_id:
            return video_id
        match = _VIDEOS_RE.search(parsed.path)
        return match.group(1) if match else None

    def _build(self, video_id: str, options: EmbedOptions) -> str:
        watch_url = with_query("https://www.facebook.com/watch/", {"v": video_id})
        return f"https://www.facebook.com/plugins/video.php?href={quote(watch_url, safe='')}"
