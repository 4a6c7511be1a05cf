"""
Instagram provider.

URL grammar:
    instagram.com/p/POST_ID/
    instagram.com/reel/REEL_ID/
    instagram.com/tv/IGTV_ID/
"""

from __future__ import annotations

import re
from urllib.parse import SplitResult

from vidembed.models.embed_options import EmbedOptions
from vidembed.providers.base import VideoProvider
from vidembed.providers.capabilities import ProviderInfo, ProviderTier

_POST_RE = re.compile(r"/(?:p|reel|tv)/([a-zA-Z0-9_-]+)")


class InstagramProvider(VideoProvider):
    info = ProviderInfo(
        name="instagram",
        display_name="Instagram",
        tier=ProviderTier.SOCIAL,
        domains=("instagram.com",),
    )

    def _extract(self, parsed: SplitResult, host: str) -> str | None:
        if host != "instagram.com":
            return None
        match = _POST_RE.search(parsed.path)
        return match.group(1) if match else None

    def _build(self, video_id: str, options: EmbedOptions) -> str:
        return f"https://www.instagram.com/p/{self._segment(video_id)}/embed/"
