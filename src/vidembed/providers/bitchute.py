"""
BitChute provider.

URL grammar:
    bitchute.com/video/VIDEO_ID/
    bitchute.com/embed/VIDEO_ID/
"""

from __future__ import annotations

import re
from urllib.parse import SplitResult

from vidembed.models.embed_options import EmbedOptions
from vidembed.providers.base import VideoProvider
from vidembed.providers.capabilities import ProviderInfo, ProviderTier

_VIDEO_RE = re.compile(r"/(?:video|embed)/([a-zA-Z0-9]+)")


class BitchuteProvider(VideoProvider):
    info = ProviderInfo(
        name="bitchute",
        display_name="BitChute",
        tier=ProviderTier.MAJOR,
        domains=("bitchute.com",),
    )

    def _extract(self, parsed: SplitResult, host: str) -> str | None:
        if host != "bitchute.com":
            return None
        match = _VIDEO_RE.search(parsed.path)
        return match.group(1) if match else None

    def _build(self, video_id: str, options: EmbedOptions) -> str:
        return f"https://www.bitchute.com/embed/{self._segment(video_id)}/"
