"""
Pornhub provider.

URL grammar:
    pornhub.com/view_video.php?viewkey=VIEWKEY
    pornhub.com/embed/VIEWKEY
"""

from __future__ import annotations

import re
from urllib.parse import SplitResult

from vidembed.models.embed_options import EmbedOptions
from vidembed.parsing.urls import query_param
from vidembed.providers.base import VideoProvider
from vidembed.providers.capabilities import Capability, ProviderInfo, ProviderTier

_EMBED_RE = re.compile(r"/embed/([a-zA-Z0-9]+)")


class PornhubProvider(VideoProvider):
    info = ProviderInfo(
        name="pornhub",
        display_name="Pornhub",
        tier=ProviderTier.ADULT,
        domains=("pornhub.com",),
        capabilities=frozenset({Capability.AUTOPLAY}),
    )

    def _extract(self, parsed: SplitResult, host: str) -> str | None:
        if host != "pornhub.com":
            return None
        viewkey = query_param(parsed, "viewkey")
        if viewkey:
            return viewkey
        match = _EMBED_RE.search(parsed.path)
        return match.group(1) if match else None

    def _build(self, video_id: str, options: EmbedOptions) -> str:
        return f"https://www.pornhub.com/embed/{self._segment(video_id)}"
