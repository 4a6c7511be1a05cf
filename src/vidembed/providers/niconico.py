"""
Niconico provider.

URL grammar:
    nicovideo.jp/watch/sm9   (also so- and nm-prefixed IDs)
"""

from __future__ import annotations

import re
from urllib.parse import SplitResult

from vidembed.models.embed_options import EmbedOptions
from vidembed.providers.base import VideoProvider
from vidembed.providers.capabilities import ProviderInfo, ProviderTier

_WATCH_RE = re.compile(r"/watch/((?:sm|so|nm)\d+)")


class NiconicoProvider(VideoProvider):
    info = ProviderInfo(
        name="niconico",
        display_name="Niconico",
        tier=ProviderTier.MAJOR,
        domains=("nicovideo.jp",),
    )

    def _extract(self, parsed: SplitResult, host: str) -> str | None:
        if host != "nicovideo.jp":
            return None
        match = _WATCH_RE.search(parsed.path)
        return match.group(1) if match else None

    def _build(self, video_id: str, options: EmbedOptions) -> str:
        return f"https://embed.nicovideo.jp/watch/{self._segment(video_id)}"
