"""
Rumble provider.

URL grammar:
    rumble.com/embed/VIDEO_ID
    rumble.com/VIDEO_ID-title-slug.html
"""

from __future__ import annotations

import re
from urllib.parse import SplitResult

from vidembed.models.embed_options import EmbedOptions
from vidembed.parsing.urls import path_segments, with_query
from vidembed.providers.base import VideoProvider
from vidembed.providers.capabilities import Capability, ProviderInfo, ProviderTier

_SLUG_ID_RE = re.compile(r"/([a-z0-9]+)-")


class RumbleProvider(VideoProvider):
    info = ProviderInfo(
        name="rumble",
        display_name="Rumble",
        tier=ProviderTier.MAJOR,
        domains=("rumble.com",),
        capabilities=frozenset({Capability.AUTOPLAY}),
    )

    def _extract(self, parsed: SplitResult, host: str) -> str | None:
        if host != "rumble.com":
            return None

        segments = path_segments(parsed)
        if segments and segments[0] == "embed":
            return segments[1] if len(segments) > 1 else None

        match = _SLUG_ID_RE.search(parsed.path)
        return match.group(1) if match else None

    def _build(self, video_id: str, options: EmbedOptions) -> str:
        params: dict[str, str] = {}
        if options.autoplay:
            params["autoplay"] = "2"
        return with_query(f"https://rumble.com/embed/{self._segment(video_id)}", params)
