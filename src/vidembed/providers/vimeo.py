"""
Vimeo provider.

URL grammar:
    vimeo.com/VIDEO_ID
    player.vimeo.com/video/VIDEO_ID
"""

from __future__ import annotations

from urllib.parse import SplitResult

from vidembed.models.embed_options import EmbedOptions
from vidembed.parsing.urls import path_segments, with_query
from vidembed.providers.base import VideoProvider
from vidembed.providers.capabilities import Capability, ProviderInfo, ProviderTier

_PARSED_HOSTS = {"vimeo.com", "player.vimeo.com"}


class VimeoProvider(VideoProvider):
    info = ProviderInfo(
        name="vimeo",
        display_name="Vimeo",
        tier=ProviderTier.MAJOR,
        domains=("vimeo.com",),
        capabilities=frozenset(
            {
                Capability.AUTOPLAY,
                Capability.API,
                Capability.MUTE,
                Capability.LOOP,
                Capability.START_TIME,
                Capability.HIDE_CONTROLS,
            }
        ),
    )

    def _extract(self, parsed: SplitResult, host: str) -> str | None:
        if host not in _PARSED_HOSTS:
            return None

        segments = path_segments(parsed)
        if not segments:
            return None
        if segments[0] == "video":
            return segments[1] if len(segments) > 1 else None
        # Vimeo IDs are numeric; anything else is a channel, user or page
        if segments[0].isdigit():
            return segments[0]
        return None

    def _build(self, video_id: str, options: EmbedOptions) -> str:
        params: dict[str, str] = {}
        if options.autoplay:
            params["autoplay"] = "1"
        if options.muted:
            params["muted"] = "1"
        if options.loop:
            params["loop"] = "1"
        if options.start_offset:
            params["t"] = f"{options.start_offset}s"
        if options.hide_controls:
            params["controls"] = "0"
        return with_query(f"https://player.vimeo.com/video/{self._segment(video_id)}", params)
