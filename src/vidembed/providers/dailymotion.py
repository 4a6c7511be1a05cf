"""
Dailymotion provider.

URL grammar:
    dai.ly/VIDEO_ID
    dailymotion.com/video/VIDEO_ID[_title-slug]
    dailymotion.com/embed/video/VIDEO_ID
"""

from __future__ import annotations

from urllib.parse import SplitResult

from vidembed.models.embed_options import EmbedOptions
from vidembed.parsing.urls import path_segments, with_query
from vidembed.providers.base import VideoProvider
from vidembed.providers.capabilities import Capability, ProviderInfo, ProviderTier


class DailymotionProvider(VideoProvider):
    info = ProviderInfo(
        name="dailymotion",
        display_name="Dailymotion",
        tier=ProviderTier.MAJOR,
        domains=("dailymotion.com", "dai.ly"),
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
        segments = path_segments(parsed)

        if host == "dai.ly":
            return segments[0] if segments else None

        if host != "dailymotion.com":
            return None
        if len(segments) >= 2 and segments[0] == "video":
            # Legacy page URLs append "_title-slug" to the ID
            return segments[1].split("_")[0]
        if len(segments) >= 3 and segments[:2] == ["embed", "video"]:
            return segments[2]
        return None

    def _build(self, video_id: str, options: EmbedOptions) -> str:
        params: dict[str, str] = {}
        if options.autoplay:
            params["autoplay"] = "1"
        if options.muted:
            params["mute"] = "1"
        if options.loop:
            params["loop"] = "1"
        if options.start_offset:
            params["start"] = str(options.start_offset)
        if options.hide_controls:
            params["controls"] = "0"
        embed_base = f"https://www.dailymotion.com/embed/video/{self._segment(video_id)}"
        return with_query(embed_base, params)
