"""
YouTube provider.

URL grammar:
    youtu.be/VIDEO_ID
    youtube.com/watch?v=VIDEO_ID
    youtube.com/embed/VIDEO_ID, /v/VIDEO_ID, /shorts/VIDEO_ID, /live/VIDEO_ID
"""

from __future__ import annotations

from urllib.parse import SplitResult

from vidembed.config.defaults import YOUTUBE_EMBED_BASE, YOUTUBE_NOCOOKIE_EMBED_BASE
from vidembed.config.loader import get_config
from vidembed.models.embed_options import EmbedOptions
from vidembed.parsing.urls import path_segments, query_param, with_query
from vidembed.providers.base import VideoProvider
from vidembed.providers.capabilities import Capability, ProviderInfo, ProviderTier

_ID_PATH_PREFIXES = {"embed", "v", "shorts", "live"}


class YoutubeProvider(VideoProvider):
    info = ProviderInfo(
        name="youtube",
        display_name="YouTube",
        tier=ProviderTier.MAJOR,
        domains=("youtube.com", "youtu.be", "youtube-nocookie.com"),
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

        if host == "youtu.be":
            return segments[0] if segments else None

        video_id = query_param(parsed, "v")
        if video_id:
            return video_id

        if len(segments) >= 2 and segments[0] in _ID_PATH_PREFIXES:
            return segments[1]
        return None

    def _build(self, video_id: str, options: EmbedOptions) -> str:
        params: dict[str, str] = {}
        if options.autoplay:
            params["autoplay"] = "1"
        if options.muted:
            params["mute"] = "1"
        if options.loop:
            # The player only loops a playlist, so the video is restated as one
            params["loop"] = "1"
            params["playlist"] = video_id
        if options.start_offset:
            params["start"] = str(options.start_offset)
        if options.hide_controls:
            params["controls"] = "0"

        if get_config().youtube_nocookie:
            base = YOUTUBE_NOCOOKIE_EMBED_BASE
        else:
            base = YOUTUBE_EMBED_BASE
        return with_query(f"{base}/{self._segment(video_id)}", params)
