"""
Mux provider.

URL grammar:
    stream.mux.com/PLAYBACK_ID
    stream.mux.com/PLAYBACK_ID.m3u8
"""

from __future__ import annotations

from urllib.parse import SplitResult

from vidembed.models.embed_options import EmbedOptions
from vidembed.parsing.urls import path_segments, with_query
from vidembed.providers.base import VideoProvider
from vidembed.providers.capabilities import Capability, ProviderInfo, ProviderTier


class MuxProvider(VideoProvider):
    info = ProviderInfo(
        name="mux",
        display_name="Mux",
        tier=ProviderTier.PROFESSIONAL,
        domains=("mux.com", "stream.mux.com"),
        capabilities=frozenset({Capability.AUTOPLAY, Capability.API, Capability.MUTE}),
    )

    def _extract(self, parsed: SplitResult, host: str) -> str | None:
        if host != "stream.mux.com":
            return None
        segments = path_segments(parsed)
        if not segments:
            return None
        return segments[0].split(".")[0] or None

    def _build(self, video_id: str, options: EmbedOptions) -> str:
        params: dict[str, str] = {}
        if options.autoplay:
            params["autoplay"] = "true"
        if options.muted:
            params["muted"] = "true"
        return with_query(f"https://stream.mux.com/{self._segment(video_id)}.m3u8", params)
