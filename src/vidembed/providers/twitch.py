"""
Twitch provider.

Identifiers are tagged with their kind because VODs and clips use
different players:

    twitch.tv/videos/123456789        -> "video:123456789"
    clips.twitch.tv/SomeClipSlug      -> "clip:SomeClipSlug"
    twitch.tv/CHANNEL/clip/ClipSlug   -> "clip:ClipSlug"

Twitch refuses to render an embed without a ``parent`` parameter naming
the embedding site; it comes from the ``twitch_parent`` config setting.
"""

from __future__ import annotations

import re
from urllib.parse import SplitResult

from vidembed.config.loader import get_config
from vidembed.models.embed_options import EmbedOptions
from vidembed.parsing.urls import path_segments, with_query
from vidembed.providers.base import VideoProvider
from vidembed.providers.capabilities import Capability, ProviderInfo, ProviderTier

_VIDEO_PREFIX = "video:"
_CLIP_PREFIX = "clip:"

_CHANNEL_CLIP_RE = re.compile(r"/([^/]+)/clip/([^/?]+)")


class TwitchProvider(VideoProvider):
    info = ProviderInfo(
        name="twitch",
        display_name="Twitch",
        tier=ProviderTier.MAJOR,
        domains=("twitch.tv", "clips.twitch.tv"),
        capabilities=frozenset({Capability.AUTOPLAY, Capability.API, Capability.MUTE}),
    )

    def _extract(self, parsed: SplitResult, host: str) -> str | None:
        segments = path_segments(parsed)

        if host == "clips.twitch.tv":
            return f"{_CLIP_PREFIX}{segments[0]}" if segments else None

        if segments and segments[0] == "videos":
            return f"{_VIDEO_PREFIX}{segments[1]}" if len(segments) > 1 else None

        match = _CHANNEL_CLIP_RE.search(parsed.path)
        if match:
            return f"{_CLIP_PREFIX}{match.group(2)}"
        return None

    def _build(self, video_id: str, options: EmbedOptions) -> str:
        params = {"parent": get_config().twitch_parent}
        if options.autoplay:
            params["autoplay"] = "true"
        if options.muted:
            params["muted"] = "true"

        kind, _, actual_id = video_id.partition(":")
        if not actual_id:
            raise self._invalid(video_id, "expected 'video:ID' or 'clip:SLUG'")
        if kind == "video":
            return with_query("https://player.twitch.tv/", {"video": actual_id, **params})
        if kind == "clip":
            return with_query("https://clips.twitch.tv/embed", {"clip": actual_id, **params})
        raise self._invalid(video_id, f"unknown kind {kind!r}")
