"""
VK Video provider.

Identifiers are "OWNER_ID_VIDEO_ID"; community owners are negative:
    vk.com/video?z=video-12345_67890   -> "-12345_67890"
    vk.com/video-12345_67890           -> "-12345_67890"
"""

from __future__ import annotations

import re
from urllib.parse import SplitResult

from vidembed.models.embed_options import EmbedOptions
from vidembed.parsing.urls import query_param, with_query
from vidembed.providers.base import VideoProvider
from vidembed.providers.capabilities import Capability, ProviderInfo, ProviderTier

_PATH_RE = re.compile(r"/video(-?\d+_\d+)")
_Z_PARAM_RE = re.compile(r"^video(-?\d+_\d+)")


class VkProvider(VideoProvider):
    info = ProviderInfo(
        name="vk",
        display_name="VK Video",
        tier=ProviderTier.MAJOR,
        domains=("vk.com",),
        capabilities=frozenset({Capability.AUTOPLAY}),
    )

    def _extract(self, parsed: SplitResult, host: str) -> str | None:
        if host != "vk.com":
            return None

        z_match = _Z_PARAM_RE.match(query_param(parsed, "z") or "")
        if z_match:
            return z_match.group(1)

        match = _PATH_RE.search(parsed.path)
        return match.group(1) if match else None

    def _build(self, video_id: str, options: EmbedOptions) -> str:
        owner_id, _, vid = video_id.partition("_")
        if not owner_id or not vid:
            raise self._invalid(video_id, "expected 'OWNER_ID_VIDEO_ID'")

        params = {"oid": owner_id, "id": vid.split("_")[0]}
        if options.autoplay:
            params["autoplay"] = "1"
        return with_query("https://vk.com/video_ext.php", params)
