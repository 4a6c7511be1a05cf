"""
Brightcove provider.

Player URLs carry the account in the path and the video in the query:
    players.brightcove.net/ACCOUNT_ID/default_default/index.html?videoId=VIDEO_ID

Identifiers are "ACCOUNT_ID:VIDEO_ID". Everything after the first colon
belongs to the video part, so reference IDs like "ref:promo" survive.
"""

from __future__ import annotations

import re
from urllib.parse import SplitResult

from vidembed.models.embed_options import EmbedOptions
from vidembed.parsing.urls import query_param, with_query
from vidembed.providers.base import VideoProvider
from vidembed.providers.capabilities import Capability, ProviderInfo, ProviderTier

_ACCOUNT_RE = re.compile(r"/(\d+)/")


class BrightcoveProvider(VideoProvider):
    info = ProviderInfo(
        name="brightcove",
        display_name="Brightcove",
        tier=ProviderTier.PROFESSIONAL,
        domains=("brightcove.com", "bcove.video", "brightcove.net"),
        capabilities=frozenset({Capability.AUTOPLAY, Capability.API}),
    )

    def _extract(self, parsed: SplitResult, host: str) -> str | None:
        video_id = query_param(parsed, "videoId")
        if not video_id:
            return None
        match = _ACCOUNT_RE.search(parsed.path)
        if match:
            return f"{match.group(1)}:{video_id}"
        return None

    def _build(self, video_id: str, options: EmbedOptions) -> str:
        account_id, _, actual_id = video_id.partition(":")
        if not account_id or not actual_id:
            raise self._invalid(video_id, "expected 'ACCOUNT_ID:VIDEO_ID'")
        return with_query(
            f"https://players.brightcove.net/{self._segment(account_id, video_id)}"
            "/default_default/index.html",
            {"videoId": actual_id},
        )
