"""
X (Twitter) provider.

URL grammar:
    twitter.com/USER/status/TWEET_ID
    x.com/USER/status/TWEET_ID
    mobile.twitter.com/USER/status/TWEET_ID
"""

from __future__ import annotations

import re
from urllib.parse import SplitResult

from vidembed.models.embed_options import EmbedOptions
from vidembed.parsing.urls import with_query
from vidembed.providers.base import VideoProvider
from vidembed.providers.capabilities import ProviderInfo, ProviderTier

_PARSED_HOSTS = {"twitter.com", "x.com", "mobile.twitter.com", "mobile.x.com"}
_STATUS_RE = re.compile(r"/status/(\d+)")


class TwitterProvider(VideoProvider):
    info = ProviderInfo(
        name="twitter",
        display_name="X (Twitter)",
        tier=ProviderTier.SOCIAL,
        domains=("twitter.com", "x.com"),
    )

    def _extract(self, parsed: SplitResult, host: str) -> str | None:
        if host not in _PARSED_HOSTS:
            return None
        match = _STATUS_RE.search(parsed.path)
        return match.group(1) if match else None

    def _build(self, video_id: str, options: EmbedOptions) -> str:
        return with_query("https://platform.twitter.com/embed/Tweet.html", {"id": video_id})
