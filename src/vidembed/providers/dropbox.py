"""
Dropbox provider.

Dropbox share links carry access keys (``rlkey``) in the query, so the
whole share URL is the identifier. The embed URL is the same link with
``dl`` dropped and ``raw=1`` added, which streams the file inline.
"""

from __future__ import annotations

from urllib.parse import SplitResult, parse_qsl, urlencode, urlunsplit

from vidembed.models.embed_options import EmbedOptions
from vidembed.parsing.urls import host_matches, host_of, parse_url
from vidembed.providers.base import VideoProvider
from vidembed.providers.capabilities import ProviderInfo, ProviderTier

_DROPPED_PARAMS = {"dl", "raw"}


class DropboxProvider(VideoProvider):
    info = ProviderInfo(
        name="dropbox",
        display_name="Dropbox",
        tier=ProviderTier.CLOUD,
        domains=("dropbox.com",),
    )

    def _extract(self, parsed: SplitResult, host: str) -> str | None:
        if host != "dropbox.com":
            return None
        return urlunsplit(parsed)

    def _build(self, video_id: str, options: EmbedOptions) -> str:
        parsed = parse_url(video_id)
        if parsed is None or not host_matches(host_of(parsed), "dropbox.com"):
            raise self._invalid(video_id, "expected a Dropbox share URL")

        query = [
            (key, value)
            for key, value in parse_qsl(parsed.query, keep_blank_values=True)
            if key not in _DROPPED_PARAMS
        ]
        query.append(("raw", "1"))
        return urlunsplit(("https", parsed.netloc, parsed.path, urlencode(query), ""))
