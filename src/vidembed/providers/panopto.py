"""
Panopto provider.

Every institution has its own subdomain, so identifiers are
"SUBDOMAIN:SESSION_ID":
    myschool.hosted.panopto.com/Panopto/Pages/Viewer.aspx?id=SESSION_ID
        -> "myschool:SESSION_ID"
"""

from __future__ import annotations

from urllib.parse import SplitResult

from vidembed.models.embed_options import EmbedOptions
from vidembed.parsing.urls import is_host_label, query_param, with_query
from vidembed.providers.base import VideoProvider
from vidembed.providers.capabilities import Capability, ProviderInfo, ProviderTier

# Fixed viewer chrome; Panopto embeds do not take the generic options
_EMBED_PARAMS = {
    "autoplay": "false",
    "offerviewer": "true",
    "showtitle": "true",
    "showbrand": "false",
    "captions": "false",
    "interactivity": "all",
}


class PanoptoProvider(VideoProvider):
    info = ProviderInfo(
        name="panopto",
        display_name="Panopto",
        tier=ProviderTier.PROFESSIONAL,
        domains=("panopto.com",),
        capabilities=frozenset({Capability.API}),
    )

    def _extract(self, parsed: SplitResult, host: str) -> str | None:
        hostname = (parsed.hostname or "").lower()
        if "panopto.com" not in hostname:
            return None
        session_id = query_param(parsed, "id")
        if not session_id:
            return None
        subdomain = hostname.split(".")[0]
        return f"{subdomain}:{session_id}"

    def _build(self, video_id: str, options: EmbedOptions) -> str:
        subdomain, _, session_id = video_id.partition(":")
        if not subdomain or not session_id:
            raise self._invalid(video_id, "expected 'SUBDOMAIN:SESSION_ID'")
        if not is_host_label(subdomain):
            raise self._invalid(video_id, f"invalid subdomain {subdomain!r}")
        return with_query(
            f"https://{subdomain}.panopto.com/Panopto/Pages/Embed.aspx",
            {"id": session_id, **_EMBED_PARAMS},
        )
