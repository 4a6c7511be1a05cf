"""
Kaltura provider.

Embed URLs spread the identifier across path and query:
    cdnapisec.kaltura.com/p/PARTNER/sp/PARTNER00/embedIframeJs/uiconf_id/UICONF/partner_id/PARTNER?entry_id=ENTRY

Identifiers are "PARTNER_ID:UICONF_ID:ENTRY_ID".
"""

from __future__ import annotations

import re
from urllib.parse import SplitResult

from vidembed.models.embed_options import EmbedOptions
from vidembed.parsing.urls import query_param, with_query
from vidembed.providers.base import VideoProvider
from vidembed.providers.capabilities import Capability, ProviderInfo, ProviderTier

_PARTNER_RE = re.compile(r"/p/(\d+)/")
_UICONF_RE = re.compile(r"/uiconf_id/(\d+)")


class KalturaProvider(VideoProvider):
    info = ProviderInfo(
        name="kaltura",
        display_name="Kaltura",
        tier=ProviderTier.PROFESSIONAL,
        domains=("kaltura.com",),
        capabilities=frozenset({Capability.AUTOPLAY, Capability.API}),
    )

    def _extract(self, parsed: SplitResult, host: str) -> str | None:
        entry_id = query_param(parsed, "entry_id", "entryId")
        if not entry_id:
            return None

        partner = _PARTNER_RE.search(parsed.path)
        uiconf = _UICONF_RE.search(parsed.path)
        if partner and uiconf:
            return f"{partner.group(1)}:{uiconf.group(1)}:{entry_id}"
        return None

    def _build(self, video_id: str, options: EmbedOptions) -> str:
        parts = video_id.split(":")
        if len(parts) < 3 or not all(parts[:3]):
            raise self._invalid(video_id, "expected 'PARTNER_ID:UICONF_ID:ENTRY_ID'")
        partner_id, uiconf_id, entry_id = parts[:3]
        if not (partner_id.isdigit() and uiconf_id.isdigit()):
            raise self._invalid(video_id, "partner and uiconf IDs must be numeric")
        return with_query(
            f"https://cdnapisec.kaltura.com/p/{partner_id}/sp/{partner_id}00"
            f"/embedIframeJs/uiconf_id/{uiconf_id}/partner_id/{partner_id}",
            {"iframeembed": "true", "entry_id": entry_id},
        )
