"""
Odysee provider.

Odysee addresses content by its LBRY claim path, kept decoded and
re-encoded per segment on embed:
    odysee.com/@channel:c/video-name:a    -> "@channel:c/video-name:a"
    odysee.com/$/embed/@channel:c/video-name:a
"""

from __future__ import annotations

import re
from urllib.parse import SplitResult, unquote

from vidembed.models.embed_options import EmbedOptions
from vidembed.providers.base import VideoProvider
from vidembed.providers.capabilities import Capability, ProviderInfo, ProviderTier

_EMBED_RE = re.compile(r"\$/embed/(.+)")


class OdyseeProvider(VideoProvider):
    info = ProviderInfo(
        name="odysee",
        display_name="Odysee",
        tier=ProviderTier.MAJOR,
        domains=("odysee.com",),
        capabilities=frozenset({Capability.AUTOPLAY}),
    )

    def _extract(self, parsed: SplitResult, host: str) -> str | None:
        if host != "odysee.com":
            return None

        match = _EMBED_RE.search(parsed.path)
        if match:
            return unquote(match.group(1)).strip("/") or None

        claim_path = unquote(parsed.path).strip("/")
        if claim_path.startswith("@"):
            return claim_path
        return None

    def _build(self, video_id: str, options: EmbedOptions) -> str:
        claim_path = "/".join(
            self._segment(part, video_id, safe="@:") for part in video_id.split("/")
        )
        return f"https://odysee.com/$/embed/{claim_path}"
