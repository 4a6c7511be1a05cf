"""
Google Drive provider.

URL grammar:
    drive.google.com/file/d/FILE_ID/view
    drive.google.com/open?id=FILE_ID
"""

from __future__ import annotations

import re
from urllib.parse import SplitResult

from vidembed.models.embed_options import EmbedOptions
from vidembed.parsing.urls import query_param
from vidembed.providers.base import VideoProvider
from vidembed.providers.capabilities import ProviderInfo, ProviderTier

_FILE_RE = re.compile(r"/file/d/([a-zA-Z0-9_-]+)")


class GoogleDriveProvider(VideoProvider):
    info = ProviderInfo(
        name="google-drive",
        display_name="Google Drive",
        tier=ProviderTier.CLOUD,
        domains=("drive.google.com",),
    )

    def _extract(self, parsed: SplitResult, host: str) -> str | None:
        if host != "drive.google.com":
            return None
        match = _FILE_RE.search(parsed.path)
        if match:
            return match.group(1)
        return query_param(parsed, "id")

    def _build(self, video_id: str, options: EmbedOptions) -> str:
        return f"https://drive.google.com/file/d/{self._segment(video_id)}/preview"
