"""
Resolution result types.

Types:
    Resolution: A (provider, video_id) pair from a successful extraction.
    ResolutionStatus: Outcome of resolving an arbitrary string.
    Probe: Diagnostic result carrying the status and whatever was resolved.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from vidembed.models.embed_options import EmbedOptions
    from vidembed.providers.base import VideoProvider


@dataclass(frozen=True)
class Resolution:
    """A provider together with an identifier it extracted.

    Hold on to this to synthesize embed URLs later without re-parsing the
    original URL.

    Example:
        >>> res = extract_video_id("https://youtu.be/dQw4w9WgXcQ")
        >>> res.video_id
        'dQw4w9WgXcQ'
        >>> res.embed_url({"autoplay": True})
        'https://www.youtube-nocookie.com/embed/dQw4w9WgXcQ?autoplay=1'
    """

    provider: VideoProvider
    video_id: str

    def embed_url(
        self, options: EmbedOptions | Mapping[str, Any] | None = None
    ) -> str | None:
        return self.provider.get_embed_url(self.video_id, options)

    def to_dict(self) -> dict:
        return {"provider": self.provider.name, "video_id": self.video_id}


class ResolutionStatus(Enum):
    """Outcome of resolving an arbitrary string."""

    NOT_A_URL = "not_a_url"  # No scheme/hostname, or not a string at all
    UNKNOWN_HOST = "unknown_host"  # Parseable URL, no provider claims the host
    NO_VIDEO_ID = "no_video_id"  # Provider known, path/query not a video link
    OK = "ok"


@dataclass(frozen=True)
class Probe:
    """Diagnostic resolution of a single input.

    Attributes:
        url: The input as given.
        status: Which stage succeeded last.
        provider: Matched provider, set for NO_VIDEO_ID and OK.
        video_id: Extracted identifier, set only for OK.
    """

    url: Any
    status: ResolutionStatus
    provider: VideoProvider | None = None
    video_id: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is ResolutionStatus.OK

    @property
    def resolution(self) -> Resolution | None:
        if self.provider is None or self.video_id is None:
            return None
        return Resolution(provider=self.provider, video_id=self.video_id)

    def to_dict(self) -> dict:
        return {
            "url": self.url,
            "status": self.status.value,
            "provider": self.provider.name if self.provider else None,
            "video_id": self.video_id,
        }
