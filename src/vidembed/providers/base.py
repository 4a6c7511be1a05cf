"""
vidembed.providers.base - Abstract base class for video providers.

A provider is one external platform: the hostnames it claims, the grammar
its URLs use to carry a video identifier, and the query-parameter
vocabulary its embed player understands.

Classes:
    VideoProvider: Base class every provider derives from.

Subclasses define a class-level ``info`` (ProviderInfo) and implement two
hooks:

    _extract(parsed, host) -> str | None
        Pull the identifier out of an already-split URL. ``host`` is the
        lower-cased hostname with one leading ``www.`` removed.

    _build(video_id, options) -> str
        Build the embed URL from a non-empty identifier. Raise
        InvalidVideoIdError (via ``self._invalid``) when a composite
        identifier is missing a segment.
        Identifier parts placed in a path go through ``self._segment``.

Example:
    >>> from vidembed.providers.registry import get_provider
    >>> youtube = get_provider("youtube")
    >>> youtube.extract_video_id("https://youtu.be/dQw4w9WgXcQ")
    'dQw4w9WgXcQ'
    >>> youtube.get_embed_url("dQw4w9WgXcQ", {"muted": True})
    'https://www.youtube-nocookie.com/embed/dQw4w9WgXcQ?mute=1'
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, ClassVar
from urllib.parse import SplitResult, quote

from vidembed.exceptions import InvalidVideoIdError
from vidembed.models.embed_options import EmbedOptions
from vidembed.parsing.urls import host_matches, host_of, parse_url
from vidembed.providers.capabilities import ProviderInfo, ProviderTier

logger = logging.getLogger(__name__)


class VideoProvider(ABC):
    """Base class for video providers.

    Providers are stateless; the registry holds one shared instance of
    each. ``extract_video_id`` and ``get_embed_url`` never raise for bad
    input and return None instead. ``build_embed_url`` is the strict
    variant that raises InvalidVideoIdError.
    """

    info: ClassVar[ProviderInfo]

    @property
    def name(self) -> str:
        return self.info.name

    @property
    def display_name(self) -> str:
        return self.info.display_name

    @property
    def domains(self) -> tuple[str, ...]:
        return self.info.domains

    @property
    def tier(self) -> ProviderTier:
        return self.info.tier

    @property
    def supports_autoplay(self) -> bool:
        return self.info.supports_autoplay

    @property
    def supports_api(self) -> bool:
        return self.info.supports_api

    def claims_host(self, host: str) -> bool:
        """Check whether a normalized hostname belongs to this provider."""
        return any(host_matches(host, domain) for domain in self.domains)

    def extract_video_id(self, url: str) -> str | None:
        """Extract this provider's video identifier from a URL.

        Only meaningful for URLs whose host this provider claims; use
        ``vidembed.detect_provider`` to find the provider first.

        Args:
            url: Video page, share, or embed URL.

        Returns:
            The identifier, or None if the URL is malformed or does not
            follow this provider's grammar.
        """
        parsed = parse_url(url)
        if parsed is None:
            return None
        return self._extract(parsed, host_of(parsed)) or None

    def build_embed_url(
        self,
        video_id: str,
        options: EmbedOptions | Mapping[str, Any] | None = None,
    ) -> str:
        """Build an embed URL, raising on a malformed identifier.

        Args:
            video_id: Identifier previously returned by extract_video_id.
            options: EmbedOptions, a mapping of its fields, or None.

        Returns:
            Embed URL with the options this provider supports encoded.

        Raises:
            InvalidVideoIdError: If video_id is empty or structurally
                invalid for this provider.
            pydantic.ValidationError: If options holds invalid values.
        """
        if not isinstance(video_id, str) or not video_id.strip():
            raise self._invalid(video_id, "empty video ID")
        return self._build(video_id, EmbedOptions.coerce(options))

    def get_embed_url(
        self,
        video_id: str,
        options: EmbedOptions | Mapping[str, Any] | None = None,
    ) -> str | None:
        """Build an embed URL, returning None on a malformed identifier."""
        try:
            return self.build_embed_url(video_id, options)
        except InvalidVideoIdError as e:
            logger.debug(f"Cannot build embed URL: {e}")
            return None

    def _invalid(self, video_id: Any, reason: str) -> InvalidVideoIdError:
        return InvalidVideoIdError(self.name, video_id, reason)

    def _segment(self, value: str, video_id: str | None = None, safe: str = "") -> str:
        """Percent-encode value for use as a single URL path segment.

        ``video_id`` is the full identifier value came from, for the error.

        Raises:
            InvalidVideoIdError: If value is empty or a dot segment.
        """
        if value in ("", ".", ".."):
            reported = value if video_id is None else video_id
            raise self._invalid(reported, f"unsafe path segment {value!r}")
        return quote(value, safe=safe)

    @abstractmethod
    def _extract(self, parsed: SplitResult, host: str) -> str | None:
        """Provider URL grammar. See module docstring."""

    @abstractmethod
    def _build(self, video_id: str, options: EmbedOptions) -> str:
        """Provider embed encoding. See module docstring."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, tier={self.tier.value!r})"
