"""
Custom exceptions for vidembed.

All vidembed exceptions inherit from VidembedError for easy catching.
URL-facing resolution functions never raise these; they are reserved for
programming errors (unknown provider names, broken registries, malformed
identifiers handed straight to a provider) and configuration problems.
"""

from __future__ import annotations

from typing import Any


class VidembedError(Exception):
    """Base exception for all vidembed errors."""

    pass


class UnknownProviderError(VidembedError, ValueError):
    """A provider name or alias does not match any registered provider."""

    def __init__(self, name: str, available: list[str] | None = None):
        self.name = name
        self.available = available or []
        message = f"Unknown provider '{name}'"
        if self.available:
            message += f". Available: {', '.join(self.available)}"
        super().__init__(message)


class RegistryError(VidembedError):
    """The provider registry was built from an inconsistent provider list."""

    pass


class InvalidVideoIdError(VidembedError):
    """A video identifier is empty or structurally invalid for its provider.

    Attributes:
        provider: Name of the provider that rejected the identifier.
        video_id: The rejected identifier.
        reason: Why it was rejected.
    """

    def __init__(self, provider: str, video_id: Any, reason: str):
        self.provider = provider
        self.video_id = video_id
        self.reason = reason
        super().__init__(f"Invalid {provider} video ID {video_id!r}: {reason}")

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a structured dict for error responses."""
        return {
            "type": self.__class__.__name__,
            "provider": self.provider,
            "video_id": self.video_id,
            "reason": self.reason,
        }


class ConfigError(VidembedError):
    """Invalid configuration value."""

    def __init__(self, key: str, value: Any, message: str | None = None):
        self.key = key
        self.value = value
        super().__init__(message or f"Invalid value for {key}: {value!r}")
