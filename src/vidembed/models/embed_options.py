"""
EmbedOptions Pydantic model: the playback-option vocabulary callers use.

Providers translate these fields into their own query parameters; see
each provider's ``_build`` for its encoding.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class EmbedOptions(BaseModel):
    """Normalized playback options for embed URL synthesis."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    autoplay: bool = Field(False, description="Start playback on load")
    muted: bool = Field(False, description="Start muted")
    loop: bool = Field(False, description="Restart when playback ends")
    start_time: int | None = Field(
        None,
        ge=0,
        alias="startTime",
        description="Start offset in whole seconds",
    )
    controls: bool = Field(True, description="Show player controls")

    @property
    def start_offset(self) -> int:
        """Start offset to encode; 0 means no offset parameter is emitted."""
        return self.start_time or 0

    @property
    def hide_controls(self) -> bool:
        return self.controls is False

    @classmethod
    def coerce(cls, options: EmbedOptions | Mapping[str, Any] | None) -> EmbedOptions:
        """Build EmbedOptions from None, a mapping, or an existing instance.

        Raises:
            pydantic.ValidationError: If a mapping holds invalid values
                (e.g. a negative start time).
        """
        if options is None:
            return _DEFAULT_OPTIONS
        if isinstance(options, cls):
            return options
        return cls.model_validate(dict(options))


_DEFAULT_OPTIONS = EmbedOptions()
