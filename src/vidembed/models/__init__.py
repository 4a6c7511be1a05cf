"""
Data models for vidembed.

Provides the EmbedOptions Pydantic model and the dataclasses returned by
URL resolution.
"""

from vidembed.models.embed_options import EmbedOptions
from vidembed.models.resolution import Probe, Resolution, ResolutionStatus

__all__ = [
    "EmbedOptions",
    "Resolution",
    "ResolutionStatus",
    "Probe",
]
