"""
vidembed - Turn video links into embeddable player URLs.

Recognizes links from 30 platforms (YouTube, Vimeo, Twitch, enterprise
streaming services, cloud storage, social media and adult sites):
1. Detect which platform a URL belongs to
2. Extract that platform's video identifier
3. Build an embed URL with normalized playback options
"""

# Resolution facade
from vidembed.matching import detect_provider, match_host
from vidembed.resolver import (
    extract_video_id,
    get_embed_url,
    get_embed_url_from_video_url,
    is_adult_content,
    probe,
)

# Config
from vidembed.config.loader import (
    ConfigSource,
    VidembedConfig,
    clear_config_cache,
    get_config,
)

# Exceptions
from vidembed.exceptions import (
    ConfigError,
    InvalidVideoIdError,
    RegistryError,
    UnknownProviderError,
    VidembedError,
)

# Models
from vidembed.models.embed_options import EmbedOptions
from vidembed.models.resolution import Probe, Resolution, ResolutionStatus

# Providers
from vidembed.providers.base import VideoProvider
from vidembed.providers.capabilities import Capability, ProviderInfo, ProviderTier
from vidembed.providers.registry import (
    PROVIDERS,
    PROVIDERS_BY_NAME,
    get_provider,
    list_all,
    list_by_tier,
)

__version__ = "0.1.0"

__all__ = [
    # Resolution
    "detect_provider",
    "match_host",
    "extract_video_id",
    "get_embed_url",
    "get_embed_url_from_video_url",
    "is_adult_content",
    "probe",
    # Models
    "EmbedOptions",
    "Resolution",
    "ResolutionStatus",
    "Probe",
    # Providers
    "VideoProvider",
    "ProviderInfo",
    "ProviderTier",
    "Capability",
    "PROVIDERS",
    "PROVIDERS_BY_NAME",
    "get_provider",
    "list_all",
    "list_by_tier",
    # Config
    "VidembedConfig",
    "ConfigSource",
    "get_config",
    "clear_config_cache",
    # Exceptions
    "VidembedError",
    "UnknownProviderError",
    "RegistryError",
    "InvalidVideoIdError",
    "ConfigError",
]
