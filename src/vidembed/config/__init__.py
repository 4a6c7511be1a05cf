"""
Configuration for vidembed.
"""

from vidembed.config.defaults import DEFAULT_TWITCH_PARENT, DEFAULT_YOUTUBE_NOCOOKIE
from vidembed.config.loader import (
    ConfigSource,
    VidembedConfig,
    clear_config_cache,
    get_config,
)

__all__ = [
    "DEFAULT_TWITCH_PARENT",
    "DEFAULT_YOUTUBE_NOCOOKIE",
    "ConfigSource",
    "VidembedConfig",
    "get_config",
    "clear_config_cache",
]
