"""
Default configuration values for vidembed.

Note: Overrides are resolved via config/loader.py which supports
environment variables, project config, and user config.
"""

# Twitch refuses to embed without a parent hostname
DEFAULT_TWITCH_PARENT = "localhost"

# Privacy-enhanced YouTube embeds (youtube-nocookie.com)
DEFAULT_YOUTUBE_NOCOOKIE = True

YOUTUBE_NOCOOKIE_EMBED_BASE = "https://www.youtube-nocookie.com/embed"
YOUTUBE_EMBED_BASE = "https://www.youtube.com/embed"
