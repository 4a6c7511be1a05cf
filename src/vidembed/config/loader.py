"""
Unified configuration loader with priority resolution.

Root directory (VIDEMBED_ROOT):
- macOS/Linux: ~/.vidembed
- Windows: %APPDATA%\\vidembed
- Override: VIDEMBED_ROOT environment variable

Each setting is resolved independently, highest priority first:
1. Environment variable (VIDEMBED_TWITCH_PARENT, VIDEMBED_YOUTUBE_NOCOOKIE)
2. Project config (.vidembed/config.yaml, searched upward from cwd)
3. User config ({root_dir}/config.yaml)
4. Default

Example config.yaml:

    twitch_parent: example.com
    youtube_nocookie: false
"""

import logging
import os
import sys
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

from vidembed.config.defaults import DEFAULT_TWITCH_PARENT, DEFAULT_YOUTUBE_NOCOOKIE
from vidembed.exceptions import ConfigError

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}

# setting name -> environment variable
_ENV_VARS = {
    "twitch_parent": "VIDEMBED_TWITCH_PARENT",
    "youtube_nocookie": "VIDEMBED_YOUTUBE_NOCOOKIE",
}


class ConfigSource(Enum):
    """Source of the configuration value."""

    ENV = "env"
    PROJECT = "project"
    USER = "user"
    DEFAULT = "default"


@dataclass(frozen=True)
class VidembedConfig:
    """Resolved vidembed configuration.

    Attributes:
        twitch_parent: Hostname sent as Twitch's required ``parent`` param.
        youtube_nocookie: Use youtube-nocookie.com for YouTube embeds.
        source: Highest-priority source that contributed a value.
    """

    twitch_parent: str = DEFAULT_TWITCH_PARENT
    youtube_nocookie: bool = DEFAULT_YOUTUBE_NOCOOKIE
    source: ConfigSource = ConfigSource.DEFAULT

    def __repr__(self) -> str:
        return (
            f"VidembedConfig(twitch_parent={self.twitch_parent!r}, "
            f"youtube_nocookie={self.youtube_nocookie!r}, source={self.source.value!r})"
        )


def _load_yaml_config(config_path: Path) -> dict[str, Any] | None:
    """Load configuration from a YAML file.

    Args:
        config_path: Path to the YAML config file.

    Returns:
        Parsed config dict, or None if file doesn't exist or fails to parse.
    """
    if not config_path.exists():
        return None

    try:
        with open(config_path) as f:
            config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Failed to load config from {config_path}: {e}")
        return None

    if config is None:
        return {}
    if not isinstance(config, dict):
        logger.warning(f"Config file {config_path} is not a valid YAML dict")
        return None
    return config


def _find_project_config() -> Path | None:
    """Find project-level config by walking up from cwd.

    Returns:
        Path to .vidembed/config.yaml if found, None otherwise.
    """
    cwd = Path.cwd()
    for parent in [cwd, *cwd.parents]:
        config_path = parent / ".vidembed" / "config.yaml"
        if config_path.exists():
            return config_path
    return None


def _get_root_dir() -> Path:
    """Get the vidembed root directory.

    Priority:
    1. VIDEMBED_ROOT environment variable
    2. Platform-specific default:
       - Windows: %APPDATA%\\vidembed
       - macOS/Linux: ~/.vidembed
    """
    env_root = os.environ.get("VIDEMBED_ROOT")
    if env_root:
        return Path(env_root).expanduser().resolve()

    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata) / "vidembed"
        return Path.home() / "AppData" / "Roaming" / "vidembed"
    return Path.home() / ".vidembed"


def _get_user_config_path() -> Path:
    """Get the user-level config path ({root_dir}/config.yaml)."""
    return _get_root_dir() / "config.yaml"


def _parse_bool(key: str, value: Any) -> bool:
    """Parse a boolean from YAML or an environment string."""
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ConfigError(key, value, f"{key} must be a boolean, got {value!r}")


def _parse_host(key: str, value: Any) -> str:
    """Parse a bare hostname (no scheme, no path)."""
    host = str(value).strip().lower()
    if not host or "/" in host or " " in host:
        raise ConfigError(key, value, f"{key} must be a bare hostname, got {value!r}")
    return host


_PARSERS = {
    "twitch_parent": _parse_host,
    "youtube_nocookie": _parse_bool,
}


def _resolve_config() -> VidembedConfig:
    """Resolve configuration from all sources in priority order.

    A value that cannot be parsed is logged and skipped, so the next
    layer (or the default) supplies that setting instead.

    Returns:
        VidembedConfig whose ``source`` is the highest-priority source
        that supplied at least one setting.
    """
    layers: list[tuple[ConfigSource, dict[str, Any]]] = []

    env_values = {
        key: os.environ[var] for key, var in _ENV_VARS.items() if os.environ.get(var)
    }
    layers.append((ConfigSource.ENV, env_values))

    project_config_path = _find_project_config()
    if project_config_path:
        layers.append((ConfigSource.PROJECT, _load_yaml_config(project_config_path) or {}))

    user_config_path = _get_user_config_path()
    layers.append((ConfigSource.USER, _load_yaml_config(user_config_path) or {}))

    resolved: dict[str, Any] = {}
    source = ConfigSource.DEFAULT
    for layer_source, values in layers:
        for key, parser in _PARSERS.items():
            if key in resolved or values.get(key) is None:
                continue
            try:
                resolved[key] = parser(key, values[key])
            except ConfigError as e:
                logger.warning(f"Ignoring {key} from {layer_source.value}: {e}")
                continue
            if source is ConfigSource.DEFAULT:
                source = layer_source
            logger.debug(f"Using {key} from {layer_source.value}: {resolved[key]!r}")

    config = VidembedConfig(**resolved, source=source)
    logger.info(f"Resolved vidembed config: {config!r}")
    return config


@lru_cache(maxsize=1)
def get_config() -> VidembedConfig:
    """Get resolved vidembed configuration.

    Results are cached - configuration is resolved once per process.
    To force re-resolution (e.g., after env change), use clear_config_cache().
    """
    return _resolve_config()


def clear_config_cache() -> None:
    """Clear the cached configuration.

    Call this if environment variables or config files have changed
    and you need to re-resolve the configuration.
    """
    get_config.cache_clear()
