"""Pytest configuration for vidembed tests."""

import pytest

from vidembed.config.loader import clear_config_cache


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Resolve configuration against an empty environment.

    Clears VIDEMBED_* variables, points the user root at an empty temp dir
    and runs from a directory with no project config, so every test sees
    the defaults unless it writes its own config.
    """
    for var in ("VIDEMBED_TWITCH_PARENT", "VIDEMBED_YOUTUBE_NOCOOKIE"):
        monkeypatch.delenv(var, raising=False)
    root = tmp_path / "vidembed-root"
    root.mkdir()
    monkeypatch.setenv("VIDEMBED_ROOT", str(root))
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)

    clear_config_cache()
    yield root
    clear_config_cache()
