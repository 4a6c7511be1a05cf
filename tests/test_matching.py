"""Tests for domain matching."""

from dataclasses import replace

import pytest

from vidembed.matching import detect_provider, match_host
from vidembed.providers.registry import ProviderRegistry
from vidembed.providers.twitter import TwitterProvider
from vidembed.providers.vimeo import VimeoProvider


class TestMatchHost:
    """Tests for match_host."""

    @pytest.mark.parametrize(
        "host,expected",
        [
            ("youtube.com", "youtube"),
            ("www.youtube.com", "youtube"),
            ("M.YOUTUBE.COM", "youtube"),
            ("youtu.be", "youtube"),
            ("player.vimeo.com", "vimeo"),
            ("dai.ly", "dailymotion"),
            ("clips.twitch.tv", "twitch"),
            ("fast.wistia.net", "wistia"),
            ("players.brightcove.net", "brightcove"),
            ("customer-abc.cloudflarestream.com", "cloudflare"),
            ("abc123.channel.ivs.aws", "aws-ivs"),
            ("acct.streaming.media.azure.net", "azure-media"),
            ("drive.google.com", "google-drive"),
            ("x.com", "twitter"),
            ("fb.watch", "facebook"),
            ("spankbang.com", "spankbang"),
        ],
    )
    def test_known_hosts(self, host, expected):
        assert match_host(host).name == expected

    @pytest.mark.parametrize("host", ["example.com", "notyoutube.com", "youtube.com.evil.net", ""])
    def test_unknown_hosts(self, host):
        assert match_host(host) is None

    def test_custom_registry(self):
        registry = ProviderRegistry([VimeoProvider(), TwitterProvider()])
        assert match_host("x.com", registry).name == "twitter"
        assert match_host("youtube.com", registry) is None

    def test_empty_registry_matches_nothing(self):
        assert match_host("youtube.com", ProviderRegistry([])) is None


class TestDetectProvider:
    """Tests for detect_provider."""

    def test_detects_from_url(self):
        assert detect_provider("https://www.youtube.com/watch?v=dQw4w9WgXcQ").name == "youtube"

    def test_host_without_video_id_still_detected(self):
        """Test detection depends only on the host, not the path."""
        assert detect_provider("https://www.youtube.com/").name == "youtube"

    def test_case_insensitive(self):
        assert detect_provider("HTTPS://WWW.VIMEO.COM/123").name == "vimeo"

    def test_port_ignored(self):
        assert detect_provider("https://vimeo.com:443/123").name == "vimeo"

    @pytest.mark.parametrize(
        "url",
        ["not-a-url", "", "youtube.com/watch?v=x", "https://example.com/video/1", None, 123],
    )
    def test_no_provider(self, url):
        assert detect_provider(url) is None

    def test_first_match_wins(self):
        """Test the earlier-registered provider claims a shared host."""
        mirror_info = replace(VimeoProvider.info, name="vimeo-mirror")
        mirror = type("MirrorProvider", (VimeoProvider,), {"info": mirror_info})()
        first = VimeoProvider()
        assert detect_provider("https://vimeo.com/1", ProviderRegistry([first, mirror])) is first
        assert detect_provider("https://vimeo.com/1", ProviderRegistry([mirror, first])) is mirror
