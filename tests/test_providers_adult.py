"""Tests for the adult-tier providers."""

import pytest

from vidembed.models.embed_options import EmbedOptions
from vidembed.providers.capabilities import ProviderTier
from vidembed.providers.registry import get_provider, list_by_tier


@pytest.mark.parametrize(
    "name,url,expected",
    [
        ("pornhub", "https://www.pornhub.com/view_video.php?viewkey=ph5f1a2b3c4d5e6", "ph5f1a2b3c4d5e6"),
        ("pornhub", "https://www.pornhub.com/embed/ph5f1a2b3c4d5e6", "ph5f1a2b3c4d5e6"),
        ("youporn", "https://www.youporn.com/watch/16123456/some-title/", "16123456"),
        ("redtube", "https://www.redtube.com/40123456", "40123456"),
        ("redtube", "https://www.redtube.com/?id=40123456", "40123456"),
        ("xhamster", "https://xhamster.com/videos/some-long-title-12345678", "12345678"),
        ("spankbang", "https://spankbang.com/8abc1/video/some+title", "8abc1"),
    ],
)
def test_extract(name, url, expected):
    assert get_provider(name).extract_video_id(url) == expected


@pytest.mark.parametrize(
    "name,url",
    [
        ("pornhub", "https://www.pornhub.com/categories"),
        ("youporn", "https://www.youporn.com/watch/"),
        ("redtube", "https://www.redtube.com/top"),
        ("xhamster", "https://xhamster.com/videos/"),
        ("spankbang", "https://spankbang.com/trending_videos/"),
    ],
)
def test_extract_without_id(name, url):
    assert get_provider(name).extract_video_id(url) is None


@pytest.mark.parametrize(
    "name,video_id,expected",
    [
        ("pornhub", "ph5f1a2b3c4d5e6", "https://www.pornhub.com/embed/ph5f1a2b3c4d5e6"),
        ("youporn", "16123456", "https://www.youporn.com/embed/16123456"),
        ("redtube", "40123456", "https://embed.redtube.com/?id=40123456"),
        ("xhamster", "12345678", "https://xhamster.com/xembed.php?video=12345678"),
        ("spankbang", "8abc1", "https://spankbang.com/8abc1/embed/"),
    ],
)
def test_embed_ignores_options(name, video_id, expected):
    options = EmbedOptions(autoplay=True, muted=True, loop=True, start_time=5, controls=False)
    assert get_provider(name).get_embed_url(video_id, options) == expected


def test_all_adult_providers_share_tier():
    assert {p.name for p in list_by_tier(ProviderTier.ADULT)} == {
        "pornhub",
        "youporn",
        "redtube",
        "xhamster",
        "spankbang",
    }
