"""Tests for the professional and enterprise streaming providers."""

import pytest

from vidembed.exceptions import InvalidVideoIdError
from vidembed.models.embed_options import EmbedOptions
from vidembed.providers.registry import get_provider

ALL_ON = EmbedOptions(autoplay=True, muted=True, loop=True, start_time=42, controls=False)


class TestWistia:
    @pytest.fixture
    def wistia(self):
        return get_provider("wistia")

    @pytest.mark.parametrize(
        "url",
        [
            "https://home.wistia.com/medias/e4a27b971d",
            "https://fast.wistia.net/embed/iframe/e4a27b971d",
            "https://fast.wistia.net/embed/iframe/e4a27b971d?videoFoam=true",
            "https://wi.st/medias/e4a27b971d",
        ],
    )
    def test_extract(self, wistia, url):
        assert wistia.extract_video_id(url) == "e4a27b971d"

    def test_extract_without_id(self, wistia):
        assert wistia.extract_video_id("https://wistia.com/pricing") is None

    def test_embed(self, wistia):
        assert wistia.get_embed_url("e4a27b971d") == "https://fast.wistia.net/embed/iframe/e4a27b971d"

    def test_embed_options(self, wistia):
        assert wistia.get_embed_url("e4a27b971d", ALL_ON) == (
            "https://fast.wistia.net/embed/iframe/e4a27b971d?autoPlay=true&muted=true"
        )


class TestBrightcove:
    @pytest.fixture
    def brightcove(self):
        return get_provider("brightcove")

    def test_extract_player_url(self, brightcove):
        url = "https://players.brightcove.net/1234567890/default_default/index.html?videoId=6000"
        assert brightcove.extract_video_id(url) == "1234567890:6000"

    @pytest.mark.parametrize(
        "url",
        [
            "https://players.brightcove.net/1234567890/default_default/index.html",
            "https://players.brightcove.net/default_default/index.html?videoId=6000",
        ],
    )
    def test_extract_incomplete(self, brightcove, url):
        """Test both the account and the videoId parameter are required."""
        assert brightcove.extract_video_id(url) is None

    def test_embed(self, brightcove):
        assert brightcove.get_embed_url("1234567890:6000") == (
            "https://players.brightcove.net/1234567890/default_default/index.html?videoId=6000"
        )

    def test_round_trip(self, brightcove):
        url = "https://players.brightcove.net/1234567890/default_default/index.html?videoId=6000"
        assert brightcove.get_embed_url(brightcove.extract_video_id(url)) == url

    @pytest.mark.parametrize("video_id", ["6000", ":6000", "1234567890:", "..:6000"])
    def test_malformed_id(self, brightcove, video_id):
        with pytest.raises(InvalidVideoIdError):
            brightcove.build_embed_url(video_id)

    def test_account_escaped(self, brightcove):
        assert brightcove.get_embed_url("a/b:6000") == (
            "https://players.brightcove.net/a%2Fb/default_default/index.html?videoId=6000"
        )


class TestKaltura:
    EMBED = (
        "https://cdnapisec.kaltura.com/p/1234/sp/123400/embedIframeJs"
        "/uiconf_id/5678/partner_id/1234?iframeembed=true&entry_id=1_abcdef"
    )

    @pytest.fixture
    def kaltura(self):
        return get_provider("kaltura")

    def test_extract(self, kaltura):
        assert kaltura.extract_video_id(self.EMBED) == "1234:5678:1_abcdef"

    def test_extract_camel_case_entry(self, kaltura):
        url = "https://www.kaltura.com/p/1234/sp/123400/uiconf_id/5678/?entryId=1_abcdef"
        assert kaltura.extract_video_id(url) == "1234:5678:1_abcdef"

    def test_extract_missing_uiconf(self, kaltura):
        url = "https://www.kaltura.com/p/1234/sp/123400/?entry_id=1_abcdef"
        assert kaltura.extract_video_id(url) is None

    def test_round_trip(self, kaltura):
        assert kaltura.get_embed_url(kaltura.extract_video_id(self.EMBED)) == self.EMBED

    @pytest.mark.parametrize(
        "video_id", ["1234:5678", "1234::1_abc", ":5678:1_abc", "a:5678:1_x", "1/x:5678:1_x"]
    )
    def test_malformed_id(self, kaltura, video_id):
        assert kaltura.get_embed_url(video_id) is None

    def test_entry_id_encoded(self, kaltura):
        assert kaltura.get_embed_url("1234:5678:1_a&x=y").endswith("&entry_id=1_a%26x%3Dy")


class TestPanopto:
    @pytest.fixture
    def panopto(self):
        return get_provider("panopto")

    def test_extract(self, panopto):
        url = "https://demo.hosted.panopto.com/Panopto/Pages/Viewer.aspx?id=abc-123"
        assert panopto.extract_video_id(url) == "demo:abc-123"

    def test_extract_without_session(self, panopto):
        assert panopto.extract_video_id("https://demo.hosted.panopto.com/Panopto/Pages/Home.aspx") is None

    def test_embed_has_fixed_viewer_params(self, panopto):
        assert panopto.get_embed_url("demo:abc-123", ALL_ON) == (
            "https://demo.panopto.com/Panopto/Pages/Embed.aspx?id=abc-123&autoplay=false"
            "&offerviewer=true&showtitle=true&showbrand=false&captions=false&interactivity=all"
        )

    @pytest.mark.parametrize("video_id", ["abc-123", "evil.com/x:abc", "a.b:abc", "-x:abc"])
    def test_malformed_id(self, panopto, video_id):
        assert panopto.get_embed_url(video_id) is None


class TestJwplayer:
    def test_extract(self):
        url = "https://content.jwplatform.com/players/AbCd1234-EfGh5678.html"
        assert get_provider("jwplayer").extract_video_id(url) == "AbCd1234-EfGh5678"

    def test_extract_without_player(self):
        assert get_provider("jwplayer").extract_video_id("https://www.jwplayer.com/pricing") is None

    def test_embed(self):
        assert get_provider("jw").get_embed_url("AbCd1234-EfGh5678") == (
            "https://content.jwplatform.com/players/AbCd1234-EfGh5678.html"
        )


class TestCloudflare:
    @pytest.fixture
    def cloudflare(self):
        return get_provider("cloudflare")

    @pytest.mark.parametrize(
        "url",
        [
            "https://iframe.videodelivery.net/5d5bc37ffcf54c9b82e996823bffbb81",
            "https://videodelivery.net/5d5bc37ffcf54c9b82e996823bffbb81/manifest/video.m3u8",
            "https://customer-abc.cloudflarestream.com/5d5bc37ffcf54c9b82e996823bffbb81/iframe",
        ],
    )
    def test_extract(self, cloudflare, url):
        assert cloudflare.extract_video_id(url) == "5d5bc37ffcf54c9b82e996823bffbb81"

    def test_extract_from_foreign_host(self, cloudflare):
        assert cloudflare.extract_video_id("https://example.com/5d5bc37f") is None

    def test_embed_options(self, cloudflare):
        assert cloudflare.get_embed_url("uid", ALL_ON) == (
            "https://iframe.videodelivery.net/uid?autoplay=true&muted=true&loop=true"
        )


class TestMux:
    @pytest.fixture
    def mux(self):
        return get_provider("mux")

    @pytest.mark.parametrize(
        "url",
        [
            "https://stream.mux.com/a4nOgmxGWg6gULfcBbAa00gXyfcwPnAFldF8RdsNyk8M.m3u8",
            "https://stream.mux.com/a4nOgmxGWg6gULfcBbAa00gXyfcwPnAFldF8RdsNyk8M",
        ],
    )
    def test_extract(self, mux, url):
        assert mux.extract_video_id(url) == "a4nOgmxGWg6gULfcBbAa00gXyfcwPnAFldF8RdsNyk8M"

    def test_extract_marketing_site(self, mux):
        assert mux.extract_video_id("https://mux.com/video") is None

    def test_embed(self, mux):
        assert mux.get_embed_url("pb1", {"autoplay": True, "muted": True}) == (
            "https://stream.mux.com/pb1.m3u8?autoplay=true&muted=true"
        )


class TestAwsIvs:
    def test_extract_playback_host(self):
        """Test only channel hostnames carry an identifier."""
        url = "https://abc123def.us-west-2.playback.live-video.net/api/video/v1/x.m3u8"
        assert get_provider("aws-ivs").extract_video_id(url) is None

    def test_extract_channel_host(self):
        url = "https://abc123def.channel.ivs.aws/stream.m3u8"
        assert get_provider("ivs").extract_video_id(url) == "abc123def"

    def test_embed(self):
        assert get_provider("aws-ivs").get_embed_url("abc123def") == (
            "https://abc123def.channel.ivs.aws/stream.m3u8"
        )

    @pytest.mark.parametrize("video_id", ["bad/host", "evil.com", "x@y", "-abc"])
    def test_channel_must_be_host_label(self, video_id):
        """Test the channel cannot change the host the stream URL points at."""
        provider = get_provider("aws-ivs")
        assert provider.get_embed_url(video_id) is None
        with pytest.raises(InvalidVideoIdError):
            provider.build_embed_url(video_id)


class TestAzureMedia:
    URL = "https://myaccount-usea.streaming.media.azure.net/a1b2c3d4/video.ism/manifest"

    @pytest.fixture
    def azure(self):
        return get_provider("azure-media")

    def test_extract(self, azure):
        assert azure.extract_video_id(self.URL) == (
            "myaccount-usea.streaming.media.azure.net:a1b2c3d4"
        )

    def test_extract_other_azure_host(self, azure):
        assert azure.extract_video_id("https://portal.azure.net/a1b2c3d4") is None

    def test_embed(self, azure):
        assert azure.get_embed_url("myaccount-usea.streaming.media.azure.net:a1b2c3d4") == (
            "https://myaccount-usea.streaming.media.azure.net/a1b2c3d4/manifest"
        )

    @pytest.mark.parametrize(
        "video_id",
        ["a1b2c3d4", "host.azure.net:", ":a1b2c3d4", "evil.com/x:a", "host.azure.net:.."],
    )
    def test_malformed_id(self, azure, video_id):
        with pytest.raises(InvalidVideoIdError) as exc_info:
            azure.build_embed_url(video_id)
        assert exc_info.value.provider == "azure-media"

    def test_asset_escaped(self, azure):
        assert azure.get_embed_url("host.azure.net:a/b?c") == (
            "https://host.azure.net/a%2Fb%3Fc/manifest"
        )
