"""Tests for the URL parsing helpers."""

from urllib.parse import urlsplit

import pytest

from vidembed.parsing.urls import (
    host_matches,
    host_of,
    is_host_label,
    is_hostname,
    normalize_host,
    parse_url,
    path_segments,
    query_param,
    with_query,
)


class TestParseUrl:
    """Tests for parse_url."""

    def test_valid_url(self):
        parsed = parse_url("https://www.youtube.com/watch?v=abc")
        assert parsed is not None
        assert parsed.hostname == "www.youtube.com"
        assert parsed.query == "v=abc"

    def test_surrounding_whitespace_is_ignored(self):
        assert parse_url("  https://vimeo.com/1  ") is not None

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "   ",
            "not-a-url",
            "youtube.com/watch?v=abc",
            "http://",
            "http://[::1",
            None,
            42,
            ["https://vimeo.com/1"],
        ],
    )
    def test_malformed_input_returns_none(self, value):
        """Test anything without a scheme and hostname is rejected."""
        assert parse_url(value) is None


class TestHosts:
    """Tests for hostname normalization and matching."""

    def test_normalize_host_lowercases_and_strips_www(self):
        assert normalize_host("WWW.YouTube.COM") == "youtube.com"

    def test_normalize_host_strips_only_one_www(self):
        assert normalize_host("www.www.example.com") == "www.example.com"

    def test_host_of(self):
        assert host_of(urlsplit("https://WWW.Vimeo.com/1")) == "vimeo.com"

    def test_host_matches_exact(self):
        assert host_matches("vimeo.com", "vimeo.com")

    def test_host_matches_subdomain(self):
        assert host_matches("player.vimeo.com", "vimeo.com")

    def test_host_matches_rejects_suffix_lookalike(self):
        """Test that a shared suffix without a dot boundary does not match."""
        assert not host_matches("notvimeo.com", "vimeo.com")
        assert not host_matches("vimeo.com.evil.net", "vimeo.com")


class TestQueryAndPath:
    """Tests for query_param, path_segments and with_query."""

    def test_query_param_first_name_wins(self):
        parsed = urlsplit("https://x.test/?entryId=b&entry_id=a")
        assert query_param(parsed, "entry_id", "entryId") == "a"

    def test_query_param_falls_back_to_later_names(self):
        parsed = urlsplit("https://x.test/?entryId=b")
        assert query_param(parsed, "entry_id", "entryId") == "b"

    def test_query_param_skips_blank_values(self):
        parsed = urlsplit("https://x.test/?v=&v=second")
        assert query_param(parsed, "v") == "second"

    def test_query_param_missing(self):
        assert query_param(urlsplit("https://x.test/"), "v") is None

    def test_path_segments_drops_empty_parts(self):
        assert path_segments(urlsplit("https://x.test/a//b/")) == ["a", "b"]

    def test_path_segments_decodes_each_part(self):
        assert path_segments(urlsplit("https://x.test/a%2Fb/%2E%2E")) == ["a/b", ".."]

    def test_with_query_empty_params(self):
        assert with_query("https://x.test/a", {}) == "https://x.test/a"

    def test_with_query_appends(self):
        assert with_query("https://x.test/a", {"a": "1", "b": "2"}) == "https://x.test/a?a=1&b=2"

    def test_with_query_extends_existing_query(self):
        assert with_query("https://x.test/?v=1", {"a": "1"}) == "https://x.test/?v=1&a=1"


class TestHostValidators:
    """Tests for is_host_label and is_hostname."""

    @pytest.mark.parametrize("value", ["demo", "abc-123", "A1", "x"])
    def test_valid_labels(self, value):
        assert is_host_label(value)

    @pytest.mark.parametrize(
        "value", ["", "-demo", "demo-", "a.b", "bad/host", "evil.com/x", "a b", "a" * 64]
    )
    def test_invalid_labels(self, value):
        assert not is_host_label(value)

    @pytest.mark.parametrize("value", ["acct.streaming.media.azure.net", "localhost"])
    def test_valid_hostnames(self, value):
        assert is_hostname(value)

    @pytest.mark.parametrize("value", ["", "evil.com/x", "a..b", ".a", "host:80", "a_b.com"])
    def test_invalid_hostnames(self, value):
        assert not is_hostname(value)
