"""Tests for the EmbedOptions model."""

import pytest
from pydantic import ValidationError

from vidembed.models.embed_options import EmbedOptions


class TestEmbedOptions:
    """Tests for EmbedOptions defaults and validation."""

    def test_defaults(self):
        options = EmbedOptions()
        assert options.autoplay is False
        assert options.muted is False
        assert options.loop is False
        assert options.start_time is None
        assert options.controls is True
        assert options.start_offset == 0
        assert options.hide_controls is False

    def test_start_time_alias(self):
        """Test the camelCase alias is accepted alongside the field name."""
        assert EmbedOptions.model_validate({"startTime": 30}).start_time == 30
        assert EmbedOptions(start_time=30).start_time == 30

    def test_zero_start_time_has_no_offset(self):
        assert EmbedOptions(start_time=0).start_offset == 0

    def test_negative_start_time_rejected(self):
        with pytest.raises(ValidationError):
            EmbedOptions(start_time=-5)

    def test_hide_controls(self):
        assert EmbedOptions(controls=False).hide_controls is True

    def test_unknown_fields_ignored(self):
        options = EmbedOptions.model_validate({"autoplay": True, "quality": "hd"})
        assert options.autoplay is True

    def test_frozen(self):
        options = EmbedOptions()
        with pytest.raises(ValidationError):
            options.autoplay = True  # type: ignore


class TestCoerce:
    """Tests for EmbedOptions.coerce."""

    def test_none_gives_defaults(self):
        assert EmbedOptions.coerce(None) == EmbedOptions()

    def test_instance_passes_through(self):
        options = EmbedOptions(muted=True)
        assert EmbedOptions.coerce(options) is options

    def test_mapping(self):
        options = EmbedOptions.coerce({"loop": True, "startTime": 10})
        assert options.loop is True
        assert options.start_time == 10

    def test_invalid_mapping_raises(self):
        with pytest.raises(ValidationError):
            EmbedOptions.coerce({"start_time": -1})
