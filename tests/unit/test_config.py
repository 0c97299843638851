"""
Unit tests for Stringy configuration and error types.
"""

import pytest

from stringy.config import (
    DEFAULT_ENCODING,
    DEFAULT_LANGUAGE,
    ENV_ENCODING,
    ENV_LANGUAGE,
    ENV_NO_COLOR,
    Settings,
    normalize_encoding,
)
from stringy.utils.errors import IndexOutOfRange, InvalidArgument, StringyError


class TestNormalizeEncoding:
    """Tests for encoding tag resolution."""

    @pytest.mark.parametrize(
        "tag, expected",
        [("UTF-8", "utf-8"), ("utf8", "utf-8"), ("ISO-8859-1", "iso8859-1"), ("latin-1", "iso8859-1")],
    )
    def test_known_tags(self, tag, expected):
        assert normalize_encoding(tag) == expected

    def test_unknown_tag(self):
        with pytest.raises(InvalidArgument):
            normalize_encoding("not-a-codec")

    @pytest.mark.parametrize("tag", ["rot13", "base64", "hex", "zlib"])
    def test_bytes_codecs_rejected(self, tag):
        """Test that codecs which do not decode to text are refused."""
        with pytest.raises(InvalidArgument):
            normalize_encoding(tag)


class TestSettings:
    """Tests for environment driven settings."""

    def test_defaults(self):
        settings = Settings.from_env({})
        assert settings.encoding == DEFAULT_ENCODING
        assert settings.language == DEFAULT_LANGUAGE
        assert settings.color is True

    def test_from_environment(self):
        settings = Settings.from_env({ENV_ENCODING: "ISO-8859-1", ENV_LANGUAGE: "de", ENV_NO_COLOR: "1"})
        assert settings.encoding == "ISO-8859-1"
        assert settings.language == "de"
        assert settings.color is False

    def test_empty_values_fall_back(self):
        settings = Settings.from_env({ENV_ENCODING: "", ENV_LANGUAGE: ""})
        assert settings.encoding == DEFAULT_ENCODING
        assert settings.language == DEFAULT_LANGUAGE

    def test_invalid_encoding_rejected(self):
        with pytest.raises(InvalidArgument):
            Settings.from_env({ENV_ENCODING: "not-a-codec"})

    def test_frozen(self):
        settings = Settings()
        with pytest.raises(AttributeError):
            settings.language = "de"


class TestErrors:
    """Tests for error formatting."""

    def test_message_with_value(self):
        error = StringyError("Bad thing", "x")
        assert str(error) == "Bad thing ['x']"

    def test_long_value_is_shortened(self):
        error = StringyError("Bad thing", "x" * 100)
        assert str(error).endswith("...]")
        assert len(str(error)) < 60

    def test_index_out_of_range(self):
        error = IndexOutOfRange(5, 3)
        assert error.index == 5
        assert error.length == 3
        assert "index 5" in str(error)
        assert isinstance(error, IndexError)

    def test_invalid_argument_lists_allowed_values(self):
        error = InvalidArgument("Bad side", "up", allowed=["left", "right"])
        assert "Expected one of: left, right" in str(error)
        assert isinstance(error, ValueError)
