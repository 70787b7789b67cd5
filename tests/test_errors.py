"""Tests for urlshort.errors: exception hierarchy and messages."""

import pytest

from urlshort.errors import ConfigurationError, ParseError, UrlshortError


class TestHierarchy:
    def test_parse_error_is_urlshort_error(self) -> None:
        assert issubclass(ParseError, UrlshortError)

    def test_configuration_error_is_urlshort_error(self) -> None:
        assert issubclass(ConfigurationError, UrlshortError)


class TestParseError:
    def test_str_without_index(self) -> None:
        assert str(ParseError("bad yaml")) == "bad yaml"

    def test_str_with_index(self) -> None:
        assert str(ParseError("missing required key 'url'", index=3)) == (
            "entry 3: missing required key 'url'"
        )

    def test_frozen(self) -> None:
        err = ParseError("bad yaml")
        with pytest.raises(AttributeError):
            err.index = 1  # type: ignore[misc]
