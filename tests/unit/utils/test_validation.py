"""Tests for the shared value validators."""

import logging

import pytest

from kingly_layouts.utils.validation import (
    is_valid_css_classes,
    is_valid_css_id,
    is_valid_css_length,
    is_valid_hex_color,
    is_valid_url,
    normalize_css_classes,
    normalize_url,
)

logging.getLogger("kingly_layouts").setLevel(logging.CRITICAL)


class TestHexColor:
    """Tests for is_valid_hex_color."""

    @pytest.mark.parametrize("value", ["#1a2b3c", "#FFFFFF", "#000000", "#aBcDeF"])
    def test_accepts_six_digit_hex(self, value: str) -> None:
        """Six hex digits after # are accepted in either case."""
        assert is_valid_hex_color(value)

    @pytest.mark.parametrize("value", ["#1a2b3", "1a2b3c", "#ggg123", "#fff", "", "#1a2b3c4"])
    def test_rejects_malformed(self, value: str) -> None:
        """Short, unprefixed, non-hex and over-long values are rejected."""
        assert not is_valid_hex_color(value)

    def test_rejects_non_string(self) -> None:
        """Non-string values are never colors."""
        assert not is_valid_hex_color(None)
        assert not is_valid_hex_color(0x1A2B3C)


class TestCssIdentifiers:
    """Tests for CSS id and class validation."""

    @pytest.mark.parametrize("value", ["hero", "section-1", "main_content", "A"])
    def test_valid_ids(self, value: str) -> None:
        assert is_valid_css_id(value)

    @pytest.mark.parametrize("value", ["1hero", "-hero", "has space", "", "bad#id"])
    def test_invalid_ids(self, value: str) -> None:
        assert not is_valid_css_id(value)

    def test_class_list_accepts_multiple_names(self) -> None:
        """Whitespace separated names are checked one by one."""
        assert is_valid_css_classes("card  is-featured -negative _private")

    def test_class_list_accepts_empty(self) -> None:
        """An empty value means no classes."""
        assert is_valid_css_classes("")
        assert is_valid_css_classes("   ")

    @pytest.mark.parametrize("value", ["card 2col", "card bad!", "--double"])
    def test_class_list_rejects_invalid_names(self, value: str) -> None:
        assert not is_valid_css_classes(value)

    def test_normalize_collapses_whitespace(self) -> None:
        assert normalize_css_classes("  card \t  hero\nwide ") == "card hero wide"


class TestUrlAndLength:
    """Tests for URL and CSS length validation."""

    @pytest.mark.parametrize(
        "value", ["https://example.com/video.mp4", "http://cdn.example.org/a.jpg?x=1"]
    )
    def test_valid_urls(self, value: str) -> None:
        assert is_valid_url(value)

    @pytest.mark.parametrize("value", ["", "   ", "not a url", "/relative/path.jpg", "ftp://example.com/a"])
    def test_invalid_urls(self, value: str) -> None:
        assert not is_valid_url(value)

    def test_normalize_url_encodes_markup_characters(self) -> None:
        assert normalize_url(' https://example.com/a"b.css?q=<x> ') == "https://example.com/a%22b.css?q=%3Cx%3E"

    def test_normalize_url_rejects_relative(self) -> None:
        assert normalize_url("/relative/path.jpg") is None

    @pytest.mark.parametrize("value", ["400px", "50vh", "12.5rem", "100%", "90svh"])
    def test_valid_lengths(self, value: str) -> None:
        assert is_valid_css_length(value)

    @pytest.mark.parametrize("value", ["400", "px", "-5px", "50 vh", "calc(100vh - 2rem)"])
    def test_invalid_lengths(self, value: str) -> None:
        assert not is_valid_css_length(value)
