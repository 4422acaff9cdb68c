"""Tests for hex parsing, opacity compositing and the color palette."""

import logging

import pytest
from pydantic import ValidationError

from kingly_layouts.display_options import NONE, ColorPalette, PaletteColor, hex_to_rgb, rgba
from kingly_layouts.display_options.colors import format_alpha

logging.getLogger("kingly_layouts").setLevel(logging.CRITICAL)


class TestHexConversion:
    """Tests for hex_to_rgb and rgba."""

    def test_six_digit_hex(self) -> None:
        assert hex_to_rgb("#336699") == (51, 102, 153)

    def test_three_digit_hex_expands(self) -> None:
        """Short form doubles each digit."""
        assert hex_to_rgb("#369") == (51, 102, 153)
        assert hex_to_rgb("fff") == (255, 255, 255)

    @pytest.mark.parametrize("value", ["#12345", "#ggg123", "", "#1234567"])
    def test_malformed_hex_returns_none(self, value: str) -> None:
        assert hex_to_rgb(value) is None

    def test_rgba_composites_opacity(self) -> None:
        """50 percent opacity on #336699."""
        assert rgba("#336699", 50) == "rgba(51, 102, 153, 0.5)"
        assert rgba("#336699", "50") == "rgba(51, 102, 153, 0.5)"

    def test_alpha_formatting(self) -> None:
        """Alpha drops trailing zeros."""
        assert format_alpha("100") == "1"
        assert format_alpha("0") == "0"
        assert format_alpha("75") == "0.75"

    def test_rgba_rejects_malformed_input(self) -> None:
        assert rgba("#33669", "50") is None
        assert rgba("#336699", "half") is None


class TestColorPalette:
    """Tests for ColorPalette lookups."""

    @pytest.fixture
    def palette(self) -> ColorPalette:
        return ColorPalette(
            [
                PaletteColor(id="brand", label="Brand", hex="#336699"),
                {"id": "accent", "label": "Accent", "hex": "#FF8800"},
            ]
        )

    def test_options_start_with_sentinel(self, palette: ColorPalette) -> None:
        """Options list None first, then palette colors in order."""
        assert list(palette.get_color_options()) == [NONE, "brand", "accent"]
        assert palette.get_color_options()["accent"] == "Accent"

    def test_options_copy_is_independent(self, palette: ColorPalette) -> None:
        """Mutating returned options does not affect the cached set."""
        palette.get_color_options()["extra"] = "Extra"
        assert "extra" not in palette.get_color_options()

    def test_resolve_hex_literal_and_palette_id(self, palette: ColorPalette) -> None:
        assert palette.resolve("#ABCDEF") == "#ABCDEF"
        assert palette.resolve("brand") == "#336699"

    @pytest.mark.parametrize("value", ["", NONE, None, "unknown", "#abc"])
    def test_resolve_unrecognized_is_none(self, palette: ColorPalette, value: object) -> None:
        assert palette.resolve(value) is None

    def test_is_acceptable(self, palette: ColorPalette) -> None:
        """Empty values and known colors pass, anything else fails."""
        assert palette.is_acceptable("")
        assert palette.is_acceptable(NONE)
        assert palette.is_acceptable("accent")
        assert palette.is_acceptable("#010203")
        assert not palette.is_acceptable("#1a2b3")
        assert not palette.is_acceptable("purple")

    def test_container_protocol(self, palette: ColorPalette) -> None:
        assert len(palette) == 2
        assert "brand" in palette
        assert "purple" not in palette

    def test_invalid_palette_color_rejected(self) -> None:
        with pytest.raises(ValidationError):
            PaletteColor(id="bad", label="Bad", hex="336699")
