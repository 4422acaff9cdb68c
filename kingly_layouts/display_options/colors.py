"""Color helpers: hex parsing, opacity compositing and the named color palette."""

import logging
from collections.abc import Iterable
from typing import Any, Optional, Union

from pydantic import BaseModel, Field, field_validator

from ..utils.validation import is_valid_hex_color
from .catalogs import NONE

logger = logging.getLogger(__name__)

HEX_COLOR_ERROR = "The color must be a valid 6-digit hex code starting with # (e.g., #RRGGBB)."


def hex_to_rgb(hex_color: str) -> Optional[tuple[int, int, int]]:
    """Convert a 3 or 6 digit hex color to an RGB triple.

    Args:
        hex_color: Color such as ``#336699`` or ``369``; the leading ``#`` is optional

    Returns:
        ``(r, g, b)`` or None when the value is not a 3 or 6 digit hex color
    """
    digits = hex_color.lstrip("#")
    if len(digits) == 3:
        digits = "".join(char * 2 for char in digits)
    if len(digits) != 6:
        return None
    try:
        return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)
    except ValueError:
        return None


def format_alpha(opacity_percent: Union[str, int, float]) -> str:
    """Format an opacity percentage as a CSS alpha value (``50`` -> ``0.5``)."""
    return f"{float(opacity_percent) / 100:g}"


def rgba(hex_color: str, opacity_percent: Union[str, int, float]) -> Optional[str]:
    """Composite a hex color with an opacity percentage.

    Example:
        >>> rgba("#336699", "50")
        'rgba(51, 102, 153, 0.5)'

    Returns:
        The ``rgba()`` expression, or None when the color or opacity is malformed
    """
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return None
    try:
        alpha = format_alpha(opacity_percent)
    except (TypeError, ValueError):
        return None
    red, green, blue = rgb
    return f"rgba({red}, {green}, {blue}, {alpha})"


class PaletteColor(BaseModel):
    """A named color offered to site builders in addition to free hex input."""

    id: str = Field(..., min_length=1, description="Machine name used in stored configuration")
    label: str = Field(..., min_length=1, description="Human readable color name")
    hex: str = Field(..., description="Color value as #RRGGBB")

    @field_validator("hex")
    @classmethod
    def validate_hex(cls, v: str) -> str:
        """Reject palette entries whose color is not a 6-digit hex literal."""
        if not is_valid_hex_color(v):
            raise ValueError(HEX_COLOR_ERROR)
        return v


class ColorPalette:
    """Lookup helper over the configured palette colors.

    Stored color values may be either a hex literal or the id of a palette
    color; ``resolve`` turns both into a hex literal.
    """

    def __init__(self, colors: Optional[Iterable[Union[PaletteColor, dict[str, Any]]]] = None) -> None:
        self._colors: dict[str, PaletteColor] = {}
        for color in colors or []:
            entry = color if isinstance(color, PaletteColor) else PaletteColor(**color)
            if entry.id in self._colors:
                logger.warning(f"Duplicate palette color '{entry.id}' replaces earlier entry")
            self._colors[entry.id] = entry
        self._options_cache: Optional[dict[str, str]] = None

    def __len__(self) -> int:
        return len(self._colors)

    def __contains__(self, color_id: object) -> bool:
        return color_id in self._colors

    def get_color_options(self) -> dict[str, str]:
        """Select options for palette colors, sentinel first. Cached per palette."""
        if self._options_cache is None:
            options = {NONE: "None"}
            options.update({color.id: color.label for color in self._colors.values()})
            self._options_cache = options
        return dict(self._options_cache)

    def get_color_hex(self, color_id: str) -> Optional[str]:
        """Hex value of a palette color, or None for unknown ids."""
        color = self._colors.get(color_id)
        return color.hex if color else None

    def resolve(self, value: Any) -> Optional[str]:
        """Resolve a stored color value to ``#RRGGBB``.

        Returns:
            The hex literal, or None for empty, sentinel or unrecognized values
        """
        if not isinstance(value, str) or not value or value == NONE:
            return None
        if is_valid_hex_color(value):
            return value
        return self.get_color_hex(value)

    def is_acceptable(self, value: Any) -> bool:
        """Whether a submitted color value passes form validation.

        Empty values are acceptable and mean "no color".
        """
        if value in (None, "", NONE):
            return True
        return self.resolve(value) is not None
