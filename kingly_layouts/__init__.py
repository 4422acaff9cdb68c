"""Kingly Layouts - grid layouts with configurable display options."""

__version__ = "1.0.0"
__author__ = "Kingly Layouts Team"

from .display_options import ColorPalette, DisplayOptionCollector, create_default_collector
from .layout import HTMLRenderer, LayoutPlugin, LayoutRegistry, ResourceManager

__all__ = [
    "ColorPalette",
    "DisplayOptionCollector",
    "HTMLRenderer",
    "LayoutPlugin",
    "LayoutRegistry",
    "ResourceManager",
    "create_default_collector",
]
