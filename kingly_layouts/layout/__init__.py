"""Layout management: grid layout definitions, configured plugins and rendering."""

from .exceptions import (
    LayoutError,
    LayoutNotFoundError,
    LayoutValidationError,
    ResourceLoadingError,
)
from .plugin import LayoutPlugin
from .registry import DEFAULT_LAYOUTS, LayoutDefinition, LayoutRegistry
from .renderer import HTMLRenderer
from .resource_manager import ResourceManager

__all__ = [
    "DEFAULT_LAYOUTS",
    "HTMLRenderer",
    "LayoutDefinition",
    "LayoutError",
    "LayoutNotFoundError",
    "LayoutPlugin",
    "LayoutRegistry",
    "LayoutValidationError",
    "ResourceLoadingError",
    "ResourceManager",
]
