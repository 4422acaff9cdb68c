"""Display option services: form, submit and render logic for presentational features."""

from .catalogs import NONE
from .collector import DisplayOptionCollector, create_default_collector, default_display_options
from .colors import ColorPalette, PaletteColor, hex_to_rgb, rgba
from .engine import DisplayOption
from .exceptions import DisplayOptionDefinitionError, DisplayOptionError
from .features import FEATURES
from .forms import FormElement, FormState
from .models import ClassRule, FeatureSpec, FieldSpec, StyleRule
from .render import ChildElement, RenderTree
from .responsive import DEFAULT_BREAKPOINTS, Breakpoint, ResponsiveFieldHelper

__all__ = [
    "DEFAULT_BREAKPOINTS",
    "FEATURES",
    "NONE",
    "Breakpoint",
    "ChildElement",
    "ClassRule",
    "ColorPalette",
    "DisplayOption",
    "DisplayOptionCollector",
    "DisplayOptionDefinitionError",
    "DisplayOptionError",
    "FeatureSpec",
    "FieldSpec",
    "FormElement",
    "FormState",
    "PaletteColor",
    "RenderTree",
    "ResponsiveFieldHelper",
    "StyleRule",
    "create_default_collector",
    "default_display_options",
    "hex_to_rgb",
    "rgba",
]
