"""Static option catalogs for display option fields.

Every catalog is an ordered mapping of stored value to human label. Catalogs are
closed sets: the render engine ignores any stored value that is not a key of
the catalog its field uses.
"""

from typing import Final

NONE: Final = "_none"
"""Sentinel stored when no explicit value has been chosen."""

_NONE_LABEL = {NONE: "None"}

SCALE: Final = {
    **_NONE_LABEL,
    "xs": "Extra Small (0.25rem)",
    "sm": "Small (0.5rem)",
    "md": "Medium (1rem)",
    "lg": "Large (2rem)",
    "xl": "Extra Large (4rem)",
}

CONTAINER_TYPE: Final = {
    "boxed": "Boxed",
    "full": "Full Width (Background Only)",
    "edge-to-edge": "Edge to Edge (Full Bleed)",
    "hero": "Full Screen Hero",
}

VERTICAL_ALIGNMENT: Final = {
    "stretch": "Stretch",
    "flex-start": "Top",
    "center": "Center (Default)",
    "flex-end": "Bottom",
    "baseline": "Baseline",
}

HORIZONTAL_ALIGNMENT: Final = {
    "start": "Start (Left)",
    "center": "Center",
    "end": "End (Right)",
    "space-between": "Space Between",
    "space-around": "Space Around",
    "space-evenly": "Space Evenly",
}

BORDER_WIDTH: Final = {
    **_NONE_LABEL,
    "sm": "Small (1px)",
    "md": "Medium (2px)",
    "lg": "Large (4px)",
}

BORDER_STYLE: Final = {
    **_NONE_LABEL,
    "solid": "Solid",
    "dashed": "Dashed",
    "dotted": "Dotted",
}

BORDER_RADIUS: Final = {
    **_NONE_LABEL,
    "xs": "Extra Small (0.25rem)",
    "sm": "Small (0.5rem)",
    "md": "Medium (1rem)",
    "lg": "Large (2rem)",
    "xl": "Extra Large (4rem)",
    "full": "Full (Pill/Circle)",
}

CUSTOM_FONT_IMPORT: Final = "custom-import"

FONT_FAMILY: Final = {
    **_NONE_LABEL,
    "sans-serif": "Sans-serif (Generic)",
    "serif": "Serif (Generic)",
    "monospace": "Monospace (Generic)",
    "cursive": "Cursive (Generic)",
    "fantasy": "Fantasy (Generic)",
    "Arial, Helvetica, sans-serif": "Arial",
    "Verdana, Geneva, sans-serif": "Verdana",
    "Tahoma, Geneva, sans-serif": "Tahoma",
    '"Trebuchet MS", Helvetica, sans-serif': "Trebuchet MS",
    '"Gill Sans", "Gill Sans MT", Calibri, sans-serif': "Gill Sans",
    'Times, "Times New Roman", serif': "Times New Roman",
    "Georgia, serif": "Georgia",
    'Palatino, "Palatino Linotype", "Book Antiqua", serif': "Palatino",
    '"Courier New", Courier, monospace': "Courier New",
    '"Lucida Console", Monaco, monospace': "Lucida Console",
    CUSTOM_FONT_IMPORT: "Custom Font (via URL)",
}

FONT_SIZE: Final = {
    **_NONE_LABEL,
    "0.75rem": "Extra Small (0.75rem)",
    "0.875rem": "Small (0.875rem)",
    "1rem": "Base (1rem)",
    "1.125rem": "Large (1.125rem)",
    "1.25rem": "Extra Large (1.25rem)",
    "1.5rem": "2XL (1.5rem)",
    "1.875rem": "3XL (1.875rem)",
    "2.25rem": "4XL (2.25rem)",
    "3rem": "5XL (3rem)",
}

FONT_WEIGHT: Final = {
    **_NONE_LABEL,
    "100": "Thin (100)",
    "200": "Extra Light (200)",
    "300": "Light (300)",
    "400": "Normal (400)",
    "500": "Medium (500)",
    "600": "Semi Bold (600)",
    "700": "Bold (700)",
    "800": "Extra Bold (800)",
    "900": "Black (900)",
}

LINE_HEIGHT: Final = {
    **_NONE_LABEL,
    "1": "1 (Tight)",
    "1.25": "1.25",
    "1.5": "1.5 (Normal)",
    "1.75": "1.75",
    "2": "2 (Loose)",
}

LETTER_SPACING: Final = {
    **_NONE_LABEL,
    "-0.05em": "-0.05em (Tight)",
    "-0.025em": "-0.025em",
    "0em": "0em (Normal)",
    "0.025em": "0.025em",
    "0.05em": "0.05em (Loose)",
    "0.1em": "0.1em (Extra Loose)",
}

TEXT_TRANSFORM: Final = {
    **_NONE_LABEL,
    "none": "No Transform",
    "uppercase": "Uppercase",
    "lowercase": "Lowercase",
    "capitalize": "Capitalize",
}

ANIMATION_TYPE: Final = {
    **_NONE_LABEL,
    "fade-in": "Fade In",
    "slide-in": "Slide In",
}

SLIDE_DIRECTION: Final = {
    **_NONE_LABEL,
    "up": "Bottom up",
    "down": "Top down",
    "left": "Right to Left",
    "right": "Left to Right",
}

TRANSITION_PROPERTY: Final = {
    NONE: "Default (opacity, transform)",
    "opacity": "Opacity only",
    "transform": "Transform only",
    "all": "All properties",
    "opacity, transform": "Opacity and Transform",
}

TRANSITION_DURATION: Final = {
    NONE: "Default (600ms)",
    "150ms": "150ms",
    "300ms": "300ms",
    "500ms": "500ms",
    "750ms": "750ms",
    "1s": "1s",
}

TRANSITION_TIMING_FUNCTION: Final = {
    NONE: "Default (ease-out)",
    "ease": "ease",
    "ease-in": "ease-in",
    "ease-in-out": "ease-in-out",
    "linear": "linear",
}

TRANSITION_DELAY: Final = {
    **_NONE_LABEL,
    "150ms": "150ms",
    "300ms": "300ms",
    "500ms": "500ms",
    "750ms": "750ms",
    "1s": "1s",
}

BOX_SHADOW: Final = {
    **_NONE_LABEL,
    "sm": "Small",
    "md": "Medium",
    "lg": "Large",
    "xl": "Extra Large",
    "inner": "Inner",
}

FILTER: Final = {
    **_NONE_LABEL,
    "grayscale": "Grayscale",
    "blur": "Blur",
    "sepia": "Sepia",
    "brightness": "Brightness",
}

OPACITY: Final = {
    NONE: "100% (Default)",
    "0.9": "90%",
    "0.75": "75%",
    "0.5": "50%",
    "0.25": "25%",
    "0": "0% (Transparent)",
}

TRANSFORM_SCALE: Final = {
    NONE: "None (100%)",
    "0.9": "90%",
    "0.95": "95%",
    "1.05": "105%",
    "1.1": "110%",
    "1.25": "125%",
}

TRANSFORM_ROTATE: Final = {
    **_NONE_LABEL,
    "1": "1 degree",
    "2": "2 degrees",
    "3": "3 degrees",
    "5": "5 degrees",
    "-1": "-1 degree",
    "-2": "-2 degrees",
    "-3": "-3 degrees",
    "-5": "-5 degrees",
}

HOVER_SCALE: Final = {
    **_NONE_LABEL,
    "scale-90": "Scale Down (90%)",
    "scale-95": "Slightly Scale Down (95%)",
    "scale-105": "Slightly Scale Up (105%)",
    "scale-110": "Scale Up (110%)",
    "scale-125": "Enlarge (125%)",
}

HOVER_BOX_SHADOW: Final = {
    **_NONE_LABEL,
    "sm": "Small Shadow",
    "md": "Medium Shadow",
    "lg": "Large Shadow",
    "xl": "Extra Large Shadow",
    "inner": "Inner Shadow",
}

HOVER_FILTER: Final = {
    **_NONE_LABEL,
    "grayscale-to-color": "Grayscale to Color",
    "brightness-down": "Brightness Down",
    "brightness-up": "Brightness Up",
}

HOVER_FONT_SIZE: Final = {
    **_NONE_LABEL,
    "size-90": "Smaller (90%)",
    "size-95": "Slightly Smaller (95%)",
    "size-105": "Slightly Larger (105%)",
    "size-110": "Larger (110%)",
    "size-125": "Much Larger (125%)",
}

HIDE_ON_BREAKPOINTS: Final = {
    "mobile": "Hide on Mobile (up to 767px)",
    "md": "Hide on Medium (768px - 1023px)",
    "lg": "Hide on Large (1024px and up)",
}

BACKGROUND_TYPE: Final = {
    "color": "Color",
    "image": "Image",
    "video": "Video",
    "gradient": "Gradient",
}

BACKGROUND_OPACITY: Final = {
    NONE: "100% (Default)",
    "90": "90%",
    "75": "75%",
    "50": "50%",
    "25": "25%",
    "0": "0% (Transparent)",
}

OVERLAY_OPACITY: Final = {
    **_NONE_LABEL,
    "25": "25%",
    "50": "50%",
    "75": "75%",
    "90": "90%",
}

IMAGE_POSITION: Final = {
    "center center": "Center Center",
    "center top": "Center Top",
    "center bottom": "Center Bottom",
    "left top": "Left Top",
    "left center": "Left Center",
    "left bottom": "Left Bottom",
    "right top": "Right Top",
    "right center": "Right Center",
    "right bottom": "Right Bottom",
}

IMAGE_REPEAT: Final = {
    "no-repeat": "No Repeat",
    "repeat": "Repeat",
    "repeat-x": "Repeat Horizontally",
    "repeat-y": "Repeat Vertically",
}

IMAGE_SIZE: Final = {
    "cover": "Cover",
    "contain": "Contain",
    "auto": "Auto",
}

IMAGE_ATTACHMENT: Final = {
    "scroll": "Scroll",
    "fixed": "Fixed (Parallax)",
    "local": "Local",
}

VIDEO_PRELOAD: Final = {
    "auto": "Auto",
    "metadata": "Metadata only",
    "none": "None",
}

GRADIENT_TYPE: Final = {
    "linear": "Linear",
    "radial": "Radial",
}

GRADIENT_LINEAR_DIRECTION: Final = {
    "to bottom": "To Bottom (Default)",
    "to top": "To Top",
    "to right": "To Right",
    "to left": "To Left",
    "to bottom right": "To Bottom Right",
    "to top left": "To Top Left",
    "45deg": "45 Degrees",
    "90deg": "90 Degrees (To Right)",
    "135deg": "135 Degrees",
    "180deg": "180 Degrees (To Top)",
    "225deg": "225 Degrees",
    "270deg": "270 Degrees (To Left)",
    "315deg": "315 Degrees",
}

GRADIENT_RADIAL_SHAPE: Final = {
    "ellipse": "Ellipse (Default)",
    "circle": "Circle",
}

GRADIENT_RADIAL_POSITION: Final = {
    "center": "Center (Default)",
    "top": "Top",
    "bottom": "Bottom",
    "left": "Left",
    "right": "Right",
    "top left": "Top Left",
    "top right": "Top Right",
    "bottom left": "Bottom Left",
    "bottom right": "Bottom Right",
}
