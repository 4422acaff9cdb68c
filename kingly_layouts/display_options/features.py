"""The feature table: every display option as one declarative row."""

from . import catalogs as c
from . import hooks
from .models import ClassRule, FeatureSpec, FieldSpec, composite_style, style

PERMISSION_PREFIX = "administer kingly layouts"


def permission(topic: str) -> str:
    return f"{PERMISSION_PREFIX} {topic}"


def _visible_when(field_path: str, *values: str) -> dict:
    """Client-side visibility rule on another field's value."""
    if len(values) == 1:
        return {"visible": {field_path: {"value": values[0]}}}
    return {"visible": [{field_path: {"value": value}} for value in values]}


_BACKGROUND_TYPE = "background/background_type"
_GRADIENT_TYPE = "background/gradient_settings/background_gradient_type"

CONTAINER_TYPE = FeatureSpec(
    id="container_type",
    label="Container Type",
    form_key="container_type",
    permission=permission("container type"),
    group_type=None,
    weight=-9,
    fields=(
        FieldSpec(
            "container_type",
            "select",
            "Container Type",
            default="boxed",
            options=c.CONTAINER_TYPE,
            description=(
                "Select how the layout container should behave. Boxed keeps a maximum "
                "width; Full Width spans the background only; Edge to Edge spans both "
                "background and content; Full Screen Hero fills the viewport."
            ),
        ),
    ),
    class_rules=(ClassRule("container_type", "kl--"),),
    libraries=("base", "containers"),
)

_SPACING_KEYS = (
    ("horizontal_padding_option", "Horizontal Padding", "kl-padding-x-",
     "Select the horizontal padding for the layout."),
    ("vertical_padding_option", "Vertical Padding", "kl-padding-y-",
     "Select the desired vertical padding (top and bottom) for the layout container."),
    ("gap_option", "Gap", "kl-gap-",
     "Select the desired gap between layout columns/regions."),
    ("horizontal_margin_option", "Horizontal Margin", "kl-margin-x-",
     "Select the horizontal margin for the layout."),
    ("vertical_margin_option", "Vertical Margin", "kl-margin-y-",
     "Select the desired vertical margin (top and bottom) for the layout container."),
)

SPACING = FeatureSpec(
    id="spacing",
    label="Spacing",
    form_key="spacing",
    permission=permission("spacing"),
    fields=tuple(
        FieldSpec(key, "select", title, options=c.SCALE, description=description, responsive=True)
        for key, title, _prefix, description in _SPACING_KEYS
    ),
    class_rules=tuple(ClassRule(key, prefix) for key, _title, prefix, _desc in _SPACING_KEYS),
    libraries=("base", "spacing"),
)

BACKGROUND = FeatureSpec(
    id="background",
    label="Background",
    form_key="background",
    permission=permission("background"),
    group_titles={
        "color_settings": "Color Options",
        "image_settings": "Image Options",
        "video_settings": "Video Options",
        "gradient_settings": "Gradient Options",
        "overlay_settings": "Background Overlay",
    },
    fields=(
        FieldSpec(
            "background_type",
            "select",
            "Background Type",
            default="color",
            options=c.BACKGROUND_TYPE,
            description="Choose the type of background for this layout section.",
        ),
        FieldSpec(
            "background_media_min_height",
            "textfield",
            "Minimum Height",
            default="",
            validator="css_length",
            description=(
                "Set a minimum height for the section. Include the unit (e.g., 400px, 50vh). "
                "Leave blank for default height."
            ),
            states=_visible_when(_BACKGROUND_TYPE, "image", "video", "gradient"),
        ),
        FieldSpec("background_media_url", "value", "Media URL", default="", validator="url"),
        FieldSpec(
            "background_color",
            "color",
            "Background Color",
            default="",
            group="color_settings",
            validator="hex_color",
            description="Enter a hex code for the background color (e.g., #F0F0F0).",
        ),
        FieldSpec(
            "background_opacity",
            "select",
            "Background Opacity",
            options=c.BACKGROUND_OPACITY,
            group="color_settings",
            description="Set the opacity for the background color.",
        ),
        FieldSpec(
            "background_image_url",
            "url",
            "Image URL",
            default="",
            group="image_settings",
            validator="url",
            stored=False,
            description="Enter the full, absolute URL for the background image.",
        ),
        FieldSpec(
            "background_image_position",
            "select",
            "Image Position",
            default="center center",
            options=c.IMAGE_POSITION,
            group="image_settings",
        ),
        FieldSpec(
            "background_image_repeat",
            "select",
            "Image Repeat",
            default="no-repeat",
            options=c.IMAGE_REPEAT,
            group="image_settings",
        ),
        FieldSpec(
            "background_image_size",
            "select",
            "Image Size",
            default="cover",
            options=c.IMAGE_SIZE,
            group="image_settings",
        ),
        FieldSpec(
            "background_image_attachment",
            "select",
            "Image Attachment",
            default="scroll",
            options=c.IMAGE_ATTACHMENT,
            group="image_settings",
        ),
        FieldSpec(
            "background_video_url",
            "url",
            "Video URL",
            default="",
            group="video_settings",
            validator="url",
            stored=False,
            description=(
                "Enter the full, absolute URL for the video file "
                "(e.g., https://example.com/video.mp4)."
            ),
        ),
        FieldSpec("background_video_loop", "checkbox", "Loop video", default=False, group="video_settings"),
        FieldSpec("background_video_autoplay", "checkbox", "Autoplay video", default=True, group="video_settings"),
        FieldSpec("background_video_muted", "checkbox", "Mute video", default=True, group="video_settings"),
        FieldSpec(
            "background_video_preload",
            "select",
            "Preload video",
            default="auto",
            options=c.VIDEO_PRELOAD,
            group="video_settings",
        ),
        FieldSpec(
            "background_gradient_type",
            "select",
            "Gradient Type",
            default="linear",
            options=c.GRADIENT_TYPE,
            group="gradient_settings",
        ),
        FieldSpec(
            "background_gradient_start_color",
            "color",
            "Start Color",
            default="",
            group="gradient_settings",
            validator="hex_color",
        ),
        FieldSpec(
            "background_gradient_end_color",
            "color",
            "End Color",
            default="",
            group="gradient_settings",
            validator="hex_color",
        ),
        FieldSpec(
            "background_gradient_linear_direction",
            "select",
            "Direction",
            default="to bottom",
            options=c.GRADIENT_LINEAR_DIRECTION,
            group="gradient_settings",
            states=_visible_when(_GRADIENT_TYPE, "linear"),
        ),
        FieldSpec(
            "background_gradient_radial_shape",
            "select",
            "Shape",
            default="ellipse",
            options=c.GRADIENT_RADIAL_SHAPE,
            group="gradient_settings",
            states=_visible_when(_GRADIENT_TYPE, "radial"),
        ),
        FieldSpec(
            "background_gradient_radial_position",
            "select",
            "Position",
            default="center",
            options=c.GRADIENT_RADIAL_POSITION,
            group="gradient_settings",
            states=_visible_when(_GRADIENT_TYPE, "radial"),
        ),
        FieldSpec(
            "background_overlay_color",
            "color",
            "Overlay Color",
            default="",
            group="overlay_settings",
            validator="hex_color",
            description=(
                "The overlay sits on top of the background media, but behind the content."
            ),
        ),
        FieldSpec(
            "background_overlay_opacity",
            "select",
            "Overlay Opacity",
            options=c.OVERLAY_OPACITY,
            group="overlay_settings",
        ),
    ),
    libraries=("backgrounds",),
    form_hook=hooks.background_form,
    submit_hook=hooks.background_submit,
    render_hook=hooks.background_render,
)

BORDER = FeatureSpec(
    id="border",
    label="Border",
    form_key="border",
    permission=permission("border"),
    fields=(
        FieldSpec(
            "border_color",
            "color",
            "Border Color",
            default="",
            validator="hex_color",
            description="Enter a hex code for the border color. Width and style default to a thin solid line.",
        ),
        FieldSpec("border_width_option", "select", "Border Width", options=c.BORDER_WIDTH),
        FieldSpec("border_style_option", "select", "Border Style", options=c.BORDER_STYLE),
        FieldSpec("border_radius_option", "select", "Border Radius", options=c.BORDER_RADIUS),
    ),
    class_rules=(ClassRule("border_radius_option", "kl-border-radius-"),),
    libraries=("borders",),
    render_hook=hooks.border_render,
)

COLOR = FeatureSpec(
    id="color",
    label="Color",
    form_key="color",
    permission=permission("colors"),
    fields=(
        FieldSpec(
            "foreground_color_enable",
            "checkbox",
            "Set a foreground color",
            default=False,
            stored=False,
        ),
        FieldSpec(
            "foreground_color",
            "color",
            "Foreground Color",
            default="",
            validator="hex_color",
            states={"visible": {"color/foreground_color_enable": {"checked": True}}},
        ),
    ),
    style_rules=(style("foreground_color", "color"),),
    form_hook=hooks.color_form,
    submit_hook=hooks.color_submit,
)

TYPOGRAPHY = FeatureSpec(
    id="typography",
    label="Typography",
    form_key="typography",
    permission=permission("typography"),
    fields=(
        FieldSpec("font_family_option", "select", "Font Family", options=c.FONT_FAMILY),
        FieldSpec(
            "custom_font_url",
            "url",
            "Custom Font URL",
            default="",
            validator="url",
            description="Stylesheet URL for the font, e.g. a Google Fonts css2 link.",
            states=_visible_when("typography/font_family_option", c.CUSTOM_FONT_IMPORT),
        ),
        FieldSpec("font_size_option", "select", "Font Size", options=c.FONT_SIZE),
        FieldSpec("font_weight_option", "select", "Font Weight", options=c.FONT_WEIGHT),
        FieldSpec("line_height_option", "select", "Line Height", options=c.LINE_HEIGHT),
        FieldSpec("letter_spacing_option", "select", "Letter Spacing", options=c.LETTER_SPACING),
        FieldSpec("text_transform_option", "select", "Text Transform", options=c.TEXT_TRANSFORM),
    ),
    style_rules=(
        style("font_family_option", "font-family", skip=(c.CUSTOM_FONT_IMPORT,)),
        style("font_size_option", "font-size"),
        style("font_weight_option", "font-weight"),
        style("line_height_option", "line-height"),
        style("letter_spacing_option", "letter-spacing"),
        style("text_transform_option", "text-transform"),
    ),
    libraries=("typography",),
    submit_hook=hooks.typography_submit,
    render_hook=hooks.typography_render,
)

ALIGNMENT = FeatureSpec(
    id="alignment",
    label="Alignment",
    form_key="alignment",
    permission=permission("alignment"),
    fields=(
        FieldSpec(
            "vertical_alignment",
            "select",
            "Vertical Alignment",
            default="center",
            options=c.VERTICAL_ALIGNMENT,
        ),
        FieldSpec(
            "horizontal_alignment",
            "select",
            "Horizontal Alignment",
            default="start",
            options=c.HORIZONTAL_ALIGNMENT,
        ),
    ),
    class_rules=(
        ClassRule("vertical_alignment", "kl-align-content-", skip=("center",)),
        ClassRule("horizontal_alignment", "kl-justify-content-", skip=("start",)),
    ),
    libraries=("alignment",),
)

ANIMATION = FeatureSpec(
    id="animation",
    label="Animation",
    form_key="animation",
    permission=permission("animation"),
    gate="animation_type",
    fields=(
        FieldSpec(
            "animation_type",
            "select",
            "Animation Type",
            options=c.ANIMATION_TYPE,
            description="Select an animation to apply when the layout scrolls into view.",
        ),
        FieldSpec(
            "slide_direction",
            "select",
            "Slide Direction",
            options=c.SLIDE_DIRECTION,
            states=_visible_when("animation/animation_type", "slide-in"),
        ),
        FieldSpec("transition_property", "select", "Transition Property", options=c.TRANSITION_PROPERTY),
        FieldSpec("transition_duration", "select", "Transition Duration", options=c.TRANSITION_DURATION),
        FieldSpec(
            "transition_timing_function",
            "select",
            "Transition Speed Curve",
            options=c.TRANSITION_TIMING_FUNCTION,
        ),
        FieldSpec("transition_delay", "select", "Transition Delay", options=c.TRANSITION_DELAY),
    ),
    class_rules=(
        ClassRule("animation_type", "kl-animate--"),
        ClassRule("slide_direction", "kl-animate--direction-", when=("animation_type", "slide-in")),
    ),
    style_rules=(
        style("transition_property", "transition-property"),
        style("transition_duration", "transition-duration"),
        style("transition_timing_function", "transition-timing-function"),
        style("transition_delay", "transition-delay"),
    ),
    marker_classes=("kl-animate",),
    libraries=("animations",),
)

SHADOWS_EFFECTS = FeatureSpec(
    id="shadows_effects",
    label="Shadows & Effects",
    form_key="shadows_effects",
    permission=permission("shadows effects"),
    group_titles={"static_effects": "Static Effects", "hover_effects": "Hover Effects"},
    fields=(
        FieldSpec("box_shadow_option", "select", "Box Shadow", options=c.BOX_SHADOW, group="static_effects"),
        FieldSpec("filter_option", "select", "Filter", options=c.FILTER, group="static_effects"),
        FieldSpec("opacity_option", "select", "Opacity", options=c.OPACITY, group="static_effects"),
        FieldSpec("transform_scale_option", "select", "Scale", options=c.TRANSFORM_SCALE, group="static_effects"),
        FieldSpec("transform_rotate_option", "select", "Rotate", options=c.TRANSFORM_ROTATE, group="static_effects"),
        FieldSpec("hover_transform_scale_option", "select", "Hover Scale", options=c.HOVER_SCALE, group="hover_effects"),
        FieldSpec(
            "hover_box_shadow_option", "select", "Hover Box Shadow", options=c.HOVER_BOX_SHADOW, group="hover_effects"
        ),
        FieldSpec("hover_filter_option", "select", "Hover Filter", options=c.HOVER_FILTER, group="hover_effects"),
        FieldSpec(
            "hover_font_size_option", "select", "Hover Font Size", options=c.HOVER_FONT_SIZE, group="hover_effects"
        ),
    ),
    class_rules=(
        ClassRule("box_shadow_option", "kl-shadow-"),
        ClassRule("filter_option", "kl-filter-"),
        ClassRule("hover_transform_scale_option", "kl--hover-scale-"),
        ClassRule("hover_box_shadow_option", "kl--hover-shadow-"),
        ClassRule("hover_filter_option", "kl--hover-filter-"),
        ClassRule("hover_font_size_option", "kl--hover-font-size-"),
    ),
    style_rules=(
        style("opacity_option", "opacity"),
        composite_style(
            "transform",
            ("transform_scale_option", "scale({value})"),
            ("transform_rotate_option", "rotate({value}deg)"),
        ),
    ),
    marker_classes=("kl-animate",),
    libraries=("effects", "animations"),
)

RESPONSIVENESS = FeatureSpec(
    id="responsiveness",
    label="Responsiveness",
    form_key="responsiveness",
    permission=permission("responsiveness"),
    fields=(
        FieldSpec(
            "hide_on_breakpoints",
            "checkboxes",
            "Visibility",
            default=[],
            options=c.HIDE_ON_BREAKPOINTS,
            description="Hide this section on the selected screen sizes.",
        ),
    ),
    class_rules=(ClassRule("hide_on_breakpoints", "kl-hide-on-"),),
    libraries=("responsiveness",),
)

CUSTOM_ATTRIBUTES = FeatureSpec(
    id="custom_attributes",
    label="Custom Attributes",
    form_key="custom_attributes",
    permission=permission("custom attributes"),
    fields=(
        FieldSpec(
            "custom_css_id",
            "textfield",
            "Custom ID",
            default="",
            validator="css_id",
            description="Add a unique ID to the layout section.",
        ),
        FieldSpec(
            "custom_css_class",
            "textfield",
            "Custom CSS Classes",
            default="",
            validator="css_classes",
            description="Add one or more custom CSS classes, separated by spaces.",
        ),
    ),
    submit_hook=hooks.custom_attributes_submit,
    render_hook=hooks.custom_attributes_render,
)

FEATURES: tuple[FeatureSpec, ...] = (
    CONTAINER_TYPE,
    SPACING,
    BACKGROUND,
    BORDER,
    COLOR,
    TYPOGRAPHY,
    ALIGNMENT,
    ANIMATION,
    SHADOWS_EFFECTS,
    RESPONSIVENESS,
    CUSTOM_ATTRIBUTES,
)
"""Standard registration order."""

