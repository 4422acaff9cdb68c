"""Hooks for features whose output is more than one rule per field."""

import hashlib
import logging
import re
from typing import TYPE_CHECKING, Any

from ..utils.validation import normalize_css_classes
from .catalogs import CUSTOM_FONT_IMPORT
from .colors import rgba
from .render import ChildElement, RenderTree

if TYPE_CHECKING:
    from .engine import DisplayOption
    from .forms import FormElement

logger = logging.getLogger(__name__)

MEDIA_BACKGROUND_TYPES = ("image", "video", "gradient")
BACKGROUND_VIDEO_THEME = "kingly_background_video"
CUSTOM_FONT_HEAD_PREFIX = "kingly_layouts_custom_font_"

_GOOGLE_FONT_FAMILY = re.compile(r"family=([^&:]+)")
_FONT_NAME = re.compile(r"^[A-Za-z0-9 _-]+$")


# Color


def color_form(container: "FormElement", config: dict[str, Any], option: "DisplayOption") -> None:
    """Pre-check the enable toggle when a foreground color is stored."""
    toggle = container.children.get("foreground_color_enable")
    if toggle is not None:
        toggle.default_value = bool(config.get("foreground_color"))


def color_submit(values: dict[str, Any], config: dict[str, Any], option: "DisplayOption") -> None:
    """Keep the foreground color only while its toggle is checked."""
    if not values.get("foreground_color_enable"):
        config["foreground_color"] = ""


# Border


def border_render(render: RenderTree, config: dict[str, Any], option: "DisplayOption") -> bool:
    """Border color plus width and style, defaulting to a thin solid line."""
    color = option.resolve("border_color", config)
    if color is None:
        return False
    render.add_style("border-color", color)
    width = option.resolve("border_width_option", config) or "sm"
    line_style = option.resolve("border_style_option", config) or "solid"
    render.add_class(f"kl-border-width-{width}", f"kl-border-style-{line_style}")
    return True


# Typography


def custom_font_family(url: str) -> str:
    """CSS font-family for an imported font, read from a Google Fonts URL when possible."""
    match = _GOOGLE_FONT_FAMILY.search(url)
    if match:
        font_name = match.group(1).replace("+", " ").strip()
        if _FONT_NAME.match(font_name):
            return f"'{font_name}', sans-serif"
    return "sans-serif"


def custom_font_head_key(url: str) -> str:
    return CUSTOM_FONT_HEAD_PREFIX + hashlib.sha256(url.encode("utf-8")).hexdigest()


def typography_submit(values: dict[str, Any], config: dict[str, Any], option: "DisplayOption") -> None:
    """Only keep a font URL while the custom import family is selected."""
    if config.get("font_family_option") != CUSTOM_FONT_IMPORT:
        config["custom_font_url"] = ""


def typography_render(render: RenderTree, config: dict[str, Any], option: "DisplayOption") -> bool:
    """Import a custom font in the document head and use it as the font family."""
    if option.resolve("font_family_option", config) != CUSTOM_FONT_IMPORT:
        return False
    url = option.resolve("custom_font_url", config)
    if url is None:
        return False
    render.add_head_style(custom_font_head_key(url), f'@import url("{url}");')
    render.add_style("font-family", custom_font_family(url))
    return True


# Custom attributes


def custom_attributes_submit(
    values: dict[str, Any], config: dict[str, Any], option: "DisplayOption"
) -> None:
    config["custom_css_class"] = normalize_css_classes(config.get("custom_css_class", ""))


def custom_attributes_render(
    render: RenderTree, config: dict[str, Any], option: "DisplayOption"
) -> bool:
    applied = False
    css_id = option.resolve("custom_css_id", config)
    if css_id:
        render.attributes["id"] = css_id
        applied = True
    css_classes = option.resolve("custom_css_class", config)
    if css_classes:
        render.add_class(*css_classes.split())
        applied = True
    return applied


# Background


def background_form(container: "FormElement", config: dict[str, Any], option: "DisplayOption") -> None:
    """Show the stored media URL in the URL field matching the background type."""
    media_url = config.get("background_media_url", "")
    background_type = config.get("background_type")
    for group, url_key, media_type in (
        ("image_settings", "background_image_url", "image"),
        ("video_settings", "background_video_url", "video"),
    ):
        element = container.find((group, url_key))
        if element is not None:
            element.default_value = media_url if background_type == media_type else ""


def background_submit(values: dict[str, Any], config: dict[str, Any], option: "DisplayOption") -> None:
    """Route the URL field of the chosen type into ``background_media_url``."""
    background_type = config.get("background_type")
    if background_type == "image":
        config["background_media_url"] = values.get("background_image_url", "")
    elif background_type == "video":
        config["background_media_url"] = values.get("background_video_url", "")
    else:
        config["background_media_url"] = ""

    # Hero sections always fill the viewport height.
    if config.get("container_type") == "hero":
        config["background_media_min_height"] = ""


def background_render(render: RenderTree, config: dict[str, Any], option: "DisplayOption") -> bool:
    background_type = option.resolve("background_type", config)
    if background_type is None:
        return False

    applied = False
    min_height = option.resolve("background_media_min_height", config)
    if min_height and background_type in MEDIA_BACKGROUND_TYPES:
        render.add_style("min-height", min_height)
        applied = True

    if background_type == "color":
        applied = _apply_background_color(render, config, option) or applied
    elif background_type == "image":
        applied = _apply_background_image(render, config, option) or applied
    elif background_type == "video":
        applied = _apply_background_video(render, config, option) or applied
    elif background_type == "gradient":
        applied = _apply_background_gradient(render, config, option) or applied

    if background_type in MEDIA_BACKGROUND_TYPES:
        applied = _apply_background_overlay(render, config, option) or applied
    return applied


def _apply_background_color(render: RenderTree, config: dict[str, Any], option: "DisplayOption") -> bool:
    color = option.resolve("background_color", config)
    if color is None:
        return False
    opacity = option.resolve("background_opacity", config)
    composited = rgba(color, opacity) if opacity is not None else None
    render.add_style("background-color", composited or color)
    return True


def _apply_background_image(render: RenderTree, config: dict[str, Any], option: "DisplayOption") -> bool:
    url = option.resolve("background_media_url", config)
    if url is None:
        return False
    render.add_style("background-image", f'url("{url}")')
    for key, prop in (
        ("background_image_position", "background-position"),
        ("background_image_repeat", "background-repeat"),
        ("background_image_size", "background-size"),
        ("background_image_attachment", "background-attachment"),
    ):
        value = option.resolve(key, config)
        if value is not None:
            render.add_style(prop, value)
    return True


def _apply_background_video(render: RenderTree, config: dict[str, Any], option: "DisplayOption") -> bool:
    url = option.resolve("background_media_url", config)
    if url is None:
        return False
    render.add_class("kl--has-bg-video")
    render.add_child(
        "video_background",
        ChildElement(
            weight=-100,
            theme=BACKGROUND_VIDEO_THEME,
            params={
                "video_url": url,
                "loop": option.resolve("background_video_loop", config),
                "autoplay": option.resolve("background_video_autoplay", config),
                "muted": option.resolve("background_video_muted", config),
                "preload": option.resolve("background_video_preload", config) or "auto",
            },
        ),
    )
    return True


def _apply_background_gradient(render: RenderTree, config: dict[str, Any], option: "DisplayOption") -> bool:
    start = option.resolve("background_gradient_start_color", config)
    end = option.resolve("background_gradient_end_color", config)
    if start is None or end is None:
        return False

    if option.resolve("background_gradient_type", config) == "radial":
        shape = option.resolve("background_gradient_radial_shape", config) or "ellipse"
        position = option.resolve("background_gradient_radial_position", config) or "center"
        gradient = f"radial-gradient({shape} at {position}, {start}, {end})"
    else:
        direction = option.resolve("background_gradient_linear_direction", config) or "to bottom"
        gradient = f"linear-gradient({direction}, {start}, {end})"
    render.add_style("background-image", gradient)
    return True


def _apply_background_overlay(render: RenderTree, config: dict[str, Any], option: "DisplayOption") -> bool:
    color = option.resolve("background_overlay_color", config)
    opacity = option.resolve("background_overlay_opacity", config)
    if color is None or opacity is None:
        return False
    overlay_color = rgba(color, opacity)
    if overlay_color is None:
        return False
    render.add_class("kl--has-bg-overlay")
    render.add_child(
        "overlay",
        ChildElement(
            weight=-99,
            classes=["kl__bg-overlay"],
            styles=[f"background-color: {overlay_color};"],
        ),
    )
    return True
