"""HTML renderer for configured layout sections."""

import html
import logging
import mimetypes
from collections.abc import Mapping
from typing import Optional

from ..display_options.hooks import BACKGROUND_VIDEO_THEME
from ..display_options.render import ChildElement, RenderTree
from .plugin import LayoutPlugin
from .resource_manager import ResourceManager

logger = logging.getLogger(__name__)

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="utf-8">
    <title>{title}</title>
</head>
<body>
{body}
</body>
</html>
"""


class HTMLRenderer:
    """Renders a layout plugin and its region content to HTML.

    Region content is inserted as given (it is already rendered markup);
    every attribute value produced from configuration is escaped, and URLs
    reach inline CSS only in normalized, percent-encoded form.
    """

    def __init__(self, resource_manager: Optional[ResourceManager] = None) -> None:
        self.resource_manager = resource_manager or ResourceManager()

    def _escape_html(self, text: str) -> str:
        if not text:
            return ""
        return html.escape(text, quote=True)

    def _attributes(self, classes: list[str], styles: list[str], extra: Mapping[str, str]) -> str:
        parts = []
        if "id" in extra:
            parts.append(f'id="{self._escape_html(extra["id"])}"')
        if classes:
            parts.append(f'class="{self._escape_html(" ".join(classes))}"')
        if styles:
            parts.append(f'style="{self._escape_html(" ".join(styles))}"')
        for name, value in extra.items():
            if name != "id":
                parts.append(f'{self._escape_html(name)}="{self._escape_html(value)}"')
        return " ".join(parts)

    def render_background_video(self, params: Mapping[str, object]) -> str:
        """Markup for the background video theme hook."""
        video_url = str(params.get("video_url", ""))
        mime_type = mimetypes.guess_type(video_url)[0] or "video/mp4"
        flags = ["playsinline"]
        for flag in ("autoplay", "muted", "loop"):
            if params.get(flag):
                flags.append(flag)
        preload = self._escape_html(str(params.get("preload") or "auto"))
        return (
            '<div class="kl__bg-video-wrapper">'
            f'<video class="kl__bg-video" {" ".join(flags)} preload="{preload}">'
            f'<source src="{self._escape_html(video_url)}" type="{mime_type}">'
            "</video></div>"
        )

    def _render_child(self, name: str, child: ChildElement) -> str:
        if child.theme == BACKGROUND_VIDEO_THEME:
            return self.render_background_video(child.params)
        if child.theme:
            logger.warning(f"No renderer for theme hook '{child.theme}' on child '{name}'")
            return ""
        attributes = self._attributes(child.classes, child.styles, {})
        return f"<{child.tag} {attributes}></{child.tag}>"

    def render_section(self, plugin: LayoutPlugin, regions: Optional[Mapping[str, str]] = None) -> str:
        """Render one layout section.

        Args:
            plugin: Configured layout
            regions: Region id to rendered content; empty regions are omitted

        Returns:
            Section HTML
        """
        return self._render_section(plugin, plugin.build_render_tree(), regions or {})

    def _render_section(
        self, plugin: LayoutPlugin, render: RenderTree, regions: Mapping[str, str]
    ) -> str:
        definition = plugin.definition
        unknown = set(regions) - set(definition.regions)
        if unknown:
            logger.warning(f"Ignoring unknown regions for {definition.id}: {', '.join(sorted(unknown))}")

        classes = ["layout", definition.template_name, *render.classes]
        lines = [f"<div {self._attributes(classes, render.styles, render.attributes)}>"]
        for name, child in render.sorted_children():
            child_html = self._render_child(name, child)
            if child_html:
                lines.append(f"  {child_html}")
        for region in definition.regions:
            content = regions.get(region)
            if content:
                lines.append(
                    f'  <div class="layout__region layout__region--{self._escape_html(region)}">'
                    f"{content}</div>"
                )
        lines.append("</div>")
        return "\n".join(lines)

    def render_page(
        self,
        plugin: LayoutPlugin,
        regions: Optional[Mapping[str, str]] = None,
        title: Optional[str] = None,
    ) -> str:
        """Render a standalone HTML page holding one section and its assets."""
        render = plugin.build_render_tree()
        body = self._render_section(plugin, render, regions or {})
        page = PAGE_TEMPLATE.format(
            title=self._escape_html(title or plugin.definition.label), body=body
        )
        return self.resource_manager.inject_layout_resources(page, render)
