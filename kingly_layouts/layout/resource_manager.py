"""Resource manager: resolves attached libraries to CSS/JS URLs and injects them."""

import html
import logging
from collections.abc import Mapping
from typing import Any, Optional

from ..display_options.hooks import CUSTOM_FONT_HEAD_PREFIX
from ..display_options.render import LIBRARY_NAMESPACE, RenderTree
from .exceptions import ResourceLoadingError

logger = logging.getLogger(__name__)

# Library name (without namespace) to the asset files it ships.
LIBRARIES: dict[str, dict[str, list[str]]] = {
    "kingly_utilities": {"css": ["css/kingly-utilities.css"], "js": []},
    "base": {"css": ["css/base.css"], "js": []},
    "containers": {"css": ["css/containers.css"], "js": []},
    "spacing": {"css": ["css/spacing.css"], "js": []},
    "backgrounds": {"css": ["css/backgrounds.css"], "js": []},
    "borders": {"css": ["css/borders.css"], "js": []},
    "alignment": {"css": ["css/alignment.css"], "js": []},
    "typography": {"css": ["css/typography.css"], "js": []},
    "animations": {"css": ["css/animations.css"], "js": ["js/animations.js"]},
    "effects": {"css": ["css/effects.css"], "js": []},
    "responsiveness": {"css": ["css/responsiveness.css"], "js": []},
    "kl_layout_one_column": {"css": ["css/layouts/kl-one-column.css"], "js": []},
    "kl_layout_two_column": {"css": ["css/layouts/kl-two-column.css"], "js": []},
    "kl_layout_three_column": {"css": ["css/layouts/kl-three-column.css"], "js": []},
    "kl_layout_four_column": {"css": ["css/layouts/kl-four-column.css"], "js": []},
}


class ResourceManager:
    """Maps the libraries attached to a render tree onto static asset URLs.

    Args:
        base_url: Base URL path for serving static resources
        libraries: Library table; defaults to the package's own assets
    """

    def __init__(
        self,
        base_url: str = "/static",
        libraries: Optional[Mapping[str, Mapping[str, list[str]]]] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.libraries = dict(LIBRARIES if libraries is None else libraries)

    def _library_files(self, library: str, kind: str) -> list[str]:
        namespace, _, name = library.partition("/")
        if namespace != LIBRARY_NAMESPACE:
            logger.debug(f"Skipping external library '{library}'")
            return []
        definition = self.libraries.get(name)
        if definition is None:
            logger.warning(f"Unknown library '{library}' attached; no assets loaded")
            return []
        return list(definition.get(kind, []))

    def _urls(self, render: RenderTree, kind: str) -> list[str]:
        urls: list[str] = []
        for library in render.libraries:
            for file_name in self._library_files(library, kind):
                url = file_name if file_name.startswith("http") else f"{self.base_url}/{LIBRARY_NAMESPACE}/{file_name}"
                if url not in urls:
                    urls.append(url)
        return urls

    def get_css_urls(self, render: RenderTree) -> list[str]:
        """CSS URLs for every attached library, in attachment order."""
        return self._urls(render, "css")

    def get_js_urls(self, render: RenderTree) -> list[str]:
        """JavaScript URLs for every attached library, in attachment order."""
        return self._urls(render, "js")

    def get_head_styles(self, render: RenderTree) -> list[tuple[str, str]]:
        """Head ``<style>`` contents, custom font imports first.

        CSS ``@import`` rules are only honored before other rules, so font
        imports always lead.
        """
        return sorted(
            render.html_head.items(),
            key=lambda item: not item[0].startswith(CUSTOM_FONT_HEAD_PREFIX),
        )

    def get_resources(self, render: RenderTree) -> dict[str, Any]:
        return {
            "css": self.get_css_urls(render),
            "js": self.get_js_urls(render),
            "head": dict(self.get_head_styles(render)),
        }

    def inject_layout_resources(self, template: str, render: RenderTree) -> str:
        """Inject the render tree's resources into an HTML document.

        Head styles that could close their ``<style>`` element are dropped.

        Args:
            template: HTML document string
            render: Render tree whose libraries and head styles to inject

        Returns:
            Updated HTML with styles before ``</head>`` and scripts before ``</body>``

        Raises:
            ResourceLoadingError: If the template lacks the ``</head>`` or
                ``</body>`` tag needed for resources the render tree carries
        """
        head_parts = []
        for key, css in self.get_head_styles(render):
            if "</" in css:
                logger.warning(f"Dropping head style {key}: contains a closing tag")
                continue
            head_parts.append(f'<style id="{html.escape(key)}">{css}</style>')
        head_parts.extend(
            f'<link rel="stylesheet" type="text/css" href="{html.escape(css_url)}">'
            for css_url in self.get_css_urls(render)
        )
        js_parts = [f'<script src="{html.escape(js_url)}"></script>' for js_url in self.get_js_urls(render)]

        if head_parts and "</head>" not in template:
            raise ResourceLoadingError("Cannot inject styles: template has no </head> tag")
        if js_parts and "</body>" not in template:
            raise ResourceLoadingError("Cannot inject scripts: template has no </body> tag")

        updated_template = template
        if head_parts:
            head_html = "\n    ".join(head_parts)
            updated_template = updated_template.replace("</head>", f"    {head_html}\n</head>", 1)
        if js_parts:
            js_html = "\n    ".join(js_parts)
            before, _tag, after = updated_template.rpartition("</body>")
            updated_template = f"{before}    {js_html}\n</body>{after}"
        return updated_template
