"""Render tree accumulated by the layout plugin and display option services."""

from dataclasses import asdict, dataclass, field
from typing import Any, Optional

LIBRARY_NAMESPACE = "kingly_layouts"


def library_name(name: str) -> str:
    """Qualify a bare library name with the package namespace."""
    return name if "/" in name else f"{LIBRARY_NAMESPACE}/{name}"


@dataclass
class ChildElement:
    """A child element rendered inside the section before its regions."""

    weight: int = 0
    theme: Optional[str] = None
    tag: str = "div"
    classes: list[str] = field(default_factory=list)
    styles: list[str] = field(default_factory=list)
    params: dict[str, Any] = field(default_factory=dict)


@dataclass
class RenderTree:
    """Classes, inline styles and attached assets for one layout section.

    A render tree lives for a single render pass. Services only ever append to
    it; classes and libraries keep their first insertion position.
    """

    classes: list[str] = field(default_factory=list)
    styles: list[str] = field(default_factory=list)
    attributes: dict[str, str] = field(default_factory=dict)
    libraries: list[str] = field(default_factory=list)
    html_head: dict[str, str] = field(default_factory=dict)
    children: dict[str, ChildElement] = field(default_factory=dict)

    def add_class(self, *names: str) -> None:
        for name in names:
            if name and name not in self.classes:
                self.classes.append(name)

    def add_style(self, prop: str, value: str) -> None:
        """Append an inline declaration ``prop: value;``."""
        self.styles.append(f"{prop}: {value};")

    def attach_library(self, *names: str) -> None:
        for name in names:
            qualified = library_name(name)
            if qualified not in self.libraries:
                self.libraries.append(qualified)

    def add_head_style(self, key: str, css: str) -> None:
        """Register a ``<style>`` element for the document head, keyed for de-duplication."""
        self.html_head[key] = css

    def add_child(self, name: str, child: ChildElement) -> None:
        self.children[name] = child

    def sorted_children(self) -> list[tuple[str, ChildElement]]:
        """Children ordered by weight, ties kept in insertion order."""
        return sorted(self.children.items(), key=lambda item: item[1].weight)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
