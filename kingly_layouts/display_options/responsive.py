"""Responsive breakpoints and the per-breakpoint field helper."""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Optional

from .catalogs import NONE
from .forms import FormElement
from .render import RenderTree

logger = logging.getLogger(__name__)

RESPONSIVE_FIELDS_CLASS = "kl-responsive-fields"


@dataclass(frozen=True)
class Breakpoint:
    """A responsive tier and the prefix its classes carry."""

    id: str
    label: str
    prefix: str


# Mobile first; mobile is the base tier and carries no prefix.
DEFAULT_BREAKPOINTS: tuple[Breakpoint, ...] = (
    Breakpoint("mobile", "Mobile (Default)", ""),
    Breakpoint("md", "Medium (md)", "md--"),
    Breakpoint("lg", "Large (lg)", "lg--"),
)


class ResponsiveFieldHelper:
    """Builds per-breakpoint selects and fans responsive values out to classes."""

    def __init__(self, breakpoints: Sequence[Breakpoint] = DEFAULT_BREAKPOINTS) -> None:
        self.breakpoints = tuple(breakpoints)

    def default_value(self) -> dict[str, str]:
        return {breakpoint.id: NONE for breakpoint in self.breakpoints}

    def normalize(self, value: Any) -> dict[str, str]:
        """Return a value with every breakpoint present.

        A plain string is treated as the mobile value, anything else that is
        not a mapping yields all sentinels.
        """
        normalized = self.default_value()
        if isinstance(value, Mapping):
            for breakpoint in self.breakpoints:
                token = value.get(breakpoint.id)
                if isinstance(token, str) and token:
                    normalized[breakpoint.id] = token
        elif isinstance(value, str) and value:
            normalized[self.breakpoints[0].id] = value
        return normalized

    def build_responsive_fields(
        self,
        title: str,
        options: Mapping[str, str],
        value: Any,
        description: Optional[str] = None,
    ) -> FormElement:
        """Build a fieldset holding one select per breakpoint.

        Only the first (mobile) select carries the description.
        """
        current = self.normalize(value)
        fieldset = FormElement(
            type="fieldset",
            title=title,
            attributes={"class": [RESPONSIVE_FIELDS_CLASS]},
        )
        for index, breakpoint in enumerate(self.breakpoints):
            fieldset.add(
                breakpoint.id,
                FormElement(
                    type="select",
                    title=breakpoint.label,
                    options=dict(options),
                    default_value=current[breakpoint.id],
                    description=description if index == 0 else None,
                ),
            )
        return fieldset

    def responsive_classes(self, prefix: str, value: Any, options: Mapping[str, str]) -> list[str]:
        """Class names for every breakpoint with a recognized, non-sentinel token."""
        classes = []
        for breakpoint, token in zip(self.breakpoints, self.normalize(value).values()):
            if token == NONE:
                continue
            if token not in options:
                logger.debug(f"Ignoring unknown {prefix} value '{token}' at {breakpoint.id}")
                continue
            classes.append(f"{breakpoint.prefix}{prefix}{token}")
        return classes

    def process_responsive_classes(
        self, render: RenderTree, prefix: str, value: Any, options: Mapping[str, str]
    ) -> bool:
        """Append responsive classes to the render tree.

        Returns:
            True if at least one class was added
        """
        classes = self.responsive_classes(prefix, value, options)
        render.add_class(*classes)
        return bool(classes)
