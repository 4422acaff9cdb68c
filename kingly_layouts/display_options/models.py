"""Declarative schema for display option features.

A feature is described by a ``FeatureSpec`` row: the fields it adds to the
settings form (and so the configuration keys it owns), the class and style
rules that turn resolved values into render output, and the libraries and
marker classes attached when any rule fires. Features with compound output
name small hook functions instead of carrying their own service class.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Optional

from .catalogs import NONE

if TYPE_CHECKING:
    from .engine import DisplayOption
    from .forms import FormElement
    from .render import RenderTree

FormHook = Callable[["FormElement", dict[str, Any], "DisplayOption"], None]
SubmitHook = Callable[[dict[str, Any], dict[str, Any], "DisplayOption"], None]
RenderHook = Callable[["RenderTree", dict[str, Any], "DisplayOption"], bool]

FIELD_TYPES = frozenset(
    {"select", "checkbox", "checkboxes", "color", "textfield", "url", "value"}
)
VALIDATORS = frozenset({"hex_color", "css_id", "css_classes", "url", "css_length"})


@dataclass(frozen=True)
class FieldSpec:
    """One form control and, unless ``stored`` is False, the configuration key it owns."""

    key: str
    field_type: str
    title: str
    default: Any = NONE
    options: Optional[Mapping[str, str]] = None
    description: Optional[str] = None
    group: Optional[str] = None
    responsive: bool = False
    validator: Optional[str] = None
    stored: bool = True
    states: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ClassRule:
    """Emit ``prefix + value`` for a resolved field value.

    Values listed in ``skip`` emit nothing. ``when`` restricts the rule to
    configurations where another field resolves to the given value.
    """

    key: str
    prefix: str
    skip: tuple[str, ...] = ()
    when: Optional[tuple[str, str]] = None


@dataclass(frozen=True)
class StyleRule:
    """Emit one inline declaration built from one or more field values.

    Each part is a ``(key, template)`` pair; parts whose field does not resolve
    are left out and the declaration is skipped when no part resolves.
    """

    property: str
    parts: tuple[tuple[str, str], ...]
    skip: tuple[str, ...] = ()
    joiner: str = " "


def style(key: str, prop: str, template: str = "{value}", skip: tuple[str, ...] = ()) -> StyleRule:
    """Single-field style rule, e.g. ``style("font_size_option", "font-size")``."""
    return StyleRule(prop, ((key, template),), skip=skip)


def composite_style(prop: str, *parts: tuple[str, str]) -> StyleRule:
    """Style rule combining several fields into one declaration."""
    return StyleRule(prop, tuple(parts))


@dataclass(frozen=True)
class FeatureSpec:
    """A display option feature: form group, owned keys and render rules."""

    id: str
    label: str
    form_key: str
    permission: Optional[str] = None
    fields: tuple[FieldSpec, ...] = ()
    class_rules: tuple[ClassRule, ...] = ()
    style_rules: tuple[StyleRule, ...] = ()
    libraries: tuple[str, ...] = ()
    marker_classes: tuple[str, ...] = ()
    gate: Optional[str] = None
    group_type: Optional[str] = "details"
    group_titles: Mapping[str, str] = field(default_factory=dict)
    weight: Optional[int] = None
    form_hook: Optional[FormHook] = None
    submit_hook: Optional[SubmitHook] = None
    render_hook: Optional[RenderHook] = None
