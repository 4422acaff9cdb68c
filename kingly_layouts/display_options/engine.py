"""Generic display option engine.

``DisplayOption`` interprets one ``FeatureSpec`` row: it builds the feature's
form group, validates and stores submitted values and applies the feature's
class and style rules to a render tree. Every feature in the package runs
through this one class.
"""

import copy
import logging
from collections.abc import Iterable, Mapping
from typing import Any, Optional

from ..utils.validation import (
    is_valid_css_classes,
    is_valid_css_id,
    is_valid_css_length,
    is_valid_url,
    normalize_url,
)
from .catalogs import NONE
from .colors import HEX_COLOR_ERROR, ColorPalette
from .forms import FormElement, FormState
from .exceptions import DisplayOptionDefinitionError
from .models import FIELD_TYPES, VALIDATORS, ClassRule, FeatureSpec, FieldSpec, StyleRule
from .render import RenderTree
from .responsive import ResponsiveFieldHelper

logger = logging.getLogger(__name__)

_MISSING = object()

VALIDATION_MESSAGES = {
    "hex_color": HEX_COLOR_ERROR,
    "css_id": (
        "The ID must start with a letter and may only contain letters, numbers, "
        "hyphens and underscores."
    ),
    "css_classes": (
        "CSS classes may only contain letters, numbers, hyphens and underscores, "
        "separated by spaces."
    ),
    "url": "Enter a full, absolute URL starting with http:// or https://.",
    "css_length": "Enter a CSS length including its unit (e.g., 400px, 50vh).",
}


class DisplayOption:
    """Runs the form, submit and render phases for one feature.

    Args:
        feature: Declarative feature definition
        palette: Named colors usable in color fields
        responsive: Breakpoint helper for responsive fields
    """

    def __init__(
        self,
        feature: FeatureSpec,
        palette: Optional[ColorPalette] = None,
        responsive: Optional[ResponsiveFieldHelper] = None,
    ) -> None:
        self.feature = feature
        self.palette = palette or ColorPalette()
        self.responsive = responsive or ResponsiveFieldHelper()
        self.fields: dict[str, FieldSpec] = {spec.key: spec for spec in feature.fields}
        self._check_definition()

    def _check_definition(self) -> None:
        """Reject field types, validators and rule keys the engine cannot interpret.

        Raises:
            DisplayOptionDefinitionError: If the feature row is inconsistent
        """
        for spec in self.feature.fields:
            if spec.field_type not in FIELD_TYPES:
                raise DisplayOptionDefinitionError(
                    f"Unknown field type '{spec.field_type}' for '{spec.key}'", feature_id=self.feature.id
                )
            if spec.validator is not None and spec.validator not in VALIDATORS:
                raise DisplayOptionDefinitionError(
                    f"Unknown validator '{spec.validator}' for '{spec.key}'", feature_id=self.feature.id
                )

        rule_keys = [rule.key for rule in self.feature.class_rules]
        rule_keys.extend(rule.when[0] for rule in self.feature.class_rules if rule.when)
        rule_keys.extend(key for rule in self.feature.style_rules for key, _template in rule.parts)
        if self.feature.gate:
            rule_keys.append(self.feature.gate)
        for key in rule_keys:
            if key not in self.fields:
                raise DisplayOptionDefinitionError(
                    f"Rule refers to unknown field '{key}'", feature_id=self.feature.id
                )

    def __repr__(self) -> str:
        return f"DisplayOption({self.feature.id!r})"

    @property
    def id(self) -> str:
        return self.feature.id

    @property
    def label(self) -> str:
        return self.feature.label

    @property
    def form_key(self) -> str:
        return self.feature.form_key

    @property
    def permission(self) -> Optional[str]:
        return self.feature.permission

    def stored_fields(self) -> Iterable[FieldSpec]:
        return (spec for spec in self.feature.fields if spec.stored)

    def field_path(self, spec: FieldSpec) -> tuple[str, ...]:
        """Key path of a field inside the submitted form values."""
        path: tuple[str, ...] = (self.form_key,) if self.feature.group_type else ()
        if spec.group:
            path += (spec.group,)
        return (*path, spec.key)

    def field_default(self, spec: FieldSpec) -> Any:
        if spec.responsive:
            return self.responsive.default_value()
        return copy.deepcopy(spec.default)

    def default_configuration(self) -> dict[str, Any]:
        """Defaults for every configuration key owned by this feature."""
        return {spec.key: self.field_default(spec) for spec in self.stored_fields()}

    def has_access(self, capabilities: Iterable[str]) -> bool:
        return self.permission is None or self.permission in set(capabilities)

    # Form phase

    def build_form(
        self, form: FormElement, config: Mapping[str, Any], capabilities: Iterable[str] = ()
    ) -> FormElement:
        """Append this feature's controls to ``form``.

        Args:
            form: Root form element to extend
            config: Current layout configuration supplying default values
            capabilities: Permissions held by the editor building the form

        Returns:
            The extended form
        """
        access = self.has_access(capabilities)
        if self.feature.group_type:
            container = form.add(
                self.form_key,
                FormElement(
                    type=self.feature.group_type,
                    title=self.label,
                    open=False,
                    access=access,
                    weight=self.feature.weight,
                ),
            )
        else:
            container = form

        for spec in self.feature.fields:
            parent = container
            if spec.group:
                parent = container.children.get(spec.group) or container.add(
                    spec.group,
                    FormElement(type="fieldset", title=self.feature.group_titles.get(spec.group)),
                )
            element = self._build_element(spec, config)
            if not self.feature.group_type:
                element.access = access
                element.weight = self.feature.weight
            parent.add(spec.key, element)

        if self.feature.form_hook:
            self.feature.form_hook(container, dict(config), self)
        return form

    def _build_element(self, spec: FieldSpec, config: Mapping[str, Any]) -> FormElement:
        value = config.get(spec.key, self.field_default(spec))
        if spec.responsive:
            return self.responsive.build_responsive_fields(
                spec.title, spec.options or {}, value, spec.description
            )
        options = dict(spec.options) if spec.options is not None else None
        if spec.field_type == "color" and len(self.palette):
            # Palette ids are offered next to free hex input.
            options = self.palette.get_color_options()
        return FormElement(
            type=spec.field_type,
            title=spec.title,
            description=spec.description,
            options=options,
            default_value=value,
            states=dict(spec.states),
        )

    def validate_form(self, form_state: FormState) -> None:
        """Record field errors for values failing their validator."""
        for spec in self.feature.fields:
            if not spec.validator:
                continue
            value = form_state.get_value(self.field_path(spec), "")
            if value in (None, ""):
                continue
            if not self._passes(spec.validator, value):
                form_state.set_error(self.field_path(spec), VALIDATION_MESSAGES[spec.validator])

    def _passes(self, validator: str, value: Any) -> bool:
        if validator == "hex_color":
            return self.palette.is_acceptable(value)
        if validator == "css_id":
            return is_valid_css_id(str(value).strip())
        if validator == "css_classes":
            return is_valid_css_classes(value)
        if validator == "url":
            return is_valid_url(value)
        return is_valid_css_length(value)

    def submit_form(self, form_state: FormState, config: dict[str, Any]) -> dict[str, Any]:
        """Copy submitted values into ``config``, using defaults for absent keys.

        Returns:
            The updated configuration (the same mapping that was passed in)
        """
        values: dict[str, Any] = {}
        for spec in self.feature.fields:
            raw = form_state.get_value(self.field_path(spec), _MISSING)
            values[spec.key] = self._coerce(spec, raw)
            if spec.stored:
                config[spec.key] = values[spec.key]
        if self.feature.submit_hook:
            self.feature.submit_hook(values, config, self)
        return config

    def _coerce(self, spec: FieldSpec, raw: Any) -> Any:
        if raw is _MISSING or raw is None:
            return self.field_default(spec)
        if spec.responsive:
            return self.responsive.normalize(raw)
        if spec.field_type == "checkbox":
            return bool(raw)
        if spec.field_type == "checkboxes":
            if isinstance(raw, Mapping):
                selected = {key for key, checked in raw.items() if checked}
            elif isinstance(raw, (list, tuple, set)):
                selected = {str(item) for item in raw}
            else:
                selected = set()
            return [key for key in (spec.options or {}) if key in selected]
        if spec.field_type in ("textfield", "color", "url", "value"):
            return str(raw).strip()
        return str(raw)

    # Render phase

    def resolve(self, key: str, config: Mapping[str, Any]) -> Any:
        """Effective value of a field, or None when it should have no effect.

        Sentinel values, values outside a closed catalog and malformed free
        text all resolve to None.
        URLs resolve to their normalized, percent-encoded form.
        """
        spec = self.fields[key]
        value = config.get(key, spec.default)
        if spec.responsive:
            return self.responsive.normalize(value)
        if spec.field_type == "checkbox":
            return bool(value)
        if spec.field_type == "checkboxes":
            if not isinstance(value, (list, tuple)):
                return []
            return [item for item in value if item in (spec.options or {})]
        if spec.field_type == "color":
            return self.palette.resolve(value)
        if not isinstance(value, str) or value in ("", NONE):
            return None
        if spec.options is not None:
            return value if value in spec.options else None
        value = value.strip()
        if spec.validator and not self._passes(spec.validator, value):
            logger.debug(f"Ignoring malformed {key} value for {self.id}")
            return None
        if spec.validator == "url":
            return normalize_url(value)
        return value or None

    def apply_to_render(self, render: RenderTree, config: Mapping[str, Any]) -> RenderTree:
        """Apply this feature's classes, styles and libraries to ``render``."""
        if self.feature.gate and self.resolve(self.feature.gate, config) is None:
            return render

        applied = False
        for class_rule in self.feature.class_rules:
            applied = self._apply_class_rule(render, class_rule, config) or applied
        for style_rule in self.feature.style_rules:
            applied = self._apply_style_rule(render, style_rule, config) or applied
        if self.feature.render_hook:
            applied = self.feature.render_hook(render, dict(config), self) or applied

        if applied:
            render.add_class(*self.feature.marker_classes)
            render.attach_library(*self.feature.libraries)
        return render

    def _apply_class_rule(self, render: RenderTree, rule: ClassRule, config: Mapping[str, Any]) -> bool:
        if rule.when is not None:
            when_key, when_value = rule.when
            if self.resolve(when_key, config) != when_value:
                return False

        spec = self.fields[rule.key]
        if spec.responsive:
            return self.responsive.process_responsive_classes(
                render, rule.prefix, config.get(rule.key), spec.options or {}
            )

        value = self.resolve(rule.key, config)
        values = value if isinstance(value, list) else [value]
        classes = [f"{rule.prefix}{item}" for item in values if item and item not in rule.skip]
        render.add_class(*classes)
        return bool(classes)

    def _apply_style_rule(self, render: RenderTree, rule: StyleRule, config: Mapping[str, Any]) -> bool:
        rendered = []
        for key, template in rule.parts:
            value = self.resolve(key, config)
            if value is None or value in rule.skip:
                continue
            rendered.append(template.format(value=value))
        if not rendered:
            return False
        render.add_style(rule.property, rule.joiner.join(rendered))
        return True
