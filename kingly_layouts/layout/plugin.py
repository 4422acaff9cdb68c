"""Layout plugin: one configured instance of a grid layout."""

import logging
from collections.abc import Iterable, Mapping
from typing import Any, Optional

from ..display_options.collector import DisplayOptionCollector, create_default_collector
from ..display_options.forms import FormElement, FormState
from ..display_options.render import RenderTree
from .exceptions import LayoutValidationError
from .registry import LayoutDefinition

logger = logging.getLogger(__name__)

SIZING_PERMISSION = "administer kingly layouts sizing"
UTILITIES_LIBRARY = "kingly_layouts/kingly_utilities"
SIZING_ERROR = "The selected column sizing is not available for this layout."


class LayoutPlugin:
    """A layout definition bound to a configuration and a set of display options.

    The configuration is always fully populated: stored values are merged over
    the defaults of the sizing option and of every registered display option.

    Args:
        definition: Layout being configured
        configuration: Stored configuration, possibly partial
        collector: Display options to run; defaults to the standard set
    """

    def __init__(
        self,
        definition: LayoutDefinition,
        configuration: Optional[Mapping[str, Any]] = None,
        collector: Optional[DisplayOptionCollector] = None,
    ) -> None:
        self.definition = definition
        self.collector = collector or create_default_collector()
        self.configuration: dict[str, Any] = {
            **self.default_configuration(),
            **dict(configuration or {}),
        }

    @property
    def plugin_id(self) -> str:
        return self.definition.id

    def default_configuration(self) -> dict[str, Any]:
        return {
            "sizing_option": self.definition.default_sizing,
            **self.collector.default_configuration(),
        }

    def build_configuration_form(self, capabilities: Iterable[str] = ()) -> FormElement:
        """Build the settings form for this layout.

        Args:
            capabilities: Permissions held by the editor. Groups the editor may
                not use are still built but carry ``access=False``.

        Returns:
            Root form element
        """
        capability_set = frozenset(capabilities)
        form = FormElement(type="form", title=self.definition.label)

        sizing_options = self.definition.sizing_options
        if len(sizing_options) > 1:
            form.add(
                "sizing_option",
                FormElement(
                    type="select",
                    title="Column sizing",
                    options=dict(sizing_options),
                    default_value=self.configuration["sizing_option"],
                    description="Select the desired column width distribution.",
                    weight=-10,
                    access=SIZING_PERMISSION in capability_set,
                ),
            )

        return self.collector.build_form(form, self.configuration, capability_set)

    def validate_configuration_form(self, form_state: FormState) -> FormState:
        """Record field errors on ``form_state``; never raises."""
        sizing = form_state.get_value(("sizing_option",))
        if sizing is not None and sizing not in self.definition.sizing_options:
            form_state.set_error(("sizing_option",), SIZING_ERROR)
        self.collector.validate_form(form_state)
        return form_state

    def submit_configuration_form(self, form_state: FormState) -> dict[str, Any]:
        """Store submitted values, using defaults for anything not submitted.

        Raises:
            LayoutValidationError: If ``form_state`` still carries validation errors
        """
        if form_state.has_errors():
            raise LayoutValidationError(
                f"Cannot submit configuration for '{self.plugin_id}' with errors: "
                f"{form_state.get_errors()}"
            )

        configuration = dict(self.configuration)
        sizing = form_state.get_value(("sizing_option",))
        configuration["sizing_option"] = (
            sizing if sizing is not None else self.definition.default_sizing
        )
        self.collector.submit_form(form_state, configuration)
        self.configuration = configuration
        logger.debug(f"Submitted configuration for layout '{self.plugin_id}'")
        return configuration

    def sizing_class(self) -> Optional[str]:
        """Column sizing class, e.g. ``layout--kl_two_column--25-75``."""
        sizing = self.configuration.get("sizing_option")
        if sizing == "default" or sizing not in self.definition.sizing_options:
            return None
        return f"layout--{self.plugin_id}--{sizing}"

    def build_render_tree(self) -> RenderTree:
        """Apply sizing and every display option to a fresh render tree."""
        render = RenderTree()
        render.attach_library(UTILITIES_LIBRARY, self.definition.library_name)
        sizing_class = self.sizing_class()
        if sizing_class:
            render.add_class(sizing_class)
        return self.collector.apply_to_render(render, self.configuration)
