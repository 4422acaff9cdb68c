"""Aggregates display option services for generic invocation by layouts."""

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Optional

from .colors import ColorPalette
from .engine import DisplayOption
from .exceptions import DisplayOptionDefinitionError
from .features import FEATURES
from .forms import FormElement, FormState
from .models import FeatureSpec
from .render import RenderTree
from .responsive import DEFAULT_BREAKPOINTS, Breakpoint, ResponsiveFieldHelper

logger = logging.getLogger(__name__)


def default_display_options(
    palette: Optional[ColorPalette] = None,
    breakpoints: Sequence[Breakpoint] = DEFAULT_BREAKPOINTS,
    features: Sequence[FeatureSpec] = FEATURES,
) -> list[DisplayOption]:
    """Instantiate the standard services in their registration order."""
    palette = palette or ColorPalette()
    responsive = ResponsiveFieldHelper(breakpoints)
    return [DisplayOption(feature, palette, responsive) for feature in features]


class DisplayOptionCollector:
    """Ordered, validated set of display option services.

    Services are registered explicitly through the constructor and always run
    in that order.

    Raises:
        DisplayOptionDefinitionError: If a service lacks an id or label, an id is
            registered twice, or two services claim the same configuration key
    """

    def __init__(self, services: Iterable[DisplayOption]) -> None:
        self._services: dict[str, DisplayOption] = {}
        owners: dict[str, str] = {}

        for service in services:
            if not service.id:
                raise DisplayOptionDefinitionError("Display option definition is missing an id")
            if not service.label:
                raise DisplayOptionDefinitionError(
                    "Display option definition is missing a label", feature_id=service.id
                )
            if service.id in self._services:
                raise DisplayOptionDefinitionError(
                    "Display option registered twice", feature_id=service.id
                )
            for spec in service.stored_fields():
                if spec.key in owners:
                    raise DisplayOptionDefinitionError(
                        f"Configuration key '{spec.key}' already owned by '{owners[spec.key]}'",
                        feature_id=service.id,
                    )
                owners[spec.key] = service.id
            self._services[service.id] = service

        logger.debug(f"Registered display options: {', '.join(self._services)}")

    def __len__(self) -> int:
        return len(self._services)

    def get_all(self) -> list[DisplayOption]:
        return list(self._services.values())

    def get(self, service_id: str) -> Optional[DisplayOption]:
        return self._services.get(service_id)

    def get_permissions(self) -> list[str]:
        """Every permission that gates a registered service."""
        return [service.permission for service in self._services.values() if service.permission]

    def default_configuration(self) -> dict[str, Any]:
        configuration: dict[str, Any] = {}
        for service in self._services.values():
            configuration.update(service.default_configuration())
        return configuration

    def build_form(
        self, form: FormElement, config: Mapping[str, Any], capabilities: Iterable[str] = ()
    ) -> FormElement:
        capability_set = frozenset(capabilities)
        for service in self._services.values():
            service.build_form(form, config, capability_set)
        return form

    def validate_form(self, form_state: FormState) -> None:
        for service in self._services.values():
            service.validate_form(form_state)

    def submit_form(self, form_state: FormState, config: dict[str, Any]) -> dict[str, Any]:
        for service in self._services.values():
            service.submit_form(form_state, config)
        return config

    def apply_to_render(self, render: RenderTree, config: Mapping[str, Any]) -> RenderTree:
        for service in self._services.values():
            service.apply_to_render(render, config)
        return render


def create_default_collector(palette: Optional[ColorPalette] = None) -> DisplayOptionCollector:
    """Collector holding the standard services."""
    return DisplayOptionCollector(default_display_options(palette))
