"""Subcommand handlers for the kingly-layouts command line."""

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Optional

import yaml

from ..config.settings import KinglyLayoutsSettings
from ..display_options.collector import DisplayOptionCollector, create_default_collector
from ..display_options.forms import FormState
from ..layout.exceptions import LayoutValidationError
from ..layout.plugin import SIZING_PERMISSION, LayoutPlugin
from ..layout.registry import LayoutRegistry
from ..layout.renderer import HTMLRenderer
from ..layout.resource_manager import ResourceManager
from ..sections.models import SectionRecord
from ..sections.persistence import SectionPersistence

logger = logging.getLogger(__name__)


class CommandContext:
    """Objects shared by every subcommand, built once from settings."""

    def __init__(
        self,
        settings: KinglyLayoutsSettings,
        registry: LayoutRegistry,
        collector: Optional[DisplayOptionCollector] = None,
    ) -> None:
        self.settings = settings
        self.registry = registry
        self.collector = collector or create_default_collector(settings.create_palette())
        self._persistence: Optional[SectionPersistence] = None

    @property
    def persistence(self) -> SectionPersistence:
        if self._persistence is None:
            self._persistence = SectionPersistence(self.settings.sections_dir)
        return self._persistence

    def create_plugin(self, layout_id: str, configuration: Optional[dict[str, Any]] = None) -> LayoutPlugin:
        return LayoutPlugin(self.registry.get_layout(layout_id), configuration, self.collector)


def read_mapping(path: Path) -> dict[str, Any]:
    """Read a YAML (or JSON) file that must hold a mapping.

    Raises:
        ValueError: If the file does not contain a mapping
    """
    with path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a mapping, got {type(data).__name__}")
    return data


def print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, default=str))


def list_command(_args: argparse.Namespace, context: CommandContext) -> int:
    default_layout = context.settings.default_layout
    for layout_id in context.registry.get_available_layouts():
        definition = context.registry.get_layout(layout_id)
        marker = "*" if layout_id == default_layout else " "
        print(f"{marker} {layout_id:<18} {definition.label} (regions: {', '.join(definition.region_names)})")
    return 0


def defaults_command(args: argparse.Namespace, context: CommandContext) -> int:
    print_json(context.create_plugin(args.layout).default_configuration())
    return 0


def form_command(args: argparse.Namespace, context: CommandContext) -> int:
    configuration = None
    if args.section:
        configuration = context.persistence.load_section(args.section).configuration

    if args.all_capabilities:
        capabilities = [SIZING_PERMISSION, *context.collector.get_permissions()]
    elif args.capability is not None:
        capabilities = args.capability
    else:
        capabilities = context.settings.capabilities

    form = context.create_plugin(args.layout, configuration).build_configuration_form(capabilities)
    print_json(form.model_dump(exclude_none=True))
    return 0


def save_command(args: argparse.Namespace, context: CommandContext) -> int:
    plugin = context.create_plugin(args.layout)
    form_state = plugin.validate_configuration_form(FormState(read_mapping(args.values)))
    if form_state.has_errors():
        for path, message in form_state.get_errors().items():
            print(f"{path}: {message}")
        return 1

    try:
        configuration = plugin.submit_configuration_form(form_state)
    except LayoutValidationError as e:
        print(f"Error: {e}")
        return 1

    record = SectionRecord(section_id=args.section, layout_id=args.layout, configuration=configuration)
    context.persistence.save_section(record)
    print(f"Saved section '{args.section}' ({args.layout})")
    return 0


def show_command(args: argparse.Namespace, context: CommandContext) -> int:
    print_json(context.persistence.load_section(args.section).model_dump(mode="json"))
    return 0


def delete_command(args: argparse.Namespace, context: CommandContext) -> int:
    if not context.persistence.delete_section(args.section):
        print(f"Section '{args.section}' not found")
        return 1
    print(f"Deleted section '{args.section}'")
    return 0


def render_command(args: argparse.Namespace, context: CommandContext) -> int:
    configuration: dict[str, Any] = {}
    if args.section:
        configuration.update(context.persistence.load_section(args.section).configuration)
    if args.configuration:
        configuration.update(read_mapping(args.configuration))

    plugin = context.create_plugin(args.layout, configuration)
    renderer = HTMLRenderer(ResourceManager(context.settings.static_base_url))
    regions = dict(args.region)
    if args.page:
        print(renderer.render_page(plugin, regions))
    else:
        print(renderer.render_section(plugin, regions))
    return 0


COMMANDS = {
    "list": list_command,
    "defaults": defaults_command,
    "form": form_command,
    "save": save_command,
    "show": show_command,
    "delete": delete_command,
    "render": render_command,
}
