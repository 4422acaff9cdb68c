"""Central layout registry for grid layout definitions."""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, NoReturn, Optional

import yaml

from .exceptions import LayoutNotFoundError, LayoutValidationError

logger = logging.getLogger(__name__)

LAYOUT_CATEGORY = "Kingly"


def _raise_missing_field_error(field_name: str, source: str) -> NoReturn:
    """Raise LayoutValidationError for missing required field."""
    raise LayoutValidationError(f"Missing required field '{field_name}' in {source}")


@dataclass(frozen=True)
class LayoutDefinition:
    """A grid layout: its regions, template, asset library and column sizings."""

    id: str
    label: str
    regions: Mapping[str, str]
    sizing_options: Mapping[str, str]
    default_region: Optional[str] = None
    category: str = LAYOUT_CATEGORY
    template: Optional[str] = None
    library: Optional[str] = None
    description: str = ""

    def __post_init__(self) -> None:
        if not self.regions:
            raise LayoutValidationError(f"Layout '{self.id}' defines no regions")
        if not self.sizing_options:
            raise LayoutValidationError(f"Layout '{self.id}' defines no sizing options")
        if self.default_region is not None and self.default_region not in self.regions:
            raise LayoutValidationError(
                f"Default region '{self.default_region}' is not a region of layout '{self.id}'"
            )

    @property
    def template_name(self) -> str:
        """Theme template, derived from the id when not given (``layout--kl-two-column``)."""
        return self.template or f"layout--{self.id.replace('_', '-')}"

    @property
    def library_name(self) -> str:
        return self.library or f"kingly_layouts/{self.id.replace('kl_', 'kl_layout_', 1)}"

    @property
    def region_names(self) -> list[str]:
        return list(self.regions)

    @property
    def primary_region(self) -> str:
        return self.default_region or next(iter(self.regions))

    @property
    def default_sizing(self) -> str:
        return next(iter(self.sizing_options))


DEFAULT_LAYOUTS: tuple[LayoutDefinition, ...] = (
    LayoutDefinition(
        id="kl_one_column",
        label="Kingly: One Column",
        regions={"content": "Content"},
        sizing_options={"100": "100%"},
        default_region="content",
    ),
    LayoutDefinition(
        id="kl_two_column",
        label="Kingly: Two Column",
        regions={"first": "First", "second": "Second"},
        sizing_options={
            "50-50": "50%/50%",
            "25-75": "25%/75%",
            "75-25": "75%/25%",
            "33-67": "33%/67%",
            "67-33": "67%/33%",
        },
        default_region="first",
    ),
    LayoutDefinition(
        id="kl_three_column",
        label="Kingly: Three Column",
        regions={"first": "First", "second": "Second", "third": "Third"},
        sizing_options={
            "33-34-33": "33%/34%/33%",
            "25-50-25": "25%/50%/25%",
            "25-25-50": "25%/25%/50%",
            "50-25-25": "50%/25%/25%",
        },
        default_region="second",
    ),
    LayoutDefinition(
        id="kl_four_column",
        label="Kingly: Four Column",
        regions={"first": "First", "second": "Second", "third": "Third", "fourth": "Fourth"},
        sizing_options={
            "25-25-25-25": "25%/25%/25%/25%",
            "40-20-20-20": "40%/20%/20%/20%",
            "20-40-20-20": "20%/40%/20%/20%",
            "20-20-40-20": "20%/20%/40%/20%",
            "20-20-20-40": "20%/20%/20%/40%",
        },
        default_region="first",
    ),
)


def layout_definition_from_dict(data: Mapping[str, Any], source: str = "definition") -> LayoutDefinition:
    """Build a LayoutDefinition from plain data (e.g. parsed YAML).

    Raises:
        LayoutValidationError: If required fields are missing or malformed
    """
    for required in ("id", "label", "regions"):
        if required not in data:
            _raise_missing_field_error(required, source)

    regions = data["regions"]
    if isinstance(regions, list):
        regions = {str(name): str(name).replace("_", " ").title() for name in regions}
    if not isinstance(regions, Mapping):
        raise LayoutValidationError(f"'regions' must be a list or mapping in {source}")

    sizing = data.get("sizing_options") or {"100": "100%"}
    if isinstance(sizing, list):
        sizing = {str(key): str(key) for key in sizing}
    if not isinstance(sizing, Mapping):
        raise LayoutValidationError(f"'sizing_options' must be a list or mapping in {source}")

    return LayoutDefinition(
        id=str(data["id"]),
        label=str(data["label"]),
        regions={str(k): str(v) for k, v in regions.items()},
        sizing_options={str(k): str(v) for k, v in sizing.items()},
        default_region=data.get("default_region"),
        category=str(data.get("category", LAYOUT_CATEGORY)),
        template=data.get("template"),
        library=data.get("library"),
        description=str(data.get("description", "")),
    )


def load_layout_definitions(config_file: Path) -> list[LayoutDefinition]:
    """Load layout definitions from a YAML file holding a ``layouts`` list.

    Raises:
        LayoutValidationError: If the file cannot be parsed or a definition is invalid
    """
    try:
        with config_file.open(encoding="utf-8") as f:
            config_data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise LayoutValidationError(f"Invalid YAML in {config_file}: {e}") from e
    except OSError as e:
        raise LayoutValidationError(f"Error loading {config_file}: {e}") from e

    entries = config_data.get("layouts") if isinstance(config_data, dict) else None
    if not isinstance(entries, list):
        raise LayoutValidationError(f"Expected a 'layouts' list in {config_file}")

    definitions = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise LayoutValidationError(f"Layout entry {index} in {config_file} is not a mapping")
        definitions.append(layout_definition_from_dict(entry, f"{config_file} entry {index}"))
    return definitions


class LayoutRegistry:
    """Registry of layout definitions, populated from an explicit list.

    Args:
        definitions: Layouts to register, in display order. Defaults to the
            four built-in grid layouts.
    """

    def __init__(self, definitions: Optional[Iterable[LayoutDefinition]] = None) -> None:
        self._layouts: dict[str, LayoutDefinition] = {}
        for definition in DEFAULT_LAYOUTS if definitions is None else definitions:
            self.register(definition)
        logger.debug(f"LayoutRegistry initialized with layouts: {', '.join(self._layouts)}")

    @classmethod
    def from_file(cls, config_file: Path, include_defaults: bool = True) -> "LayoutRegistry":
        """Create a registry from a YAML definitions file.

        Args:
            config_file: YAML file with a ``layouts`` list
            include_defaults: Register the built-in layouts before the file's entries
        """
        definitions = list(DEFAULT_LAYOUTS) if include_defaults else []
        definitions.extend(load_layout_definitions(config_file))
        logger.info(f"Loaded layout definitions from {config_file}")
        return cls(definitions)

    def register(self, definition: LayoutDefinition) -> None:
        """Add a layout, replacing any earlier definition with the same id."""
        if definition.id in self._layouts:
            logger.warning(f"Layout '{definition.id}' registered twice; keeping the later definition")
        self._layouts[definition.id] = definition

    def get_available_layouts(self) -> list[str]:
        """Get list of all available layout names."""
        return list(self._layouts.keys())

    def validate_layout(self, layout_name: str) -> bool:
        """Check whether a layout is registered."""
        return layout_name in self._layouts

    def get_layout_info(self, layout_name: str) -> Optional[LayoutDefinition]:
        """Get the definition of a layout, or None if it is not registered."""
        return self._layouts.get(layout_name)

    def get_layout(self, layout_name: str) -> LayoutDefinition:
        """Get the definition of a layout.

        Raises:
            LayoutNotFoundError: If layout doesn't exist.
        """
        layout_info = self.get_layout_info(layout_name)
        if layout_info is None:
            raise LayoutNotFoundError(f"Layout '{layout_name}' not found")
        return layout_info

    def get_default_layout(self) -> str:
        """Get the default layout name, preferring the one column layout."""
        if "kl_one_column" in self._layouts:
            return "kl_one_column"
        if self._layouts:
            return next(iter(self._layouts.keys()))
        raise LayoutNotFoundError("No layouts registered")

    def get_layout_metadata(self, layout_name: str) -> Optional[dict[str, Any]]:
        """Get a plain-data description of a layout, or None if not found."""
        layout_info = self.get_layout_info(layout_name)
        if layout_info is None:
            return None

        return {
            "id": layout_info.id,
            "label": layout_info.label,
            "category": layout_info.category,
            "description": layout_info.description,
            "template": layout_info.template_name,
            "library": layout_info.library_name,
            "regions": dict(layout_info.regions),
            "default_region": layout_info.primary_region,
            "sizing_options": dict(layout_info.sizing_options),
        }
