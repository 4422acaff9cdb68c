"""Command-line argument parsing for Kingly Layouts."""

import argparse
import logging
from pathlib import Path
from typing import Any, Optional

from ..layout.registry import LayoutRegistry

logger = logging.getLogger(__name__)


class LayoutAction(argparse.Action):
    """Argparse action validating layout names against a LayoutRegistry.

    Validation is dynamic so layouts loaded from a definitions file are
    accepted alongside the built-in ones.
    """

    def __init__(
        self,
        option_strings: list[str],
        dest: str,
        layout_registry: Optional[LayoutRegistry] = None,
        **kwargs: Any,
    ) -> None:
        # Remove choices if provided since we handle validation dynamically
        kwargs.pop("choices", None)
        self.layout_registry = layout_registry
        super().__init__(option_strings, dest, **kwargs)

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        _option_string: Optional[str] = None,
    ) -> None:
        """Validate and set the layout value.

        Raises:
            argparse.ArgumentError: If the layout is not registered
        """
        layout_name = str(values)
        registry = self.layout_registry if self.layout_registry is not None else LayoutRegistry()

        if not registry.validate_layout(layout_name):
            available_layouts = registry.get_available_layouts()
            raise argparse.ArgumentError(
                self,
                f"Invalid layout '{layout_name}'. Available layouts: {', '.join(available_layouts)}",
            )
        setattr(namespace, self.dest, layout_name)


def parse_region(value: str) -> tuple[str, str]:
    """Parse a ``NAME=HTML`` region argument.

    Raises:
        argparse.ArgumentTypeError: If the value has no ``=`` or an empty name
    """
    name, separator, content = value.partition("=")
    if not separator or not name.strip():
        raise argparse.ArgumentTypeError(f"Region must be given as NAME=HTML, got '{value}'")
    return name.strip(), content


def add_global_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", type=Path, metavar="FILE", help="YAML settings file")
    parser.add_argument("--data-dir", type=Path, metavar="DIR", help="Directory for stored sections")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "VERBOSE", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Console log level (overrides settings)",
    )


def add_layout_argument(
    parser: argparse.ArgumentParser,
    layout_registry: Optional[LayoutRegistry],
    default_layout: Optional[str],
) -> None:
    """Add the layout positional, optional when a default layout is configured."""
    if default_layout is None:
        parser.add_argument("layout", action=LayoutAction, layout_registry=layout_registry)
        return
    parser.add_argument(
        "layout",
        nargs="?",
        default=default_layout,
        action=LayoutAction,
        layout_registry=layout_registry,
        help=f"Layout id (default: {default_layout})",
    )


def create_parser(
    layout_registry: Optional[LayoutRegistry] = None, default_layout: Optional[str] = None
) -> argparse.ArgumentParser:
    """Create the command line parser.

    Args:
        layout_registry: Registry used to validate layout arguments
        default_layout: Layout used when a command omits one; the layout
            argument is required when this is None

    Returns:
        Configured ArgumentParser

    Example:
        >>> parser = create_parser()
        >>> args = parser.parse_args(["defaults", "kl_two_column"])
        >>> args.layout
        'kl_two_column'
    """
    parser = argparse.ArgumentParser(
        prog="kingly-layouts",
        description="Kingly Layouts - grid layouts with configurable display options",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s list                                   # Show registered layouts
  %(prog)s defaults kl_two_column                 # Default configuration as JSON
  %(prog)s defaults                               # Same, for the configured default layout
  %(prog)s form kl_two_column --all-capabilities  # Settings form as JSON
  %(prog)s save hero kl_one_column --values form.yaml
  %(prog)s render kl_two_column --section hero --region first="<p>Hi</p>"
        """,
    )
    add_global_arguments(parser)

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    subparsers.add_parser("list", help="List registered layouts")

    defaults = subparsers.add_parser("defaults", help="Print the default configuration of a layout")
    add_layout_argument(defaults, layout_registry, default_layout)

    form = subparsers.add_parser("form", help="Print the settings form of a layout as JSON")
    add_layout_argument(form, layout_registry, default_layout)
    form.add_argument("--section", metavar="ID", help="Pre-fill from a stored section")
    capability_group = form.add_mutually_exclusive_group()
    capability_group.add_argument(
        "--capability",
        action="append",
        default=None,
        metavar="PERMISSION",
        help="Permission held by the editor (repeatable; defaults to settings)",
    )
    capability_group.add_argument(
        "--all-capabilities", action="store_true", help="Grant every display option permission"
    )

    save = subparsers.add_parser("save", help="Validate submitted form values and store a section")
    save.add_argument("section", help="Section id")
    add_layout_argument(save, layout_registry, default_layout)
    save.add_argument(
        "--values", type=Path, required=True, metavar="FILE", help="YAML or JSON form values"
    )

    show = subparsers.add_parser("show", help="Print a stored section as JSON")
    show.add_argument("section", help="Section id")

    delete = subparsers.add_parser("delete", help="Delete a stored section")
    delete.add_argument("section", help="Section id")

    render = subparsers.add_parser("render", help="Render a layout section as HTML")
    add_layout_argument(render, layout_registry, default_layout)
    render.add_argument("--section", metavar="ID", help="Use the configuration of a stored section")
    render.add_argument(
        "--configuration", type=Path, metavar="FILE", help="YAML or JSON configuration mapping"
    )
    render.add_argument(
        "--region",
        action="append",
        type=parse_region,
        default=[],
        metavar="NAME=HTML",
        help="Region content (repeatable)",
    )
    render.add_argument("--page", action="store_true", help="Wrap in a full HTML page with assets")

    return parser
