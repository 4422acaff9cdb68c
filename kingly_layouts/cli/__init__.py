"""Command line interface for Kingly Layouts."""

import argparse
import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from ..config.settings import KinglyLayoutsSettings
from ..display_options.exceptions import DisplayOptionError
from ..layout.exceptions import LayoutError
from ..sections.exceptions import SectionError
from ..utils.logging import setup_logging_from_settings
from .commands import COMMANDS, CommandContext
from .parser import add_global_arguments, create_parser

logger = logging.getLogger(__name__)


def build_settings(argv: Optional[list[str]] = None) -> KinglyLayoutsSettings:
    """Pre-parse global options so the layout registry exists before full parsing."""
    pre_parser = argparse.ArgumentParser(add_help=False)
    add_global_arguments(pre_parser)
    known, _ = pre_parser.parse_known_args(argv)

    overrides: dict[str, object] = {}
    if known.config is not None:
        overrides["config_file"] = known.config
    if known.data_dir is not None:
        overrides["data_dir"] = known.data_dir
    settings = KinglyLayoutsSettings(**overrides)
    if known.log_level:
        settings.logging.console_level = known.log_level
    return settings


def main(argv: Optional[list[str]] = None) -> int:
    """Run the command line interface.

    Args:
        argv: Arguments without the program name; defaults to ``sys.argv[1:]``

    Returns:
        Process exit code
    """
    settings = build_settings(argv)
    setup_logging_from_settings(settings.logging, settings.data_dir)

    try:
        registry = settings.create_layout_registry()
    except LayoutError as e:
        print(f"Error loading layouts: {e}")
        return 1

    parser = create_parser(registry, settings.default_layout)
    args = parser.parse_args(argv)
    context = CommandContext(settings, registry)

    try:
        return COMMANDS[args.command](args, context)
    except (LayoutError, SectionError, DisplayOptionError) as e:
        logger.debug(f"Command '{args.command}' failed", exc_info=True)
        print(f"Error: {e}")
        return 1
    except (OSError, ValueError, yaml.YAMLError, ValidationError) as e:
        print(f"Error: {e}")
        return 1


__all__ = ["main", "build_settings", "create_parser"]
