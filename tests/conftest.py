"""Shared fixtures for the Kingly Layouts test suite."""

import logging
import os
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest

from kingly_layouts.config.settings import reset_settings
from kingly_layouts.display_options import (
    ColorPalette,
    DisplayOptionCollector,
    PaletteColor,
    RenderTree,
    create_default_collector,
)
from kingly_layouts.layout import LayoutRegistry

logging.getLogger("kingly_layouts").setLevel(logging.CRITICAL)


@pytest.fixture(scope="module")
def palette() -> ColorPalette:
    """Palette with two named colors."""
    return ColorPalette(
        [
            PaletteColor(id="brand", label="Brand", hex="#336699"),
            PaletteColor(id="accent", label="Accent", hex="#FF8800"),
        ]
    )


@pytest.fixture(scope="module")
def collector(palette: ColorPalette) -> DisplayOptionCollector:
    """Standard display option services sharing the test palette."""
    return create_default_collector(palette)


@pytest.fixture(scope="module")
def registry() -> LayoutRegistry:
    """Registry of the built-in layouts."""
    return LayoutRegistry()


@pytest.fixture
def render() -> RenderTree:
    """Fresh render tree."""
    return RenderTree()


@pytest.fixture
def default_config(collector: DisplayOptionCollector) -> dict[str, Any]:
    """Fully populated default configuration."""
    return collector.default_configuration()


@pytest.fixture
def clean_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Generator[Path, None, None]:
    """Isolate settings from the user's environment and config files."""
    for key in list(os.environ):
        if key.upper().startswith("KINGLY_LAYOUTS_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    reset_settings()
    yield tmp_path
    reset_settings()
