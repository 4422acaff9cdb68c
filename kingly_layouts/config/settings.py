"""Settings management using Pydantic for type validation and configuration."""

import logging
import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field, PrivateAttr, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..display_options.colors import ColorPalette, PaletteColor
from ..layout.registry import LayoutRegistry

logger = logging.getLogger(__name__)

ENV_PREFIX = "KINGLY_LAYOUTS_"


class LoggingSettings(BaseModel):
    """Logging configuration settings."""

    console_level: str = Field(
        default="WARNING",
        description="Console log level: DEBUG, VERBOSE, INFO, WARNING, ERROR, CRITICAL",
    )
    console_colors: bool = Field(
        default=True, description="Enable colored console output (auto-detected)"
    )
    file_enabled: bool = Field(default=False, description="Enable file logging")
    file_directory: Optional[str] = Field(
        default=None, description="Custom log directory (defaults to data_dir/logs)"
    )
    file_prefix: str = Field(default="kingly_layouts", description="Log file prefix")


class KinglyLayoutsSettings(BaseSettings):
    """Package settings with environment variable and YAML file support.

    Precedence: explicit keyword arguments, then ``KINGLY_LAYOUTS_*``
    environment variables, then the YAML file, then defaults.
    """

    _explicit_args: set[str] = PrivateAttr(default_factory=set)

    config_file: Optional[Path] = Field(default=None, description="Explicit YAML config file")
    config_dir: Path = Field(
        default_factory=lambda: Path.home() / ".config" / "kingly_layouts",
        description="User configuration directory",
    )
    data_dir: Path = Field(
        default_factory=lambda: Path.home() / ".local" / "share" / "kingly_layouts",
        description="Directory for stored section configurations and logs",
    )

    static_base_url: str = Field(default="/static", description="Base URL for static assets")
    layouts_file: Optional[Path] = Field(
        default=None, description="YAML file with additional layout definitions"
    )
    default_layout: str = Field(default="kl_one_column", description="Layout used when none is given")
    colors: list[PaletteColor] = Field(
        default_factory=list, description="Named palette colors offered in color fields"
    )
    capabilities: list[str] = Field(
        default_factory=list, description="Permissions granted to command line editors"
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    def __init__(self, **kwargs: Any) -> None:
        env_vars_set = {
            key[len(ENV_PREFIX):].lower().split("__", 1)[0]
            for key in os.environ
            if key.upper().startswith(ENV_PREFIX)
        }
        super().__init__(**kwargs)
        self._explicit_args = set(kwargs) | env_vars_set
        self._load_yaml_config()

    def _find_config_file(self) -> Optional[Path]:
        """Find config file: explicit path, then ./config/config.yaml, then the user directory."""
        if self.config_file is not None:
            return self.config_file if self.config_file.exists() else None

        project_config = Path.cwd() / "config" / "config.yaml"
        if project_config.exists():
            return project_config

        user_config = self.config_dir / "config.yaml"
        if user_config.exists():
            return user_config

        return None

    def _load_yaml_config(self) -> None:
        """Load configuration from YAML file if it exists."""
        config_file = self._find_config_file()
        if not config_file:
            return

        try:
            with config_file.open(encoding="utf-8") as f:
                config_data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            # Don't fail if YAML loading fails, just continue with defaults/env vars
            logger.warning(f"Could not load YAML config from {config_file}: {e}")
            return

        if not isinstance(config_data, dict):
            return

        self._load_basic_settings(config_data)
        self._load_color_settings(config_data)
        self._load_logging_config(config_data)
        logger.debug(f"Loaded configuration from {config_file}")

    def _load_basic_settings(self, config_data: dict) -> None:
        for name in ("data_dir", "layouts_file"):
            if name in config_data and name not in self._explicit_args and config_data[name]:
                setattr(self, name, Path(config_data[name]).expanduser())
        for name in ("static_base_url", "default_layout"):
            if name in config_data and name not in self._explicit_args:
                setattr(self, name, str(config_data[name]))
        if "capabilities" in config_data and "capabilities" not in self._explicit_args:
            self.capabilities = [str(item) for item in config_data["capabilities"] or []]

    def _load_color_settings(self, config_data: dict) -> None:
        if "colors" not in config_data or "colors" in self._explicit_args:
            return
        colors = []
        for entry in config_data["colors"] or []:
            try:
                colors.append(PaletteColor(**entry))
            except (TypeError, ValidationError) as e:
                logger.warning(f"Skipping invalid palette color {entry!r}: {e}")
        self.colors = colors

    def _load_logging_config(self, config_data: dict) -> None:
        if "logging" not in config_data or "logging" in self._explicit_args:
            return
        logging_config = config_data["logging"] or {}
        for setting in LoggingSettings.model_fields:
            if setting in logging_config:
                setattr(self.logging, setting, logging_config[setting])

    def create_palette(self) -> ColorPalette:
        return ColorPalette(self.colors)

    def create_layout_registry(self) -> LayoutRegistry:
        """Registry of built-in layouts plus any from ``layouts_file``."""
        if self.layouts_file:
            return LayoutRegistry.from_file(self.layouts_file)
        return LayoutRegistry()

    @property
    def sections_dir(self) -> Path:
        return self.data_dir / "sections"


# Global settings management
_settings_instance: Optional[KinglyLayoutsSettings] = None


def get_settings() -> KinglyLayoutsSettings:
    """Get the global settings instance, creating it lazily if needed."""
    if globals()["_settings_instance"] is None:
        globals()["_settings_instance"] = KinglyLayoutsSettings()
    return globals()["_settings_instance"]


def reset_settings() -> None:
    """Reset the global settings instance (primarily for testing)."""
    globals()["_settings_instance"] = None
