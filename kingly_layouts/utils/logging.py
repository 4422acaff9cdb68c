"""Logging configuration and setup utilities."""

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from ..config.settings import LoggingSettings

# Custom log level between INFO(20) and DEBUG(10)
VERBOSE = 15
logging.addLevelName(VERBOSE, "VERBOSE")

ROOT_LOGGER_NAME = "kingly_layouts"


def get_log_level(level_name: str) -> int:
    """Get numeric log level from string name, including custom VERBOSE level.

    Args:
        level_name: Log level name (DEBUG, VERBOSE, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        Numeric log level value

    Raises:
        AttributeError: If level name is not recognized

    Example:
        >>> get_log_level("verbose")
        15
    """
    level_name = level_name.upper()
    if level_name == "VERBOSE":
        return VERBOSE
    level: int = getattr(logging, level_name)
    return level


class AutoColoredFormatter(logging.Formatter):
    """Formatter that auto-detects terminal color support."""

    COLORS = {
        "ERROR": {"truecolor": "\033[91m", "basic": "\033[31m", "none": ""},
        "INFO": {"truecolor": "\033[94m", "basic": "\033[34m", "none": ""},
        "VERBOSE": {"truecolor": "\033[92m", "basic": "\033[32m", "none": ""},
        "WARNING": {"truecolor": "\033[93m", "basic": "\033[33m", "none": ""},
        "DEBUG": {"truecolor": "\033[95m", "basic": "\033[35m", "none": ""},
        "CRITICAL": {"truecolor": "\033[91m\033[1m", "basic": "\033[31m\033[1m", "none": ""},
        "RESET": {"truecolor": "\033[0m", "basic": "\033[0m", "none": ""},
    }

    def __init__(self, *args: Any, enable_colors: bool = True, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.enable_colors = enable_colors
        self.color_mode = self._detect_color_support() if enable_colors else "none"

    def _detect_color_support(self) -> str:
        """Auto-detect terminal color capabilities."""
        if not hasattr(sys.stderr, "isatty") or not sys.stderr.isatty():
            return "none"

        term = os.environ.get("TERM", "").lower()
        colorterm = os.environ.get("COLORTERM", "").lower()

        if term == "dumb":
            return "none"
        if colorterm in ("truecolor", "24bit") or "256color" in term:
            return "truecolor"
        if term and "color" in term:
            return "basic"
        return "none"

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors if supported."""
        formatted = super().format(record)

        if self.color_mode == "none":
            return formatted

        level_name = record.levelname
        if level_name in self.COLORS:
            color_start = self.COLORS[level_name][self.color_mode]
            color_end = self.COLORS["RESET"][self.color_mode]
            formatted = formatted.replace(level_name, f"{color_start}{level_name}{color_end}", 1)

        return formatted


def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    log_dir: Optional[Path] = None,
    enable_colors: bool = True,
) -> logging.Logger:
    """Set up package logging with console and optional file output.

    Args:
        log_level: Console logging level (DEBUG, VERBOSE, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file name
        log_dir: Optional log directory path
        enable_colors: Whether the console formatter may emit ANSI colors

    Returns:
        Configured package logger
    """
    try:
        numeric_level = get_log_level(log_level)
    except AttributeError:
        numeric_level = logging.INFO

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(min(numeric_level, logging.DEBUG) if log_file else numeric_level)
    logger.handlers.clear()

    console_formatter = AutoColoredFormatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
        enable_colors=enable_colors,
    )
    console_handler = logging.StreamHandler()
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    if log_file:
        if log_dir:
            log_dir = Path(log_dir)
            log_dir.mkdir(parents=True, exist_ok=True)
            log_path = log_dir / log_file
        else:
            log_path = Path(log_file)

        file_formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        file_handler = logging.handlers.RotatingFileHandler(
            log_path, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

        logger.info(f"Logging to file: {log_path}")

    logger.debug(f"Logging initialized at {log_level} level")
    return logger


def setup_logging_from_settings(
    logging_settings: "LoggingSettings", data_dir: Optional[Path] = None
) -> logging.Logger:
    """Configure logging from a LoggingSettings model.

    Args:
        logging_settings: Logging section of the package settings
        data_dir: Base directory used when no explicit log directory is configured

    Returns:
        Configured package logger
    """
    log_dir: Optional[Path] = None
    log_file: Optional[str] = None
    if logging_settings.file_enabled:
        log_file = f"{logging_settings.file_prefix}.log"
        if logging_settings.file_directory:
            log_dir = Path(logging_settings.file_directory).expanduser()
        elif data_dir is not None:
            log_dir = data_dir / "logs"

    return setup_logging(
        log_level=logging_settings.console_level,
        log_file=log_file,
        log_dir=log_dir,
        enable_colors=logging_settings.console_colors,
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under the package root logger.

    Args:
        name: Logger name, typically a dotted component path

    Returns:
        Logger instance named ``kingly_layouts.<name>``
    """
    if name.startswith(f"{ROOT_LOGGER_NAME}.") or name == ROOT_LOGGER_NAME:
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
