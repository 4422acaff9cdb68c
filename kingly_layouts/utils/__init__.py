"""Utility functions and helpers package."""

from .logging import get_logger, setup_logging
from .validation import (
    is_valid_css_classes,
    is_valid_css_id,
    is_valid_css_length,
    is_valid_hex_color,
    is_valid_url,
    normalize_css_classes,
    normalize_url,
)

__all__ = [
    "get_logger",
    "is_valid_css_classes",
    "is_valid_css_id",
    "is_valid_css_length",
    "is_valid_hex_color",
    "is_valid_url",
    "normalize_css_classes",
    "normalize_url",
    "setup_logging",
]
