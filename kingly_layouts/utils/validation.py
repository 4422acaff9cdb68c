"""Value validators shared by form validation and render-time checks."""

import re
from typing import Any, Optional

from pydantic import AnyHttpUrl, TypeAdapter, ValidationError

HEX_COLOR_PATTERN = re.compile(r"^#([a-fA-F0-9]{6})$")
CSS_ID_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9_-]*$")
CSS_CLASS_PATTERN = re.compile(r"^-?[A-Za-z_][A-Za-z0-9_-]*$")
CSS_LENGTH_PATTERN = re.compile(r"^\d+(\.\d+)?(px|rem|em|vh|vw|svh|dvh|%)$")

_http_url_adapter: TypeAdapter[AnyHttpUrl] = TypeAdapter(AnyHttpUrl)


def is_valid_hex_color(value: Any) -> bool:
    """Check for a ``#RRGGBB`` color literal."""
    return isinstance(value, str) and HEX_COLOR_PATTERN.match(value) is not None


def is_valid_css_id(value: Any) -> bool:
    """Check that a value can be used as an HTML id attribute."""
    return isinstance(value, str) and CSS_ID_PATTERN.match(value) is not None


def is_valid_css_classes(value: Any) -> bool:
    """Check a whitespace separated list of CSS class names.

    An empty string is valid and means no classes.
    """
    if not isinstance(value, str):
        return False
    return all(CSS_CLASS_PATTERN.match(name) for name in value.split())


def normalize_css_classes(value: str) -> str:
    """Collapse any run of whitespace to a single space and trim the ends."""
    return " ".join(value.split())


def normalize_url(value: Any) -> Optional[str]:
    """Absolute http(s) URL in its normalized, percent-encoded form.

    Quotes and angle brackets come back encoded, so the result is safe inside
    a quoted CSS ``url()`` or an HTML attribute.

    Returns:
        The normalized URL, or None when the value is not an absolute http(s) URL
    """
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return str(_http_url_adapter.validate_python(value.strip()))
    except ValidationError:
        return None


def is_valid_url(value: Any) -> bool:
    """Check for an absolute http(s) URL."""
    return normalize_url(value) is not None


def is_valid_css_length(value: Any) -> bool:
    """Check for a plain CSS length such as ``400px`` or ``50vh``."""
    return isinstance(value, str) and CSS_LENGTH_PATTERN.match(value.strip()) is not None
