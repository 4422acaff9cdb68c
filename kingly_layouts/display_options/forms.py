"""Framework-free form element and form state models."""

import logging
from collections.abc import Sequence
from typing import Any, Optional

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

FormPath = Sequence[str]


class FormElement(BaseModel):
    """One element of a settings form.

    Groups (``details``, ``fieldset``) hold ordered children; input elements
    carry options and a default value taken from the current configuration.
    """

    type: str = Field(..., description="details, fieldset, select, checkbox, checkboxes, color, textfield, url or item")
    title: Optional[str] = Field(default=None, description="Element label")
    description: Optional[str] = Field(default=None, description="Help text")
    options: Optional[dict[str, str]] = Field(default=None, description="Value to label choices")
    default_value: Any = Field(default=None, description="Value pre-filled from configuration")
    access: bool = Field(default=True, description="Whether the current editor may use the element")
    weight: Optional[int] = Field(default=None, description="Ordering hint among siblings")
    open: Optional[bool] = Field(default=None, description="Initial state for details groups")
    states: dict[str, Any] = Field(default_factory=dict, description="Client-side visibility rules")
    attributes: dict[str, Any] = Field(default_factory=dict, description="HTML attributes")
    children: dict[str, "FormElement"] = Field(default_factory=dict, description="Ordered child elements")

    def add(self, key: str, element: "FormElement") -> "FormElement":
        """Append a child element and return it."""
        self.children[key] = element
        return element

    def find(self, path: FormPath) -> Optional["FormElement"]:
        """Find a descendant by its key path."""
        element: Optional[FormElement] = self
        for key in path:
            if element is None:
                return None
            element = element.children.get(key)
        return element


class FormState:
    """Submitted values for a settings form plus any validation errors.

    Values are nested dictionaries mirroring the form tree, e.g.
    ``{"spacing": {"gap_option": {"mobile": "sm"}}}``.
    """

    def __init__(self, values: Optional[dict[str, Any]] = None) -> None:
        self.values: dict[str, Any] = values or {}
        self._errors: dict[str, str] = {}

    def get_value(self, path: FormPath, default: Any = None) -> Any:
        """Nested value lookup that tolerates missing or non-dict levels."""
        current: Any = self.values
        for key in path:
            if not isinstance(current, dict) or key not in current:
                return default
            current = current[key]
        return current

    def set_value(self, path: FormPath, value: Any) -> None:
        """Set a nested value, creating intermediate levels."""
        current = self.values
        for key in path[:-1]:
            current = current.setdefault(key, {})
        current[path[-1]] = value

    def set_error(self, path: FormPath, message: str) -> None:
        """Record a field-level error. The first error for a field wins."""
        key = "/".join(path)
        if key not in self._errors:
            logger.debug(f"Form error on {key}: {message}")
            self._errors[key] = message

    def get_errors(self) -> dict[str, str]:
        """Errors keyed by ``/``-joined element path."""
        return dict(self._errors)

    def has_errors(self) -> bool:
        return bool(self._errors)
