"""Display option exceptions."""

from typing import Any, Optional


class DisplayOptionError(Exception):
    """Base exception for all display option errors.

    Args:
        message: Human-readable error description
        details: Optional dictionary containing additional error context
    """

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class DisplayOptionDefinitionError(DisplayOptionError):
    """Raised when a feature definition is incomplete or registered twice.

    Args:
        message: Human-readable error description
        feature_id: Identifier of the offending feature, if known
        details: Additional context about the failure
    """

    def __init__(
        self,
        message: str,
        feature_id: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.feature_id = feature_id
        error_details = details or {}
        if feature_id:
            error_details["feature_id"] = feature_id
        super().__init__(message, error_details)
