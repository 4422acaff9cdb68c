"""Exceptions raised while storing section configurations."""

from typing import Any, Optional


class SectionError(Exception):
    """Base exception for all section storage errors.

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


class SectionNotFoundError(SectionError):
    """Raised when no configuration is stored for a section id."""

    def __init__(self, section_id: str) -> None:
        self.section_id = section_id
        super().__init__(f"Section '{section_id}' not found", {"section_id": section_id})


class SectionPersistenceError(SectionError):
    """Raised when reading or writing the section store fails.

    Args:
        message: Human-readable persistence error description
        operation: The operation that failed (load, save, delete)
        file_path: Path to the file involved in the operation
        original_error: The underlying exception that caused the failure
        details: Additional context about the persistence failure

    Example:
        >>> raise SectionPersistenceError(
        ...     "Failed to save section",
        ...     operation="save",
        ...     file_path="/var/lib/kingly_layouts/sections.json",
        ...     original_error=PermissionError("Permission denied")
        ... )
    """

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        file_path: Optional[str] = None,
        original_error: Optional[Exception] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.operation = operation
        self.file_path = file_path
        self.original_error = original_error

        error_details = details or {}
        if operation:
            error_details["operation"] = operation
        if file_path:
            error_details["file_path"] = file_path
        if original_error:
            error_details["original_error"] = str(original_error)
            error_details["error_type"] = type(original_error).__name__

        super().__init__(message, error_details)
