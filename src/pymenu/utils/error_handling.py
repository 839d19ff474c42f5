"""
Error types for pymenu.

The ranking engine itself never fails: a candidate that does not match is
simply absent from the result. Errors only come from the layers around it,
loading candidates, reading configuration and inspecting paths, and they
are reported through the hierarchy defined here.

Error Categories:
    - FILE_ACCESS: Missing files or directories
    - PERMISSION: Files that cannot be opened for the current user
    - ENCODING: Candidate sources that are not valid text
    - CONFIGURATION: Invalid settings
    - VALIDATION: Invalid user input

Example:
    >>> from pymenu.utils.error_handling import classify_file_error
    >>> try:
    ...     Path("missing.txt").read_text()
    ... except OSError as exc:
    ...     raise classify_file_error(Path("missing.txt"), "read", exc) from exc
"""

from __future__ import annotations

import builtins
import time
from enum import Enum
from pathlib import Path
from typing import Any

BuiltinPermissionError = builtins.PermissionError


class ErrorSeverity(str, Enum):
    """Error severity levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """Error categories for classification."""

    FILE_ACCESS = "file_access"
    PERMISSION = "permission"
    ENCODING = "encoding"
    CONFIGURATION = "configuration"
    VALIDATION = "validation"
    UNKNOWN = "unknown"


class MenuError(Exception):
    """Base exception for pymenu errors."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.UNKNOWN,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        file_path: Path | None = None,
        suggestions: list[str] | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message: str = message
        self.category: ErrorCategory = category
        self.severity: ErrorSeverity = severity
        self.file_path: Path | None = file_path
        self.suggestions: list[str] = suggestions or []
        self.context: dict[str, Any] = context or {}
        self.timestamp: float = time.time()


class FileAccessError(MenuError):
    """Error accessing files."""

    def __init__(
        self, message: str, file_path: Path, context: dict[str, Any] | None = None
    ) -> None:
        super().__init__(
            message,
            category=ErrorCategory.FILE_ACCESS,
            severity=ErrorSeverity.HIGH,
            file_path=file_path,
            suggestions=["Check that the candidate file exists", "Use '-' to read from stdin"],
            context=context,
        )


class PermissionError(MenuError):
    """Permission-related errors."""

    def __init__(
        self, message: str, file_path: Path, context: dict[str, Any] | None = None
    ) -> None:
        super().__init__(
            message,
            category=ErrorCategory.PERMISSION,
            severity=ErrorSeverity.HIGH,
            file_path=file_path,
            suggestions=[
                "Check file permissions",
                "Run with appropriate user privileges",
            ],
            context=context,
        )


class EncodingError(MenuError):
    """Candidate source is not valid text."""

    def __init__(
        self,
        message: str,
        file_path: Path | None,
        encoding: str = "utf-8",
        context: dict[str, Any] | None = None,
    ) -> None:
        merged_context: dict[str, Any] = {}
        if context:
            merged_context.update(context)
        merged_context["encoding"] = encoding

        super().__init__(
            message,
            category=ErrorCategory.ENCODING,
            severity=ErrorSeverity.MEDIUM,
            file_path=file_path,
            suggestions=[
                f"Convert the candidate list to {encoding}",
                "Check if the input is binary",
            ],
            context=merged_context,
        )


class ConfigurationError(MenuError):
    """Configuration-related errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(
            message,
            category=ErrorCategory.CONFIGURATION,
            severity=ErrorSeverity.HIGH,
            suggestions=[
                "Check the command-line options",
                "Use the default configuration",
            ],
            context=context,
        )


def classify_file_error(file_path: Path, operation: str, exception: Exception) -> MenuError:
    """
    Convert an OS or decoding exception into the matching MenuError.

    Args:
        file_path: Path to the file that caused the error
        operation: Operation being performed (e.g., "read", "stat")
        exception: The exception that occurred

    Returns:
        A MenuError subclass describing the failure
    """
    if isinstance(exception, (FileNotFoundError, IsADirectoryError, NotADirectoryError)):
        return FileAccessError(f"Cannot {operation} file: {exception}", file_path)
    if isinstance(exception, BuiltinPermissionError):
        return PermissionError(f"Permission denied during {operation}: {exception}", file_path)
    if isinstance(exception, UnicodeError):
        return EncodingError(f"Encoding error during {operation}: {exception}", file_path)
    return MenuError(f"Unexpected error during {operation}: {exception}", file_path=file_path)
