"""
Utility functions and helper modules.

This module contains the layers around the ranking engine:
- Error handling and logging
- Candidate loading
- Page layout and output formatting
- File tests for building candidate lists
"""

from .error_handling import (
    ConfigurationError,
    EncodingError,
    FileAccessError,
    MenuError,
    PermissionError,
    classify_file_error,
)
from .loader import read_items, split_items
from .logging_config import configure_logging, disable_logging, enable_debug_logging, get_logger

__all__ = [
    # Error handling
    "ConfigurationError",
    "EncodingError",
    "FileAccessError",
    "MenuError",
    "PermissionError",
    "classify_file_error",
    # Loading
    "read_items",
    "split_items",
    # Logging
    "configure_logging",
    "disable_logging",
    "enable_debug_logging",
    "get_logger",
]
