"""
Command-line interface implementation.

This module provides the command-line interface for pymenu:
- the ``filter`` command ranking candidates from a file or stdin
- the ``stest`` command building candidate lists from file tests
"""

from .main import main

__all__ = [
    "main",
]
