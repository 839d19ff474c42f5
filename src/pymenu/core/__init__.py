"""
Core functionality for the pymenu package.

This module contains the building blocks shared by every front end:
- Configuration management
- Core data types and structures

The session classes live in ``pymenu.core.api`` and
``pymenu.core.selection``.
"""

from .config import MenuConfig
from .types import MatcherKind, MatchResult, OutputFormat, RankResult, RankStats, Tier

__all__ = [
    "MenuConfig",
    # Data types
    "MatcherKind",
    "MatchResult",
    "OutputFormat",
    "RankResult",
    "RankStats",
    "Tier",
]
