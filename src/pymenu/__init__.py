"""
pymenu: Candidate ranking engine for dmenu-style launchers.

A launcher shows a list of candidates (commands, files, bookmarks) and
narrows it with every keystroke. This package provides the ranking
engine behind that: given the current query and the full candidate list,
return the matching candidates in display order.

Key Features:
    - **Four Strategies**: positional substring, multi-word tiered,
      forward-scan fuzzy and recursive best-alignment fuzzy matching
    - **Stable Ordering**: ties keep their input order
    - **Session State**: input editing, highlight navigation, completion
      and paging over horizontal bars or vertical lists
    - **Candidate Lists**: read from files or stdin, or built from file
      tests with ``pymenu stest``
    - **Output Formats**: plain text, JSON, highlighted console output

Main Classes:
    Menu: One session over a fixed candidate list
    MenuConfig: Session settings and validation
    Selection: Input text, cursor and highlighted match
    RankResult: Ordered matches with timing statistics

Example Usage:
    >>> from pymenu import Menu, MenuConfig
    >>> menu = Menu(MenuConfig(matcher="fuzzy-recursive"), items=["foo/bar", "fxxxxb"])
    >>> menu.search("fb")
    ['foo/bar', 'fxxxxb']

    CLI usage:
        $ ls | pymenu filter --query rdme --matcher fuzzy
        $ pymenu stest -flx "$PATH" | sort -u | pymenu filter -i --matcher dmenu
"""

from .core.api import Menu
from .core.config import MenuConfig
from .core.selection import Selection
from .core.types import MatcherKind, MatchResult, OutputFormat, RankResult, RankStats, Tier
from .search import get_matcher
from .utils.error_handling import (
    ConfigurationError,
    EncodingError,
    FileAccessError,
    MenuError,
    PermissionError,
)
from .utils.logging_config import configure_logging, disable_logging, enable_debug_logging, get_logger

# Package metadata
__version__ = "0.1.0"
__license__ = "MIT"
__description__ = "Candidate ranking engine for dmenu-style launchers"

# Public API
__all__ = [
    # Main classes
    "Menu",
    "MenuConfig",
    "Selection",
    "get_matcher",
    # Data types
    "MatcherKind",
    "MatchResult",
    "OutputFormat",
    "RankResult",
    "RankStats",
    "Tier",
    # Error handling
    "MenuError",
    "ConfigurationError",
    "EncodingError",
    "FileAccessError",
    "PermissionError",
    # Logging
    "configure_logging",
    "disable_logging",
    "enable_debug_logging",
    "get_logger",
]
