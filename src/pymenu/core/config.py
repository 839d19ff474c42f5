"""
Configuration module for pymenu.

This module defines the MenuConfig class, the single settings object shared
by the command line front end, the candidate loader and the ranking engine.
Defaults follow the classic dmenu look: a one-line bar, dark grey
background, teal selection.

Classes:
    MenuConfig: Settings for one launcher session

Example:
    >>> from pymenu.core.config import MenuConfig
    >>> config = MenuConfig(matcher="dmenu", case_sensitive=False, lines=10)
    >>> config.validate()
    >>> matcher = config.get_matcher()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import regex

from ..utils.error_handling import ConfigurationError
from .types import MatcherKind, OutputFormat

if TYPE_CHECKING:
    from ..search.base import Matcher

# X11 colour specs: rgb:r/g/b with 1-4 hex digits per channel, #rgb/#rrggbb, or a colour name
_COLOR_PATTERN = regex.compile(
    r"^(?:rgb:[0-9A-Fa-f]{1,4}/[0-9A-Fa-f]{1,4}/[0-9A-Fa-f]{1,4}"
    r"|#(?:[0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})"
    r"|[A-Za-z][A-Za-z0-9 ]*)$"
)


@dataclass(slots=True)
class MenuConfig:
    # Matching
    matcher: MatcherKind | str = MatcherKind.SIMPLE
    case_sensitive: bool = True

    # Candidates
    cache_file: str = "-"  # "-" reads candidates from stdin

    # Layout
    topbar: bool = False
    lines: int = 0  # 0 = single horizontal line
    width: int = 80  # terminal cells available for the bar
    prompt: str = ""

    # Appearance
    font: str = "fixed"
    normal_background: str = "rgb:22/22/22"
    normal_foreground: str = "rgb:bb/bb/bb"
    selected_background: str = "rgb:00/55/77"
    selected_foreground: str = "rgb:ee/ee/ee"

    # Output
    output_format: OutputFormat = OutputFormat.TEXT

    def matcher_kind(self) -> MatcherKind:
        """Return the configured strategy as a MatcherKind."""
        try:
            return MatcherKind(self.matcher)
        except ValueError:
            raise ConfigurationError(
                f"Unknown matcher: {self.matcher!r}",
                context={"field": "matcher", "choices": [k.value for k in MatcherKind]},
            ) from None

    def get_matcher(self) -> Matcher:
        """Build the configured ranking strategy."""
        from ..search import get_matcher

        return get_matcher(self.matcher_kind(), case_sensitive=self.case_sensitive)

    def colors(self) -> dict[str, str]:
        return {
            "normal_background": self.normal_background,
            "normal_foreground": self.normal_foreground,
            "selected_background": self.selected_background,
            "selected_foreground": self.selected_foreground,
        }

    def validate(self) -> None:
        """Validate the configuration and raise ConfigurationError on issues.

        Raises:
            ConfigurationError: If the configuration is invalid.
        """
        self.matcher_kind()

        if self.lines < 0:
            raise ConfigurationError(
                "Line count must be non-negative (0 = horizontal bar)",
                context={"field": "lines", "value": self.lines},
            )

        if self.width <= 0:
            raise ConfigurationError(
                "Width must be positive",
                context={"field": "width", "value": self.width},
            )

        if not self.cache_file:
            raise ConfigurationError(
                "Candidate source must be a file path or '-' for stdin",
                context={"field": "cache_file"},
            )

        issues = [
            f"{name}={value!r}"
            for name, value in self.colors().items()
            if not _COLOR_PATTERN.match(value)
        ]
        if issues:
            raise ConfigurationError(
                f"Invalid color specification: {'; '.join(issues)}",
                context={"issues": issues},
            )
