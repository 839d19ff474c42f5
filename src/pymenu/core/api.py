"""
Main API module for pymenu.

This module provides the Menu class, the programmatic entry point that ties a
configuration, a candidate list and the configured ranking strategy
together. Ranking itself stays a pure function of (query, candidates); Menu
only adds loading, timing and logging around it.

Classes:
    Menu: One launcher session over a fixed candidate list

Example:
    >>> from pymenu import Menu, MenuConfig
    >>> menu = Menu(MenuConfig(matcher="dmenu"), items=["firefox", "fish", "vim"])
    >>> menu.rank("fi").matches
    ['firefox', 'fish']
"""

from __future__ import annotations

import time
from collections.abc import Iterable

from ..search.base import Matcher
from ..utils.loader import read_items
from ..utils.logging_config import MenuLogger, get_logger
from .config import MenuConfig
from .types import MatcherKind, RankResult, RankStats


class Menu:
    """
    A launcher session: configuration, candidates and one ranking strategy.

    The matcher is chosen once from the configuration and reused for every
    query. Candidates are either given directly or read from
    ``config.cache_file`` on first access.
    """

    def __init__(
        self,
        config: MenuConfig | None = None,
        items: Iterable[str] | None = None,
        logger: MenuLogger | None = None,
    ) -> None:
        """
        Initialize the session.

        Args:
            config: Session settings. Defaults to ``MenuConfig()``.
            items: Candidate list. If None, candidates are loaded from
                ``config.cache_file`` when first needed.
            logger: Custom logger instance. If None, uses default logger.

        Raises:
            ConfigurationError: If the configuration is invalid.
        """
        self.config = config or MenuConfig()
        self.config.validate()
        self.logger = logger or get_logger()
        self.matcher: Matcher = self.config.get_matcher()
        self._items: list[str] | None = list(items) if items is not None else None

    @property
    def kind(self) -> MatcherKind:
        return self.matcher.kind

    @property
    def items(self) -> list[str]:
        if self._items is None:
            self._items = self.load_items()
        return self._items

    def load_items(self) -> list[str]:
        """Read candidates from the configured source."""
        source = self.config.cache_file
        t0 = time.perf_counter()
        try:
            items = read_items(source)
        except Exception as exc:
            self.logger.log_file_error(source, str(exc), stage="load")
            raise
        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        self.logger.log_items_loaded("stdin" if source == "-" else source, len(items), elapsed_ms)
        return items

    def rank(self, query: str) -> RankResult:
        """
        Rank every candidate against ``query``.

        Args:
            query: Current input text, possibly empty

        Returns:
            RankResult with the ordered matches and timing statistics
        """
        items = self.items
        self.logger.log_rank_start(query, self.kind.value, len(items))

        t0 = time.perf_counter()
        matches = self.matcher.rank(query, items)
        elapsed_ms = (time.perf_counter() - t0) * 1000.0

        self.logger.log_rank_complete(query, len(matches), elapsed_ms)
        return RankResult(
            query=query,
            matcher=self.kind,
            matches=matches,
            stats=RankStats(candidates=len(items), matches=len(matches), elapsed_ms=elapsed_ms),
        )

    def search(self, query: str) -> list[str]:
        """Convenience wrapper returning only the ordered matches."""
        return self.rank(query).matches
