from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from ..core.types import MatcherKind, MatchResult


class Matcher(ABC):
    """
    Ranking strategy shared contract.

    ``rank`` receives the current query and the full candidate list and
    returns the matching candidates ordered best-first. It never mutates
    its input, never invents or duplicates entries, and keeps no state
    between calls.
    """

    kind: MatcherKind

    def __init__(self, case_sensitive: bool = True) -> None:
        self.case_sensitive = case_sensitive

    @abstractmethod
    def rank(self, query: str, candidates: Iterable[str]) -> list[str]:
        """Return the candidates matching ``query``, best first."""

    def fold(self, text: str) -> str:
        """Normalize text for comparison according to case sensitivity."""
        return text if self.case_sensitive else text.lower()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(case_sensitive={self.case_sensitive})"


def stable_order(results: list[MatchResult], descending: bool = False) -> list[str]:
    """Order results by score; equal scores keep input order."""
    if descending:
        ordered = sorted(results, key=lambda r: (-r.score, r.index))
    else:
        ordered = sorted(results, key=lambda r: (r.score, r.index))
    return [r.candidate for r in ordered]
