from __future__ import annotations

from collections.abc import Iterable

from ..core.types import MatcherKind, MatchResult
from .base import Matcher, stable_order


class PositionalMatcher(Matcher):
    """Rank by the index of the leftmost contiguous occurrence of the query."""

    kind = MatcherKind.SIMPLE

    def rank(self, query: str, candidates: Iterable[str]) -> list[str]:
        needle = self.fold(query)
        results: list[MatchResult] = []
        for index, candidate in enumerate(candidates):
            position = self.fold(candidate).find(needle)
            if position == -1:
                continue
            results.append(MatchResult(candidate=candidate, score=float(position), index=index))
        return stable_order(results)
