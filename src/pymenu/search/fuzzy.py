from __future__ import annotations

from collections.abc import Iterable

from ..core.types import MatcherKind, MatchResult
from .base import Matcher, stable_order

BASE_SCORE = 1.0
PROXIMITY_BONUS = 10.0


def forward_scan_score(query: str, candidate: str) -> float:
    """
    Score ``query`` as a character subsequence of ``candidate``.

    Each query character is looked up in the remaining view of the
    candidate and contributes ``10.0 - offset``. The view restarts *at*
    the found character, so a repeated query character may match the same
    position twice. Offsets of ten or more contribute negatively; the
    total is not clamped. A missing character scores 0.0.

    Example:
        >>> forward_scan_score("ab", "ab")
        20.0
        >>> forward_scan_score("ab", "xyz")
        0.0
    """
    score = BASE_SCORE
    start = 0
    for char in query:
        position = candidate.find(char, start)
        if position == -1:
            return 0.0
        score += PROXIMITY_BONUS - (position - start)
        start = position
    return score


class ForwardScanMatcher(Matcher):
    """Cheap subsequence ranking: first occurrence of each character, closer is better."""

    kind = MatcherKind.FUZZY

    def rank(self, query: str, candidates: Iterable[str]) -> list[str]:
        needle = self.fold(query)
        results: list[MatchResult] = []
        for index, candidate in enumerate(candidates):
            score = forward_scan_score(needle, self.fold(candidate))
            if score > 0.0:
                results.append(MatchResult(candidate=candidate, score=score, index=index))
        return stable_order(results, descending=True)
