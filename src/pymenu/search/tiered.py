"""
Multi-word AND matcher in the style of dmenu.

Every whitespace-separated word of the query must occur somewhere in a
candidate. Candidates are then bucketed by the best alignment any single
word achieved:

    exact      a word equals the whole candidate
    prefix     a word starts the candidate
    substring  words only occur further inside

The buckets are emitted in that order, each one keeping the input order
of its candidates.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..core.types import MatcherKind, Tier
from .base import Matcher


class TieredMatcher(Matcher):
    kind = MatcherKind.DMENU

    def classify(self, words: list[str], candidate: str) -> Tier | None:
        """
        Return the best tier reached by any word, or None when some word
        does not occur in the candidate at all.
        """
        text = self.fold(candidate)
        exact = prefix = False
        for word in words:
            position = text.find(word)
            if position == -1:
                return None
            if position == 0:
                if len(word) == len(text):
                    exact = True
                else:
                    prefix = True
        if exact:
            return Tier.EXACT
        if prefix:
            return Tier.PREFIX
        return Tier.SUBSTRING

    def rank(self, query: str, candidates: Iterable[str]) -> list[str]:
        if not query:
            return list(candidates)

        words = self.fold(query).split()
        buckets: dict[Tier, list[str]] = {tier: [] for tier in Tier}
        for candidate in candidates:
            tier = self.classify(words, candidate)
            if tier is not None:
                buckets[tier].append(candidate)

        return buckets[Tier.EXACT] + buckets[Tier.PREFIX] + buckets[Tier.SUBSTRING]
