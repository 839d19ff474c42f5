"""
Candidate ranking strategies.

Four interchangeable matchers share the ``Matcher.rank(query, candidates)``
contract:

- simple: leftmost contiguous occurrence
- dmenu: multi-word AND with exact/prefix/substring tiers
- fuzzy: forward-scan character subsequence scoring
- fuzzy-recursive: best-alignment subsequence scoring with boundary bonuses

The caller picks one per session with ``get_matcher``.
"""

from __future__ import annotations

from ..core.types import MatcherKind
from ..utils.error_handling import ConfigurationError
from .base import Matcher, stable_order
from .fuzzy import ForwardScanMatcher, forward_scan_score
from .positional import PositionalMatcher
from .recursive import RecursiveFuzzyMatcher, recursive_score
from .tiered import TieredMatcher

MATCHERS: dict[MatcherKind, type[Matcher]] = {
    MatcherKind.SIMPLE: PositionalMatcher,
    MatcherKind.DMENU: TieredMatcher,
    MatcherKind.FUZZY: ForwardScanMatcher,
    MatcherKind.FUZZY_RECURSIVE: RecursiveFuzzyMatcher,
}


def get_matcher(kind: MatcherKind | str, case_sensitive: bool = True) -> Matcher:
    """
    Build the matcher for ``kind``.

    Raises:
        ConfigurationError: If ``kind`` names no known strategy.
    """
    try:
        matcher_kind = MatcherKind(kind)
    except ValueError:
        raise ConfigurationError(
            f"Unknown matcher: {kind!r}",
            context={"field": "matcher", "choices": [k.value for k in MatcherKind]},
        ) from None
    return MATCHERS[matcher_kind](case_sensitive=case_sensitive)


__all__ = [
    "MATCHERS",
    "Matcher",
    "ForwardScanMatcher",
    "PositionalMatcher",
    "RecursiveFuzzyMatcher",
    "TieredMatcher",
    "forward_scan_score",
    "get_matcher",
    "recursive_score",
    "stable_order",
]
