"""
Best-alignment subsequence scoring.

Unlike the forward scan, which commits to the first occurrence of every
query character, this scorer explores later occurrences as well and keeps
the alignment with the highest total. Characters landing on a word
boundary earn a larger share of the per-character budget:

    after '/'                       0.9
    after '-', '_', ' ' or a digit  0.8
    lower-to-upper camel hump       0.8
    after '.'                       0.7
    anywhere else                   0.75 / distance from previous match

A character directly next to the previous match earns the full budget.
Sub-results are memoized on ``(needle_index, haystack_index)`` so that
the branching stays polynomial in the candidate length.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ..core.types import MatcherKind
from .base import Matcher

SLASH_FACTOR = 0.9
SEPARATOR_FACTOR = 0.8
CAMEL_CASE_FACTOR = 0.8
DOT_FACTOR = 0.7
DISTANCE_FACTOR = 0.75

_SEPARATORS = frozenset("-_ ")


def _char_factor(haystack: str, position: int) -> float | None:
    """Boundary factor for a match at ``position``, None when not on a boundary."""
    if position == 0:
        return None
    previous = haystack[position - 1]
    if previous == "/":
        return SLASH_FACTOR
    if previous in _SEPARATORS or previous.isdigit():
        return SEPARATOR_FACTOR
    if previous.islower() and haystack[position].isupper():
        return CAMEL_CASE_FACTOR
    if previous == ".":
        return DOT_FACTOR
    return None


@dataclass(slots=True)
class _Frame:
    """One pending alignment search starting at ``(needle_index, haystack_index)``."""

    key: tuple[int, int]
    current: int
    position: int
    last_match: int
    score: float
    best_branch: float = 0.0
    score_for_char: float = 0.0


def recursive_score(haystack: str, needle: str) -> float:
    """
    Score the best alignment of ``needle`` inside ``haystack``.

    ``needle`` is expected in lower case; haystack characters are
    lower-cased for comparison only. An empty needle scores 0.0 for
    dot-prefixed (hidden) entries and 1.0 otherwise.

    Branches are driven from an explicit stack of frames, so the depth of
    the search is bounded by memory rather than the interpreter's
    recursion limit.
    """
    if not needle:
        return 0.0 if haystack.startswith(".") else 1.0
    if not haystack:
        return 0.0

    haystack_length = len(haystack)
    needle_length = len(needle)
    folded = [char.lower() for char in haystack]
    max_score_per_char = (1.0 / haystack_length + 1.0 / needle_length) / 2
    memo: dict[tuple[int, int], float] = {}
    stack: list[_Frame] = []

    def enter(haystack_index: int, needle_index: int, last_match: int, carried: float) -> float | None:
        """Return a known score, or push a frame and return None."""
        key = (needle_index, haystack_index)
        if key in memo:
            return memo[key]
        if haystack_length - haystack_index < needle_length - needle_index:
            memo[key] = 0.0
            return 0.0
        stack.append(_Frame(key, needle_index, haystack_index, last_match, carried))
        return None

    returned = enter(0, 0, 0, 0.0)
    while stack:
        frame = stack[-1]
        if returned is not None:
            # Branch finished: commit the current character and move on.
            if returned > frame.best_branch:
                frame.best_branch = returned
            frame.score += frame.score_for_char
            frame.last_match = frame.position
            frame.position += 1
            frame.current += 1
            returned = None

        if frame.current == needle_length:
            returned = max(frame.score, frame.best_branch)
            memo[frame.key] = returned
            stack.pop()
            continue

        char = needle[frame.current]
        position = frame.position
        while position < haystack_length and folded[position] != char:
            position += 1
        if position == haystack_length:
            memo[frame.key] = 0.0
            returned = 0.0
            stack.pop()
            continue
        frame.position = position

        factor = _char_factor(haystack, position)
        if factor is not None:
            frame.score_for_char = max_score_per_char * factor
        else:
            distance = position - frame.last_match
            if distance <= 1:
                frame.score_for_char = max_score_per_char
            else:
                frame.score_for_char = max_score_per_char * (1.0 / distance) * DISTANCE_FACTOR

        # Same needle character, aligned further right.
        returned = enter(position + 1, frame.current, frame.last_match, frame.score)

    return returned if returned is not None else 0.0


class RecursiveFuzzyMatcher(Matcher):
    """
    Subsequence ranking by best-scoring alignment.

    Ties are broken by candidate text rather than input order.
    """

    kind = MatcherKind.FUZZY_RECURSIVE

    def rank(self, query: str, candidates: Iterable[str]) -> list[str]:
        needle = query.lower()
        scored: list[tuple[float, str]] = []
        for candidate in candidates:
            score = recursive_score(candidate, needle)
            if score > 0.0:
                scored.append((score, candidate))
        scored.sort(key=lambda pair: (-pair[0], pair[1]))
        return [candidate for _, candidate in scored]
