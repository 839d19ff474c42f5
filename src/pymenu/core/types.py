from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import List


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"
    HIGHLIGHT = "highlight"


class MatcherKind(str, Enum):
    """Ranking strategies selectable per session."""

    SIMPLE = "simple"
    DMENU = "dmenu"
    FUZZY = "fuzzy"
    FUZZY_RECURSIVE = "fuzzy-recursive"


class Tier(IntEnum):
    """Match-quality buckets of the multi-word matcher, best first."""

    EXACT = 0
    PREFIX = 1
    SUBSTRING = 2


@dataclass(slots=True, frozen=True)
class MatchResult:
    candidate: str
    score: float
    index: int


@dataclass(slots=True)
class RankStats:
    candidates: int = 0
    matches: int = 0
    elapsed_ms: float = 0.0


@dataclass(slots=True)
class RankResult:
    query: str
    matcher: MatcherKind
    matches: List[str] = field(default_factory=list)
    stats: RankStats = field(default_factory=RankStats)
