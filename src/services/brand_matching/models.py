"""
Data models for brand matching.

This module contains the structures shared by the graph builder, the pattern
compiler and the matcher: relation records, the match policy, compiled alias
patterns and per-title match results.
"""

import enum
import re
from dataclasses import asdict, dataclass, field
from types import MappingProxyType
from typing import Dict, FrozenSet, List, Mapping, Optional, Tuple

from constants import (
    CASE_SENSITIVE_ALIASES,
    FIRST_WORD_ALIASES,
    IGNORED_ALIASES,
    SECOND_WORD_ALIASES,
)

AliasGraph = Mapping[str, Tuple[str, ...]]
CanonicalLookup = Mapping[str, str]


class PositionPolicy(str, enum.Enum):
    ANYWHERE = "anywhere"
    FIRST_WORD_ONLY = "first-word-only"
    FIRST_OR_SECOND_WORD = "first-or-second-word"


@dataclass(frozen=True)
class BrandRelation:
    """One curated row: a primary alias and its ';'-separated related aliases."""
    primary_alias: str
    related_aliases: str = ""


@dataclass(frozen=True)
class Product:
    title: str
    source_id: str


@dataclass(frozen=True)
class MatchPolicy:
    """Immutable lists controlling which aliases match, where, and how."""
    ignored: FrozenSet[str] = frozenset()
    first_word_only: FrozenSet[str] = frozenset()
    first_or_second_word: FrozenSet[str] = frozenset()
    case_sensitive: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "case_sensitive", MappingProxyType(dict(self.case_sensitive)))

    @classmethod
    def default(cls) -> "MatchPolicy":
        return cls(
            ignored=IGNORED_ALIASES,
            first_word_only=FIRST_WORD_ALIASES,
            first_or_second_word=SECOND_WORD_ALIASES,
            case_sensitive=CASE_SENSITIVE_ALIASES,
        )

    def position_for(self, alias: str) -> PositionPolicy:
        if alias in self.first_or_second_word:
            return PositionPolicy.FIRST_OR_SECOND_WORD
        if alias in self.first_word_only:
            return PositionPolicy.FIRST_WORD_ONLY
        return PositionPolicy.ANYWHERE

    def is_ignored(self, alias: str) -> bool:
        return alias in self.ignored


@dataclass(frozen=True)
class CompiledAlias:
    """A brand alias with its boundary pattern and optional positional gate."""
    alias: str
    position: PositionPolicy
    pattern: re.Pattern
    position_pattern: Optional[re.Pattern] = None

    def matches(self, title: str) -> bool:
        if self.position_pattern is not None and not self.position_pattern.search(title):
            return False
        return self.pattern.search(title) is not None


@dataclass
class MatchResult:
    """Brand assignment for a single product title."""
    title: str
    matched_brands: List[str] = field(default_factory=list)
    priority_brand: Optional[str] = None
    brand: Optional[str] = None

    @property
    def is_match(self) -> bool:
        return self.brand is not None

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)
