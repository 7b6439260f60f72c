"""
Brand detection and disambiguation for product titles.

A ``BrandMatcher`` is built once per batch from curated relations. It finds
every alias present in a title, widens the matches with their directly related
aliases, picks the one appearing earliest in the title and reports its
canonical brand.
"""

import logging
from typing import Callable, Iterable, List, Optional

from services.brand_matching.alias_graph import build_alias_graph, iter_aliases
from services.brand_matching.canonical import build_canonical_lookup
from services.brand_matching.models import (
    AliasGraph,
    BrandRelation,
    CanonicalLookup,
    MatchPolicy,
    MatchResult,
)
from services.brand_matching.pattern_compiler import MatchCache, compile_match_cache
from services.brand_matching.text_utils import TitleNormalizer

logger = logging.getLogger(__name__)


class BrandMatcher:
    def __init__(
        self,
        graph: AliasGraph,
        lookup: CanonicalLookup,
        cache: MatchCache,
        normalizer: Optional[Callable[[str], str]] = None,
    ) -> None:
        self.graph = graph
        self.lookup = lookup
        self.cache = cache
        self.normalize = normalizer if normalizer is not None else TitleNormalizer()

    @classmethod
    def from_relations(
        cls,
        relations: Iterable[BrandRelation],
        policy: Optional[MatchPolicy] = None,
        normalizer: Optional[Callable[[str], str]] = None,
    ) -> "BrandMatcher":
        """Build graph, canonical lookup and pattern cache for one batch."""
        policy = policy or MatchPolicy.default()
        graph = build_alias_graph(relations)
        lookup = build_canonical_lookup(graph, policy.ignored)
        cache = compile_match_cache(iter_aliases(graph), policy)
        return cls(graph, lookup, cache, normalizer)

    def match(self, title: str) -> MatchResult:
        """Assign a canonical brand to a single title."""
        normalized = self.normalize(title or "").strip()
        matched = self.find_aliases(normalized)
        if not matched:
            logger.debug(f"No brand in title: {title!r}")
            return MatchResult(title=title)

        priority = self.select_priority_alias(normalized, matched)
        brand = self.lookup.get(priority, priority)
        logger.debug(f"{title!r} -> {matched} (priority={priority!r}, brand={brand!r})")
        return MatchResult(
            title=title,
            matched_brands=matched,
            priority_brand=priority,
            brand=brand,
        )

    def find_aliases(self, normalized_title: str) -> List[str]:
        """Aliases whose patterns match the title, in cache order."""
        matched: List[str] = []
        for entry in self.cache:
            if entry.alias in matched:
                continue
            if entry.matches(normalized_title):
                matched.append(entry.alias)
        return matched

    def candidate_aliases(self, matched: List[str]) -> List[str]:
        """Matched aliases plus all of their direct neighbours, in first-seen order."""
        candidates = {}
        for alias in matched:
            for candidate in (alias, *self.graph.get(alias, ())):
                candidates.setdefault(candidate, None)
        return list(candidates)

    def select_priority_alias(self, normalized_title: str, matched: List[str]) -> str:
        """The candidate appearing leftmost in the title, else the first match."""
        haystack = normalized_title.lower()
        best: Optional[str] = None
        best_index = -1

        for candidate in self.candidate_aliases(matched):
            index = haystack.find(self.normalize(candidate).lower())
            if index == -1:
                continue
            if best is None or index < best_index:
                best, best_index = candidate, index

        return best if best is not None else matched[0]

    def reset(self) -> None:
        """Drop the per-batch normalization cache."""
        clear = getattr(self.normalize, "clear", None)
        if clear is not None:
            clear()
