"""
Brand matching for pharmacy product titles.

This package builds an alias graph from curated brand relations, derives one
canonical label per equivalence class, compiles boundary-aware alias patterns
and assigns a single canonical brand to each product title.
"""

from services.brand_matching.models import (
    AliasGraph,
    BrandRelation,
    CanonicalLookup,
    CompiledAlias,
    MatchPolicy,
    MatchResult,
    PositionPolicy,
    Product,
)
from services.brand_matching.alias_graph import (
    build_alias_graph,
    connected_aliases,
    iter_aliases,
    split_related_aliases,
)
from services.brand_matching.canonical import build_canonical_lookup, choose_canonical
from services.brand_matching.pattern_compiler import (
    MatchCache,
    compile_alias,
    compile_match_cache,
)
from services.brand_matching.text_utils import TitleNormalizer, normalize_title
from services.brand_matching.matcher import BrandMatcher

__all__ = [
    # Data models
    "AliasGraph",
    "BrandRelation",
    "CanonicalLookup",
    "CompiledAlias",
    "MatchPolicy",
    "MatchResult",
    "PositionPolicy",
    "Product",

    # Graph and canonical labels
    "build_alias_graph",
    "connected_aliases",
    "iter_aliases",
    "split_related_aliases",
    "build_canonical_lookup",
    "choose_canonical",

    # Pattern compilation
    "MatchCache",
    "compile_alias",
    "compile_match_cache",

    # Text utilities
    "TitleNormalizer",
    "normalize_title",

    # Matching
    "BrandMatcher",
]
