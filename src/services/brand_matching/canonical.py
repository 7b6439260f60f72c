import logging
from types import MappingProxyType
from typing import AbstractSet, Dict, Sequence

from services.brand_matching.alias_graph import connected_aliases
from services.brand_matching.models import AliasGraph, CanonicalLookup

logger = logging.getLogger(__name__)


def choose_canonical(members: Sequence[str], ignored: AbstractSet[str] = frozenset()) -> str:
    """Pick the shortest non-ignored member; the first one wins on equal length."""
    pool = [member for member in members if member not in ignored]
    if not pool:
        pool = list(members)
    return min(pool, key=len)


def build_canonical_lookup(
    graph: AliasGraph,
    ignored: AbstractSet[str] = frozenset(),
) -> CanonicalLookup:
    """Map every alias to the representative of its equivalence class."""
    first_seen = {alias: index for index, alias in enumerate(graph)}
    lookup: Dict[str, str] = {}
    classes = 0

    for alias in graph:
        if alias in lookup:
            continue
        members = sorted(connected_aliases(graph, alias), key=first_seen.__getitem__)
        canonical = choose_canonical(members, ignored)
        for member in members:
            lookup[member] = canonical
        classes += 1

    logger.info(f"Derived {classes} canonical brands for {len(lookup)} aliases")
    return MappingProxyType(lookup)
