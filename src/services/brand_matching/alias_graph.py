"""
Alias graph construction.

Relations are stored as declared: every alias lists the aliases it is directly
related to, in both directions, without transitive closure.
"""

import logging
from collections import deque
from types import MappingProxyType
from typing import Dict, Iterable, List

from services.brand_matching.models import AliasGraph, BrandRelation

logger = logging.getLogger(__name__)

RELATED_ALIAS_DELIMITER = ";"


def normalize_alias(alias: str) -> str:
    return (alias or "").strip().lower()


def split_related_aliases(value: str, delimiter: str = RELATED_ALIAS_DELIMITER) -> List[str]:
    """Split a delimited alias list into trimmed, lower-cased, non-empty aliases."""
    if not value:
        return []
    aliases = [normalize_alias(part) for part in value.split(delimiter)]
    return [alias for alias in aliases if alias]


def build_alias_graph(relations: Iterable[BrandRelation]) -> AliasGraph:
    """Build a symmetric alias -> neighbours mapping from curated relations."""
    neighbours: Dict[str, Dict[str, None]] = {}
    edge_count = 0

    for relation in relations:
        primary = normalize_alias(relation.primary_alias)
        if not primary:
            continue
        neighbours.setdefault(primary, {})

        for related in split_related_aliases(relation.related_aliases):
            if related == primary:
                continue
            neighbours.setdefault(related, {})
            if related not in neighbours[primary]:
                edge_count += 1
            neighbours[primary][related] = None
            neighbours[related][primary] = None

    logger.info(f"Built alias graph: {len(neighbours)} aliases, {edge_count} relations")
    return MappingProxyType({alias: tuple(linked) for alias, linked in neighbours.items()})


def iter_aliases(graph: AliasGraph) -> List[str]:
    """Every known alias, in first-seen order."""
    return list(graph.keys())


def connected_aliases(graph: AliasGraph, alias: str) -> List[str]:
    """Aliases reachable from ``alias`` through declared relations, breadth-first."""
    if alias not in graph:
        return [alias]
    seen = {alias: None}
    queue = deque([alias])
    while queue:
        current = queue.popleft()
        for linked in graph.get(current, ()):
            if linked in seen:
                continue
            seen[linked] = None
            queue.append(linked)
    return list(seen)
