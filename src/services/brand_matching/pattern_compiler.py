"""
Match-pattern compilation.

Each known alias is compiled once per batch into a boundary-aware pattern. Aliases
that coincide with common words additionally carry a positional pattern that
must match before the boundary check is consulted.
"""

import logging
import re
from typing import Dict, Iterable, Optional, Tuple

from services.brand_matching.models import CompiledAlias, MatchPolicy, PositionPolicy
from services.brand_matching.text_utils import normalize_title

logger = logging.getLogger(__name__)

MatchCache = Tuple[CompiledAlias, ...]

_TOKEN_END = r"(?:\b|\s|$)"


def compile_alias(alias: str, policy: MatchPolicy) -> CompiledAlias:
    """Compile the boundary pattern and positional gate for a single alias."""
    exact_case = policy.case_sensitive.get(alias)
    if exact_case is not None:
        literal, flags = exact_case, 0
    else:
        literal, flags = normalize_title(alias), re.IGNORECASE

    escaped = re.escape(literal)
    position = policy.position_for(alias)
    return CompiledAlias(
        alias=alias,
        position=position,
        pattern=_anywhere_pattern(escaped, flags),
        position_pattern=_position_pattern(escaped, position, flags),
    )


def compile_match_cache(aliases: Iterable[str], policy: MatchPolicy) -> MatchCache:
    """Compile every non-ignored alias, longest first."""
    compiled: Dict[str, CompiledAlias] = {}
    skipped = 0
    for alias in aliases:
        if alias in compiled:
            continue
        if policy.is_ignored(alias):
            skipped += 1
            continue
        compiled[alias] = compile_alias(alias, policy)

    cache = tuple(sorted(compiled.values(), key=lambda entry: len(entry.alias), reverse=True))
    logger.info(f"Compiled {len(cache)} alias patterns ({skipped} ignored)")
    return cache


def _anywhere_pattern(escaped: str, flags: int) -> re.Pattern:
    standalone = rf"\b{escaped}\b"
    space_bounded = rf"^(?:{escaped}|{escaped}\s.*|.*\s{escaped}\s.*|.*\s{escaped})$"
    return re.compile(f"{standalone}|{space_bounded}", flags | re.DOTALL)


def _position_pattern(escaped: str, position: PositionPolicy, flags: int) -> Optional[re.Pattern]:
    if position is PositionPolicy.FIRST_WORD_ONLY:
        return re.compile(rf"^{escaped}{_TOKEN_END}", flags)
    if position is PositionPolicy.FIRST_OR_SECOND_WORD:
        return re.compile(rf"^(?:\S+\s+)?{escaped}{_TOKEN_END}", flags)
    return None
