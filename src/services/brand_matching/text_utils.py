"""
Title normalization utilities.

Titles are compared accent-insensitively: combining diacritical marks are
stripped, everything else is left as scraped.
"""

import unicodedata
from typing import Dict


def normalize_title(text: str) -> str:
    """Strip combining diacritics; return the input untouched when there are none."""
    if not text:
        return text

    decomposed = unicodedata.normalize("NFD", text)
    if not any(unicodedata.combining(ch) for ch in decomposed):
        return text

    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return unicodedata.normalize("NFC", stripped)


class TitleNormalizer:
    """Memoizing wrapper around ``normalize_title`` scoped to one batch."""

    def __init__(self) -> None:
        self._cache: Dict[str, str] = {}

    def __call__(self, text: str) -> str:
        cached = self._cache.get(text)
        if cached is None:
            cached = normalize_title(text)
            self._cache[text] = cached
        return cached

    def __len__(self) -> int:
        return len(self._cache)

    def clear(self) -> None:
        self._cache.clear()
