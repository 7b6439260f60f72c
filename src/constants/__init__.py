from constants.brand_policy import (
    CASE_SENSITIVE_ALIASES,
    FIRST_WORD_ALIASES,
    IGNORED_ALIASES,
    SECOND_WORD_ALIASES,
)

__all__ = [
    "CASE_SENSITIVE_ALIASES",
    "FIRST_WORD_ALIASES",
    "IGNORED_ALIASES",
    "SECOND_WORD_ALIASES",
]
