"""Default lists that decide where and whether a brand alias may match a title."""

# Aliases that double as everyday words; they only count at the start of a title.
FIRST_WORD_ALIASES = frozenset({
    "rich", "rff", "flex", "ultra", "gum", "beauty", "orto", "free", "112",
    "kin", "happy", "heel", "contour", "nero", "rsv",
})

# Allowed as the first or second token ("Dr. Heel ...", "Pharma Contour ...").
SECOND_WORD_ALIASES = frozenset({"heel", "contour", "nero", "rsv"})

# Matched against this exact casing only.
CASE_SENSITIVE_ALIASES = {"happy": "HAPPY"}

# Placeholder manufacturer values seen in scraped catalogs.
IGNORED_ALIASES = frozenset({
    "other", "others", "generic", "unknown", "n/a", "various", "no brand",
})
