"""Search package exports.

Rankers decide which entry names match a query and in what order.
"""

from __future__ import annotations

from .matching import (
    DEFAULT_FUZZY_THRESHOLD,
    MATCH_MODES,
    WORD_SEPARATORS,
    FuzzyRanker,
    NameRanker,
    SubstringRanker,
    build_ranker,
    normalize_search_text,
    substring_matches,
)

__all__ = [
    "DEFAULT_FUZZY_THRESHOLD",
    "FuzzyRanker",
    "MATCH_MODES",
    "NameRanker",
    "SubstringRanker",
    "WORD_SEPARATORS",
    "build_ranker",
    "normalize_search_text",
    "substring_matches",
]
