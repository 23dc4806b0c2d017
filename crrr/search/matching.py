"""Name rankers used to filter and order directory entries for a query.

Two strategies share one contract: ``rank(query, names)`` returns indices into
``names`` for every name that matches, best match first.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from rapidfuzz import fuzz, process, utils

WORD_SEPARATORS: tuple[str, ...] = (" ", "-", "_", ".")
DEFAULT_FUZZY_THRESHOLD = 50.0
MATCH_MODES: tuple[str, ...] = ("fuzzy", "substring")


class NameRanker(Protocol):
    def rank(self, query: str, names: Sequence[str]) -> list[int]: ...


def normalize_search_text(text: str) -> str:
    """Lower-case ``text`` and drop word separators."""
    folded = text.casefold()
    for separator in WORD_SEPARATORS:
        folded = folded.replace(separator, "")
    return folded


def substring_matches(query: str, candidate: str) -> bool:
    """Separator-tolerant, case-insensitive containment test."""
    return normalize_search_text(query) in normalize_search_text(candidate)


class SubstringRanker:
    """Keep names that contain the normalized query, in input order."""

    def rank(self, query: str, names: Sequence[str]) -> list[int]:
        needle = normalize_search_text(query)
        return [idx for idx, name in enumerate(names) if needle in normalize_search_text(name)]


class FuzzyRanker:
    """Rank names by rapidfuzz ``WRatio`` similarity, dropping scores below ``threshold``.

    ``threshold`` is on rapidfuzz's 0-100 scale. Both sides go through
    ``utils.default_process`` so matching ignores case and punctuation.
    """

    def __init__(self, threshold: float = DEFAULT_FUZZY_THRESHOLD) -> None:
        self.threshold = max(0.0, min(100.0, float(threshold)))

    def rank(self, query: str, names: Sequence[str]) -> list[int]:
        if not names:
            return []
        if not utils.default_process(query):
            # Nothing left to score once punctuation is stripped.
            return list(range(len(names)))
        matches = process.extract(
            query,
            list(names),
            scorer=fuzz.WRatio,
            processor=utils.default_process,
            limit=None,
            score_cutoff=self.threshold,
        )
        return [idx for _name, _score, idx in matches]


def build_ranker(mode: str = "fuzzy", threshold: float = DEFAULT_FUZZY_THRESHOLD) -> NameRanker:
    """Return the ranker for a ``--match`` mode name."""
    if mode == "substring":
        return SubstringRanker()
    if mode == "fuzzy":
        return FuzzyRanker(threshold)
    raise ValueError(f"unknown match mode: {mode!r}")


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
