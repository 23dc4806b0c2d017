"""Search-string editing rules."""

from __future__ import annotations

from ..search import WORD_SEPARATORS


def append_text(query: str, text: str) -> str:
    """Append printable characters, dropping control characters."""
    return query + "".join(ch for ch in text if ch.isprintable())


def delete_char(query: str) -> str:
    return query[:-1]


def delete_word(query: str) -> str:
    """Truncate at the last word separator, or clear when there is none.

    ``"foo-bar"`` becomes ``"foo"``; ``"foo"`` becomes ``""``.
    """
    cut = max(query.rfind(separator) for separator in WORD_SEPARATORS)
    return query[: max(cut, 0)]
