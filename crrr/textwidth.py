"""Terminal cell-width measurement for entry names and status text."""

from __future__ import annotations

import unicodedata


def char_display_width(ch: str) -> int:
    """Return terminal columns used by ``ch``.

    Combining marks consume no columns and East Asian wide/fullwidth
    characters consume two. Control characters render as one ``?`` cell.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    return sum(char_display_width(ch) for ch in text)


def sanitize(text: str) -> str:
    """Replace characters that would move the cursor (newlines, escapes) with ``?``."""
    return "".join(ch if ch.isprintable() else "?" for ch in text)


def clip_text(text: str, max_cols: int) -> str:
    """Trim ``text`` to at most ``max_cols`` display columns."""
    if max_cols <= 0 or not text:
        return ""
    out: list[str] = []
    col = 0
    for ch in text:
        w = char_display_width(ch)
        if col + w > max_cols:
            break
        out.append(ch)
        col += w
    return "".join(out)


def fit_text(text: str, width: int) -> str:
    """Clip ``text`` and right-pad it with spaces to exactly ``width`` columns."""
    clipped = clip_text(text, width)
    return clipped + " " * max(0, width - display_width(clipped))
