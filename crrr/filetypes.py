"""Human-readable type labels for entries, used in the status row."""

from __future__ import annotations

from functools import lru_cache

from pygments.lexers import get_lexer_for_filename
from pygments.util import ClassNotFound

from .file_model import Entry


@lru_cache(maxsize=1024)
def language_label(filename: str) -> str | None:
    """Return the Pygments language name for ``filename``, if it has one."""
    try:
        lexer = get_lexer_for_filename(filename)
    except ClassNotFound:
        return None
    return lexer.name


def entry_type_label(entry: Entry | None) -> str:
    if entry is None:
        return ""
    if entry.is_pseudo:
        return "current directory" if entry.name == "." else "parent directory"
    if entry.is_dir:
        return "directory"
    return language_label(entry.name) or "file"
