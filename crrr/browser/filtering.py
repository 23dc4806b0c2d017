"""Display-list construction: hidden filtering, grouping, and query ranking."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from ..file_model import PSEUDO_ENTRIES, DisplayList, Entry
from ..search import NameRanker


def is_hidden_name(name: str) -> bool:
    return name.startswith(".")


def order_group(entries: Sequence[Entry], query: str, ranker: NameRanker) -> list[Entry]:
    """Sort one directory/file group by name, or rank it against ``query``."""
    if not query:
        return sorted(entries, key=lambda entry: entry.name)
    ranked = ranker.rank(query, [entry.name for entry in entries])
    return [entries[idx] for idx in ranked]


def build_display_list(
    entries: Iterable[Entry],
    query: str,
    show_hidden: bool,
    ranker: NameRanker,
) -> DisplayList:
    """Return ``.``/``..`` followed by matching directories, then matching files.

    Pseudo-entries are never hidden or filtered. Directories and files are
    ordered independently, so a strong file match never outranks a directory.
    """
    visible = [entry for entry in entries if show_hidden or not is_hidden_name(entry.name)]
    directories = [entry for entry in visible if entry.is_dir]
    files = [entry for entry in visible if not entry.is_dir]
    return (
        *PSEUDO_ENTRIES,
        *order_group(directories, query, ranker),
        *order_group(files, query, ranker),
    )


def index_of_name(display_list: DisplayList, name: str) -> int | None:
    """Return the index of the first entry called ``name``, if present."""
    for idx, entry in enumerate(display_list):
        if entry.name == name:
            return idx
    return None
