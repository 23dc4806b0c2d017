"""Domain datatypes for directory entries shown by the browser."""

from __future__ import annotations

from dataclasses import dataclass

CURRENT_DIR_NAME = "."
PARENT_DIR_NAME = ".."


@dataclass(frozen=True)
class Entry:
    """One directory child as observed by a single listing pass."""

    name: str
    is_dir: bool

    @property
    def is_pseudo(self) -> bool:
        """Return whether this is one of the synthetic ``.``/``..`` rows."""
        return self.name in PSEUDO_ENTRY_NAMES


PSEUDO_ENTRIES: tuple[Entry, ...] = (
    Entry(CURRENT_DIR_NAME, is_dir=True),
    Entry(PARENT_DIR_NAME, is_dir=True),
)
PSEUDO_ENTRY_NAMES = frozenset(entry.name for entry in PSEUDO_ENTRIES)
PSEUDO_ENTRY_COUNT = len(PSEUDO_ENTRIES)

DisplayList = tuple[Entry, ...]


__all__ = [
    "CURRENT_DIR_NAME",
    "PARENT_DIR_NAME",
    "Entry",
    "PSEUDO_ENTRIES",
    "PSEUDO_ENTRY_NAMES",
    "PSEUDO_ENTRY_COUNT",
    "DisplayList",
]
