"""Domain model for directory entries and the filesystem provider.

This package contains non-UI primitives:
- the immutable ``Entry`` datatype and the ``.``/``..`` pseudo-entries
- directory listing with symlink-following directory classification
- the ``LocalFilesystem`` provider used by the browser state machine
"""

from __future__ import annotations

from .types import (
    CURRENT_DIR_NAME,
    PARENT_DIR_NAME,
    PSEUDO_ENTRIES,
    PSEUDO_ENTRY_COUNT,
    PSEUDO_ENTRY_NAMES,
    DisplayList,
    Entry,
)
from .fs import FilesystemError, FilesystemProvider, LocalFilesystem, entry_is_directory, list_entries

__all__ = [
    "CURRENT_DIR_NAME",
    "PARENT_DIR_NAME",
    "PSEUDO_ENTRIES",
    "PSEUDO_ENTRY_COUNT",
    "PSEUDO_ENTRY_NAMES",
    "DisplayList",
    "Entry",
    "FilesystemError",
    "FilesystemProvider",
    "LocalFilesystem",
    "entry_is_directory",
    "list_entries",
]
