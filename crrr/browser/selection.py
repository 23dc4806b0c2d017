"""Selection continuity policies and cursor movement.

All functions are pure: they take the old and new display lists and return a
clamped index. ``SelectionMemory`` is the one stateful piece and is owned by
the state machine for the lifetime of a browsing session.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from ..file_model import CURRENT_DIR_NAME, PARENT_DIR_NAME, DisplayList
from .filtering import index_of_name
from .scroll import clamp

CURRENT_DIR_INDEX = 0
PARENT_DIR_INDEX = 1
DEFAULT_SELECTION = PARENT_DIR_INDEX
DEFAULT_LARGE_JUMP_STEP = 15


class SelectionMemory:
    """Last selected entry name per absolute directory path."""

    def __init__(self) -> None:
        self._names: dict[Path, str] = {}

    def remember(self, directory: Path, name: str) -> None:
        self._names[directory] = name

    def recall(self, directory: Path) -> str | None:
        return self._names.get(directory)

    def clear(self) -> None:
        self._names.clear()

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[Path]:
        return iter(self._names)


def clamp_selection(index: int, display_list: DisplayList) -> int:
    return clamp(index, 0, len(display_list) - 1)


def selection_on_directory_change(
    display_list: DisplayList,
    directory: Path,
    memory: SelectionMemory,
) -> int:
    """Restore the remembered entry for ``directory`` or fall back to ``..``."""
    remembered = memory.recall(directory)
    if remembered is None:
        return clamp_selection(DEFAULT_SELECTION, display_list)
    index = index_of_name(display_list, remembered)
    if index is None:
        return clamp_selection(DEFAULT_SELECTION, display_list)
    return clamp_selection(index, display_list)


def selection_on_filter_change(
    old_list: DisplayList,
    new_list: DisplayList,
    old_selected: int,
    query: str,
) -> int:
    """Keep the nearest surviving entry at or above the old selection.

    Walks backward from ``old_selected`` through ``old_list`` and selects the
    first name still present in ``new_list``. The literal queries ``.`` and
    ``..`` jump straight to their pseudo-entry.
    """
    if query == CURRENT_DIR_NAME:
        return clamp_selection(CURRENT_DIR_INDEX, new_list)
    if query == PARENT_DIR_NAME:
        return clamp_selection(PARENT_DIR_INDEX, new_list)

    start = min(old_selected, len(old_list) - 1)
    for old_index in range(start, -1, -1):
        new_index = index_of_name(new_list, old_list[old_index].name)
        if new_index is not None:
            return clamp_selection(new_index, new_list)
    return clamp_selection(CURRENT_DIR_INDEX, new_list)


def selection_on_reset(display_list: DisplayList) -> int:
    return clamp_selection(DEFAULT_SELECTION, display_list)


def move_up(selected: int, display_list: DisplayList) -> int:
    return clamp_selection(max(0, selected - 1), display_list)


def move_down(selected: int, display_list: DisplayList) -> int:
    return clamp_selection(min(len(display_list) - 1, selected + 1), display_list)


def jump_up(selected: int, display_list: DisplayList, step: int = DEFAULT_LARGE_JUMP_STEP) -> int:
    """Move up by ``step``; near the top this is a single-step move."""
    target = selected - max(1, step)
    if target < 0:
        return move_up(selected, display_list)
    return clamp_selection(target, display_list)


def jump_down(selected: int, display_list: DisplayList, step: int = DEFAULT_LARGE_JUMP_STEP) -> int:
    return clamp_selection(selected + max(1, step), display_list)


def jump_to_top(display_list: DisplayList) -> int:
    """Select the first navigable row, skipping the ``.`` pseudo-entry."""
    return clamp_selection(PARENT_DIR_INDEX, display_list)


def jump_to_bottom(display_list: DisplayList) -> int:
    return len(display_list) - 1
