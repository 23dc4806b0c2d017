"""Navigation state machine for the directory browser.

``NavigationStateMachine`` is the single writer of browsing state: working
directory, raw listing, search query, hidden-file flag, selection, and
viewport. Every command runs to completion and ends with ``recompute()``,
which publishes an immutable ``BrowserSnapshot`` for rendering.

Side effects that leave the browser (editor launch, exit with cd, quit) are
returned as ``Effect`` values and executed by the runtime loop.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from ..file_model import DisplayList, Entry, FilesystemError, FilesystemProvider
from ..search import NameRanker
from . import query as query_edit
from .commands import (
    Command,
    Confirm,
    DeleteChar,
    DeleteWord,
    InsertText,
    Interrupt,
    JumpToBottom,
    JumpToTop,
    MoveDown,
    MoveUp,
    ResetSearch,
    Resize,
    SelectAndExitCurrent,
    SelectAndExitEntry,
    ToggleHidden,
)
from .filtering import build_display_list
from .scroll import ScrollWindow, scroll_window
from .selection import (
    DEFAULT_LARGE_JUMP_STEP,
    SelectionMemory,
    clamp_selection,
    jump_down,
    jump_to_bottom,
    jump_to_top,
    jump_up,
    move_down,
    move_up,
    selection_on_directory_change,
    selection_on_filter_change,
    selection_on_reset,
)

logger = logging.getLogger(__name__)

MODE_BROWSING = "browsing"
MODE_SUSPENDED = "suspended"
MODE_TERMINATED = "terminated"

EFFECT_NONE = "none"
EFFECT_EXIT_WITH_CD = "exit_with_cd"
EFFECT_OPEN_EDITOR = "open_editor"
EFFECT_QUIT = "quit"

# Header, spacer, status, and prompt rows drawn around the entry list.
DEFAULT_CHROME_ROWS = 4


@dataclass(frozen=True)
class ViewportSize:
    columns: int
    rows: int


@dataclass(frozen=True)
class Effect:
    """Side effect requested by a command; ``path`` is set for cd/editor effects."""

    kind: str = EFFECT_NONE
    path: Path | None = None


NO_EFFECT = Effect()


@dataclass(frozen=True)
class BrowserSnapshot:
    """Everything the renderer needs for one frame."""

    cwd: Path
    entries: DisplayList
    selected: int
    query: str
    show_hidden: bool
    window: ScrollWindow
    viewport: ViewportSize
    mode: str
    status_message: str = ""

    @property
    def selected_entry(self) -> Entry | None:
        if 0 <= self.selected < len(self.entries):
            return self.entries[self.selected]
        return None

    def visible_entries(self) -> list[tuple[int, Entry]]:
        """Return ``(index, entry)`` pairs inside the scroll window."""
        return [(idx, self.entries[idx]) for idx in range(self.window.start, self.window.stop)]


class NavigationStateMachine:
    """Turn input commands into browsing state transitions and effects."""

    def __init__(
        self,
        filesystem: FilesystemProvider,
        ranker: NameRanker,
        memory: SelectionMemory | None = None,
        *,
        show_hidden: bool = False,
        viewport: ViewportSize = ViewportSize(80, 24),
        large_jump_step: int = DEFAULT_LARGE_JUMP_STEP,
        chrome_rows: int = DEFAULT_CHROME_ROWS,
    ) -> None:
        self.filesystem = filesystem
        self.ranker = ranker
        self.memory = memory if memory is not None else SelectionMemory()
        self.show_hidden = show_hidden
        self.viewport = viewport
        self.large_jump_step = max(1, large_jump_step)
        self.chrome_rows = max(0, chrome_rows)
        self.mode = MODE_BROWSING
        self.query = ""
        self.status_message = ""
        self.cwd = filesystem.current_directory()
        self.listing: list[Entry] = self._read_listing()
        self.display_list: DisplayList = build_display_list(self.listing, "", self.show_hidden, self.ranker)
        self.selected = selection_on_directory_change(self.display_list, self.cwd, self.memory)
        self.snapshot = self.recompute()

    @property
    def list_rows(self) -> int:
        return max(1, self.viewport.rows - self.chrome_rows)

    def selected_entry(self) -> Entry | None:
        if 0 <= self.selected < len(self.display_list):
            return self.display_list[self.selected]
        return None

    def recompute(self) -> BrowserSnapshot:
        """Clamp selection and publish the next immutable snapshot."""
        self.selected = clamp_selection(self.selected, self.display_list)
        self.snapshot = BrowserSnapshot(
            cwd=self.cwd,
            entries=self.display_list,
            selected=self.selected,
            query=self.query,
            show_hidden=self.show_hidden,
            window=scroll_window(self.selected, len(self.display_list), self.list_rows),
            viewport=self.viewport,
            mode=self.mode,
            status_message=self.status_message,
        )
        return self.snapshot

    def handle(self, command: Command) -> Effect:
        """Apply one command and return the effect the runtime must perform.

        Commands other than ``Resize`` are ignored unless browsing.
        """
        if isinstance(command, Resize):
            self.viewport = ViewportSize(max(1, command.columns), max(1, command.rows))
            self.recompute()
            return NO_EFFECT
        if self.mode != MODE_BROWSING:
            return NO_EFFECT

        self.status_message = ""
        effect = self._dispatch(command)
        self.recompute()
        return effect

    def resume_from_editor(self, error: str | None = None) -> BrowserSnapshot:
        """Return to browsing after the editor exits, surfacing any failure."""
        if self.mode == MODE_SUSPENDED:
            self.mode = MODE_BROWSING
        if error:
            logger.warning("editor failed: %s", error)
            self.status_message = error
        return self.recompute()

    def _dispatch(self, command: Command) -> Effect:
        if isinstance(command, MoveUp):
            if command.large:
                self.selected = jump_up(self.selected, self.display_list, self.large_jump_step)
            else:
                self.selected = move_up(self.selected, self.display_list)
            return NO_EFFECT
        if isinstance(command, MoveDown):
            if command.large:
                self.selected = jump_down(self.selected, self.display_list, self.large_jump_step)
            else:
                self.selected = move_down(self.selected, self.display_list)
            return NO_EFFECT
        if isinstance(command, JumpToTop):
            self.selected = jump_to_top(self.display_list)
            return NO_EFFECT
        if isinstance(command, JumpToBottom):
            self.selected = jump_to_bottom(self.display_list)
            return NO_EFFECT
        if isinstance(command, InsertText):
            self._set_query(query_edit.append_text(self.query, command.text))
            return NO_EFFECT
        if isinstance(command, DeleteChar):
            self._set_query(query_edit.delete_char(self.query))
            return NO_EFFECT
        if isinstance(command, DeleteWord):
            self._set_query(query_edit.delete_word(self.query))
            return NO_EFFECT
        if isinstance(command, ToggleHidden):
            self.show_hidden = not self.show_hidden
            self._refilter()
            return NO_EFFECT
        if isinstance(command, ResetSearch):
            self._reset()
            return NO_EFFECT
        if isinstance(command, Confirm):
            return self._confirm()
        if isinstance(command, SelectAndExitEntry):
            return self._select_and_exit_entry()
        if isinstance(command, SelectAndExitCurrent):
            return self._terminate(EFFECT_EXIT_WITH_CD)
        if isinstance(command, Interrupt):
            return self._terminate(EFFECT_QUIT)
        raise TypeError(f"unsupported command: {command!r}")

    def _read_listing(self) -> list[Entry]:
        try:
            return self.filesystem.list_directory(self.cwd)
        except FilesystemError as exc:
            logger.warning("%s", exc)
            self.status_message = str(exc)
            return []

    def _set_query(self, new_query: str) -> None:
        if new_query == self.query:
            return
        self.query = new_query
        self._refilter()

    def _refilter(self) -> None:
        old_list = self.display_list
        self.display_list = build_display_list(self.listing, self.query, self.show_hidden, self.ranker)
        self.selected = selection_on_filter_change(old_list, self.display_list, self.selected, self.query)

    def _reset(self) -> None:
        self.query = ""
        self.memory.clear()
        self.display_list = build_display_list(self.listing, "", self.show_hidden, self.ranker)
        self.selected = selection_on_reset(self.display_list)

    def _selected_target(self) -> tuple[Entry, Path] | None:
        entry = self.selected_entry()
        if entry is None:
            return None
        return entry, self.cwd / entry.name

    def _confirm(self) -> Effect:
        target = self._selected_target()
        if target is None:
            return NO_EFFECT
        entry, path = target
        if self.filesystem.is_directory(path):
            self._enter_directory(entry, path)
            return NO_EFFECT
        return self._open_editor(entry, path)

    def _select_and_exit_entry(self) -> Effect:
        target = self._selected_target()
        if target is None:
            return NO_EFFECT
        entry, path = target
        if not self.filesystem.is_directory(path):
            return self._open_editor(entry, path)
        try:
            self.filesystem.change_directory(path)
        except FilesystemError as exc:
            logger.warning("%s", exc)
            self.status_message = str(exc)
            return NO_EFFECT
        self.cwd = self.filesystem.current_directory()
        return self._terminate(EFFECT_EXIT_WITH_CD)

    def _enter_directory(self, entry: Entry, path: Path) -> None:
        old_cwd = self.cwd
        try:
            self.filesystem.change_directory(path)
        except FilesystemError as exc:
            logger.warning("%s", exc)
            self.status_message = str(exc)
            return
        if not entry.is_pseudo:
            self.memory.remember(old_cwd, entry.name)
        self.cwd = self.filesystem.current_directory()
        logger.debug("entered %s", self.cwd)
        self.query = ""
        self.listing = self._read_listing()
        self.display_list = build_display_list(self.listing, "", self.show_hidden, self.ranker)
        self.selected = selection_on_directory_change(self.display_list, self.cwd, self.memory)

    def _open_editor(self, entry: Entry, path: Path) -> Effect:
        if entry.is_dir or not self.filesystem.exists(path):
            logger.debug("selected entry vanished: %s", path)
            return NO_EFFECT
        self.mode = MODE_SUSPENDED
        return Effect(EFFECT_OPEN_EDITOR, path)

    def _terminate(self, kind: str) -> Effect:
        self.mode = MODE_TERMINATED
        if kind == EFFECT_EXIT_WITH_CD:
            return Effect(kind, self.cwd)
        return Effect(kind)
