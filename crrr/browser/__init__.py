"""Browser core: display-list building, selection, scrolling, and the state machine.

Nothing in this package touches the terminal. Filesystem access goes through
the provider handed to ``NavigationStateMachine``.
"""

from __future__ import annotations

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
from .filtering import build_display_list, index_of_name
from .machine import (
    EFFECT_EXIT_WITH_CD,
    EFFECT_NONE,
    EFFECT_OPEN_EDITOR,
    EFFECT_QUIT,
    MODE_BROWSING,
    MODE_SUSPENDED,
    MODE_TERMINATED,
    NO_EFFECT,
    BrowserSnapshot,
    Effect,
    NavigationStateMachine,
    ViewportSize,
)
from .scroll import ScrollWindow, scroll_window
from .selection import DEFAULT_LARGE_JUMP_STEP, SelectionMemory

__all__ = [
    "BrowserSnapshot",
    "Command",
    "Confirm",
    "DEFAULT_LARGE_JUMP_STEP",
    "DeleteChar",
    "DeleteWord",
    "EFFECT_EXIT_WITH_CD",
    "EFFECT_NONE",
    "EFFECT_OPEN_EDITOR",
    "EFFECT_QUIT",
    "Effect",
    "InsertText",
    "Interrupt",
    "JumpToBottom",
    "JumpToTop",
    "MODE_BROWSING",
    "MODE_SUSPENDED",
    "MODE_TERMINATED",
    "MoveDown",
    "MoveUp",
    "NO_EFFECT",
    "NavigationStateMachine",
    "ResetSearch",
    "Resize",
    "ScrollWindow",
    "SelectAndExitCurrent",
    "SelectAndExitEntry",
    "SelectionMemory",
    "ToggleHidden",
    "ViewportSize",
    "build_display_list",
    "index_of_name",
    "scroll_window",
]
