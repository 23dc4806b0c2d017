"""Closed set of input commands consumed by the navigation state machine.

The input adapter turns raw key tokens into these values; the state machine
dispatches on their type and nothing else.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MoveUp:
    large: bool = False


@dataclass(frozen=True)
class MoveDown:
    large: bool = False


@dataclass(frozen=True)
class JumpToTop:
    pass


@dataclass(frozen=True)
class JumpToBottom:
    pass


@dataclass(frozen=True)
class Confirm:
    """Enter the selected directory or edit the selected file."""


@dataclass(frozen=True)
class SelectAndExitEntry:
    """Enter the selected directory and exit, handing its path to the shell."""


@dataclass(frozen=True)
class SelectAndExitCurrent:
    """Exit immediately, handing the current directory to the shell."""


@dataclass(frozen=True)
class ToggleHidden:
    pass


@dataclass(frozen=True)
class ResetSearch:
    pass


@dataclass(frozen=True)
class InsertText:
    text: str


@dataclass(frozen=True)
class DeleteChar:
    pass


@dataclass(frozen=True)
class DeleteWord:
    pass


@dataclass(frozen=True)
class Resize:
    columns: int
    rows: int


@dataclass(frozen=True)
class Interrupt:
    """Quit without handing a directory to the shell."""


Command = (
    MoveUp
    | MoveDown
    | JumpToTop
    | JumpToBottom
    | Confirm
    | SelectAndExitEntry
    | SelectAndExitCurrent
    | ToggleHidden
    | ResetSearch
    | InsertText
    | DeleteChar
    | DeleteWord
    | Resize
    | Interrupt
)


__all__ = [
    "Command",
    "Confirm",
    "DeleteChar",
    "DeleteWord",
    "InsertText",
    "Interrupt",
    "JumpToBottom",
    "JumpToTop",
    "MoveDown",
    "MoveUp",
    "ResetSearch",
    "Resize",
    "SelectAndExitCurrent",
    "SelectAndExitEntry",
    "ToggleHidden",
]
