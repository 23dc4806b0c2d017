"""Key-token to command mapping.

A ``KeyMap`` is a small dispatch table from normalized key tokens (as produced
by ``read_key``) to browser commands. Printable text that is not bound to a
command becomes ``InsertText``.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..browser.commands import (
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
    SelectAndExitCurrent,
    SelectAndExitEntry,
    ToggleHidden,
)


@dataclass(frozen=True)
class KeyBinding:
    """Mapping from one or more key tokens to a single command factory."""

    keys: tuple[str, ...]
    command: Callable[[], Command]


class KeyMap:
    """Dispatch table from key tokens to command factories."""

    def __init__(self) -> None:
        self._bindings: dict[str, Callable[[], Command]] = {}

    def bind(self, binding: KeyBinding) -> KeyMap:
        """Register one binding, overwriting existing commands for the same keys."""
        for key in binding.keys:
            self._bindings[key] = binding.command
        return self

    def bind_all(self, *bindings: KeyBinding) -> KeyMap:
        for binding in bindings:
            self.bind(binding)
        return self

    def command_for(self, key: str) -> Command | None:
        """Return the command for ``key``, treating unbound printable text as input."""
        factory = self._bindings.get(key)
        if factory is not None:
            return factory()
        if is_text_key(key):
            return InsertText(key)
        return None


def is_text_key(key: str) -> bool:
    """Return whether ``key`` is one typed character rather than a named token."""
    return len(key) == 1 and key.isprintable()


def default_keymap() -> KeyMap:
    """Return the standard bindings for the browser."""
    return KeyMap().bind_all(
        KeyBinding(("UP",), MoveUp),
        KeyBinding(("DOWN",), MoveDown),
        KeyBinding(("SHIFT_UP", "PAGE_UP"), lambda: MoveUp(large=True)),
        KeyBinding(("SHIFT_DOWN", "PAGE_DOWN"), lambda: MoveDown(large=True)),
        KeyBinding(("ALT_UP", "HOME"), JumpToTop),
        KeyBinding(("ALT_DOWN", "END"), JumpToBottom),
        KeyBinding(("ENTER",), Confirm),
        KeyBinding((">",), SelectAndExitEntry),
        KeyBinding(("<",), SelectAndExitCurrent),
        KeyBinding(("?",), ToggleHidden),
        KeyBinding(("/",), ResetSearch),
        KeyBinding(("BACKSPACE", "DELETE"), DeleteChar),
        KeyBinding(("ALT_BACKSPACE", "CTRL_W"), DeleteWord),
        KeyBinding(("CTRL_C",), Interrupt),
    )
