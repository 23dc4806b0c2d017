"""Main interactive event loop for the terminal UI.

Each iteration folds terminal resizes into the state machine, renders when
something changed, then reads and dispatches one key. Effects that leave the
browser end the loop; the editor effect suspends and resumes it.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from ..browser import (
    EFFECT_EXIT_WITH_CD,
    EFFECT_OPEN_EDITOR,
    EFFECT_QUIT,
    BrowserSnapshot,
    Effect,
    NavigationStateMachine,
    Resize,
)
from ..input import KeyMap, read_key
from ..terminal import TerminalController

TERMINATING_EFFECTS = frozenset({EFFECT_EXIT_WITH_CD, EFFECT_QUIT})


@dataclass(frozen=True)
class RuntimeLoopCallbacks:
    """Injected operations used by ``run_main_loop``."""

    render: Callable[[BrowserSnapshot], None]
    launch_editor_for_path: Callable[[Path], str | None]


def normalize_enter(key: str, skip_next_lf: bool) -> tuple[str | None, bool]:
    """Collapse CR, LF, and CRLF into one ``ENTER`` token.

    Returns ``(key, skip_next_lf)``; ``key`` is ``None`` when the token is the
    LF half of a CRLF pair and must be dropped.
    """
    if key == "ENTER_LF" and skip_next_lf:
        return None, False
    if key == "ENTER_CR":
        return "ENTER", True
    if key == "ENTER_LF":
        return "ENTER", False
    return key, False


def sync_viewport(machine: NavigationStateMachine, terminal: TerminalController) -> bool:
    """Feed a terminal size change into the machine; return whether it changed."""
    columns, rows = terminal.size()
    viewport = machine.viewport
    if (columns, rows) == (viewport.columns, viewport.rows):
        return False
    machine.handle(Resize(columns, rows))
    return True


def run_main_loop(
    machine: NavigationStateMachine,
    terminal: TerminalController,
    stdin_fd: int,
    keymap: KeyMap,
    callbacks: RuntimeLoopCallbacks,
    key_timeout_ms: int = 120,
) -> Effect:
    """Run the browser until a terminating effect and return it."""
    dirty = True
    skip_next_lf = False

    with terminal.raw_mode():
        while True:
            if sync_viewport(machine, terminal):
                dirty = True
            if dirty:
                callbacks.render(machine.snapshot)
                dirty = False

            try:
                raw_key = read_key(stdin_fd, timeout_ms=key_timeout_ms)
            except KeyboardInterrupt:
                continue
            if raw_key == "":
                continue
            key, skip_next_lf = normalize_enter(raw_key, skip_next_lf)
            if key is None:
                continue

            command = keymap.command_for(key)
            if command is None:
                continue
            effect = machine.handle(command)
            dirty = True

            if effect.kind == EFFECT_OPEN_EDITOR and effect.path is not None:
                error = callbacks.launch_editor_for_path(effect.path)
                machine.resume_from_editor(error)
                continue
            if effect.kind in TERMINATING_EFFECTS:
                return effect
