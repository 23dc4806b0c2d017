"""Composition root wiring filesystem, state machine, terminal, and loop."""

from __future__ import annotations

import logging
import sys
from functools import partial
from pathlib import Path

from ..browser import EFFECT_EXIT_WITH_CD, NavigationStateMachine, SelectionMemory, ViewportSize
from ..config import BrowserConfig
from ..editor import launch_editor
from ..exit_file import remove_stale_output, write_exit_directory
from ..file_model import FilesystemError, FilesystemProvider, LocalFilesystem
from ..input import default_keymap
from ..render import render_snapshot
from ..search import build_ranker
from ..terminal import TerminalController
from .loop import RuntimeLoopCallbacks, run_main_loop

logger = logging.getLogger(__name__)

FALLBACK_DIRECTORY = Path("/")


def enter_start_directory(filesystem: FilesystemProvider, start_path: Path | None) -> None:
    """Change into ``start_path`` when it is a directory; anything else is ignored."""
    if start_path is None or not filesystem.is_directory(start_path):
        return
    try:
        filesystem.change_directory(start_path)
    except FilesystemError as exc:
        logger.warning("ignoring start path: %s", exc)


def ensure_working_directory(filesystem: FilesystemProvider, fallback: Path = FALLBACK_DIRECTORY) -> Path:
    """Return the process cwd, moving to ``fallback`` when it has been deleted."""
    try:
        return filesystem.current_directory()
    except FilesystemError as exc:
        logger.warning("%s; starting in %s", exc, fallback)
    filesystem.change_directory(fallback)
    return filesystem.current_directory()


def build_machine(
    config: BrowserConfig,
    filesystem: FilesystemProvider,
    viewport: ViewportSize,
) -> NavigationStateMachine:
    return NavigationStateMachine(
        filesystem,
        build_ranker(config.match_mode, config.fuzzy_threshold),
        SelectionMemory(),
        show_hidden=config.show_hidden,
        viewport=viewport,
        large_jump_step=config.large_jump_step,
    )


def run_browser(config: BrowserConfig) -> int:
    """Run one interactive session and return the process exit status."""
    filesystem = LocalFilesystem()
    try:
        remove_stale_output(config.output_path)
    except OSError as exc:
        logger.warning("cannot remove %s: %s", config.output_path, exc)
    enter_start_directory(filesystem, config.start_path)
    ensure_working_directory(filesystem)

    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    terminal = TerminalController(stdin_fd, stdout_fd)
    terminal.install_exit_hooks()
    columns, rows = terminal.size()
    machine = build_machine(config, filesystem, ViewportSize(columns, rows))

    callbacks = RuntimeLoopCallbacks(
        render=partial(render_snapshot, stdout_fd=stdout_fd),
        launch_editor_for_path=partial(
            launch_editor,
            suspend_tui=terminal.suspended,
            command=list(config.editor),
        ),
    )
    effect = run_main_loop(
        machine,
        terminal,
        stdin_fd,
        default_keymap(),
        callbacks,
        key_timeout_ms=config.key_timeout_ms,
    )

    if effect.kind != EFFECT_EXIT_WITH_CD or effect.path is None:
        return 0
    try:
        write_exit_directory(config.output_path, effect.path)
    except OSError as exc:
        sys.stderr.write(f"crrr: cannot write {config.output_path}: {exc}\n")
        return 1
    return 0
