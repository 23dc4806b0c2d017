"""Editor launch helper for opening a selected file.

Runs ``$EDITOR`` (default ``vim``) while temporarily leaving raw/alternate-screen
TUI mode. Returns an error message string instead of raising for UI-friendly
handling.
"""

from __future__ import annotations

import contextlib
import logging
import os
import shlex
import signal
import subprocess
from collections.abc import Callable
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_EDITOR = "vim"


def editor_command(environ: dict[str, str] | None = None) -> list[str]:
    """Split ``$EDITOR`` shell-style, falling back to ``vim`` when unset or blank."""
    env = os.environ if environ is None else environ
    editor_env = env.get("EDITOR", "").strip()
    try:
        cmd = shlex.split(editor_env)
    except ValueError:
        cmd = []
    return cmd or [DEFAULT_EDITOR]


@contextlib.contextmanager
def _sigint_deferred():
    """Keep Ctrl-C meant for the editor from interrupting the browser.

    A Python-level handler (unlike ``SIG_IGN``) is reset by ``exec``, so the
    child still receives SIGINT with its default disposition.
    """
    previous = signal.signal(signal.SIGINT, _ignore_signal)
    try:
        yield
    finally:
        signal.signal(signal.SIGINT, previous if previous is not None else signal.SIG_DFL)


def _ignore_signal(_signum: int, _frame: object) -> None:
    return None


def launch_editor(
    target: Path,
    suspend_tui: Callable[[], contextlib.AbstractContextManager],
    command: list[str] | None = None,
) -> str | None:
    cmd = command if command is not None else editor_command()
    logger.info("launching %s on %s", cmd[0], target)
    with suspend_tui():
        try:
            with _sigint_deferred():
                proc = subprocess.run([*cmd, str(target)], check=False)
        except OSError as exc:
            return f"Failed to launch editor: {exc}"
    if proc.returncode < 0:
        return f"Editor killed by signal {-proc.returncode}"
    if proc.returncode != 0:
        return f"Editor exited with status {proc.returncode}"
    return None
