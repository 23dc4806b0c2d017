"""Terminal control helpers for the TUI session.

Owns raw-mode lifecycle, alternate-screen switching, and cursor visibility.
Restoration is guaranteed on every exit path: the ``raw_mode`` context
manager, an ``atexit`` hook, and SIGTERM/SIGHUP handlers all funnel into the
idempotent ``disable_tui_mode``.
"""

from __future__ import annotations

import atexit
import contextlib
import os
import shutil
import signal
import termios
import tty

ENTER_TUI_SEQUENCE = b"\x1b[?1049h\x1b[?25l"
LEAVE_TUI_SEQUENCE = b"\x1b[?25h\x1b[?1049l"
EXIT_SIGNALS = (signal.SIGTERM, signal.SIGHUP)


class TerminalController:
    """Manage terminal mode transitions for the browser UI."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)
        self._tui_active = False
        self._hooks_installed = False

    @property
    def tui_active(self) -> bool:
        return self._tui_active

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode with the cursor hidden."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        os.write(self.stdout_fd, ENTER_TUI_SEQUENCE)
        self._tui_active = True

    def disable_tui_mode(self) -> None:
        """Restore the main screen buffer and the saved tty attributes."""
        if not self._tui_active:
            return
        self._tui_active = False
        os.write(self.stdout_fd, LEAVE_TUI_SEQUENCE)
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    def install_exit_hooks(self) -> None:
        """Restore the terminal at interpreter exit and on termination signals."""
        if self._hooks_installed:
            return
        self._hooks_installed = True
        atexit.register(self.disable_tui_mode)
        for signum in EXIT_SIGNALS:
            signal.signal(signum, self._exit_on_signal)

    def _exit_on_signal(self, signum: int, _frame: object) -> None:
        self.disable_tui_mode()
        raise SystemExit(128 + signum)

    def size(self) -> tuple[int, int]:
        """Return ``(columns, rows)`` of the controlling terminal."""
        term = shutil.get_terminal_size((80, 24))
        return max(1, term.columns), max(1, term.lines)

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with TUI enter/exit calls."""
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()

    @contextlib.contextmanager
    def suspended(self):
        """Hand the terminal back in cooked mode for a foreground child process."""
        self.disable_tui_mode()
        try:
            yield
        finally:
            self.enable_tui_mode()
