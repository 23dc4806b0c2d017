"""Rendering of browser snapshots into full ANSI frames.

The frame layout is: working-directory header, a spacer row, the scroll
window of entries, a status row, and the search prompt. ``build_frame`` is
pure; ``render_snapshot`` writes the frame to the terminal in one call.
"""

from __future__ import annotations

import os
import sys

from .browser import BrowserSnapshot
from .file_model import Entry
from .filetypes import entry_type_label
from .textwidth import clip_text, display_width, fit_text, sanitize

RESET = "\033[0m"
REVERSE = "\033[7m"
HEADER_STYLE = "\033[45;97m"
DIRECTORY_STYLE = "\033[44;97m"
PROMPT_PREFIX = "> "
SELECTION_MARKER = ">"
HELP_HINT = "? hidden  / reset  > cd  < cd here"


def selected_with_ansi(text: str) -> str:
    """Apply selection styling without discarding existing ANSI colors."""
    if not text:
        return text
    # Keep reverse video active even when the text contains internal resets.
    return REVERSE + text.replace(RESET, RESET + REVERSE) + RESET


def format_entry_row(entry: Entry, selected: bool, width: int) -> str:
    """Format one list row: selection marker, then the padded, styled name."""
    marker = SELECTION_MARKER if selected else " "
    label = clip_text(f" {sanitize(entry.name)} ", max(0, width - 1))
    if entry.is_dir:
        label = DIRECTORY_STYLE + label + RESET
    row = marker + label
    if selected:
        row = selected_with_ansi(row)
    return row


def build_status_line(left_text: str, width: int, right_text: str = HELP_HINT) -> str:
    usable = max(1, width - 1)
    right_cols = display_width(right_text)
    if usable <= right_cols:
        return clip_text(right_text, usable)
    left = clip_text(left_text, max(0, usable - right_cols - 1))
    gap = " " * (usable - display_width(left) - right_cols)
    return f"{left}{gap}{right_text}"


def status_text(snapshot: BrowserSnapshot) -> str:
    if snapshot.status_message:
        return sanitize(snapshot.status_message)
    position = f"{snapshot.selected}/{len(snapshot.entries) - 1}"
    hidden = "hidden shown" if snapshot.show_hidden else "hidden off"
    label = entry_type_label(snapshot.selected_entry)
    return f"{position}  {hidden}  {label}".rstrip()


def build_frame(snapshot: BrowserSnapshot) -> list[str]:
    """Return the screen rows for ``snapshot``, exactly ``viewport.rows`` long."""
    width = max(1, snapshot.viewport.columns)
    rows: list[str] = [HEADER_STYLE + clip_text(sanitize(str(snapshot.cwd)), width) + RESET, ""]
    for idx, entry in snapshot.visible_entries():
        rows.append(format_entry_row(entry, idx == snapshot.selected, width))
    footer = [
        REVERSE + build_status_line(status_text(snapshot), width) + RESET,
        REVERSE + fit_text(PROMPT_PREFIX + sanitize(snapshot.query), width - 1) + RESET,
    ]
    body_rows = max(0, snapshot.viewport.rows - len(footer))
    rows = rows[:body_rows]
    rows.extend("" for _ in range(body_rows - len(rows)))
    rows.extend(footer)
    return rows[-snapshot.viewport.rows :] if len(rows) > snapshot.viewport.rows else rows


def render_snapshot(snapshot: BrowserSnapshot, stdout_fd: int | None = None) -> None:
    fd = sys.stdout.fileno() if stdout_fd is None else stdout_fd
    frame = "\033[H\033[J" + "\r\n".join(build_frame(snapshot))
    os.write(fd, frame.encode("utf-8", errors="replace"))
