"""Viewport scrolling for the entry list."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScrollWindow:
    """Contiguous visible slice ``[start, start + count)`` of the display list."""

    start: int
    count: int

    @property
    def stop(self) -> int:
        return self.start + self.count

    def __contains__(self, index: object) -> bool:
        return isinstance(index, int) and self.start <= index < self.stop


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


def scroll_window(selected: int, total: int, rows: int) -> ScrollWindow:
    """Center ``selected`` in a ``rows``-tall window, pinned to both list ends.

    Once the list is longer than the viewport the window never shows blank
    rows past the last entry.
    """
    rows = max(1, rows)
    total = max(0, total)
    start = clamp(selected - rows // 2, 0, max(0, total - rows))
    return ScrollWindow(start=start, count=max(0, min(rows, total - start)))
