"""Screen geometry for the two-pane view.

One status row sits under the panes; panes split the remaining width evenly
around a one-column divider.
"""

from __future__ import annotations

STATUS_ROWS = 1
DIVIDER_COLS = 1


def content_rows(term_lines: int) -> int:
    """Rows available for pane entries."""
    return max(1, term_lines - STATUS_ROWS)


def page_distance(term_lines: int) -> int:
    """Cursor distance for PageUp/PageDown: one screen minus one row of overlap."""
    return max(1, content_rows(term_lines) - 1)


def pane_widths(term_columns: int) -> tuple[int, int]:
    """Return ``(left_width, right_width)`` excluding the divider."""
    usable = max(0, term_columns - DIVIDER_COLS)
    left = usable // 2
    return left, usable - left


def scroll_start(selected: int | None, entry_count: int, rows: int) -> int:
    """First visible entry index that keeps ``selected`` on screen.

    Without a cursor the pane shows its top. With one, the view scrolls just
    enough to keep the cursor on the last visible row.
    """
    if selected is None or rows <= 0 or entry_count <= rows:
        return 0
    start = max(0, selected - rows + 1)
    return min(start, entry_count - rows)


__all__ = [
    "STATUS_ROWS",
    "DIVIDER_COLS",
    "content_rows",
    "page_distance",
    "pane_widths",
    "scroll_start",
]
