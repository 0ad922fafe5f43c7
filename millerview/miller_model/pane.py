"""Single-pane list model: sorted entries plus an optional cursor.

Cursor moves clamp at both ends and report whether the index changed, so
callers can skip refreshing dependent panes when nothing moved.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from .fs import Entry


class Pane:
    """Ordered directory entries and the cursor into them."""

    def __init__(self, entries: Iterable[Entry] = (), selected: int | None = None) -> None:
        self.entries: tuple[Entry, ...] = tuple(entries)
        self.selected: int | None = None
        if selected is not None and 0 <= selected < len(self.entries):
            self.selected = selected

    @classmethod
    def with_first_selected(cls, entries: Iterable[Entry]) -> Pane:
        """Build a pane whose cursor starts on the first entry, if any."""
        pane = cls(entries)
        pane.select_first()
        return pane

    def __len__(self) -> int:
        return len(self.entries)

    def __repr__(self) -> str:
        return f"Pane(entries={len(self.entries)}, selected={self.selected!r})"

    def copy(self) -> Pane:
        return Pane(self.entries, self.selected)

    def selected_entry(self) -> Entry | None:
        if self.selected is None:
            return None
        return self.entries[self.selected]

    def select_first(self) -> None:
        self.selected = 0 if self.entries else None

    def unselect(self) -> None:
        self.selected = None

    def activate(self) -> None:
        """Restore a retained cursor when still in range, else select first."""
        if self.selected is not None and 0 <= self.selected < len(self.entries):
            return
        self.select_first()

    def select_path(self, path: Path) -> bool:
        """Put the cursor on the entry whose path equals ``path``.

        Leaves the pane unselected and returns ``False`` when no entry matches.
        """
        for idx, entry in enumerate(self.entries):
            if entry.path == path:
                self.selected = idx
                return True
        self.unselect()
        return False

    def _move_to(self, target: int) -> bool:
        if not self.entries:
            self.selected = None
            return False
        previous = self.selected
        self.selected = max(0, min(len(self.entries) - 1, target))
        return self.selected != previous

    def _move_by(self, delta: int) -> bool:
        if self.selected is None:
            # Non-empty pane without a cursor (e.g. parent lookup failed): land on the top row.
            return self._move_to(0)
        return self._move_to(self.selected + delta)

    def select_next(self) -> bool:
        """Move down one row; return whether the cursor changed."""
        return self._move_by(1)

    def select_prev(self) -> bool:
        """Move up one row; return whether the cursor changed."""
        return self._move_by(-1)

    def select_next_by_n(self, n: int) -> bool:
        """Move down ``n`` rows (at least one), clamped to the last entry."""
        return self._move_by(max(1, n))

    def select_prev_by_n(self, n: int) -> bool:
        """Move up ``n`` rows (at least one), clamped to the first entry."""
        return self._move_by(-max(1, n))


__all__ = ["Pane"]
