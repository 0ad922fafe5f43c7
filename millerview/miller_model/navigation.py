"""Miller-column navigation state.

Holds a fixed window of ``PANE_COUNT`` panes anchored at ``base_path`` and
the index of the pane whose cursor responds to up/down. Every mutation keeps
the pane right of the active one in sync with the active selection (live
preview), and shifts the window outward/inward when moving past its edges.

Directory reads go through an injectable ``reader`` so tests can count or
fake listings; recoverable filesystem failures never raise from here.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

from .fs import Entry, list_directory
from .pane import Pane

PANE_COUNT = 2

DirectoryReader = Callable[[Path], Sequence[Entry]]


def parent_directory(path: Path) -> Path | None:
    """Return the parent of ``path``, or ``None`` at a filesystem root."""
    parent = path.parent
    if parent == path:
        return None
    return parent


class NavigationState:
    """Window of panes, active pane index, and base path."""

    def __init__(self, base_path: Path, reader: DirectoryReader = list_directory) -> None:
        self._reader = reader
        self.base_path = Path(base_path)
        self.active_pane_index = 0
        self.panes: list[Pane] = [Pane() for _ in range(PANE_COUNT)]
        self.panes[0] = Pane.with_first_selected(self._reader(self.base_path))
        self._refresh_pane_right_of_active()

    @classmethod
    def from_cwd(cls, reader: DirectoryReader = list_directory) -> NavigationState:
        """Anchor a new state at the process working directory.

        ``OSError`` from ``Path.cwd()`` propagates; there is nothing to browse
        without a starting directory.
        """
        return cls(Path.cwd(), reader=reader)

    # Queries

    def display_base_path(self) -> str:
        return str(self.base_path)

    def entries(self, pane_index: int) -> tuple[Entry, ...]:
        if not 0 <= pane_index < PANE_COUNT:
            return ()
        return self.panes[pane_index].entries

    def selected(self, pane_index: int) -> int | None:
        """Return the live cursor of ``pane_index``.

        Panes right of the active one may retain a cursor from earlier
        navigation; it is not a live selection and is reported as ``None``.
        """
        if not 0 <= pane_index < PANE_COUNT or pane_index > self.active_pane_index:
            return None
        return self.panes[pane_index].selected

    @property
    def active_pane(self) -> Pane:
        return self.panes[self.active_pane_index]

    def selected_entry(self) -> Entry | None:
        return self.active_pane.selected_entry()

    def has_space_to_right(self) -> bool:
        return self.active_pane_index < PANE_COUNT - 1

    # Mutations

    def on_up(self) -> bool:
        return self._after_cursor_move(self.active_pane.select_prev())

    def on_down(self) -> bool:
        return self._after_cursor_move(self.active_pane.select_next())

    def on_page_up(self, distance: int) -> bool:
        return self._after_cursor_move(self.active_pane.select_prev_by_n(distance))

    def on_page_down(self, distance: int) -> bool:
        return self._after_cursor_move(self.active_pane.select_next_by_n(distance))

    def on_left(self) -> bool:
        """Activate the pane to the left, shifting the window outward at pane 0."""
        if self.active_pane_index > 0:
            self.active_pane_index -= 1
            return True

        parent = parent_directory(self.base_path)
        if parent is None:
            return False

        new_left = Pane(self._reader(parent))
        if new_left.select_path(self.base_path):
            new_right = self.panes[0].copy()
        else:
            new_right = Pane()
        self.panes = [new_left, new_right]
        self.base_path = parent
        return True

    def on_right(self) -> bool:
        """Enter the selected directory, shifting the window inward at the last pane."""
        selected = self.selected_entry()
        if selected is None or not selected.is_dir:
            return False

        if self.has_space_to_right():
            self.active_pane_index += 1
            self.active_pane.activate()
            return True

        new_base = parent_directory(selected.path)
        if new_base is None:
            return False

        entered = Pane.with_first_selected(self._reader(selected.path))
        self.panes = self.panes[1:] + [entered]
        self.base_path = new_base
        return True

    def _after_cursor_move(self, moved: bool) -> bool:
        if moved:
            self._refresh_pane_right_of_active()
        return moved

    def _refresh_pane_right_of_active(self) -> None:
        if not self.has_space_to_right():
            return
        selected = self.active_pane.selected_entry()
        if selected is None or not selected.is_dir:
            self.panes[self.active_pane_index + 1] = Pane()
            return
        self.panes[self.active_pane_index + 1] = Pane.with_first_selected(self._reader(selected.path))


__all__ = [
    "PANE_COUNT",
    "DirectoryReader",
    "NavigationState",
    "parent_directory",
]
