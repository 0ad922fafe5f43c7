"""Filesystem-backed Miller-column model: entries, panes, and navigation."""

from .fs import Entry, entry_sort_key, list_directory
from .navigation import PANE_COUNT, DirectoryReader, NavigationState, parent_directory
from .pane import Pane

__all__ = [
    "Entry",
    "entry_sort_key",
    "list_directory",
    "Pane",
    "PANE_COUNT",
    "DirectoryReader",
    "NavigationState",
    "parent_directory",
]
