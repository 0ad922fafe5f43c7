"""Directory listing for Miller-column panes.

Reads one directory into sorted ``Entry`` rows. Read failures are expected
while browsing (permissions, vanished paths, symlink loops) and collapse to an
empty listing instead of propagating.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Entry:
    """One directory child as shown in a pane."""

    name: str
    path: Path
    is_dir: bool


def _child_is_dir(child: os.DirEntry) -> bool:
    """Return resolved directory-ness for ``child``; stat failures mean file."""
    try:
        return child.is_dir()
    except OSError:
        return False


def entry_sort_key(entry: Entry) -> bytes:
    """Byte-order sort key on the display name (uppercase before lowercase)."""
    return os.fsencode(entry.name)


def list_directory(directory: Path) -> list[Entry]:
    """List ``directory`` children sorted by display name.

    Directories get a trailing ``os.sep`` in their display name. Symlinks are
    followed when classifying. Returns ``[]`` when the directory cannot be read.
    """
    entries: list[Entry] = []
    try:
        with os.scandir(directory) as children:
            for child in children:
                is_dir = _child_is_dir(child)
                name = child.name + os.sep if is_dir else child.name
                entries.append(Entry(name=name, path=Path(child.path), is_dir=is_dir))
    except OSError:
        return []

    entries.sort(key=entry_sort_key)
    return entries


__all__ = [
    "Entry",
    "entry_sort_key",
    "list_directory",
]
