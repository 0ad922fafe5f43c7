"""Terminal file browser with Miller-column navigation.

The navigation model (``NavigationState``, ``Pane``, ``list_directory``) is
importable without touching the terminal; ``main`` runs the CLI.
"""

from __future__ import annotations

from .miller_model import Entry, NavigationState, Pane, list_directory

__version__ = "0.1.0"


def main(argv: list[str] | None = None) -> None:
    """Run the CLI; imported lazily so model-only users skip runtime imports."""
    from .cli import main as _main

    _main(argv)


__all__ = ["Entry", "NavigationState", "Pane", "list_directory", "main", "__version__"]
