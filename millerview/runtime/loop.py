"""Main interactive event loop for the terminal UI.

Reads one key at a time, applies it to the navigation state, and redraws when
state or terminal size changed. Each key is fully handled (including any
directory reads) before the next one is read.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass

from ..keys import NavigationKeyMap
from ..layout import page_distance
from ..miller_model import NavigationState
from .terminal import TerminalController

KEY_POLL_TIMEOUT_MS = 250


@dataclass(frozen=True)
class RuntimeLoopCallbacks:
    """Injected I/O used by ``run_event_cycle``.

    Keeping terminal reads and frame writes behind callbacks lets the cycle
    run against scripted keys in tests.
    """

    read_key: Callable[[int], str]
    terminal_size: Callable[[], os.terminal_size]
    render: Callable[[NavigationState, int, int], None]


def run_event_cycle(state: NavigationState, callbacks: RuntimeLoopCallbacks) -> None:
    """Process keys until a quit key arrives.

    ``read_key`` returning ``""`` means no key before the poll timeout; the
    cycle then only checks for a resize.
    """
    term = callbacks.terminal_size()
    keymap = NavigationKeyMap(state, lambda: page_distance(term.lines))
    dirty = True
    while True:
        current = callbacks.terminal_size()
        if current != term:
            term = current
            dirty = True
        if dirty:
            callbacks.render(state, term.columns, term.lines)
            dirty = False

        key = callbacks.read_key(KEY_POLL_TIMEOUT_MS)
        if not key:
            continue
        if keymap.handle(key):
            return
        dirty = keymap.changed


def run_main_loop(state: NavigationState, terminal: TerminalController, callbacks: RuntimeLoopCallbacks) -> None:
    """Run the event cycle inside raw alternate-screen mode."""
    with terminal.raw_mode():
        run_event_cycle(state, callbacks)


__all__ = [
    "KEY_POLL_TIMEOUT_MS",
    "RuntimeLoopCallbacks",
    "run_event_cycle",
    "run_main_loop",
]
