"""Browser session setup: wire state, terminal, input, and rendering."""

from __future__ import annotations

import os
import shutil
import sys

from ..input import read_key
from ..miller_model import NavigationState
from ..render import RenderContext, render_frame
from ..ui_theme import UITheme
from .loop import RuntimeLoopCallbacks, run_main_loop
from .terminal import TerminalController


def format_listing(state: NavigationState) -> str:
    """Plain listing of the left pane, one entry per line."""
    return "".join(f"{entry.name}\n" for entry in state.entries(0))


def run_browser(state: NavigationState, theme: UITheme, print_only: bool = False) -> None:
    """Run the interactive browser, or print the listing when not on a tty."""
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    if print_only or not os.isatty(stdin_fd) or not os.isatty(stdout_fd):
        sys.stdout.write(format_listing(state))
        return

    def render(current: NavigationState, columns: int, lines: int) -> None:
        render_frame(RenderContext.from_state(current, columns, lines, theme), stdout_fd)

    callbacks = RuntimeLoopCallbacks(
        read_key=lambda timeout_ms: read_key(stdin_fd, timeout_ms=timeout_ms),
        terminal_size=lambda: shutil.get_terminal_size((80, 24)),
        render=render,
    )
    run_main_loop(state, TerminalController(stdin_fd, stdout_fd), callbacks)


__all__ = ["format_listing", "run_browser"]
