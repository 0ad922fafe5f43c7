"""Terminal control helpers for the TUI session.

Owns raw-mode lifecycle, alternate-screen switching, and cursor visibility.
"""

from __future__ import annotations

import contextlib
import os
import termios
import tty

ENTER_TUI_SEQUENCE = b"\x1b[?1049h\x1b[?25l"
EXIT_TUI_SEQUENCE = b"\x1b[?25h\x1b[?1049l"


class TerminalController:
    """Switch a tty between cooked mode and the full-screen browser mode."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state so it can be restored on exit."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)

    def enable_tui_mode(self) -> None:
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        # Alternate screen, hidden cursor.
        os.write(self.stdout_fd, ENTER_TUI_SEQUENCE)

    def disable_tui_mode(self) -> None:
        os.write(self.stdout_fd, EXIT_TUI_SEQUENCE)
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    @contextlib.contextmanager
    def raw_mode(self):
        """Bracket the browser session; the tty is restored even on errors."""
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()
