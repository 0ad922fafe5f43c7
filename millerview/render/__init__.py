"""Rendering engine for the Miller-column terminal view.

Defines a read-only render context and writes fully composed ANSI frames.
Nothing here mutates navigation state; it only reads pane queries.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

from ..ansi import fit_to_width, sanitize_text, text_display_width
from ..layout import content_rows, pane_widths, scroll_start
from ..miller_model import PANE_COUNT, Entry, NavigationState
from ..ui_theme import UITheme

STATUS_HINT = "←/→ open  ↑/↓ move  q quit"
EMPTY_PANE_TEXT = "(empty)"


@dataclass(frozen=True)
class PaneView:
    """Snapshot of one pane as the renderer sees it."""

    entries: tuple[Entry, ...]
    selected: int | None
    active: bool


@dataclass(frozen=True)
class RenderContext:
    panes: tuple[PaneView, ...]
    base_path: str
    width: int
    height: int
    theme: UITheme

    @classmethod
    def from_state(cls, state: NavigationState, width: int, height: int, theme: UITheme) -> RenderContext:
        panes = tuple(
            PaneView(
                entries=state.entries(idx),
                selected=state.selected(idx),
                active=idx == state.active_pane_index,
            )
            for idx in range(PANE_COUNT)
        )
        return cls(panes=panes, base_path=state.display_base_path(), width=width, height=height, theme=theme)


def _styled(text: str, style: str, theme: UITheme) -> str:
    if not style:
        return text
    return f"{style}{text}{theme.reset}"


def format_entry_cell(entry: Entry, width: int, theme: UITheme, highlight: str = "") -> str:
    """Render one entry fitted to ``width`` columns with directory/file styling."""
    text = fit_to_width(" " + sanitize_text(entry.name), width)
    color = theme.pane_dir if entry.is_dir else theme.pane_file
    return _styled(text, highlight + color, theme)


def pane_rows(pane: PaneView, width: int, rows: int, theme: UITheme, *, show_empty_hint: bool = False) -> list[str]:
    """Return exactly ``rows`` styled cells for one pane."""
    if not pane.entries:
        cells = [" " * width for _ in range(rows)]
        if show_empty_hint and rows > 0 and width > 0:
            cells[0] = _styled(fit_to_width(" " + EMPTY_PANE_TEXT, width), theme.empty_hint, theme)
        return cells

    start = scroll_start(pane.selected, len(pane.entries), rows)
    cells: list[str] = []
    for idx in range(start, min(len(pane.entries), start + rows)):
        highlight = ""
        if idx == pane.selected:
            highlight = theme.selected_active if pane.active else theme.selected_inactive
        cells.append(format_entry_cell(pane.entries[idx], width, theme, highlight))
    while len(cells) < rows:
        cells.append(" " * width)
    return cells


def build_status_line(left_text: str, width: int, right_text: str = STATUS_HINT) -> tuple[str, str]:
    """Split the status row into ``(left, right)`` parts that fit ``width``.

    The path keeps priority; the key hint is dropped when both do not fit.
    """
    usable = max(0, width - 1)
    left = " " + sanitize_text(left_text)
    right_width = text_display_width(right_text)
    if text_display_width(left) + 1 + right_width > usable:
        return fit_to_width(left, usable), ""
    gap = usable - text_display_width(left) - right_width
    return left + " " * gap, right_text


def build_frame_lines(context: RenderContext) -> list[str]:
    """Compose every screen row (panes then status) for ``context``."""
    theme = context.theme
    rows = content_rows(context.height)
    left_width, right_width = pane_widths(context.width)
    left_pane, right_pane = context.panes
    left_cells = pane_rows(left_pane, left_width, rows, theme, show_empty_hint=True)
    right_cells = pane_rows(right_pane, right_width, rows, theme)
    divider = _styled("│", theme.divider, theme)

    lines = [f"{left}{divider}{right}" for left, right in zip(left_cells, right_cells)]
    status_left, status_right = build_status_line(context.base_path, context.width)
    lines.append(_styled(status_left, theme.status_path, theme) + _styled(status_right, theme.status_hint, theme))
    return lines


def render_frame(context: RenderContext, fd: int | None = None) -> None:
    """Write one full frame to ``fd`` (stdout by default)."""
    out = ["\033[H\033[J", "\r\n".join(build_frame_lines(context))]
    target = sys.stdout.fileno() if fd is None else fd
    os.write(target, "".join(out).encode("utf-8", errors="replace"))


__all__ = [
    "STATUS_HINT",
    "EMPTY_PANE_TEXT",
    "PaneView",
    "RenderContext",
    "format_entry_cell",
    "pane_rows",
    "build_status_line",
    "build_frame_lines",
    "render_frame",
]
