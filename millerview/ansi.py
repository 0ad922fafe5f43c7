"""Display-width text shaping for pane rows.

Pane cells hold plain filenames that may include wide (CJK) characters,
combining marks, or control bytes. These helpers measure and fit them to a
fixed number of terminal columns before styling is applied.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
CONTROL_REPLACEMENT = "?"


def char_display_width(ch: str) -> int:
    """Return terminal column width for one printable character.

    Combining marks consume no columns and East Asian wide/fullwidth
    characters consume two.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def sanitize_text(text: str) -> str:
    """Replace control and unencodable characters so they cannot move the cursor."""
    out: list[str] = []
    for ch in text:
        category = unicodedata.category(ch)
        if category in {"Cc", "Cs"}:
            out.append(CONTROL_REPLACEMENT)
        else:
            out.append(ch)
    return "".join(out)


def text_display_width(text: str) -> int:
    return sum(char_display_width(ch) for ch in text)


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


def fit_to_width(text: str, max_cols: int, ellipsis: str = "~") -> str:
    """Clip or pad plain ``text`` to exactly ``max_cols`` display columns.

    Clipped text ends with ``ellipsis`` when it fits. A wide character that
    would straddle the last column is replaced by padding.
    """
    if max_cols <= 0:
        return ""
    width = text_display_width(text)
    if width <= max_cols:
        return text + " " * (max_cols - width)

    marker_width = text_display_width(ellipsis)
    budget = max_cols - marker_width if marker_width < max_cols else max_cols
    out: list[str] = []
    col = 0
    for ch in text:
        w = char_display_width(ch)
        if col + w > budget:
            break
        out.append(ch)
        col += w
    if budget < max_cols:
        out.append(ellipsis)
        col += marker_width
    out.append(" " * (max_cols - col))
    return "".join(out)


__all__ = [
    "ANSI_ESCAPE_RE",
    "CONTROL_REPLACEMENT",
    "char_display_width",
    "sanitize_text",
    "text_display_width",
    "strip_ansi",
    "fit_to_width",
]
