"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into normalized key tokens.
Handles ESC-sequence timing for arrow, paging, and home/end keys in both CSI
(``ESC [``) and SS3 (``ESC O``) forms.
"""

from __future__ import annotations

import os
import select

ESC_SEQUENCE_TIMEOUT_MS = 25
_PENDING_BYTES: list[bytes] = []

_ARROW_FINALS = {
    b"A": "UP",
    b"B": "DOWN",
    b"C": "RIGHT",
    b"D": "LEFT",
    b"H": "HOME",
    b"F": "END",
}

# ESC [ <n> ~ sequences.
_TILDE_CODES = {
    b"1": "HOME",
    b"4": "END",
    b"5": "PAGE_UP",
    b"6": "PAGE_DOWN",
    b"7": "HOME",
    b"8": "END",
}

_CONTROL_KEYS = {
    b"\x03": "CTRL_C",
    b"\r": "ENTER",
    b"\n": "ENTER",
    b"\t": "TAB",
    b"\x08": "BACKSPACE",
    b"\x7f": "BACKSPACE",
}


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _read_tilde_sequence(fd: int, first: bytes) -> str:
    """Decode ``ESC [ <digits> ~``; ``first`` is the first digit already read."""
    digits = first
    while True:
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            return "ESC"
        if part == b"~":
            break
        if not part.isdigit() and part != b";":
            return "ESC"
        digits += part
        if len(digits) > 8:
            return "ESC"
    code = digits.split(b";", 1)[0]
    return _TILDE_CODES.get(code, "ESC")


def _read_utf8_continuation(fd: int, lead: bytes) -> bytes:
    """Collect remaining bytes of a multi-byte UTF-8 character."""
    first = lead[0]
    if first >= 0xF0:
        needed = 3
    elif first >= 0xE0:
        needed = 2
    elif first >= 0xC0:
        needed = 1
    else:
        return lead
    data = lead
    for _ in range(needed):
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            break
        data += part
    return data


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Read one key token from ``fd``.

    Returns ``""`` on timeout or EOF, a named token such as ``"UP"`` or
    ``"PAGE_DOWN"`` for special keys, and the decoded character otherwise.
    """
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        if timeout_ms is not None:
            ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
            if not ready:
                return ""

        ch = os.read(fd, 1)
        if not ch:
            return ""

    if ch in _CONTROL_KEYS:
        return _CONTROL_KEYS[ch]

    if ch != b"\x1b":
        return _read_utf8_continuation(fd, ch).decode("utf-8", errors="replace")

    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq not in {b"[", b"O"}:
        _PENDING_BYTES.append(seq)
        return "ESC"
    introducer = seq
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq in _ARROW_FINALS:
        return _ARROW_FINALS[seq]
    if introducer == b"[" and seq.isdigit():
        return _read_tilde_sequence(fd, seq)
    return "ESC"


__all__ = [
    "ESC_SEQUENCE_TIMEOUT_MS",
    "read_key",
]
