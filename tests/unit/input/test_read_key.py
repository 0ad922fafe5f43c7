"""Regression tests for raw-key decoding.

Covers ESC timing, CSI/SS3 arrow forms, paging sequences, and control keys.
"""

import os
import time
import unittest

from millerview import input as input_mod


class ReadKeyTests(unittest.TestCase):
    def setUp(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def tearDown(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def _decode(self, payload: bytes, count: int = 1) -> list[str]:
        read_fd, write_fd = os.pipe()
        try:
            os.write(write_fd, payload)
            return [input_mod.read_key(read_fd, timeout_ms=20) for _ in range(count)]
        finally:
            os.close(read_fd)
            os.close(write_fd)

    def test_csi_arrows(self) -> None:
        self.assertEqual(self._decode(b"\x1b[A\x1b[B\x1b[C\x1b[D", 4), ["UP", "DOWN", "RIGHT", "LEFT"])

    def test_ss3_arrows(self) -> None:
        self.assertEqual(self._decode(b"\x1bOA\x1bOD", 2), ["UP", "LEFT"])

    def test_page_keys(self) -> None:
        self.assertEqual(self._decode(b"\x1b[5~\x1b[6~", 2), ["PAGE_UP", "PAGE_DOWN"])

    def test_home_and_end_variants(self) -> None:
        self.assertEqual(self._decode(b"\x1b[H\x1b[4~\x1b[1~", 3), ["HOME", "END", "HOME"])

    def test_unknown_tilde_code_is_escape(self) -> None:
        self.assertEqual(self._decode(b"\x1b[99~"), ["ESC"])

    def test_single_escape_returns_without_second_keypress(self) -> None:
        started = time.monotonic()
        key = self._decode(b"\x1b")[0]
        elapsed = time.monotonic() - started

        self.assertEqual(key, "ESC")
        self.assertLess(elapsed, 0.2)

    def test_escape_does_not_swallow_following_printable_key(self) -> None:
        self.assertEqual(self._decode(b"\x1bq", 2), ["ESC", "q"])

    def test_control_keys(self) -> None:
        self.assertEqual(self._decode(b"\x03\r\x7f", 3), ["CTRL_C", "ENTER", "BACKSPACE"])

    def test_multibyte_character_is_one_key(self) -> None:
        self.assertEqual(self._decode("é".encode("utf-8")), ["é"])

    def test_timeout_without_input_returns_empty(self) -> None:
        self.assertEqual(self._decode(b""), [""])


if __name__ == "__main__":
    unittest.main()
