"""Regression tests for raw-key decoding and the prompt line editor.

Covers ESC timing, arrow sequences, control-key token mapping, UTF-8 input,
and end-of-input handling.
"""

from __future__ import annotations

import os
import time
import unittest

from lis.errors import KeyReadError
from lis.input import reader as input_mod
from lis.input.line_editor import read_line


class ReadKeyRegressionTests(unittest.TestCase):
    def setUp(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def tearDown(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def _read_all(self, data: bytes, count: int) -> list[str]:
        read_fd, write_fd = os.pipe()
        try:
            os.write(write_fd, data)
            return [input_mod.read_key(read_fd) for _ in range(count)]
        finally:
            os.close(read_fd)
            os.close(write_fd)

    def test_single_escape_returns_esc_without_second_keypress(self) -> None:
        started = time.monotonic()
        keys = self._read_all(b"\x1b", 1)
        elapsed = time.monotonic() - started

        self.assertEqual(keys, ["ESC"])
        self.assertLess(elapsed, 0.2)

    def test_arrow_sequences(self) -> None:
        self.assertEqual(
            self._read_all(b"\x1b[A\x1b[B\x1b[C\x1b[D\x1bOA", 5),
            ["UP", "DOWN", "RIGHT", "LEFT", "UP"],
        )

    def test_escape_does_not_swallow_following_printable_key(self) -> None:
        self.assertEqual(self._read_all(b"\x1ba", 2), ["ESC", "a"])

    def test_unknown_csi_sequence_is_consumed_whole(self) -> None:
        self.assertEqual(self._read_all(b"\x1b[3~j", 2), ["ESC", "j"])

    def test_control_tokens(self) -> None:
        self.assertEqual(
            self._read_all(b"\r\n\x03\x0e\x10\x7f\x08\t", 8),
            ["ENTER", "ENTER", "CTRL_C", "CTRL_N", "CTRL_P", "BACKSPACE", "BACKSPACE", "TAB"],
        )

    def test_printable_and_multibyte_characters(self) -> None:
        self.assertEqual(self._read_all("q é ✓".encode("utf-8"), 5), ["q", " ", "é", " ", "✓"])

    def test_invalid_utf8_raises(self) -> None:
        for data in (b"\xff", b"\xc3("):
            with self.subTest(data=data):
                with self.assertRaises(KeyReadError):
                    self._read_all(data, 1)

    def test_end_of_input_raises(self) -> None:
        read_fd, write_fd = os.pipe()
        os.close(write_fd)
        try:
            with self.assertRaises(KeyReadError):
                input_mod.read_key(read_fd)
        finally:
            os.close(read_fd)


class ReadLineTests(unittest.TestCase):
    def _run(self, keys: list[str]) -> tuple[str, str]:
        queue = list(keys)
        written: list[str] = []
        result = read_line("Name: ", lambda: queue.pop(0), written.append)
        return result, "".join(written)

    def test_enter_returns_typed_text(self) -> None:
        result, screen = self._run(["a", "b", "ENTER"])
        self.assertEqual(result, "ab")
        self.assertEqual(screen, "\r\nName: ab")

    def test_backspace_edits_and_echoes_erase(self) -> None:
        result, screen = self._run(["a", "b", "BACKSPACE", "c", "ENTER"])
        self.assertEqual(result, "ac")
        self.assertIn("\b \b", screen)

    def test_backspace_on_empty_line_does_nothing(self) -> None:
        result, screen = self._run(["BACKSPACE", "x", "ENTER"])
        self.assertEqual(result, "x")
        self.assertNotIn("\b", screen)

    def test_escape_and_ctrl_c_cancel(self) -> None:
        self.assertEqual(self._run(["a", "ESC"])[0], "")
        self.assertEqual(self._run(["a", "CTRL_C"])[0], "")

    def test_named_tokens_are_ignored(self) -> None:
        result, _ = self._run(["UP", "x", "TAB", "ENTER"])
        self.assertEqual(result, "x")


if __name__ == "__main__":
    unittest.main()
