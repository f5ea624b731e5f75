"""Tests for ANSI width measurement and background helpers."""

from __future__ import annotations

import unittest

from lis.ansi import (
    RESET,
    apply_persistent_bg,
    bg_256,
    fg_hex,
    pad_with_background,
    strip_ansi,
    style,
    visible_width,
)


class VisibleWidthTests(unittest.TestCase):
    def test_escape_sequences_have_no_width(self) -> None:
        styled = style("hello", "#ff0000", bold=True)
        self.assertNotEqual(styled, "hello")
        self.assertEqual(visible_width(styled), 5)
        self.assertEqual(strip_ansi(styled), "hello")

    def test_unterminated_escape_has_no_width(self) -> None:
        self.assertEqual(visible_width("ab\x1b[38;5"), 2)
        self.assertEqual(strip_ansi("ab\x1b[38;5"), "ab")

    def test_multibyte_characters_count_one_cell_each(self) -> None:
        self.assertEqual(visible_width("│ ├ └ ✓"), 7)
        self.assertEqual(visible_width("\ue5ff x"), 3)

    def test_style_without_color_or_bold_is_identity(self) -> None:
        self.assertEqual(style("plain"), "plain")

    def test_fg_hex_emits_truecolor_sequence(self) -> None:
        self.assertEqual(fg_hex("#0a0B0c"), "\x1b[38;2;10;11;12m")
        with self.assertRaises(ValueError):
            fg_hex("#fff")


class BackgroundTests(unittest.TestCase):
    def test_persistent_background_follows_every_reset(self) -> None:
        text = f"a{RESET}b{RESET}"
        self.assertEqual(apply_persistent_bg(text, 17), f"a{RESET}{bg_256(17)}b{RESET}{bg_256(17)}")
        self.assertEqual(apply_persistent_bg(text, -1), text)

    def test_pad_with_background_fills_to_width_and_reasserts_page_bg(self) -> None:
        padded = pad_with_background(style("ab", "#ffffff"), 236, 10, page_bg=234)

        self.assertTrue(padded.startswith(bg_256(236)))
        self.assertTrue(padded.endswith(RESET + bg_256(234)))
        self.assertEqual(visible_width(padded), 10)

    def test_pad_never_truncates_wide_rows(self) -> None:
        padded = pad_with_background("abcdef", 1, 3)
        self.assertEqual(strip_ansi(padded), "abcdef")


if __name__ == "__main__":
    unittest.main()
