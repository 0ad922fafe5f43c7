"""Tests for display-width fitting, screen geometry, and theme selection."""

from __future__ import annotations

import unittest

from millerview import ansi as ansi_mod
from millerview import layout
from millerview.ui_theme import DEFAULT_THEME, OCEAN_THEME, PLAIN_THEME, available_theme_names, resolve_theme


class FitToWidthTests(unittest.TestCase):
    def test_short_text_is_padded(self) -> None:
        self.assertEqual(ansi_mod.fit_to_width("ab", 5), "ab   ")

    def test_long_text_is_clipped_with_marker(self) -> None:
        self.assertEqual(ansi_mod.fit_to_width("abcdef", 4), "abc~")

    def test_single_column_has_no_room_for_marker(self) -> None:
        self.assertEqual(ansi_mod.fit_to_width("abcdef", 1), "a")

    def test_wide_characters_count_two_columns(self) -> None:
        self.assertEqual(ansi_mod.text_display_width("日本"), 4)
        self.assertEqual(ansi_mod.fit_to_width("日本語", 4), "日~ ")

    def test_combining_marks_take_no_columns(self) -> None:
        self.assertEqual(ansi_mod.text_display_width("é"), 1)

    def test_zero_width_is_empty(self) -> None:
        self.assertEqual(ansi_mod.fit_to_width("abc", 0), "")

    def test_sanitize_replaces_control_characters(self) -> None:
        self.assertEqual(ansi_mod.sanitize_text("a\tb\nc\x7f"), "a?b?c?")

    def test_sanitize_replaces_undecodable_surrogates(self) -> None:
        self.assertEqual(ansi_mod.sanitize_text("caf\udce9"), "caf?")


class LayoutTests(unittest.TestCase):
    def test_pane_widths_split_around_divider(self) -> None:
        self.assertEqual(layout.pane_widths(81), (40, 40))
        self.assertEqual(layout.pane_widths(80), (39, 40))
        self.assertEqual(layout.pane_widths(0), (0, 0))

    def test_page_distance_is_one_screen_minus_one(self) -> None:
        self.assertEqual(layout.content_rows(24), 23)
        self.assertEqual(layout.page_distance(24), 22)
        self.assertEqual(layout.page_distance(1), 1)

    def test_scroll_start_keeps_cursor_on_screen(self) -> None:
        self.assertEqual(layout.scroll_start(None, 100, 10), 0)
        self.assertEqual(layout.scroll_start(3, 100, 10), 0)
        self.assertEqual(layout.scroll_start(15, 100, 10), 6)
        self.assertEqual(layout.scroll_start(99, 100, 10), 90)
        self.assertEqual(layout.scroll_start(4, 5, 10), 0)


class ThemeTests(unittest.TestCase):
    def test_resolve_theme_by_name(self) -> None:
        self.assertIs(resolve_theme("ocean"), OCEAN_THEME)
        self.assertIs(resolve_theme(" OCEAN "), OCEAN_THEME)
        self.assertIs(resolve_theme(None), DEFAULT_THEME)
        self.assertIs(resolve_theme("unknown"), DEFAULT_THEME)

    def test_no_color_forces_plain_theme(self) -> None:
        self.assertIs(resolve_theme("ocean", no_color=True), PLAIN_THEME)

    def test_plain_theme_is_not_selectable_by_name(self) -> None:
        self.assertEqual(available_theme_names(), ("default", "ocean"))
        self.assertIs(resolve_theme("plain"), DEFAULT_THEME)


if __name__ == "__main__":
    unittest.main()
