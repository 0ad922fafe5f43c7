"""CLI entrypoint behavior tests.

Verifies the working-directory anchor, option/config precedence for themes,
and the fatal exit when the working directory is unavailable.
"""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from millerview import cli
from millerview.ui_theme import DEFAULT_THEME, OCEAN_THEME, PLAIN_THEME


class CliEntryTests(unittest.TestCase):
    def _run_main(self, argv: list[str], *, theme_name: str | None = None, no_color: bool = False):
        with mock.patch("millerview.cli.run_browser") as run_browser, mock.patch(
            "millerview.cli.load_theme_name", return_value=theme_name
        ), mock.patch("millerview.cli.load_no_color", return_value=no_color):
            cli.main(argv)
        return run_browser

    def test_main_anchors_state_at_working_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "a.txt").write_text("", encoding="utf-8")
            previous_cwd = Path.cwd()
            try:
                os.chdir(root)
                run_browser = self._run_main([])
            finally:
                os.chdir(previous_cwd)

        run_browser.assert_called_once()
        state, theme = run_browser.call_args.args
        self.assertEqual(state.base_path, root)
        self.assertEqual([entry.name for entry in state.entries(0)], ["a.txt"])
        self.assertIs(theme, DEFAULT_THEME)
        self.assertFalse(run_browser.call_args.kwargs["print_only"])

    def test_theme_flag_overrides_config(self) -> None:
        run_browser = self._run_main(["--theme", "ocean"], theme_name="default")
        self.assertIs(run_browser.call_args.args[1], OCEAN_THEME)

    def test_config_theme_used_without_flag(self) -> None:
        run_browser = self._run_main([], theme_name="ocean")
        self.assertIs(run_browser.call_args.args[1], OCEAN_THEME)

    def test_no_color_from_flag_or_config(self) -> None:
        self.assertIs(self._run_main(["--no-color"]).call_args.args[1], PLAIN_THEME)
        self.assertIs(self._run_main([], no_color=True).call_args.args[1], PLAIN_THEME)

    def test_print_flag_is_forwarded(self) -> None:
        run_browser = self._run_main(["--print"])
        self.assertTrue(run_browser.call_args.kwargs["print_only"])

    def test_missing_working_directory_exits_with_error(self) -> None:
        with mock.patch(
            "millerview.miller_model.navigation.Path.cwd",
            side_effect=FileNotFoundError("No such file or directory"),
        ), mock.patch("millerview.cli.run_browser") as run_browser:
            with self.assertRaises(SystemExit) as ctx:
                cli.main([])

        run_browser.assert_not_called()
        self.assertIn("Cannot read current directory", str(ctx.exception.code))


if __name__ == "__main__":
    unittest.main()
