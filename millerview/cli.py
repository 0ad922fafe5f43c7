"""Command-line front door for millerview.

Parses options, anchors navigation at the current working directory, and
dispatches into the interactive browser runtime.
"""

from __future__ import annotations

import argparse

from .miller_model import NavigationState
from .runtime import run_browser
from .runtime.config import load_no_color, load_theme_name
from .ui_theme import available_theme_names, resolve_theme


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Browse the current directory in Miller columns."
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument(
        "--print",
        dest="print_only",
        action="store_true",
        help="Print the current directory listing and exit.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and launch the browser in the working directory.

    Exits with a message (status 1) when the working directory cannot be
    determined, e.g. after it was deleted from under the shell.
    """
    args = build_parser().parse_args(argv)

    try:
        state = NavigationState.from_cwd()
    except OSError as exc:
        raise SystemExit(f"Cannot read current directory: {exc}") from exc

    theme_name = args.theme if args.theme is not None else load_theme_name()
    theme = resolve_theme(theme_name, no_color=args.no_color or load_no_color())
    run_browser(state, theme, print_only=args.print_only)


if __name__ == "__main__":
    main()
