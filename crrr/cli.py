"""Command-line front door for crrr.

Parses CLI options, sets up logging, and builds the session configuration.
Then dispatches into the interactive browser runtime.
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from .browser import DEFAULT_LARGE_JUMP_STEP
from .config import build_config
from .logs import configure_logging
from .runtime import run_browser
from .search import DEFAULT_FUZZY_THRESHOLD, MATCH_MODES


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _threshold(value: str) -> float:
    """argparse type for a 0-100 similarity threshold."""
    try:
        parsed = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from exc
    if not 0.0 <= parsed <= 100.0:
        raise argparse.ArgumentTypeError("threshold must be between 0 and 100")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="crrr",
        description=(
            "Browse directories in the terminal. '<' or '>' writes the chosen directory "
            "to the output file so a shell wrapper can cd into it."
        ),
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to start in. Ignored if not a directory.")
    parser.add_argument("--hidden", action="store_true", help="Show dotfiles from the start.")
    parser.add_argument(
        "--match",
        choices=MATCH_MODES,
        default="fuzzy",
        help="Search strategy: fuzzy ranking or separator-insensitive substring (default: fuzzy).",
    )
    parser.add_argument(
        "--threshold",
        type=_threshold,
        default=DEFAULT_FUZZY_THRESHOLD,
        help=f"Minimum fuzzy similarity score, 0-100 (default: {DEFAULT_FUZZY_THRESHOLD:g}).",
    )
    parser.add_argument(
        "--jump-step",
        type=_positive_int,
        default=DEFAULT_LARGE_JUMP_STEP,
        help=f"Rows moved by Shift+Up/Down and PageUp/PageDown (default: {DEFAULT_LARGE_JUMP_STEP}).",
    )
    parser.add_argument(
        "--output-path",
        default=None,
        help="File receiving the chosen directory (default: $CRRR_OUTPUT_PATH or /tmp/crrr).",
    )
    parser.add_argument("--log-file", default=None, help="Write a debug log to this file.")
    parser.add_argument("--verbose", action="store_true", help="Log debug detail (to the platform log dir by default).")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse CLI arguments and run one browsing session.

    Returns the process exit status. A non-interactive stdin is rejected
    before the terminal is touched.
    """
    args = build_parser().parse_args(argv)
    configure_logging(Path(args.log_file).expanduser() if args.log_file else None, verbose=args.verbose)

    if not os.isatty(sys.stdin.fileno()):
        raise SystemExit("crrr needs an interactive terminal.")

    config = build_config(
        start_path=args.path,
        show_hidden=args.hidden,
        match_mode=args.match,
        fuzzy_threshold=args.threshold,
        large_jump_step=args.jump_step,
        output_path=args.output_path,
    )
    return run_browser(config)


if __name__ == "__main__":
    sys.exit(main())
