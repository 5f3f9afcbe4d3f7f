#!/usr/bin/env python3
"""
doot is a todo manager

Usage:
    doot [PATH]          Browse TODOs under PATH (default: .) in the TUI
    doot [PATH] --once   Print TODOs once and exit (no TUI)
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TextIO

from doot import __version__
from doot.extractor import MarkerPatternError
from doot.presenter import QUIT_KEY, Presenter
from doot.providers import Frame, InputEvent, KeyEvent
from doot.scan_provider import FileScanProvider


class StreamTarget:
    """RenderTarget that prints each frame as plain lines."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def draw(self, frame: Frame) -> None:
        for entry in frame.entries:
            print(f"{entry.path}:{entry.line_number}: {entry.text}", file=self._stream)


class QuitImmediately:
    """EventSource that asks to quit on the first read."""

    def read(self) -> InputEvent:
        return KeyEvent(QUIT_KEY)


def print_once(presenter: Presenter, stream: TextIO | None = None) -> int:
    """Print the TODO list once and exit."""
    presenter.run(StreamTarget(stream or sys.stdout), QuitImmediately())
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="doot",
        description="doot is a todo manager",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "path",
        nargs="?",
        type=Path,
        default=Path("."),
        help="find all todos under this path (default: .)",
    )
    parser.add_argument(
        "--once",
        action="store_true",
        help="Print todos once and exit (no TUI)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    args = parser.parse_args(argv)

    try:
        presenter = Presenter(FileScanProvider(args.path))
    except MarkerPatternError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.once:
        return print_once(presenter)

    # Launch TUI
    from doot.app import run

    run(presenter)
    return 0


if __name__ == "__main__":
    sys.exit(main())
