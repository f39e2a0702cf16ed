"""
motd — CLI for Misconception of the Day.

Usage:
  motd <command> [options]

Commands:
  pull       Fetches Wikipedia misconception lists and saves the collection JSON.
  today      Shows the misconception selected for today (or a given date).
  schedule   Lists the selections for a range of days.
  images     Generates images for the selections of a range of days.
"""

from __future__ import annotations

import argparse
import logging
import sys

# Windows terminals may default to cp1252; force UTF-8 so "›", "✓" and
# non-Latin misconception text print correctly.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from rich.console import Console
from rich.logging import RichHandler

from motd.commands import images as cmd_images
from motd.commands import pull as cmd_pull
from motd.commands import schedule as cmd_schedule
from motd.commands import today as cmd_today

__version__ = "0.1.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="motd",
        description="Misconception of the Day — CLI.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"motd {__version__}"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Debug logging (rejected items, requests).",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        metavar="<command>",
        dest="command",
    )
    subparsers.required = True

    cmd_pull.add_parser(subparsers)
    cmd_today.add_parser(subparsers)
    cmd_schedule.add_parser(subparsers)
    cmd_images.add_parser(subparsers)

    return parser


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=verbose)],
        force=True,
    )
    # urllib3 debug lines drown the extraction log
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)
    args.func(args)


if __name__ == "__main__":
    main()
