"""Command: motd schedule — rotation over a range of days."""

from __future__ import annotations

import argparse
from datetime import date
from pathlib import Path

from rich import box
from rich.table import Table

from motd.commands._common import (
    add_collection_args,
    console,
    load_or_exit,
    parse_date,
    settings_or_exit,
)
from rotation.scheduler import RotationScheduler


def run(args: argparse.Namespace) -> None:
    settings = settings_or_exit()
    path = Path(args.input) if args.input else settings.data_path
    collection = load_or_exit(path)

    start: date = args.start or date.today()
    scheduler = RotationScheduler(args.strategy or settings.rotation)
    picks = scheduler.indices_for_range(start, args.days, collection.total_count)

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        expand=False,
    )
    table.add_column("DATE",  no_wrap=True)
    table.add_column("INDEX", justify="right", no_wrap=True, style="bold")
    table.add_column("ID",    no_wrap=True, style="cyan", max_width=40)
    table.add_column("TEXT",  no_wrap=False, max_width=70)

    seen: set[int] = set()
    for pick in picks:
        m = collection[pick.index]
        style = "dim" if pick.index in seen else ""
        seen.add(pick.index)
        table.add_row(pick.day.isoformat(), str(pick.index), m.id, m.text[:100], style=style)

    console.print()
    console.print(table)
    console.print(
        f"  [dim]{len(picks)} days, {len(seen)} distinct misconceptions "
        f"of {collection.total_count} ({scheduler.strategy.value})[/dim]\n"
    )


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "schedule",
        help="List the misconceptions selected for a range of days.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Lists (date, index) picks for consecutive days, oldest first. A negative
--days walks backward from --start. Repeated picks are dimmed.

Examples:
  motd schedule --days 14
  motd schedule --start 2025-01-01 --days -7
        """,
    )
    p.add_argument(
        "--start", "-s",
        type=parse_date,
        metavar="YYYY-MM-DD",
        default=None,
        help="First day (default: today).",
    )
    p.add_argument(
        "--days", "-n",
        type=int,
        metavar="N",
        default=7,
        help="Number of days; negative goes backward (default: 7).",
    )
    add_collection_args(p)
    p.set_defaults(func=run)
