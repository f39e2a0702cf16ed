"""Command: motd today — the misconception selected for a day."""

from __future__ import annotations

import argparse
from datetime import date
from pathlib import Path

from rich.panel import Panel
from rich.text import Text

from motd.commands._common import (
    add_collection_args,
    console,
    format_day,
    load_or_exit,
    parse_date,
    settings_or_exit,
)
from rotation.scheduler import RotationScheduler


def run(args: argparse.Namespace) -> None:
    settings = settings_or_exit()
    path = Path(args.input) if args.input else settings.data_path
    collection = load_or_exit(path)

    day: date = args.date or date.today()
    scheduler = RotationScheduler(args.strategy or settings.rotation)
    index = scheduler.index_for(day, collection.total_count)
    m = collection[index]

    section = f"{m.section} › {m.subsection}" if m.subsection else m.section
    body = Text()
    body.append(m.text + "\n\n")
    body.append(f" {m.category} ", style="bold black on cyan")
    body.append(f"  {section}\n", style="dim")
    body.append(m.source, style="link " + m.source)

    image = settings.images_dir / f"{m.id}.png"
    if image.exists():
        body.append(f"\nImage: {image}", style="dim")

    console.print(Panel(
        body,
        title="[bold]Misconception of the Day[/bold]",
        subtitle=format_day(day),
        expand=False,
    ))
    console.print(
        f"[dim]One of {collection.total_count} common misconceptions "
        f"(#{index}, {scheduler.strategy.value}). Come back tomorrow for another![/dim]"
    )


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "today",
        help="Show the misconception selected for today (or --date).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Shows the misconception the rotation selects for a day.

Examples:
  motd today
  motd today --date 2025-02-14
  motd today --strategy simple-hash -i data/misconceptions.json
        """,
    )
    p.add_argument(
        "--date", "-d",
        type=parse_date,
        metavar="YYYY-MM-DD",
        default=None,
        help="Day to show (default: today).",
    )
    add_collection_args(p)
    p.set_defaults(func=run)
