"""Command: motd images — illustrations for the misconceptions of upcoming days."""

from __future__ import annotations

import argparse
import time
from datetime import date
from pathlib import Path

from rich import box
from rich.table import Table

from motd._store import atomic_write_bytes
from motd.commands._common import (
    add_collection_args,
    console,
    load_or_exit,
    parse_date,
    positive_int,
    settings_or_exit,
)
from rotation.scheduler import RotationScheduler, distinct_indices


def run(args: argparse.Namespace) -> None:
    settings = settings_or_exit()
    path = Path(args.input) if args.input else settings.data_path
    out_dir = Path(args.out_dir) if args.out_dir else settings.images_dir
    collection = load_or_exit(path)

    start: date = args.start or date.today()
    scheduler = RotationScheduler(args.strategy or settings.rotation)
    picks = scheduler.indices_for_range(start, args.days, collection.total_count)
    indices = distinct_indices(picks)

    todo: list[tuple[int, Path]] = []
    skipped = 0
    for index in indices:
        target = out_dir / f"{collection[index].id}.png"
        if target.exists() and not args.force:
            skipped += 1
            continue
        todo.append((index, target))

    console.print(
        f"{len(picks)} days → [bold]{len(indices)}[/bold] distinct misconceptions, "
        f"{skipped} already illustrated, [bold]{len(todo)}[/bold] to generate "
        f"([cyan]{scheduler.strategy.value}[/cyan])"
    )

    if args.dry_run:
        table = Table(box=box.SIMPLE_HEAD, header_style="bold white", show_header=True)
        table.add_column("INDEX", justify="right", style="dim")
        table.add_column("FILE",  style="cyan", no_wrap=True)
        table.add_column("TEXT",  max_width=70)
        for index, target in todo:
            table.add_row(str(index), target.name, collection[index].text[:100])
        console.print(table)
        console.print("[dim](--dry-run: Gemini not called)[/dim]")
        return

    if not todo:
        return

    from image_gen import DEFAULT_MODEL, build_image_prompt, generate_image

    model = args.model or DEFAULT_MODEL
    errors = 0

    for i, (index, target) in enumerate(todo, 1):
        m = collection[index]
        console.print(f"[{i}/{len(todo)}] [bold cyan]{m.id}[/bold cyan]  {m.text[:60]}…")

        try:
            prompt = build_image_prompt(m, max_chars=args.max_chars)
        except OSError as e:
            console.print(f"[red]Cannot read prompt template:[/red] {e}")
            raise SystemExit(1)

        try:
            data = generate_image(prompt, model=model)
        except ValueError as e:
            console.print(f"[red]{e}[/red]")
            raise SystemExit(1)
        except Exception as e:
            errors += 1
            console.print(f"    [red]Generation failed:[/red] {e}")
        else:
            try:
                atomic_write_bytes(target, data)
            except OSError as e:
                console.print(f"[red]Cannot write {target}:[/red] {e}")
                raise SystemExit(1)
            console.print(f"    → [green]{target}[/green] ({len(data) // 1024} KiB)")

        if i < len(todo) and args.delay > 0:
            time.sleep(args.delay)

    console.print()
    if errors:
        console.print(f"[yellow]Done with {errors} errors[/yellow]")
    else:
        console.print(f"[green]Done[/green] — {len(todo)} images in {out_dir}")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "images",
        help="Generate images for the misconceptions of the next/previous N days.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Walks the rotation over a range of days, keeps each selected misconception
once and generates <id>.png for those without an image (Gemini).

Examples:
  motd images --days 30 --dry-run
  motd images --start 2025-01-01 --days -7 --out-dir public/images
  motd images --days 7 --force --delay 5
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
    p.add_argument(
        "--out-dir",
        metavar="DIR",
        default=None,
        help="Image directory (default: $MOTD_IMAGES_DIR or public/images).",
    )
    p.add_argument(
        "--model", "-m",
        metavar="MODEL",
        help="Gemini image model.",
    )
    p.add_argument(
        "--max-chars",
        type=positive_int,
        default=500,
        metavar="N",
        help="Bound on the misconception text sent in the prompt (default: 500).",
    )
    p.add_argument(
        "--delay",
        type=float,
        default=2.0,
        metavar="SEC",
        help="Delay between API calls in seconds (default: 2.0).",
    )
    p.add_argument(
        "--force",
        action="store_true",
        help="Regenerate images that already exist.",
    )
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Only list what would be generated.",
    )
    add_collection_args(p)
    p.set_defaults(func=run)
