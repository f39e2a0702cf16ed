"""Command: motd pull — fetch pages, extract misconceptions, save JSON."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich import box
from rich.table import Table

from data_model.misconceptions import MisconceptionCollection
from extraction.pipeline import ExtractionReport, run_extraction
from extraction.sources import WIKIPEDIA_PAGES
from extraction.wiki_client import WikipediaClient
from motd._store import PersistenceError, load_collection, save_collection
from motd.commands._common import console, positive_int, settings_or_exit


# ---------------------------------------------------------------------------
# Terminal output
# ---------------------------------------------------------------------------

def _show_documents(report: ExtractionReport) -> None:
    for doc in report.documents:
        if doc.ok:
            console.print(
                f"  [green]✓[/green] {doc.page.category}: "
                f"[bold]{len(doc.misconceptions)}[/bold] misconceptions"
            )
        else:
            console.print(f"  [red]✗[/red] {doc.page.category}: {doc.error}")


def _show_table(collection: MisconceptionCollection, limit: int = 50) -> None:
    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("ID",       no_wrap=True, style="bold cyan", max_width=40)
    table.add_column("CATEGORY", no_wrap=True)
    table.add_column("SECTION",  no_wrap=False, max_width=30)
    table.add_column("TEXT",     no_wrap=False, max_width=70)

    for m in collection.misconceptions[:limit]:
        section = f"{m.section} › {m.subsection}" if m.subsection else m.section
        table.add_row(m.id, m.category, section, m.text[:140])

    console.print()
    console.print(table)
    if collection.total_count > limit:
        console.print(f"  [dim]… {collection.total_count - limit} more[/dim]")


# ---------------------------------------------------------------------------
# Command
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    settings = settings_or_exit()
    output = Path(args.output) if args.output else settings.data_path
    workers = args.workers or settings.workers

    previous = None
    if not args.fresh and output.exists():
        try:
            previous = load_collection(output)
        except PersistenceError as e:
            console.print(f"[red]Cannot merge with existing file:[/red] {e}")
            console.print("[yellow]Use --fresh to overwrite it.[/yellow]")
            raise SystemExit(1)
        console.print(f"Merging with [bold]{previous.total_count}[/bold] existing misconceptions.")

    client = WikipediaClient(timeout=settings.timeout)
    with console.status(f"Fetching {len(WIKIPEDIA_PAGES)} pages from Wikipedia …"):
        report = run_extraction(WIKIPEDIA_PAGES, client.fetch, max_workers=workers, previous=previous)

    _show_documents(report)

    if report.documents and len(report.failed) == len(report.documents):
        console.print(f"[red]All pages failed; {output} left unchanged.[/red]")
        raise SystemExit(1)

    try:
        save_collection(report.collection, output)
    except PersistenceError as e:
        console.print(f"[red]Save failed:[/red] {e}")
        raise SystemExit(1)

    status = "[green]Done[/green]" if not report.failed else (
        f"[yellow]Done with {len(report.failed)} failed pages[/yellow]"
    )
    console.print(
        f"\n{status} — saved [bold]{report.collection.total_count}[/bold] "
        f"misconceptions to {output}"
    )

    if args.show:
        _show_table(report.collection)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "pull",
        help="Pull misconceptions from Wikipedia and save to JSON.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Fetches the Wikipedia lists of common misconceptions, extracts one record
per top-level bullet, deduplicates by id and writes the collection file.
An existing file is merged by id (fresh records replace old ones).

Examples:
  motd pull
  motd pull -o data/misconceptions.json --show
  motd pull --fresh --workers 1
        """,
    )
    p.add_argument(
        "--output", "-o",
        metavar="PATH",
        default=None,
        help="Output file (default: $MOTD_DATA or misconceptions.json).",
    )
    p.add_argument(
        "--workers", "-w",
        type=positive_int,
        metavar="N",
        default=None,
        help="Concurrent page fetches (default: $MOTD_WORKERS or 3).",
    )
    p.add_argument(
        "--fresh",
        action="store_true",
        help="Do not merge with the existing file.",
    )
    p.add_argument(
        "--show",
        action="store_true",
        help="Print a table of the saved misconceptions.",
    )
    p.set_defaults(func=run)
