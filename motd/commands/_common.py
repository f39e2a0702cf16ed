"""Helpers shared by motd commands."""

from __future__ import annotations

import argparse
from datetime import date
from pathlib import Path

from rich.console import Console

from data_model.misconceptions import MisconceptionCollection
from motd._config import Settings, get_settings
from motd._store import PersistenceError, load_collection
from rotation.scheduler import RotationStrategy

console = Console()


def parse_date(value: str) -> date:
    """argparse type: YYYY-MM-DD."""
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {value!r}") from exc


def format_day(day: date) -> str:
    return f"{day:%A}, {day:%B} {day.day}, {day.year}"


def settings_or_exit() -> Settings:
    try:
        return get_settings()
    except ValueError as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        raise SystemExit(1)


def load_or_exit(path: Path) -> MisconceptionCollection:
    try:
        collection = load_collection(path)
    except PersistenceError as e:
        console.print(f"[red]Cannot load misconceptions:[/red] {e}")
        console.print("[yellow]Run:[/yellow] motd pull")
        raise SystemExit(1)
    if not collection.misconceptions:
        console.print(f"[red]No misconceptions in[/red] {path}")
        raise SystemExit(1)
    return collection


def add_collection_args(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--input", "-i",
        metavar="PATH",
        default=None,
        help="Collection file (default: $MOTD_DATA or misconceptions.json).",
    )
    p.add_argument(
        "--strategy",
        choices=[s.value for s in RotationStrategy],
        default=None,
        help="Rotation strategy (default: $MOTD_ROTATION or full-cycle).",
    )


def positive_int(value: str) -> int:
    """argparse type: integer >= 1."""
    try:
        n = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from exc
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {n}")
    return n
