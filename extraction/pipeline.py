"""
extraction/pipeline.py — pages → deduplicated misconception collection.

Architecture:
  [SourcePage] → fetch (bounded thread pool) → SourceDocument
  → walk_sections() → extract_candidates() → generate_id() → [Misconception]
  → merge_misconceptions() in input order → MisconceptionCollection

Every page is processed independently; a failing page is logged and
reported, the others go on. Results are merged only after all fetches
finish, in the order of the input list, so "last write wins" on duplicate
ids never depends on network timing.

Public API:
  extract_document(document)                       -> list[Misconception]
  merge_misconceptions(*batches)                   -> list[Misconception]
  run_extraction(pages, fetch, max_workers, previous) -> ExtractionReport
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Callable, Iterable

from data_model.documents import SourceDocument, SourcePage
from data_model.misconceptions import Misconception, MisconceptionCollection
from extraction.identifiers import generate_id
from html_parser.lists import extract_candidates
from html_parser.sections import walk_sections

log = logging.getLogger(__name__)

DEFAULT_WORKERS = 3

type Fetcher = Callable[[SourcePage], SourceDocument]


# ---------------------------------------------------------------------------
# Report
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class DocumentResult:
    page: SourcePage
    misconceptions: list[Misconception] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(slots=True)
class ExtractionReport:
    collection: MisconceptionCollection
    documents: list[DocumentResult]

    @property
    def failed(self) -> list[DocumentResult]:
        return [d for d in self.documents if not d.ok]

    @property
    def extracted_count(self) -> int:
        return sum(len(d.misconceptions) for d in self.documents)


# ---------------------------------------------------------------------------
# Single document
# ---------------------------------------------------------------------------

def extract_document(document: SourceDocument) -> list[Misconception]:
    """Runs the section walker and list extractor over one fetched page."""
    page = document.page
    regions = walk_sections(document.markup)

    if not regions and document.headings:
        log.warning(
            "%s: service reported %d sections but no headings were found in the markup",
            page.title, len(document.headings),
        )

    misconceptions: list[Misconception] = []
    for region in regions:
        for text in extract_candidates(region):
            misconceptions.append(Misconception(
                id=generate_id(text),
                text=text,
                section=region.section or page.category,
                subsection=region.subsection,
                category=page.category,
                source=document.source_url,
            ))

    log.debug("%s: %d regions, %d misconceptions", page.title, len(regions), len(misconceptions))
    return misconceptions


def _process_page(page: SourcePage, fetch: Fetcher) -> DocumentResult:
    try:
        document = fetch(page)
        misconceptions = extract_document(document)
    except Exception as exc:
        log.warning("skipping %s (%s): %s", page.title, page.category, exc)
        return DocumentResult(page=page, error=str(exc))
    return DocumentResult(page=page, misconceptions=misconceptions)


# ---------------------------------------------------------------------------
# Merge
# ---------------------------------------------------------------------------

def merge_misconceptions(*batches: Iterable[Misconception]) -> list[Misconception]:
    """
    Deduplicates by id, later batches (and later items) winning.

    A replaced record keeps the position of its first occurrence. Two
    different texts sharing an id are logged; the later one is kept.
    """
    merged: dict[str, Misconception] = {}
    for batch in batches:
        for item in batch:
            existing = merged.get(item.id)
            if existing is not None and existing.text != item.text:
                log.warning(
                    "id collision %s: %.40r replaced by %.40r",
                    item.id, existing.text, item.text,
                )
            merged[item.id] = item
    return list(merged.values())


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------

def run_extraction(
    pages: Iterable[SourcePage],
    fetch: Fetcher,
    max_workers: int = DEFAULT_WORKERS,
    previous: MisconceptionCollection | None = None,
) -> ExtractionReport:
    """
    Fetches and extracts all pages, then merges in input order.

    Args:
        pages:       Pages to process; their order defines last-write-wins.
        fetch:       Page → SourceDocument (e.g. WikipediaClient.fetch).
        max_workers: Upper bound on concurrent fetches.
        previous:    Previously persisted collection; its records come first
                     and are replaced by fresh ones with the same id.
    """
    if max_workers < 1:
        raise ValueError(f"max_workers must be >= 1, got {max_workers}")

    pages = list(pages)
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        futures = [pool.submit(_process_page, page, fetch) for page in pages]
        documents = [f.result() for f in futures]

    batches: list[Iterable[Misconception]] = []
    if previous is not None:
        batches.append(previous.misconceptions)
    batches.extend(d.misconceptions for d in documents)

    collection = MisconceptionCollection(misconceptions=merge_misconceptions(*batches))
    log.info(
        "extracted %d misconceptions from %d/%d pages, %d after merge",
        sum(len(d.misconceptions) for d in documents),
        sum(1 for d in documents if d.ok), len(documents),
        collection.total_count,
    )
    return ExtractionReport(collection=collection, documents=documents)
