"""
extraction — building the misconception collection from source pages.

Public API:
  generate_id(text)                                   -> str
  WikipediaClient(session, timeout).fetch(page)       -> SourceDocument
  WIKIPEDIA_PAGES                                     configured pages
  extract_document(document)                          -> list[Misconception]
  merge_misconceptions(*batches)                      -> list[Misconception]
  run_extraction(pages, fetch, max_workers, previous) -> ExtractionReport
"""

from .identifiers import generate_id
from .wiki_client import SourceFetchError, WikipediaClient, page_url
from .sources import WIKIPEDIA_PAGES
from .pipeline import (
    DocumentResult,
    ExtractionReport,
    extract_document,
    merge_misconceptions,
    run_extraction,
)

__all__ = [
    "generate_id",
    "SourceFetchError",
    "WikipediaClient",
    "page_url",
    "WIKIPEDIA_PAGES",
    "DocumentResult",
    "ExtractionReport",
    "extract_document",
    "merge_misconceptions",
    "run_extraction",
]
