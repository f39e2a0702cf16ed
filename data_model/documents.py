"""
data_model/documents.py — source pages and their heading regions.

SourcePage is one page to extract from (title + caller-assigned category).
SourceDocument is the fetched content of such a page. Region is a span of
the page markup attributed to one heading path; regions are produced by
html_parser.sections.walk_sections in document order and never overlap.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class SourcePage:
    title: str           # page title in URL form, e.g. "List_of_common_misconceptions_about_history"
    category: str        # e.g. "History"


@dataclass(slots=True)
class SourceDocument:
    page: SourcePage
    markup: str                  # rendered body HTML
    source_url: str
    headings: list[str] = field(default_factory=list)   # anchors reported by the content service


@dataclass(frozen=True, slots=True)
class Region:
    section: str             # top-level heading title ("" before any top-level heading)
    subsection: str | None   # second-level heading title
    anchor: str              # anchor id of the heading opening this region
    markup: str              # markup[start:end] of the whole document
    start: int
    end: int

    @property
    def heading_path(self) -> tuple[str, ...]:
        if self.subsection is None:
            return (self.section,)
        return (self.section, self.subsection)
