"""
html_parser/sections.py — splitting a page into heading regions.

Architecture:
  markup → tokenize() → headings (top-level + second-level, with anchor)
  → walk_sections() → list[Region] (markup slice up to the next heading)

Headings of both levels come out of one token stream, so they interleave by
document position; a second-level heading always belongs to the most
recent top-level heading. Headings without an anchor are not boundaries.

Denylisted headings open no region but still end the previous one. A
denylisted top-level heading also mutes its second-level headings until the
next top-level heading, so nothing after "References" is attributed to the
last real section.

Public API:
  find_headings(markup, section_tag, subsection_tag) -> list[Heading]
  walk_sections(markup, denylist, ...)                -> list[Region]
"""

from __future__ import annotations

from dataclasses import dataclass

from data_model.documents import Region
from html_parser.rules import SECTION_DENYLIST, is_denylisted
from html_parser.text_cleaner import clean_html_text
from html_parser.tokens import TokenKind, tokenize

SECTION_TAG    = "h2"
SUBSECTION_TAG = "h3"


@dataclass(frozen=True, slots=True)
class Heading:
    level: int       # 1 = section, 2 = subsection
    anchor: str
    title: str       # cleaned
    start: int       # offset of the opening tag


def find_headings(
    markup: str,
    section_tag: str = SECTION_TAG,
    subsection_tag: str = SUBSECTION_TAG,
) -> list[Heading]:
    """Returns section and subsection headings in document order."""
    levels = {section_tag: 1, subsection_tag: 2}
    headings: list[Heading] = []
    pending = None

    for token in tokenize(markup):
        if token.kind is TokenKind.HEADING_OPEN:
            pending = token if token.tag in levels and token.anchor else None
        elif token.kind is TokenKind.HEADING_CLOSE and pending is not None:
            if token.tag != pending.tag:
                continue
            headings.append(Heading(
                level=levels[pending.tag],
                anchor=pending.anchor or "",
                title=clean_html_text(markup[pending.end:token.start]),
                start=pending.start,
            ))
            pending = None

    return headings


def walk_sections(
    markup: str,
    denylist: frozenset[str] = SECTION_DENYLIST,
    section_tag: str = SECTION_TAG,
    subsection_tag: str = SUBSECTION_TAG,
) -> list[Region]:
    """
    Partitions `markup` into regions, one per non-denylisted heading.

    Region.section is "" for subsections appearing before any top-level
    heading; the caller substitutes the page category.
    """
    headings = find_headings(markup, section_tag, subsection_tag)
    regions: list[Region] = []

    section = ""
    subsection: str | None = None
    muted = False

    for i, heading in enumerate(headings):
        end = headings[i + 1].start if i + 1 < len(headings) else len(markup)

        if heading.level == 1:
            muted = is_denylisted(heading.anchor, denylist)
            if muted:
                continue
            section = heading.title
            subsection = None
        else:
            if muted or is_denylisted(heading.anchor, denylist):
                continue
            subsection = heading.title

        regions.append(Region(
            section=section,
            subsection=subsection,
            anchor=heading.anchor,
            markup=markup[heading.start:end],
            start=heading.start,
            end=end,
        ))

    return regions
