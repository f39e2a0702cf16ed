"""
html_parser/tokens.py — structural token stream over rendered page markup.

The page markup has a fixed, known shape (MediaWiki output), so instead of
building a DOM we scan only the tags that matter for extraction:

  HEADING_OPEN / HEADING_CLOSE   <h1>..<h6>, anchor = id attribute
  LIST_OPEN / LIST_CLOSE         <ul>, <ol>
  ITEM_OPEN / ITEM_CLOSE         <li>

Everything else (inline markup, text) stays in the source string and is
addressed by token offsets.

Public API:
  tokenize(markup) -> Iterator[Token]
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum
from typing import Iterator


class TokenKind(StrEnum):
    HEADING_OPEN  = "heading_open"
    HEADING_CLOSE = "heading_close"
    LIST_OPEN     = "list_open"
    LIST_CLOSE    = "list_close"
    ITEM_OPEN     = "item_open"
    ITEM_CLOSE    = "item_close"


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    tag: str                  # lower-case tag name: "h2", "ul", "li", ...
    start: int                # offset of "<"
    end: int                  # offset just past ">"
    anchor: str | None = None # id attribute (headings only)


# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------

_TAG_RE = re.compile(r"<(/?)(h[1-6]|ul|ol|li)\b([^>]*)>", re.IGNORECASE)

# id="..." but not data-id="..." and similar
_ID_RE = re.compile(r'(?<![\w-])id="([^"]+)"')

_HEADING_TAGS = {"h1", "h2", "h3", "h4", "h5", "h6"}
_LIST_TAGS    = {"ul", "ol"}


def tokenize(markup: str) -> Iterator[Token]:
    """Yields structural tokens in document order."""
    for m in _TAG_RE.finditer(markup):
        closing = m.group(1) == "/"
        tag = m.group(2).lower()

        if tag in _HEADING_TAGS:
            if closing:
                yield Token(TokenKind.HEADING_CLOSE, tag, m.start(), m.end())
            else:
                id_match = _ID_RE.search(m.group(3))
                anchor = id_match.group(1) if id_match else None
                yield Token(TokenKind.HEADING_OPEN, tag, m.start(), m.end(), anchor)
        elif tag in _LIST_TAGS:
            kind = TokenKind.LIST_CLOSE if closing else TokenKind.LIST_OPEN
            yield Token(kind, tag, m.start(), m.end())
        else:
            kind = TokenKind.ITEM_CLOSE if closing else TokenKind.ITEM_OPEN
            yield Token(kind, tag, m.start(), m.end())
