"""
html_parser/lists.py — top-level bullet items of a region.

State machine over the token stream of one region:
  - list depth grows on <ul>/<ol>, shrinks on </ul>/</ol>
  - an <li> at depth ≤ 1 opens a top-level item
  - the first list opened inside an open item cuts its content
    (sub-items elaborate the parent, they are not separate facts)
  - </li>, a sibling <li>, or the end of the enclosing list closes the item

Public API:
  iter_item_markup(markup)     -> Iterator[str]
  extract_candidates(region)   -> list[str]
"""

from __future__ import annotations

import logging
from typing import Iterator

from data_model.documents import Region
from html_parser.rules import REJECT_RULES, RejectRule, rejection_reason
from html_parser.text_cleaner import clean_html_text
from html_parser.tokens import TokenKind, tokenize

log = logging.getLogger(__name__)


def iter_item_markup(markup: str) -> Iterator[str]:
    """Yields the inner markup of each top-level item, cut before any nested list."""
    depth = 0
    item_start: int | None = None
    item_depth = 0
    cut: int | None = None

    def close(at: int) -> str:
        return markup[item_start:cut if cut is not None else at]

    for token in tokenize(markup):
        kind = token.kind

        if kind is TokenKind.LIST_OPEN:
            depth += 1
            if item_start is not None and cut is None:
                cut = token.start

        elif kind is TokenKind.LIST_CLOSE:
            if item_start is not None and depth == item_depth:
                yield close(token.start)
                item_start, cut = None, None
            depth = max(depth - 1, 0)

        elif kind is TokenKind.ITEM_OPEN and depth <= 1:
            if item_start is not None:
                if depth != item_depth:
                    continue  # sub-item of an item opened outside any list
                yield close(token.start)
            item_start, item_depth, cut = token.end, depth, None

        elif kind is TokenKind.ITEM_CLOSE and item_start is not None and depth == item_depth:
            yield close(token.start)
            item_start, cut = None, None

    if item_start is not None:
        yield close(len(markup))


def extract_candidates(region: Region, rules: list[RejectRule] = REJECT_RULES) -> list[str]:
    """Cleans top-level items of `region` and drops rejected ones."""
    candidates: list[str] = []
    for item in iter_item_markup(region.markup):
        text = clean_html_text(item)
        reason = rejection_reason(text, rules)
        if reason is not None:
            log.debug("rejected (%s) in %r: %.60s", reason, region.anchor, text)
            continue
        candidates.append(text)
    return candidates
