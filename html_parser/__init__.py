"""
html_parser — extraction of list items from rendered encyclopedia pages.

Public API:
  tokenize(markup)                 -> Iterator[Token]
  normalize_math(html)             -> str
  clean_html_text(html)            -> str
  walk_sections(markup, denylist)  -> list[Region]
  extract_candidates(region)       -> list[str]
  SECTION_DENYLIST, REJECT_RULES   predicate lists
"""

from .tokens import Token, TokenKind, tokenize
from .text_cleaner import clean_html_text, decode_entities, normalize_math
from .rules import (
    MIN_TEXT_LENGTH,
    REJECT_RULES,
    SECTION_DENYLIST,
    RejectRule,
    is_denylisted,
    rejection_reason,
)
from .sections import Heading, find_headings, walk_sections
from .lists import extract_candidates, iter_item_markup

__all__ = [
    "Token",
    "TokenKind",
    "tokenize",
    "clean_html_text",
    "decode_entities",
    "normalize_math",
    "MIN_TEXT_LENGTH",
    "REJECT_RULES",
    "SECTION_DENYLIST",
    "RejectRule",
    "is_denylisted",
    "rejection_reason",
    "Heading",
    "find_headings",
    "walk_sections",
    "extract_candidates",
    "iter_item_markup",
]
