"""
html_parser/rules.py — named predicates deciding what is extracted.

SECTION_DENYLIST   anchors of housekeeping sections (matched case-sensitively)
REJECT_RULES       candidate-rejection rules, tested in order; the first
                   matching rule names the reason

Each RejectRule holds:
  - name  : stable reason identifier (logged, used in tests)
  - test  : predicate on the cleaned candidate text; True = reject
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable

# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------

SECTION_DENYLIST: frozenset[str] = frozenset({
    "References",
    "See_also",
    "Notes",
    "External_links",
    "Further_reading",
    "Citations",
})


def is_denylisted(anchor: str, denylist: frozenset[str] = SECTION_DENYLIST) -> bool:
    return anchor in denylist


# ---------------------------------------------------------------------------
# Candidates
# ---------------------------------------------------------------------------

MIN_TEXT_LENGTH = 20   # a candidate must be longer than this

NAVIGATION_PREFIXES: tuple[str, ...] = ("Main article:", "See also:")

# "a. ", "b. ": a sub-enumeration that survived cleaning
_LETTER_MARKER_RE = re.compile(r"^[a-z]\.\s")


@dataclass(frozen=True, slots=True)
class RejectRule:
    name: str
    test: Callable[[str], bool]


REJECT_RULES: list[RejectRule] = [
    RejectRule(
        name="too_short",
        test=lambda text: len(text) <= MIN_TEXT_LENGTH,
    ),
    RejectRule(
        name="navigation",
        test=lambda text: text.startswith(NAVIGATION_PREFIXES),
    ),
    RejectRule(
        name="letter_marker",
        test=lambda text: _LETTER_MARKER_RE.match(text) is not None,
    ),
]


def rejection_reason(text: str, rules: list[RejectRule] = REJECT_RULES) -> str | None:
    """Returns the name of the first rule rejecting `text`, or None if it passes."""
    for rule in rules:
        if rule.test(text):
            return rule.name
    return None
