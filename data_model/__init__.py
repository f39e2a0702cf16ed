"""
data_model — data structures of Misconception of the Day.

Usage:
  from data_model import Misconception, MisconceptionCollection, Region, ...

Modules:
  misconceptions — Misconception, MisconceptionCollection, utc_timestamp
  documents      — SourcePage, SourceDocument, Region
"""

from .misconceptions import (
    Misconception,
    MisconceptionCollection,
    utc_timestamp,
)
from .documents import (
    SourcePage,
    SourceDocument,
    Region,
)

__all__ = [
    # misconceptions
    "Misconception",
    "MisconceptionCollection",
    "utc_timestamp",
    # documents
    "SourcePage",
    "SourceDocument",
    "Region",
]
