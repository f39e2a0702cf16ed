"""extraction/sources.py — pages the misconception set is built from."""

from __future__ import annotations

from data_model.documents import SourcePage

WIKIPEDIA_PAGES: list[SourcePage] = [
    SourcePage(
        title="List_of_common_misconceptions_about_arts_and_culture",
        category="Arts & Culture",
    ),
    SourcePage(
        title="List_of_common_misconceptions_about_history",
        category="History",
    ),
    SourcePage(
        title="List_of_common_misconceptions_about_science,_technology,_and_mathematics",
        category="Science, Technology & Mathematics",
    ),
]
