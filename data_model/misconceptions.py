"""
data_model/misconceptions.py — records extracted from encyclopedia lists.

Misconception is the atomic unit: one cleaned bullet item with identity and
provenance. MisconceptionCollection is the persisted set (generatedAt,
totalCount, misconceptions) consumed by the rotation scheduler.

Mapping onto the JSON artifact:
  generatedAt    → MisconceptionCollection.generated_at (ISO-8601, UTC, "Z")
  totalCount     → len(MisconceptionCollection.misconceptions)
  misconceptions → list[Misconception]; "subsection" omitted when None
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any


# ---------------------------------------------------------------------------
# Misconception
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Misconception:
    """
    One misconception with identity and provenance.

    - id:         content-derived identifier (extraction.identifiers.generate_id)
    - text:       cleaned prose; inline math as $...$
    - section:    nearest top-level heading, or category when none precedes
    - subsection: nearest second-level heading (optional)
    - category:   grouping assigned to the whole source page
    - source:     URL of the originating page
    """
    id: str
    text: str
    section: str
    category: str
    source: str
    subsection: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id":      self.id,
            "text":    self.text,
            "section": self.section,
        }
        if self.subsection is not None:
            data["subsection"] = self.subsection
        data["category"] = self.category
        data["source"] = self.source
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Misconception:
        return cls(
            id=str(data["id"]),
            text=str(data["text"]),
            section=str(data["section"]),
            category=str(data["category"]),
            source=str(data["source"]),
            subsection=data.get("subsection"),
        )


# ---------------------------------------------------------------------------
# MisconceptionCollection
# ---------------------------------------------------------------------------

def utc_timestamp(now: datetime | None = None) -> str:
    """Timestamp in the artifact format, e.g. 2024-01-01T00:00:00.000Z."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(slots=True)
class MisconceptionCollection:
    """
    Ordered, id-unique set of misconceptions plus generation timestamp.

    Uniqueness of `id` is maintained by the producer (extraction.pipeline);
    consumers treat the collection as an immutable array.
    """
    misconceptions: list[Misconception] = field(default_factory=list)
    generated_at: str = field(default_factory=utc_timestamp)

    @property
    def total_count(self) -> int:
        return len(self.misconceptions)

    def __len__(self) -> int:
        return len(self.misconceptions)

    def __getitem__(self, index: int) -> Misconception:
        return self.misconceptions[index]

    def ids(self) -> list[str]:
        return [m.id for m in self.misconceptions]

    def to_dict(self) -> dict[str, Any]:
        return {
            "generatedAt":    self.generated_at,
            "totalCount":     self.total_count,
            "misconceptions": [m.to_dict() for m in self.misconceptions],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MisconceptionCollection:
        items = data["misconceptions"]
        if not isinstance(items, list):
            raise TypeError("'misconceptions' must be a list")
        return cls(
            misconceptions=[Misconception.from_dict(m) for m in items],
            generated_at=str(data.get("generatedAt") or utc_timestamp()),
        )
