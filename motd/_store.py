"""
Persisted misconception collection — one JSON file, replaced atomically.

  {"generatedAt": "...Z", "totalCount": N, "misconceptions": [...]}
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path

from data_model.misconceptions import MisconceptionCollection


class PersistenceError(RuntimeError):
    """The collection file cannot be read or written."""


def atomic_write_bytes(path: Path, data: bytes) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with tempfile.NamedTemporaryFile(
        mode="wb",
        delete=False,
        dir=str(path.parent),
        prefix=path.name,
        suffix=".tmp",
    ) as tmp:
        tmp.write(data)
        tmp.flush()
        os.fsync(tmp.fileno())
        tmp_path = Path(tmp.name)
    os.replace(tmp_path, path)


def load_collection(path: Path) -> MisconceptionCollection:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise PersistenceError(f"cannot read {path}: {exc}") from exc

    try:
        data = json.loads(raw)
        return MisconceptionCollection.from_dict(data)
    except (ValueError, KeyError, TypeError) as exc:
        raise PersistenceError(f"invalid collection file {path}: {exc}") from exc


def save_collection(collection: MisconceptionCollection, path: Path) -> None:
    text = json.dumps(collection.to_dict(), ensure_ascii=False, indent=2) + "\n"
    try:
        atomic_write_bytes(path, text.encode("utf-8"))
    except OSError as exc:
        raise PersistenceError(f"cannot write {path}: {exc}") from exc
